import logging

from django.contrib import messages
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.utils.decorators import method_decorator
from django.views import View
from django.views.generic import FormView

from ..decorators import session_required
from ..exceptions import DataAccessError, GeolocationUnavailable
from ..forms import ProfileForm, ProfileImageForm
from ..services import ProfileService, resolve_coordinates
from .base import ERROR, ServiceMixin, load

logger = logging.getLogger(__name__)


@method_decorator(session_required, name="dispatch")
class ProfileView(ServiceMixin, FormView):
    template_name = "profile.html"
    form_class = ProfileForm
    service_class = ProfileService
    success_url = reverse_lazy("profile")

    def dispatch(self, request, *args, **kwargs):
        self.load_state, self.profile = load(self.get_service().load_own, default=None)
        return super().dispatch(request, *args, **kwargs)

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["instance"] = self.profile
        return kwargs

    def post(self, request, *args, **kwargs):
        if self.load_state == ERROR:
            return redirect("profile")
        return super().post(request, *args, **kwargs)

    def form_valid(self, form):
        fields = {name: form.cleaned_data[name] for name in ProfileForm.Meta.fields}
        if form.cleaned_data.get("use_current_location"):
            try:
                fields["location"] = resolve_coordinates(*form.reported_coordinates())
            except GeolocationUnavailable as exc:
                logger.info("Geolocation unavailable for user %s", self.request.session_context.user_id)
                messages.warning(self.request, str(exc))
        try:
            self.get_service().update_own(fields)
        except DataAccessError:
            return self.form_invalid(form)
        messages.success(self.request, "Profile updated successfully!")
        return super().form_valid(form)

    def form_invalid(self, form):
        if form.errors:
            messages.error(self.request, "Please review the errors below.")
        return super().form_invalid(form)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "load_state": self.load_state,
                "profile": self.profile,
                "image_form": kwargs.get("image_form") or ProfileImageForm(),
            }
        )
        return context


@method_decorator(session_required, name="dispatch")
class ProfileImageView(ServiceMixin, View):
    http_method_names = ["post"]
    service_class = ProfileService

    def post(self, request):
        form = ProfileImageForm(request.POST, request.FILES)
        if not form.is_valid():
            for errors in form.errors.values():
                for error in errors:
                    messages.error(request, error)
            return redirect("profile")
        try:
            self.get_service().replace_image(form.cleaned_data["image"])
        except DataAccessError:
            return redirect("profile")
        messages.success(request, "Profile picture updated successfully!")
        return redirect("profile")

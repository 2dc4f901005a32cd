from django.contrib import messages
from django.shortcuts import redirect, resolve_url
from django.urls import reverse, reverse_lazy
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import FormView, TemplateView

from .. import content
from ..carousel import carousel_window
from ..exceptions import AuthError, DataAccessError
from ..forms import FeedbackForm, SignInForm, SignUpForm
from ..services import FeedbackService
from .base import ServiceMixin


class LandingView(TemplateView):
    template_name = "landing.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "features": content.LANDING_FEATURES,
                "testimonials": carousel_window(content.TESTIMONIALS, self.request.GET.get("slide"), per_view=1),
            }
        )
        return context


class AnonymousOnlyMixin:
    """Signed-in visitors skip the auth forms and go straight to the dashboard."""

    def dispatch(self, request, *args, **kwargs):
        if request.session_context.is_authenticated:
            return redirect("dashboard")
        return super().dispatch(request, *args, **kwargs)

    def get_success_url(self):
        next_url = self.request.POST.get("next") or self.request.GET.get("next")
        if next_url and url_has_allowed_host_and_scheme(
            next_url,
            allowed_hosts={self.request.get_host()},
            require_https=self.request.is_secure(),
        ):
            return next_url
        return resolve_url("dashboard")

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["next"] = self.request.GET.get("next", "")
        return context


class SignInView(AnonymousOnlyMixin, FormView):
    template_name = "login.html"
    form_class = SignInForm

    def form_valid(self, form):
        try:
            self.request.session_context.sign_in(form.cleaned_data["email"], form.cleaned_data["password"])
        except AuthError:
            return self.form_invalid(form)
        return redirect(self.get_success_url())


class SignUpView(AnonymousOnlyMixin, FormView):
    template_name = "signup.html"
    form_class = SignUpForm

    def form_valid(self, form):
        try:
            self.request.session_context.sign_up(
                form.cleaned_data["email"],
                form.cleaned_data["password1"],
                form.cleaned_data["role"],
            )
        except AuthError as exc:
            form.add_error(None, str(exc))
            return self.form_invalid(form)
        return redirect(self.get_success_url())


class SignOutView(View):
    http_method_names = ["post"]

    def post(self, request):
        request.session_context.sign_out()
        return redirect("home")


class ContactView(ServiceMixin, FormView):
    template_name = "contact.html"
    form_class = FeedbackForm
    service_class = FeedbackService
    success_url = reverse_lazy("contact")

    def post(self, request, *args, **kwargs):
        if not request.session_context.is_authenticated:
            messages.error(request, "Please sign in to send feedback.")
            return redirect(f"{reverse('login')}?next={reverse('contact')}")
        return super().post(request, *args, **kwargs)

    def form_valid(self, form):
        try:
            self.get_service().submit(form.cleaned_data)
        except DataAccessError:
            return self.form_invalid(form)
        messages.success(self.request, "Thank you for your feedback!")
        return super().form_valid(form)

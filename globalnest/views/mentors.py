from django.contrib import messages
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.decorators import method_decorator
from django.views.generic import FormView, TemplateView

from ..decorators import session_required
from ..exceptions import DataAccessError
from ..filters import filter_mentors
from ..forms import BookingForm, MentorForm, ReviewForm
from ..services import BookingService, MentorService, ReviewService
from .base import ServiceMixin, load

BROWSING, MENTOR_SELECTED, REVIEWING, BOOKING = "browsing", "mentor-selected", "reviewing", "booking"
SESSION_RATES = (
    ("30 min session", 25),
    ("1 hour session", 45),
    ("2 hour session", 80),
)


def connect_url(mentor_id, mode=None) -> str:
    url = f"{reverse('connect')}?mentor={mentor_id}"
    return f"{url}&mode={mode}" if mode else url


@method_decorator(session_required, name="dispatch")
class ConnectView(ServiceMixin, TemplateView):
    """Mentor marketplace: browse, pick a mentor, then review or book them."""

    template_name = "connect.html"
    service_class = MentorService

    def resolve_mode(self) -> str:
        mode = self.request.GET.get("mode", "")
        if self.request.GET.get("review") == "true":
            mode = "review"
        return {"review": REVIEWING, "book": BOOKING}.get(mode, MENTOR_SELECTED)

    def selected_mentor(self, mentors, mentor_id):
        try:
            mentor_id = int(mentor_id)
        except (TypeError, ValueError):
            return None
        return next((mentor for mentor in mentors if mentor.pk == mentor_id), None)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        load_state, mentors = load(self.get_service().load)
        search_term = self.request.GET.get("search", "").strip()
        expertise = self.request.GET.get("expertise", "").strip()
        mentor = kwargs.get("mentor") or self.selected_mentor(mentors, self.request.GET.get("mentor"))
        flow = BROWSING
        reviews, existing_review = [], None
        if mentor is not None:
            flow = kwargs.get("flow") or self.resolve_mode()
            reviews_service = self.get_service(ReviewService)
            _, reviews = load(reviews_service.for_mentor, mentor)
            _, existing_review = load(reviews_service.existing, mentor, default=None)
            if "review_form" not in kwargs:
                kwargs["review_form"] = ReviewForm(instance=existing_review)
            if "booking_form" not in kwargs:
                kwargs["booking_form"] = BookingForm(mentor=mentor)
        expertise_tags = sorted({tag for item in mentors for tag in (item.expertise or [])})
        context.update(
            {
                "load_state": load_state,
                "mentors": filter_mentors(mentors, search_term, expertise),
                "search_term": search_term,
                "expertise": expertise,
                "expertise_tags": expertise_tags,
                "mentor": mentor,
                "flow": flow,
                "reviews": reviews,
                "existing_review": existing_review,
                "review_form": kwargs.get("review_form"),
                "booking_form": kwargs.get("booking_form"),
                "session_rates": SESSION_RATES,
            }
        )
        return context


@method_decorator(session_required, name="dispatch")
class MentorActionView(ConnectView):
    """POST endpoints that re-render the connect page when the form is invalid."""

    http_method_names = ["get", "post"]

    def dispatch(self, request, *args, **kwargs):
        try:
            self.mentor = self.get_service().get(kwargs["mentor_id"])
        except DataAccessError:
            return redirect("connect")
        return super().dispatch(request, *args, **kwargs)

    def get(self, request, *args, **kwargs):
        return redirect(connect_url(self.mentor.pk, self.mode))

    def render_invalid(self, **forms):
        messages.error(self.request, "Please review the errors below.")
        context = self.get_context_data(mentor=self.mentor, flow=self.flow, **forms)
        return self.render_to_response(context)


class ReviewSubmitView(MentorActionView):
    mode = "review"
    flow = REVIEWING

    def post(self, request, mentor_id):
        service = self.get_service(ReviewService)
        try:
            existing = service.existing(self.mentor)
        except DataAccessError:
            return redirect(connect_url(self.mentor.pk, self.mode))
        form = ReviewForm(request.POST, instance=existing)
        if not form.is_valid():
            return self.render_invalid(review_form=form)
        try:
            _, created = service.submit(
                self.mentor,
                {"rating": form.cleaned_data["rating"], "comment": form.cleaned_data["comment"]},
            )
        except DataAccessError:
            return self.render_invalid(review_form=form)
        messages.success(request, "Review submitted successfully!" if created else "Review updated successfully!")
        return redirect(connect_url(self.mentor.pk))


class BookSessionView(MentorActionView):
    mode = "book"
    flow = BOOKING

    def post(self, request, mentor_id):
        form = BookingForm(request.POST, mentor=self.mentor)
        if not form.is_valid():
            return self.render_invalid(booking_form=form)
        try:
            session = self.get_service(BookingService).book(self.mentor, form.cleaned_data)
        except DataAccessError:
            return self.render_invalid(booking_form=form)
        messages.success(request, "Session booked successfully!")
        return redirect(f"{reverse('sessions')}#session-{session.pk}")


@method_decorator(session_required, name="dispatch")
class BecomeMentorView(ServiceMixin, FormView):
    template_name = "become_mentor.html"
    form_class = MentorForm
    service_class = MentorService

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        _, kwargs["instance"] = load(self.get_service().current, default=None)
        return kwargs

    def form_valid(self, form):
        try:
            mentor, created = self.get_service().register(form.mentor_fields())
        except DataAccessError:
            return self.form_invalid(form)
        messages.success(
            self.request,
            "You are now listed as a mentor!" if created else "Mentor profile updated successfully!",
        )
        return redirect(connect_url(mentor.pk))

    def form_invalid(self, form):
        if form.errors:
            messages.error(self.request, "Please review the errors below.")
        return super().form_invalid(form)

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views.generic import TemplateView

from ..decorators import session_required
from ..exceptions import DataAccessError
from ..models import MentorSession
from ..services import BookingService
from ..services.booking import TABS
from .base import ServiceMixin, load


@method_decorator(session_required, name="dispatch")
class SessionListView(ServiceMixin, TemplateView):
    template_name = "sessions.html"
    service_class = BookingService

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        tab = self.request.GET.get("tab", "upcoming")
        if tab not in TABS:
            tab = "upcoming"
        status = self.request.GET.get("status", "")
        if status not in dict(MentorSession.STATUS_CHOICES):
            status = ""
        service = self.get_service()
        load_state, sessions = load(service.for_tab, tab, status)
        now = timezone.now()
        for session in sessions:
            session.is_starting_soon = session.starts_soon(now)
        context.update(
            {
                "load_state": load_state,
                "sessions": sessions,
                "tab": tab,
                "status": status,
                "status_choices": MentorSession.STATUS_CHOICES,
                "stats": service.stats(sessions),
            }
        )
        return context


@method_decorator(session_required, name="dispatch")
class SessionActionView(ServiceMixin, TemplateView):
    """Confirmation page on GET, state change on POST."""

    template_name = "session_confirm.html"
    service_class = BookingService
    action = None
    prompt = ""
    success_message = ""

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        try:
            session = self.get_service().get_owned(kwargs["pk"])
        except DataAccessError:
            raise Http404("Session not found")
        context.update({"session": session, "prompt": self.prompt, "action": self.action})
        return context

    def post(self, request, pk):
        service = self.get_service()
        try:
            getattr(service, self.action)(pk)
        except DataAccessError:
            return redirect("sessions")
        messages.success(request, self.success_message)
        return redirect("sessions")


class SessionCancelView(SessionActionView):
    action = "cancel"
    prompt = "Are you sure you want to cancel this session?"
    success_message = "Session canceled successfully"


class SessionCompleteView(SessionActionView):
    action = "complete"
    prompt = "Mark this session as completed?"
    success_message = "Session marked as completed"

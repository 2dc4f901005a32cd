from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from django.db.models import Q
from django.utils import timezone

from ..models import Mentor, MentorSession, calculate_session_amount
from .base import TableService

TABS = ("upcoming", "past")


@dataclass(frozen=True)
class SessionStats:
    total_hours: float
    completed: int
    mentors: int


class BookingService(TableService):
    """Mentoring sessions booked by the signed-in user."""

    model = MentorSession
    label = "sessions"

    def queryset(self):
        return self._owned().select_related("mentor__user__profile")

    def book(self, mentor: Mentor, fields: dict) -> MentorSession:
        duration = int(fields["duration"])
        with self._remote_call("book session"):
            return MentorSession.objects.create(
                user=self.user,
                mentor=mentor,
                date=fields["date"],
                time_slot=fields["time_slot"],
                duration=duration,
                notes=fields.get("notes", ""),
                amount=calculate_session_amount(mentor.hourly_rate, duration),
                currency=mentor.currency,
                status="upcoming",
                payment_status="pending",
            )

    def for_tab(self, tab: str, status: str = "", today=None) -> list[MentorSession]:
        today = today or timezone.localdate()
        sessions = self.queryset()
        if tab == "past":
            sessions = sessions.filter(
                Q(date__lt=today) | Q(status__in=["completed", "canceled"])
            ).order_by("-date", "-time_slot")
        else:
            sessions = sessions.filter(date__gte=today).exclude(status="canceled").order_by("date", "time_slot")
        if status:
            sessions = sessions.filter(status=status)
        with self._remote_call("load sessions"):
            return list(sessions)

    def cancel(self, pk) -> MentorSession:
        session = self.get_owned(pk)
        with self._remote_call("cancel session"):
            session.mark_canceled()
        return session

    def complete(self, pk) -> MentorSession:
        session = self.get_owned(pk)
        with self._remote_call("update session"):
            session.mark_completed()
        return session

    def mentors_booked(self) -> int:
        with self._remote_call("load sessions"):
            return self._owned().values("mentor_id").distinct().count()

    @staticmethod
    def stats(sessions: Iterable[MentorSession]) -> SessionStats:
        sessions = list(sessions)
        minutes = sum(session.duration or 0 for session in sessions)
        return SessionStats(
            total_hours=round(minutes / 60, 1),
            completed=sum(1 for session in sessions if session.status == "completed"),
            mentors=len({session.mentor_id for session in sessions if session.mentor_id}),
        )

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from django.db.models import Avg, Count

from ..models import Mentor, MentorReview
from .base import TableService


class MentorService(TableService):
    model = Mentor
    label = "mentors"

    def queryset(self):
        return Mentor.objects.select_related("user__profile")

    def current(self) -> Mentor | None:
        """The signed-in user's own mentor record, if they registered as one."""

        with self._remote_call("load mentor profile"):
            return self.queryset().filter(user=self.user).first()

    def register(self, fields: dict) -> tuple[Mentor, bool]:
        with self._remote_call("register as mentor"):
            return Mentor.objects.update_or_create(user=self.user, defaults=fields)

    def refresh_rating(self, mentor: Mentor) -> Mentor:
        """Recompute the aggregate rating and review count from stored reviews."""

        with self._remote_call("update mentor rating"):
            summary = MentorReview.objects.filter(mentor=mentor).aggregate(average=Avg("rating"), total=Count("id"))
            average = Decimal(str(summary["average"] or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
            Mentor.objects.filter(pk=mentor.pk).update(rating=average, review_count=summary["total"])
        mentor.rating = average
        mentor.review_count = summary["total"]
        return mentor

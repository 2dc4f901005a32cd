from __future__ import annotations

from ..models import Mentor, MentorReview
from .base import TableService
from .mentor import MentorService


class ReviewService(TableService):
    """Mentor reviews; a user keeps at most one review per mentor."""

    model = MentorReview
    label = "reviews"
    mentor_service_class = MentorService

    def for_mentor(self, mentor: Mentor) -> list[MentorReview]:
        with self._remote_call("load reviews"):
            return list(
                MentorReview.objects.filter(mentor=mentor)
                .select_related("user__profile")
                .order_by("-created_at", "-id")
            )

    def existing(self, mentor: Mentor) -> MentorReview | None:
        with self._remote_call("load your review"):
            return MentorReview.objects.filter(mentor=mentor, user=self.user).first()

    def submit(self, mentor: Mentor, fields: dict) -> tuple[MentorReview, bool]:
        """Insert or update this user's review, then refresh the mentor's rating."""

        review = self.existing(mentor)
        with self._remote_call("submit review"):
            if review is None:
                review = MentorReview.objects.create(mentor=mentor, user=self.user, **fields)
                created = True
            else:
                for name, value in fields.items():
                    setattr(review, name, value)
                review.save()
                created = False
        self.mentor_service_class(self.context).refresh_rating(mentor)
        return review, created

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .user import User

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class Mentor(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="mentor")
    title = models.CharField(max_length=255)
    bio = models.TextField(blank=True)
    expertise = models.JSONField(default=list, blank=True)
    hourly_rate = models.DecimalField(max_digits=8, decimal_places=2)
    currency = models.CharField(max_length=3, default="USD")
    rating = models.DecimalField(max_digits=3, decimal_places=2, default=0)
    review_count = models.PositiveIntegerField(default=0)
    badges = models.JSONField(default=list, blank=True)
    availability = models.JSONField(default=dict, blank=True, help_text="Weekday name -> list of HH:MM slots")
    languages = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "mentors"
        ordering = ["-rating", "id"]

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return f"{self.name} ({self.title})"

    @property
    def name(self) -> str:
        return self.user.display_name

    @property
    def image_url(self) -> str:
        profile = getattr(self.user, "profile", None)
        return profile.image_url if profile is not None else ""

    def slots_for(self, day) -> list[str]:
        """Return the published time slots for ``day``'s weekday."""

        weekday = WEEKDAYS[day.weekday()]
        return list((self.availability or {}).get(weekday, []))


class MentorReview(models.Model):
    mentor = models.ForeignKey(Mentor, on_delete=models.CASCADE, related_name="reviews")
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="mentor_reviews")
    rating = models.IntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "mentor_reviews"
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return f"Review for {self.mentor_id} by {self.user_id}"

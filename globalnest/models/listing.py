from django.db import models

from ..location import parse_location
from .user import User


class Listing(models.Model):
    """Fields shared by housing and job postings."""

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="%(class)ss")
    title = models.CharField(max_length=255)
    description = models.TextField()
    location = models.JSONField(null=True, blank=True)
    contact_email = models.EmailField(blank=True)
    contact_phone = models.CharField(max_length=30, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return self.title

    @property
    def location_value(self):
        return parse_location(self.location)

    def is_owned_by(self, user) -> bool:
        return bool(user is not None and getattr(user, "is_authenticated", False) and self.user_id == user.id)


class HousingListing(Listing):
    price = models.DecimalField(max_digits=10, decimal_places=2, help_text="Monthly rent")
    available_from = models.DateField()
    available_until = models.DateField()

    class Meta(Listing.Meta):
        db_table = "housing"


class JobListing(Listing):
    JOB_TYPE_CHOICES = (
        ("full-time", "Full Time"),
        ("part-time", "Part Time"),
        ("internship", "Internship"),
        ("contract", "Contract"),
    )

    company = models.CharField(max_length=255)
    job_type = models.CharField(max_length=20, choices=JOB_TYPE_CHOICES, default="full-time")
    salary = models.CharField(max_length=100, blank=True, help_text="e.g., $50,000 - $70,000 per year")

    class Meta(Listing.Meta):
        db_table = "jobs"

from django.db import models

from ..location import parse_location
from .user import User


class Profile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")
    name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(blank=True)
    university = models.CharField(max_length=255, blank=True)
    field_of_study = models.CharField(max_length=255, blank=True)
    bio = models.TextField(blank=True)
    image_url = models.CharField(max_length=500, blank=True)
    location = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "profiles"

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return f"Profile for {self.name or self.email or self.user_id}"

    @property
    def location_value(self):
        return parse_location(self.location)

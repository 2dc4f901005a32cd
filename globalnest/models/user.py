from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    ROLE_CHOICES = (
        ("planning", "Planning to study abroad"),
        ("abroad", "Currently studying abroad"),
    )

    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default="planning")

    @property
    def display_name(self) -> str:
        profile = getattr(self, "profile", None)
        if profile is not None and profile.name:
            return profile.name
        return self.get_full_name() or self.email or self.username

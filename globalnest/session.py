"""Per-request session store.

A :class:`SessionContext` is built by :class:`~globalnest.middleware.SessionContextMiddleware`
for every request and handed to page controllers and data-access services, so
nothing reads the signed-in user from module-level state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.contrib import messages
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import DatabaseError

from .exceptions import AuthError

if TYPE_CHECKING:  # pragma: no cover - static type hints only
    from .models import User as UserType

logger = logging.getLogger(__name__)

User = get_user_model()

MODEL_BACKEND = "django.contrib.auth.backends.ModelBackend"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class SessionContext:
    """Current identity plus the sign-in/sign-up/sign-out operations."""

    def __init__(self, request):
        self.request = request
        self.user: "UserType | None" = None
        self.loading = True

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self) -> int | None:
        return self.user.pk if self.user is not None else None

    def set_user(self, user) -> None:
        """Record an auth-state change reported by Django's auth layer."""

        if user is not None and not getattr(user, "is_authenticated", False):
            user = None
        self.user = user
        self.loading = False

    def notify(self, level: int, message: str) -> None:
        messages.add_message(self.request, level, message, fail_silently=True)

    # Auth operations --------------------------------------------------
    def sign_in(self, email: str, password: str) -> "UserType":
        user = authenticate(self.request, username=normalize_email(email), password=password)
        if user is None:
            logger.warning("Login error: rejected credentials for %s", normalize_email(email))
            self.notify(messages.ERROR, "Invalid email or password")
            raise AuthError("Invalid email or password")
        login(self.request, user)
        self.set_user(user)
        self.notify(messages.SUCCESS, "Welcome back!")
        return user

    def sign_up(self, email: str, password: str, role: str) -> "UserType":
        email = normalize_email(email)
        valid_roles = {value for value, _ in User.ROLE_CHOICES}
        try:
            if role not in valid_roles:
                raise AuthError(f"Unknown role: {role!r}")
            if User.objects.filter(username__iexact=email).exists():
                raise AuthError("An account with this email already exists.")
            candidate = User(username=email, email=email, role=role)
            validate_password(password, user=candidate)
            user = User.objects.create_user(username=email, email=email, password=password, role=role)
        except (AuthError, ValidationError, DatabaseError) as exc:
            logger.warning("Signup error for %s: %s", email, exc)
            self.notify(messages.ERROR, "Failed to create account")
            if isinstance(exc, AuthError):
                raise
            raise AuthError(str(exc)) from exc
        login(self.request, user, backend=MODEL_BACKEND)
        self.set_user(user)
        self.notify(messages.SUCCESS, "Account created successfully! Welcome to GlobalNest.")
        return user

    def sign_out(self) -> None:
        logout(self.request)
        self.set_user(None)
        self.notify(messages.SUCCESS, "Signed out successfully")

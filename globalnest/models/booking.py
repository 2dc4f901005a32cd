from datetime import datetime, time, timedelta
from decimal import Decimal, ROUND_HALF_UP

from django.db import models
from django.utils import timezone

from .mentor import Mentor
from .user import User

STARTING_SOON_WINDOW = timedelta(minutes=15)


class MentorSession(models.Model):
    """A booked mentoring appointment (not the login session)."""

    STATUS_CHOICES = (
        ("upcoming", "Upcoming"),
        ("completed", "Completed"),
        ("canceled", "Canceled"),
    )
    PAYMENT_STATUS_CHOICES = (
        ("paid", "Paid"),
        ("pending", "Pending"),
        ("refunded", "Refunded"),
        ("failed", "Failed"),
    )
    DURATION_CHOICES = (
        (30, "30 minutes"),
        (60, "1 hour"),
        (90, "1.5 hours"),
        (120, "2 hours"),
    )

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="mentor_sessions")
    mentor = models.ForeignKey(Mentor, on_delete=models.CASCADE, related_name="sessions")
    date = models.DateField()
    time_slot = models.CharField(max_length=8, help_text="HH:MM or HH:MM:SS")
    duration = models.PositiveIntegerField(choices=DURATION_CHOICES, default=60)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default="upcoming")
    payment_status = models.CharField(max_length=10, choices=PAYMENT_STATUS_CHOICES, default="pending")
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    currency = models.CharField(max_length=3, default="USD")
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "sessions"
        ordering = ["date", "time_slot"]

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return f"Session with mentor {self.mentor_id} on {self.date} at {self.time_slot}"

    def mark_canceled(self) -> None:
        self.status = "canceled"
        self.payment_status = "refunded"
        self.save(update_fields=["status", "payment_status"])

    def mark_completed(self) -> None:
        self.status = "completed"
        self.payment_status = "paid"
        self.save(update_fields=["status", "payment_status"])

    def starts_at(self):
        start = datetime.combine(self.date, parse_time_slot(self.time_slot))
        return timezone.make_aware(start) if timezone.is_naive(start) else start

    def starts_soon(self, now=None) -> bool:
        """True when the session begins within the next fifteen minutes."""

        if self.status != "upcoming":
            return False
        try:
            start = self.starts_at()
        except ValueError:
            return False
        now = now or timezone.now()
        remaining = start - now
        return timedelta(0) < remaining <= STARTING_SOON_WINDOW


def parse_time_slot(time_slot: str) -> time:
    parts = [int(part) for part in (time_slot or "").split(":")]
    if len(parts) < 2:
        raise ValueError(f"Invalid time slot: {time_slot!r}")
    seconds = parts[2] if len(parts) > 2 else 0
    return time(parts[0], parts[1], seconds)


def calculate_session_amount(hourly_rate, duration: int) -> Decimal:
    """Price of a booking: the hourly rate pro-rated by minutes."""

    amount = Decimal(str(hourly_rate)) * Decimal(duration) / Decimal(60)
    return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

"""Display formatting shared by templates and the JSON API."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django.utils import timezone

from .location import Coordinates, FreeformText, parse_location
from .models.booking import parse_time_slot

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "CAD": "CA$",
    "AUD": "A$",
}


def format_currency(amount, currency: str | None = "USD") -> str:
    code = (currency or "USD").upper()
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError):
        return f"{code} {amount}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{code} {value:,.2f}"
    return f"{symbol}{value:,.2f}"


def format_location(raw) -> str:
    location = parse_location(raw)
    if location is None:
        return "Location not specified"
    if isinstance(location, Coordinates):
        return f"{location.lat:.2f}, {location.lng:.2f}"
    if isinstance(location, FreeformText):
        return location.text
    return "Invalid location format"


def star_states(rating, total: int = 5) -> list[bool]:
    """Filled/empty flags for a star row; the rating is rounded to a whole star."""

    try:
        filled = int(Decimal(str(rating or 0)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError):
        filled = 0
    filled = max(0, min(filled, total))
    return [index < filled for index in range(total)]


def format_session_date(value) -> str:
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value)
        except ValueError:
            return value
    if isinstance(value, datetime):
        value = value.date()
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_time_slot(time_slot: str) -> str:
    """Render ``HH:MM[:SS]`` as a 12-hour clock; unparseable values pass through."""

    try:
        slot = parse_time_slot(time_slot)
    except (TypeError, ValueError):
        return time_slot
    hour = slot.hour % 12 or 12
    suffix = "AM" if slot.hour < 12 else "PM"
    return f"{hour:02d}:{slot.minute:02d} {suffix}"


def relative_date(value, now=None) -> str:
    """Short "n days ago" style label, falling back to an absolute date after a month."""

    if value is None:
        return ""
    now = now or timezone.now()
    if isinstance(value, datetime) and isinstance(now, datetime):
        if timezone.is_aware(value) != timezone.is_aware(now):
            value = value.replace(tzinfo=None)
            now = now.replace(tzinfo=None)
        delta = now - value
    else:
        value_date = value.date() if isinstance(value, datetime) else value
        now_date = now.date() if isinstance(now, datetime) else now
        delta = datetime.combine(now_date, datetime.min.time()) - datetime.combine(value_date, datetime.min.time())
    seconds = int(delta.total_seconds())
    if seconds < 0:
        return f"{value:%b} {value.day}, {value.year}"
    if seconds < 60:
        return "just now"
    if seconds < 3600:
        minutes = seconds // 60
        return f"{minutes} minute{'s' if minutes != 1 else ''} ago"
    if seconds < 86400:
        hours = seconds // 3600
        return f"{hours} hour{'s' if hours != 1 else ''} ago"
    days = delta.days
    if days < 30:
        return f"{days} day{'s' if days != 1 else ''} ago"
    return f"{value:%b} {value.day}, {value.year}"


def title_status(status: str) -> str:
    return (status or "")[:1].upper() + (status or "")[1:]

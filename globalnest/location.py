"""Listing and profile locations: either coordinates or free text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float

    def to_json(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}

    def as_text(self) -> str:
        return f"{self.lat}, {self.lng}"


@dataclass(frozen=True)
class FreeformText:
    text: str

    def to_json(self) -> str:
        return self.text

    def as_text(self) -> str:
        return self.text


Location = Union[Coordinates, FreeformText]


def parse_location(raw: Any) -> Location | None:
    """Return the tagged location for a stored JSON value or user input.

    ``{"lat": .., "lng": ..}`` and ``"lat, lng"`` strings become
    :class:`Coordinates`; any other non-empty string is kept as
    :class:`FreeformText`.
    """

    if raw is None:
        return None
    if isinstance(raw, (Coordinates, FreeformText)):
        return raw
    if isinstance(raw, dict):
        try:
            return Coordinates(lat=float(raw["lat"]), lng=float(raw["lng"]))
        except (KeyError, TypeError, ValueError):
            return None
    text = str(raw).strip()
    if not text:
        return None
    parts = [part.strip() for part in text.split(",")]
    if len(parts) == 2:
        try:
            lat, lng = float(parts[0]), float(parts[1])
        except ValueError:
            return FreeformText(text)
        if -90 <= lat <= 90 and -180 <= lng <= 180:
            return Coordinates(lat=lat, lng=lng)
    return FreeformText(text)


def location_to_json(location: Location | None) -> Any:
    return location.to_json() if location is not None else None


def location_search_text(raw: Any) -> str:
    """Text that participates in search; coordinates are never matched."""

    location = parse_location(raw)
    if isinstance(location, FreeformText):
        return location.text
    return ""

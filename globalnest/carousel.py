from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class CarouselWindow:
    items: list
    position: int
    count: int

    @property
    def previous_position(self) -> int | None:
        return self.position - 1 if self.position > 0 else None

    @property
    def next_position(self) -> int | None:
        return self.position + 1 if self.position < self.count - 1 else None

    @property
    def indicators(self) -> list[bool]:
        return [index == self.position for index in range(self.count)]


def carousel_window(items: Sequence[Any], position: Any, per_view: int = 3) -> CarouselWindow:
    """Visible slice of a carousel, clamping ``position`` into range."""

    count = len(items)
    try:
        index = int(position)
    except (TypeError, ValueError):
        index = 0
    index = max(0, min(index, count - 1)) if count else 0
    visible = [items[(index + offset) % count] for offset in range(min(per_view, count))] if count else []
    return CarouselWindow(items=visible, position=index, count=count)

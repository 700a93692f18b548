"""State and geometry of a horizontal scroll bar."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

SCROLL_LEFT = -2
SCROLL_RIGHT = -1


@dataclass
class Rect:
    """An axis aligned rectangle."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


@dataclass
class ScrollBar:
    """A scroll bar made of two arrows, two track parts and a thumb.

    ``on_scroll`` receives the new position while dragging, or
    ``SCROLL_LEFT`` / ``SCROLL_RIGHT`` when an arrow steps by one.
    """

    min_pos: int = 0
    max_pos: int = 100
    pos: int = 0
    on_scroll: Callable[[int], None] | None = None
    dragging: bool = False
    left_arrow: Rect = field(default_factory=Rect)
    right_arrow: Rect = field(default_factory=Rect)
    left_track: Rect = field(default_factory=Rect)
    thumb: Rect = field(default_factory=lambda: Rect(-1, -1, 0, 0))
    right_track: Rect = field(default_factory=Rect)

    @property
    def range(self) -> int:
        return self.max_pos - self.min_pos

    def _emit(self, value: int) -> None:
        if self.on_scroll is not None:
            self.on_scroll(value)

    def set_range(self, min_pos: int, max_pos: int) -> None:
        """Change the range, keeping the relative position of the thumb."""
        fraction = (self.pos - self.min_pos) / self.range if self.range else 0.0
        self.min_pos = min_pos
        self.max_pos = max_pos
        self.pos = self.min_pos + int(self.range * fraction)

    def set_position(self, pos: int) -> None:
        """Set the position, clamped to the range."""
        self.pos = min(max(pos, self.min_pos), self.max_pos)

    def layout(self, width: int, height: int, arrow_width: int, thumb_width: int) -> None:
        """Place the parts for a bar of the given size."""
        free = width - 2 * arrow_width - thumb_width
        if self.range:
            tx = arrow_width + int(free / self.range * (self.pos - self.min_pos))
        else:
            tx = arrow_width
        self.left_arrow = Rect(0, 0, arrow_width, height)
        self.right_arrow = Rect(width - arrow_width, 0, arrow_width, height)
        self.left_track = Rect(arrow_width, 0, tx - arrow_width, height)
        self.thumb = Rect(tx, 0, thumb_width, height)
        self.right_track = Rect(tx + thumb_width, 0, width - (tx + thumb_width) - arrow_width, height)

    def _track_to(self, x: int, width: int) -> None:
        span = width - 2 * self.left_arrow.width - self.thumb.width
        if span == 0:
            pos = self.min_pos
        else:
            offset = x - self.thumb.width // 2 - self.left_arrow.width
            pos = int(self.min_pos + offset / span * self.range)
        self.pos = min(max(pos, self.min_pos), self.max_pos)
        self._emit(self.pos)

    def press(self, x: int, y: int, width: int) -> bool:
        """Mouse down at (x, y); return True if the position changed or a drag began."""
        if self.thumb.contains(x, y) or self.left_track.contains(x, y) or self.right_track.contains(x, y):
            self.dragging = True
            self._track_to(x, width)
            return True
        if self.left_arrow.contains(x, y):
            return self.scroll_left()
        if self.right_arrow.contains(x, y):
            return self.scroll_right()
        return False

    def drag(self, x: int, width: int) -> bool:
        """Mouse moved while pressed; return True if dragging."""
        if not self.dragging:
            return False
        self._track_to(x, width)
        return True

    def release(self) -> bool:
        """End a drag; return True if one was in progress."""
        if not self.dragging:
            return False
        self.dragging = False
        return True

    def scroll_left(self) -> bool:
        """Step one position left; return True if it moved."""
        if self.pos <= self.min_pos:
            return False
        self.pos -= 1
        self._emit(SCROLL_LEFT)
        return True

    def scroll_right(self) -> bool:
        """Step one position right; return True if it moved."""
        if self.pos >= self.max_pos:
            return False
        self.pos += 1
        self._emit(SCROLL_RIGHT)
        return True
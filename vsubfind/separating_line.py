"""Geometry of a draggable separating line with arrow-shaped ends."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .scrollbar import Rect


class Orientation(enum.IntEnum):
    """Direction the line runs in."""

    HORIZONTAL = 0
    VERTICAL = 1


@dataclass
class SeparatingLine:
    """A line of size ``width`` x ``height`` with end markers ``sw`` x ``sh``.

    It moves between the pixel coordinates ``min_pos`` and ``max_pos`` across
    its length and is placed at ``offset`` along it. ``pos`` is the position
    as a fraction of that span, kept within ``pos_min`` and ``pos_max``.
    """

    width: int
    height: int
    sw: int
    sh: int
    min_pos: int
    max_pos: int
    offset: int
    orientation: Orientation = Orientation.HORIZONTAL
    pos: float = 0.0
    pos_min: float = 0.0
    pos_max: float = 1.0

    def outline(self) -> list[tuple[int, int]]:
        """The polygon, in window coordinates, that shapes the line."""
        w, h, sw, sh = self.width, self.height, self.sw, self.sh
        if self.orientation == Orientation.HORIZONTAL:
            mid = sh + (h + 1) // 2
            return [
                (0, 0),
                (sw, sh),
                (w + sw, sh),
                (w + 2 * sw, 0),
                (w + sw + 1, mid + 1),
                (w + sw + 1, mid - 1),
                (w + 2 * sw, sh + h + sh),
                (w + sw, sh + h),
                (sw, sh + h),
                (0, sh + h + sh),
                (sw - 1, mid - 1),
                (sw - 1, mid + 1),
            ]
        mid = sw + (w + 1) // 2
        return [
            (0, 0),
            (mid + 1, sh - 1),
            (mid - 1, sh - 1),
            (w + 2 * sw, 0),
            (w + sw, sh),
            (w + sw, sh + h),
            (w + 2 * sw, h + 2 * sh),
            (mid - 1, h + sh + 1),
            (mid + 1, h + sh + 1),
            (0, h + 2 * sh),
            (sw, h + sh),
            (sw, sh),
        ]

    def move_to(self, x: int, y: int) -> Rect:
        """Move the line towards a point in parent coordinates; return its rectangle."""
        val = y if self.orientation == Orientation.HORIZONTAL else x
        if val > self.max_pos:
            pos = 1.0
        elif val < self.min_pos:
            pos = 0.0
        else:
            pos = (val - self.min_pos) / (self.max_pos - self.min_pos)
        self.pos = min(max(pos, self.pos_min), self.pos_max)
        return self.rect()

    def rect(self) -> Rect:
        """The window rectangle for the current position."""
        pixel = self.min_pos + int(self.pos * (self.max_pos - self.min_pos))
        full_w = self.width + 2 * self.sw
        full_h = self.height + 2 * self.sh
        if self.orientation == Orientation.HORIZONTAL:
            return Rect(self.offset - self.sw, pixel - self.height // 2 - self.sh, full_w, full_h)
        return Rect(pixel - self.width // 2 - self.sw, self.offset - self.sh, full_w, full_h)

    def current_position(self) -> int:
        """Pixel coordinate of the line's centre across its length."""
        rc = self.rect()
        if self.orientation == Orientation.HORIZONTAL:
            return rc.y + self.height // 2 + self.sh
        return rc.x + self.width // 2 + self.sw

    def current_fraction(self) -> float:
        """Centre of the line as a fraction of the span."""
        return (self.current_position() - self.min_pos) / (self.max_pos - self.min_pos)
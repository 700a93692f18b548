"""Move and resize logic for a floating child window."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Cursor(enum.Enum):
    """Mouse cursor shapes shown over the window."""

    ARROW = "arrow"
    SIZENWSE = "size_nwse"
    SIZENESW = "size_nesw"
    SIZEWE = "size_we"
    SIZENS = "size_ns"
    HAND = "hand"


@dataclass
class ResizableWindow:
    """A window placed in its parent, dragged by its borders or title band.

    Mouse coordinates passed to the methods are relative to the window.
    """

    x: int
    y: int
    width: int
    height: int
    border_size: int = 4
    move_border_size: int = 40
    cursor: Cursor = Cursor.ARROW
    resizing: bool = False
    moving: bool = False
    from_left: bool = False
    from_right: bool = False
    from_top: bool = False
    from_bottom: bool = False
    _origin: tuple[int, int] = field(default=(0, 0), repr=False)

    def _edges(self, x: int, y: int) -> tuple[bool, bool, bool, bool]:
        b = self.border_size
        return (
            x < b,
            x > self.width - b - 1,
            y < b,
            y > self.height - b - 1,
        )

    def cursor_at(self, x: int, y: int) -> Cursor:
        """Return the cursor for a point inside the window."""
        left, right, top, bottom = self._edges(x, y)
        if not (left or right or top or bottom):
            return Cursor.ARROW
        if (left and top) or (right and bottom):
            return Cursor.SIZENWSE
        if (left and bottom) or (right and top):
            return Cursor.SIZENESW
        if left or right:
            return Cursor.SIZEWE
        return Cursor.SIZENS

    def press(self, x: int, y: int) -> bool:
        """Start a resize or move; return True if the mouse is captured."""
        left, right, top, bottom = self._edges(x, y)
        if left or right or top or bottom:
            self.resizing = True
            self.cursor = self.cursor_at(x, y)
            self.from_left, self.from_right = left, right
            self.from_top, self.from_bottom = top, bottom
            return True
        if y < self.move_border_size:
            self.moving = True
            self._origin = (x, y)
            self.cursor = Cursor.HAND
            return True
        return False

    def move(self, x: int, y: int, parent_width: int, parent_height: int) -> bool:
        """Follow the mouse; return True if the window rectangle changed."""
        if not (self.resizing or self.moving):
            self.cursor = self.cursor_at(x, y)
            return False

        before = (self.x, self.y, self.width, self.height)
        rx, ry, rw, rh = before
        w, h = self.width, self.height

        if self.resizing:
            px, py = self.x + x, self.y + y
            least = 2 * self.border_size + 10
            if self.from_left:
                val = rx + w - px
                if val > least and px >= 0:
                    rw, rx = val, px
            if self.from_right:
                val = px - rx
                if val > least and px < parent_width:
                    rw = val
            if self.from_top:
                val = ry + h - py
                if val > least and py >= 0:
                    rh, ry = val, py
            if self.from_bottom:
                val = py - ry
                if val > least and py < parent_height:
                    rh = val
        else:
            dx = x - self._origin[0]
            dy = y - self._origin[1]
            mb = self.move_border_size
            if rx + w + dx > mb and rx + dx < parent_width - mb:
                rx += dx
            if ry + dy >= 0 and ry + dy < parent_height - mb:
                ry += dy

        self.x, self.y, self.width, self.height = rx, ry, rw, rh
        return (rx, ry, rw, rh) != before

    def release(self) -> bool:
        """End a drag; return True if one was in progress."""
        if not (self.resizing or self.moving):
            return False
        self.resizing = False
        self.moving = False
        self.cursor = Cursor.ARROW
        return True

    def leave(self) -> None:
        """The mouse left the window: reset the cursor unless dragging."""
        if not (self.resizing or self.moving):
            self.cursor = Cursor.ARROW
"""Placement and sizing of labels and group boxes."""

from __future__ import annotations

import enum


class Align(enum.IntFlag):
    """Text alignment flags inside a label."""

    LEFT = 0
    TOP = 0
    CENTER_HORIZONTAL = 0x0100
    RIGHT = 0x0200
    BOTTOM = 0x0400
    CENTER_VERTICAL = 0x0800
    CENTER = 0x0100 | 0x0800


def _half(value: int) -> int:
    """Halve, rounding toward zero."""
    return int(value / 2)


def text_origin(
    client_width: int, client_height: int, text_width: int, text_height: int, align: Align
) -> tuple[int, int]:
    """Top-left corner of text of the given size inside the client area."""
    if align & Align.CENTER_HORIZONTAL:
        x = _half(client_width - text_width)
    elif align & Align.RIGHT:
        x = client_width - text_width
    else:
        x = 0
    if align & Align.CENTER_VERTICAL:
        y = _half(client_height - text_height)
    elif align & Align.BOTTOM:
        y = client_height - text_height
    else:
        y = 0
    return x, y


def optimal_size(
    text_width: int,
    text_height: int,
    border_width: int,
    border_height: int,
    min_width: int = 0,
    min_height: int = 0,
    auto_width: bool = True,
    gap: int = 6,
) -> tuple[int, int]:
    """Best label size for its text, borders and gap, at least the minimum.

    Without ``auto_width`` the width is left small so the layout decides it.
    """
    best_w = text_width + border_width + gap
    best_h = text_height + border_height + gap
    width = max(best_w, min_width) if auto_width else 10
    return width, max(best_h, min_height)


def box_best_size(
    content_width: int, content_height: int, border_width: int, border_height: int
) -> tuple[int, int]:
    """Size a group box needs around content of the given size."""
    return content_width + border_width + 20, content_height + border_height + 20
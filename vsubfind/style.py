"""Text line colour and height data, grouped into subtitle styles."""

from __future__ import annotations

from dataclasses import dataclass, field


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend."""
    return a - b * _trunc_div(a, b)


@dataclass
class YiqLineHeight:
    """Main colour of a text line in YIQ, with the line height."""

    y: int = 0
    i: int = 0
    q: int = 0
    line_height: int = 0


@dataclass
class AssTextLine:
    """One recognised text line with its geometry, colour and timing."""

    text: str = ""
    width: int = 0
    height: int = 0
    line_height: int = 0
    line_y: int = 0
    x_begin: int = 0
    x_end: int = 0
    y_begin: int = 0
    y_end: int = 0
    mean_y: int = 0
    mean_i: int = 0
    mean_q: int = 0
    begin_ms: int = 0
    end_ms: int = 0
    dx: int = -1
    dy: int = -1
    alignment: int = -1
    style_index: int = 0
    style: AssTextStyle | None = None


@dataclass
class AssTextStyle:
    """A subtitle style built from the lines that share it."""

    data: list[YiqLineHeight] = field(default_factory=list)
    min_y: int = 0
    min_i: int = 0
    min_q: int = 0
    max_y: int = 0
    max_i: int = 0
    max_q: int = 0
    mean_y: int = 0
    mean_i: int = 0
    mean_q: int = 0
    min_line_height: int = 0
    max_line_height: int = 0
    line_height: int = 0
    alignment: int = 2
    margin_left: int = 10
    margin_right: int = 10
    margin_vertical: int = 10
    name: str = ""

    def compute(self, width: int, height: int) -> None:
        """Average the collected colours and scale the line height.

        ``width`` and ``height`` are the full image size including any
        scaling. The line height is rescaled to font units and rounded up
        to an even number.
        """
        if not self.data:
            raise ValueError("style has no line data to compute from")
        if height <= 0:
            raise ValueError(f"image height must be positive: {height}")

        size = len(self.data)
        sum_y = sum(d.y for d in self.data)
        sum_i = sum(d.i for d in self.data)
        sum_q = sum(d.q for d in self.data)
        sum_lh = sum(d.line_height for d in self.data)

        self.mean_y = _trunc_div(sum_y, size)
        self.mean_i = _trunc_div(sum_i, size)
        self.mean_q = _trunc_div(sum_q, size)
        lh = _trunc_div(sum_lh * 528 * 100, size * height * 53)
        self.line_height = lh + _trunc_mod(lh, 2)
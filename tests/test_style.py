import pytest

from vsubfind.style import AssTextLine, AssTextStyle, YiqLineHeight


def test_style_defaults_match_ass_default_style():
    style = AssTextStyle()
    assert style.alignment == 2
    assert (style.margin_left, style.margin_right, style.margin_vertical) == (10, 10, 10)
    assert style.data == []


def test_line_defaults():
    line = AssTextLine()
    assert (line.dx, line.dy, line.alignment) == (-1, -1, -1)
    assert line.style is None
    assert line.begin_ms == 0 and line.end_ms == 0


def test_compute_identical_entries_gives_their_colour():
    style = AssTextStyle(data=[YiqLineHeight(120, 15, 7, 30) for _ in range(4)])
    style.compute(720, 480)
    assert (style.mean_y, style.mean_i, style.mean_q) == (120, 15, 7)


def test_compute_exact_line_height():
    # one line of height 53 in an image 52800 high maps to 1, rounded up to 2
    style = AssTextStyle(data=[YiqLineHeight(0, 0, 0, 53)])
    style.compute(100, 52800)
    assert style.line_height == 2


def test_compute_truncates_toward_zero_for_negative_values():
    style = AssTextStyle(data=[YiqLineHeight(10, -3, -5, 20), YiqLineHeight(10, 0, 0, 20)])
    style.compute(720, 480)
    assert style.mean_i == -1
    assert style.mean_q == -2


@pytest.mark.parametrize("lh,height", [(20, 480), (37, 576), (51, 1080), (9, 240)])
def test_compute_line_height_is_even_and_not_negative(lh, height):
    style = AssTextStyle(data=[YiqLineHeight(1, 2, 3, lh), YiqLineHeight(4, 5, 6, lh + 1)])
    style.compute(1920, height)
    assert style.line_height % 2 == 0
    assert style.line_height >= 0


def test_compute_line_height_decreases_with_taller_image():
    small = AssTextStyle(data=[YiqLineHeight(0, 0, 0, 40)])
    large = AssTextStyle(data=[YiqLineHeight(0, 0, 0, 40)])
    small.compute(100, 300)
    large.compute(100, 1200)
    assert large.line_height < small.line_height


def test_compute_ignores_width():
    a = AssTextStyle(data=[YiqLineHeight(50, 6, 2, 33)])
    b = AssTextStyle(data=[YiqLineHeight(50, 6, 2, 33)])
    a.compute(100, 500)
    b.compute(4000, 500)
    assert a.line_height == b.line_height
    assert a.mean_y == b.mean_y


def test_compute_without_data_raises():
    with pytest.raises(ValueError):
        AssTextStyle().compute(720, 480)


def test_compute_with_zero_height_raises():
    style = AssTextStyle(data=[YiqLineHeight(1, 1, 1, 10)])
    with pytest.raises(ValueError):
        style.compute(720, 0)


def test_line_can_reference_style():
    style = AssTextStyle(name="Top")
    line = AssTextLine(text="hello", style=style, style_index=3)
    assert line.style.name == "Top"
    assert line.style_index == 3
import pytest

from vsubfind.join_layout import (
    MAX_JOINED_HEIGHT,
    format_split_line,
    plan_batches,
    separator_heights,
)
from vsubfind.timecodes import format_srt_time

NAME = "0_00_01_000__0_00_02_500_extra"


def test_split_line_fills_all_fields():
    line = format_split_line("[begin_time] --> [end_time] [sub_id]", NAME, 0, "[%d]")
    assert line == f"{format_srt_time(1000)} --> {format_srt_time(2500)} [1]"


def test_split_line_uses_index_plus_one():
    assert format_split_line("[sub_id]", NAME, 41, "#%d#") == "#42#"


def test_split_line_replaces_every_occurrence():
    line = format_split_line("[sub_id]/[sub_id]", NAME, 2, "%d")
    assert line == "3/3"


def test_split_line_without_fields_unchanged():
    assert format_split_line("plain", NAME, 0, "%d") == "plain"


def test_split_line_negative_index():
    with pytest.raises(ValueError):
        format_split_line("[sub_id]", NAME, -1, "%d")


def test_separator_small_average():
    assert separator_heights(10, 320) == (10, 6)


def test_separator_capped_by_width():
    band, text = separator_heights(1000, 320)
    assert band == 320 // 16
    assert text <= band


def test_separator_negative():
    with pytest.raises(ValueError):
        separator_heights(-1, 100)


def test_batches_cover_all_in_order():
    heights = [30, 40, 50, 20, 10, 60, 70]
    batches = plan_batches(heights, 5, 3)
    indices = [i for r, _ in batches for i in r]
    assert indices == list(range(len(heights)))
    for r, total in batches:
        assert len(r) <= 3
        assert total == sum(5 + heights[i] for i in r)


def test_batches_respect_limit():
    heights = [40] * 10
    batches = plan_batches(heights, 10, 100, limit=120)
    for r, total in batches:
        assert total <= 120
    assert [len(r) for r, _ in batches] == [2, 2, 2, 2, 2]


def test_batches_default_limit():
    heights = [MAX_JOINED_HEIGHT // 2] * 3
    batches = plan_batches(heights, 0, 10)
    assert [len(r) for r, _ in batches] == [2, 1]


def test_batches_empty():
    assert plan_batches([], 5, 3) == []


def test_batches_too_tall_image():
    with pytest.raises(ValueError):
        plan_batches([200], 10, 5, limit=100)


def test_batches_bad_max_number():
    with pytest.raises(ValueError):
        plan_batches([1, 2], 1, 0)
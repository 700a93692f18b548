"""Layout of joined text images: split lines between images and batches."""

from __future__ import annotations

from collections.abc import Sequence

from .timecodes import format_srt_time, parse_interval_name

MAX_JOINED_HEIGHT = 65500
SAMPLE_SPLIT_TEXT = "12345678987654321"


def format_split_line(template: str, file_name: str, index: int, id_format: str) -> str:
    """Fill in the split line drawn above the image at zero-based ``index``.

    ``[begin_time]`` and ``[end_time]`` become the image's interval in SRT
    time format, ``[sub_id]`` becomes ``id_format`` applied to ``index + 1``.
    """
    if index < 0:
        raise ValueError(f"index must not be negative: {index}")
    begin, end = parse_interval_name(file_name)
    text = template
    if "[begin_time]" in text:
        text = text.replace("[begin_time]", format_srt_time(begin))
    if "[end_time]" in text:
        text = text.replace("[end_time]", format_srt_time(end))
    if "[sub_id]" in text:
        text = text.replace("[sub_id]", id_format % (index + 1))
    return text


def separator_heights(average_height: int, result_width: int) -> tuple[int, int]:
    """Height of the split band and the largest text height inside it.

    The band is as high as an average text line, but never more than a
    sixteenth of the joined image width; text may fill six tenths of it.
    """
    if average_height < 0 or result_width < 0:
        raise ValueError("heights and widths must not be negative")
    cap = result_width // 16
    band = average_height if average_height < cap else cap
    return band, (band * 6) // 10


def plan_batches(
    heights: Sequence[int],
    separator_height: int,
    max_number: int,
    limit: int = MAX_JOINED_HEIGHT,
) -> list[tuple[range, int]]:
    """Split images into joined batches.

    Each image takes ``separator_height`` plus its own height. A batch holds
    at most ``max_number`` images and is no taller than ``limit``. Returns
    ``(indices, total_height)`` for each batch, in order.
    """
    if max_number < 1:
        raise ValueError(f"max_number must be at least 1: {max_number}")
    batches: list[tuple[range, int]] = []
    count = len(heights)
    start = 0
    while start < count:
        total = 0
        stop = start
        while stop < count:
            step = separator_height + heights[stop]
            if total + step > limit:
                break
            total += step
            stop += 1
            if stop - start == max_number:
                break
        if stop == start:
            raise ValueError(
                f"image {start} of height {heights[start]} does not fit in {limit} pixels"
            )
        batches.append((range(start, stop), total))
        start = stop
    return batches
"""Time codes used in image file names and in subtitle files."""

from __future__ import annotations

import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read the leading integer of ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _field_ms(name: str, hour: int, minute: int, sec: int, msec: int) -> int:
    hours = _atoi(name[hour:hour + 1])
    minutes = _atoi(name[minute:minute + 2])
    seconds = _atoi(name[sec:sec + 2])
    millis = _atoi(name[msec:msec + 3])
    return (hours * 3600 + minutes * 60 + seconds) * 1000 + millis


def parse_interval_name(name: str) -> tuple[int, int]:
    """Return (begin, end) in milliseconds from an image file name.

    The name starts with ``H_MM_SS_mmm__H_MM_SS_mmm``; fields that are
    missing or not numeric count as zero.
    """
    begin = _field_ms(name, 0, 2, 5, 8)
    end = _field_ms(name, 13, 15, 18, 21)
    return begin, end


def _check(ms: int) -> None:
    if ms < 0:
        raise ValueError(f"time must not be negative: {ms}")


def format_srt_time(ms: int) -> str:
    """Format milliseconds as ``HH:MM:SS,mmm``."""
    _check(ms)
    hours, rest = divmod(ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def format_ass_time(ms: int) -> str:
    """Format milliseconds as ``H:MM:SS.cc`` (centiseconds, truncated)."""
    _check(ms)
    hours, rest = divmod(ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{millis // 10:02d}"


def format_duration(ms: int) -> str:
    """Format a duration as ``seconds,mmm``."""
    _check(ms)
    seconds, millis = divmod(ms, 1000)
    return f"{seconds},{millis:03d}"


def fill_duration(template: str, placeholder: str, ms: int) -> str:
    """Replace every ``placeholder`` in ``template`` with the duration."""
    if placeholder not in template:
        return template
    return template.replace(placeholder, format_duration(ms))
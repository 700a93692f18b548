"""Subtitles from the OCR result of joined text images."""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable
from pathlib import Path

from .subtitles import (
    GROUP_KEY_LENGTH,
    Subtitle,
    SubtitleOptions,
    correct_min_duration,
    merge_adjacent,
    read_text,
)
from .timecodes import parse_interval_name

DEFAULT_SUB_ID_FORMAT = "[%d]"
DEFAULT_SEARCH_BY_ID_FORMAT = r"\[%d\]\s*([^\[]*)"
EMPTY_RESULT = "OCR_EMPTY_RESULT"
NOT_FOUND = "NOT_FOUND"


def extract_sub_texts(text: str, count: int, search_format: str, id_format: str) -> list[str]:
    """Cut the texts of subtitles 1..count out of a joined OCR result.

    ``id_format`` is the printf-style format of the id line drawn between
    the joined images; id 0 is appended as a final terminator.
    ``search_format`` is a printf-style format giving, for an id, a regular
    expression whose first group captures that subtitle's text.
    """
    body = text.replace("\r", "").strip() + (id_format % 0)
    result = []
    for number in range(1, count + 1):
        match = re.search(search_format % number, body, re.DOTALL)
        if match is None:
            result.append(NOT_FOUND)
            continue
        found = (match.group(1) or "").strip()
        result.append(found if found else EMPTY_RESULT)
    return result


def subtitles_from_joined_results(
    path: str | Path, names: Iterable[str], options: SubtitleOptions
) -> list[Subtitle]:
    """Subtitles from a joined OCR result file and the joined image names.

    The n-th name (in sorted order) owns the text found for id n. The id
    formats are read from ``options`` attributes ``sub_id_format`` and
    ``search_by_id_format`` when present, else the defaults are used.
    """
    ordered = sorted(names)
    if not ordered:
        return []

    id_format = getattr(options, "sub_id_format", DEFAULT_SUB_ID_FORMAT)
    search_format = getattr(options, "search_by_id_format", DEFAULT_SEARCH_BY_ID_FORMAT)
    texts = extract_sub_texts(read_text(path), len(ordered), search_format, id_format)

    indexed = list(enumerate(ordered))
    if options.join_and_correct_time:
        groups = [
            list(group)
            for _, group in itertools.groupby(indexed, key=lambda item: item[1][:GROUP_KEY_LENGTH])
        ]
    else:
        groups = [[item] for item in indexed]

    subs = []
    for group in groups:
        begin, end = parse_interval_name(group[0][1])
        joined = "\n".join(texts[index] for index, _ in group).strip()
        subs.append(Subtitle(begin, end, joined))

    subs = merge_adjacent(subs, options)
    if options.join_and_correct_time:
        subs = correct_min_duration(subs, options.min_duration_ms)
    return subs
"""Building SRT and ASS subtitles from the images and OCR results on disk."""

from __future__ import annotations

import fnmatch
import itertools
import locale
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from pathlib import Path

from .timecodes import fill_duration, format_ass_time, format_srt_time, parse_interval_name

ASS_HEADER = (
    "[Script Info]\n"
    "; Script generated by vsubfind\n"
    "Title: Default Aegisub file\n"
    "ScriptType: v4.00+\n"
    "WrapStyle: 0\n"
    "ScaledBorderAndShadow: yes\n"
    "YCbCr Matrix: None\n"
    "\n"
    "[Aegisub Project Garbage]\n"
    "\n"
    "[V4+ Styles]\n"
    "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, "
    "BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, "
    "BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding\n"
    "Style: Default,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,"
    "100,100,0,0,1,2,2,2,10,10,10,1\n"
    "\n"
    "[Events]\n"
    "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"
)

UNRECOGNIZED_TEXT = "#unrecognized text#"
MERGE_GAP_MS = 333
GROUP_KEY_LENGTH = 11
_UTF8_BOM = b"\xef\xbb\xbf"


@dataclass
class Subtitle:
    """One subtitle: its interval in milliseconds and its text."""

    begin_ms: int
    end_ms: int
    text: str = ""


@dataclass(frozen=True)
class SubtitleOptions:
    """Settings that steer how subtitles are built.

    ``min_duration`` is in seconds. ``keep_unrecognized`` keeps subtitles
    whose text came out empty, marking them as unrecognised.
    """

    min_duration: float = 0.0
    join_and_correct_time: bool = True
    keep_unrecognized: bool = True
    empty_text: str = ""

    @property
    def min_duration_ms(self) -> int:
        return int(self.min_duration * 1000)


def sorted_file_names(directory: str | Path, pattern: str = "*") -> list[str]:
    """Names of the entries in ``directory`` matching ``pattern``, sorted.

    A missing directory gives an empty list.
    """
    path = Path(directory)
    if not path.is_dir():
        return []
    return sorted(entry.name for entry in path.iterdir() if fnmatch.fnmatch(entry.name, pattern))


def read_text(path: str | Path) -> str:
    """Read an OCR text file: drop a UTF-8 BOM and carriage returns.

    Text that is not valid UTF-8 is decoded with the locale's encoding.
    """
    data = Path(path).read_bytes()
    nul = data.find(b"\0")
    if nul >= 0:
        data = data[:nul]
    body = data[len(_UTF8_BOM):] if data.startswith(_UTF8_BOM) else data
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        text = ""
    if not text:
        text = body.decode(locale.getpreferredencoding(False), errors="replace")
    return text.replace("\r", "")


def correct_min_duration(subs: list[Subtitle], min_duration_ms: int) -> list[Subtitle]:
    """Stretch subtitles shorter than the minimum, up to the next one's start."""
    result = [replace(sub) for sub in subs]
    for cur, nxt in zip(result, result[1:]):
        if 0 <= cur.end_ms - cur.begin_ms < min_duration_ms:
            if cur.begin_ms + min_duration_ms < nxt.begin_ms:
                cur.end_ms = cur.begin_ms + min_duration_ms
            else:
                cur.end_ms = nxt.begin_ms - 1
    return result


def merge_adjacent(subs: list[Subtitle], options: SubtitleOptions) -> list[Subtitle]:
    """Handle empty texts and merge neighbours that repeat the same text."""
    result = [replace(sub) for sub in subs]
    join = options.join_and_correct_time
    k = 0
    while k < len(result):
        cur = result[k]
        if not cur.text:
            if not options.keep_unrecognized:
                if join:
                    del result[k]
                    continue
            else:
                cur.text = UNRECOGNIZED_TEXT
        if join and k < len(result) - 1:
            nxt = result[k + 1]
            if 0 <= nxt.begin_ms - cur.end_ms <= MERGE_GAP_MS and nxt.text == cur.text:
                cur.end_ms = nxt.end_ms
                del result[k + 1]
                continue
        k += 1
    return result


def render_srt(subs: Iterable[Subtitle]) -> str:
    """Render subtitles in SRT format."""
    return "".join(
        f"{n}\n{format_srt_time(s.begin_ms)} --> {format_srt_time(s.end_ms)}\n{s.text}\n\n"
        for n, s in enumerate(subs, start=1)
    )


def render_ass(subs: Iterable[Subtitle]) -> str:
    """Render subtitles in ASS format with the default style."""
    lines = [
        f"Dialogue: 0,{format_ass_time(s.begin_ms)},{format_ass_time(s.end_ms)},"
        f"Default,,0,0,0,,{s.text.replace(chr(10), chr(92) + 'N')}\n"
        for s in subs
    ]
    return ASS_HEADER + "".join(lines)


def _groups(names: list[str], join: bool) -> Iterator[list[str]]:
    if join:
        for _, group in itertools.groupby(names, key=lambda n: n[:GROUP_KEY_LENGTH]):
            yield list(group)
    else:
        for name in names:
            yield [name]


def _with_duration_text(subs: list[Subtitle], template: str, placeholders: tuple[str, ...]) -> list[Subtitle]:
    result = []
    for sub in subs:
        text = template
        for placeholder in placeholders:
            text = fill_duration(text, placeholder, sub.end_ms - sub.begin_ms)
        result.append(replace(sub, text=text))
    return result


def empty_subtitles(names: Iterable[str], options: SubtitleOptions) -> list[Subtitle]:
    """One subtitle per image name, all holding the default text.

    Duration placeholders in the default text are filled in.
    """
    subs = [Subtitle(*parse_interval_name(name)) for name in sorted(names)]
    if options.join_and_correct_time:
        subs = correct_min_duration(subs, options.min_duration_ms)
    return _with_duration_text(subs, options.empty_text, ("[sub_duration]", "%sub_duration%"))


def subtitles_from_txt_images(names: Iterable[str], options: SubtitleOptions) -> list[Subtitle]:
    """Subtitles from cleared text image names; lines of one frame are joined."""
    ordered = sorted(names)
    subs = [
        Subtitle(*parse_interval_name(group[0]))
        for group in _groups(ordered, options.join_and_correct_time)
    ]
    if options.join_and_correct_time:
        subs = correct_min_duration(subs, options.min_duration_ms)
    return _with_duration_text(subs, options.empty_text, ("%sub_duration%",))


def subtitles_from_txt_results(directory: str | Path, options: SubtitleOptions) -> list[Subtitle]:
    """Subtitles from the ``*.txt`` OCR results in ``directory``."""
    directory = Path(directory)
    names = sorted_file_names(directory, "*.txt")
    subs = []
    for group in _groups(names, options.join_and_correct_time):
        begin, end = parse_interval_name(group[0])
        texts = (read_text(directory / name).rstrip() for name in group)
        subs.append(Subtitle(begin, end, "\n".join(t for t in texts if t)))
    subs = merge_adjacent(subs, options)
    if options.join_and_correct_time:
        subs = correct_min_duration(subs, options.min_duration_ms)
    return subs


def write_subtitles(path: str | Path, subs: list[Subtitle]) -> None:
    """Write subtitles to ``path``; the extension chooses SRT or ASS."""
    path = Path(path)
    ext = path.suffix[1:]
    if ext == "srt":
        content = render_srt(subs)
    elif ext == "ass":
        content = render_ass(subs)
    else:
        raise ValueError("only .ass and .srt output subtitle formats are supported")
    with path.open("w", encoding="utf-8") as out:
        out.write(content)
"""Command line entry point: build subtitle files from a work folder."""

from __future__ import annotations

import argparse
import os
import shutil
import sys
from collections.abc import Sequence
from pathlib import Path

from .joined import subtitles_from_joined_results
from .subtitles import (
    Subtitle,
    SubtitleOptions,
    empty_subtitles,
    sorted_file_names,
    subtitles_from_txt_images,
    subtitles_from_txt_results,
    write_subtitles,
)

RGB_IMAGES = "RGBImages"
TXT_IMAGES = "TXTImages"
TXT_RESULTS = "TXTResults"
IMAGES_JOINED = "ImagesJoined"
JOIN_RESULTS_FILE = "join_txt_results.txt"
TEXT_FOLDERS = (TXT_IMAGES, TXT_RESULTS, IMAGES_JOINED)


def clear_work_folders(work_dir: str | Path) -> list[Path]:
    """Empty the text image, OCR result and joined image folders.

    The folders themselves are kept; missing ones are skipped. Returns the
    folders that were cleared.
    """
    cleared = []
    for name in TEXT_FOLDERS:
        folder = Path(work_dir) / name
        if not folder.is_dir():
            continue
        for entry in folder.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
        cleared.append(folder)
    return cleared


def ocr_thread_count(requested: int, cpu_count: int | None = None) -> int:
    """Number of OCR worker threads: the request, or the CPU count when not positive."""
    if requested > 0:
        return requested
    if cpu_count is None:
        cpu_count = os.cpu_count() or 1
    return cpu_count


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vsubfind", description="Create subtitle files from a work folder."
    )
    parser.add_argument("--work-dir", default=".", help="folder holding the image folders")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_build(name: str, help_text: str) -> argparse.ArgumentParser:
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("output", help="output file, .srt or .ass")
        cmd.add_argument("--min-duration", type=float, default=0.0,
                         help="minimal subtitle duration in seconds")
        cmd.add_argument("--no-join", action="store_true",
                         help="do not join subtitles or correct their timing")
        cmd.add_argument("--drop-unrecognized", action="store_true",
                         help="delete subtitles whose text is empty")
        cmd.add_argument("--empty-text", default="",
                         help="text for subtitles built without OCR results")
        return cmd

    add_build("empty", "one subtitle per RGB image with the default text")
    add_build("txt-images", "one subtitle per cleared text image frame")
    results = add_build("txt-results", "subtitles from OCR text results")
    results.add_argument("--join-rgb", action="store_true",
                         help="joined images were built from RGB images")
    sub.add_parser("clear", help="empty the text image and result folders")
    return parser


def _options(args: argparse.Namespace) -> SubtitleOptions:
    return SubtitleOptions(
        min_duration=args.min_duration,
        join_and_correct_time=not args.no_join,
        keep_unrecognized=not args.drop_unrecognized,
        empty_text=args.empty_text,
    )


def _build(args: argparse.Namespace, work: Path) -> list[Subtitle]:
    options = _options(args)
    if args.command == "empty":
        return empty_subtitles(sorted_file_names(work / RGB_IMAGES), options)
    if args.command == "txt-images":
        return subtitles_from_txt_images(sorted_file_names(work / TXT_IMAGES), options)
    join_path = work / TXT_RESULTS / JOIN_RESULTS_FILE
    if join_path.is_file():
        folder = RGB_IMAGES if args.join_rgb else TXT_IMAGES
        return subtitles_from_joined_results(join_path, sorted_file_names(work / folder), options)
    return subtitles_from_txt_results(work / TXT_RESULTS, options)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _parser().parse_args(argv)
    work = Path(args.work_dir)

    if args.command == "clear":
        for folder in clear_work_folders(work):
            print(f"cleared {folder}")
        return 0

    subs = _build(args, work)
    if not subs:
        print("nothing to write: no images or results found", file=sys.stderr)
        return 0
    try:
        write_subtitles(args.output, subs)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
# vsubfind

Turns the work folder of a hard-coded subtitle extraction run into `.srt` and
`.ass` subtitle files.

A work folder holds sub-folders such as `RGBImages`, `TXTImages`,
`TXTResults` and `ImagesJoined`. Every image and text file in them is named
after the time interval it covers, starting with `H_MM_SS_mmm__H_MM_SS_mmm`
(for example `0_01_02_345__0_01_04_567...`). Files whose first 11 characters
are equal belong to the same frame. From these names and the recognised text
vsubfind builds subtitles:

- empty subtitles, one per frame image, holding a default text in which the
  placeholders `[sub_duration]` and `%sub_duration%` are replaced by the
  subtitle's duration as `seconds,mmm`;
- subtitles from cleared text images, one per frame (only `%sub_duration%` is
  filled in);
- subtitles from the per-image OCR results (`*.txt`) in `TXTResults`, the
  lines of one frame joined together, or from a single
  `TXTResults/join_txt_results.txt` produced by recognising joined images.

When joining is on (the default), subtitles shorter than the minimum duration
are stretched to it, but never past the start of the next subtitle, and
neighbouring subtitles with the same text at most 333 ms apart are merged.
Subtitles whose OCR text is empty are kept as `#unrecognized text#`, or
dropped on request.

## Installing

```
pip install .
```

Python 3.10 or later is required; there are no third-party dependencies.

## Command line

```
vsubfind [--work-dir DIR] COMMAND ...
```

`--work-dir` defaults to the current folder. Commands:

- `empty OUTPUT` — one subtitle per file in `RGBImages`, with the default
  text;
- `txt-images OUTPUT` — one subtitle per frame in `TXTImages`;
- `txt-results OUTPUT` — subtitles from `TXTResults/join_txt_results.txt` if
  it exists, otherwise from the `*.txt` files in `TXTResults`. With
  `--join-rgb` the joined results are matched to the names in `RGBImages`
  instead of `TXTImages`;
- `clear` — empties `TXTImages`, `TXTResults` and `ImagesJoined`, keeping the
  folders themselves.

The three building commands take:

- `--min-duration SECONDS` — minimum subtitle duration (default 0);
- `--no-join` — neither join frames and neighbours nor correct timing;
- `--drop-unrecognized` — delete subtitles whose text is empty;
- `--empty-text TEXT` — the default text for `empty` and `txt-images`.

`OUTPUT` must end in `.srt` or `.ass`; any other extension is reported as an
error and the command exits with status 2. If nothing is found, nothing is
written.

## Library use

- `vsubfind.timecodes` — `parse_interval_name`, `format_srt_time`,
  `format_ass_time`, `format_duration`, `fill_duration`;
- `vsubfind.subtitles` — `Subtitle`, `SubtitleOptions`, `sorted_file_names`,
  `read_text`, `empty_subtitles`, `subtitles_from_txt_images`,
  `subtitles_from_txt_results`, `correct_min_duration`, `merge_adjacent`,
  `render_srt`, `render_ass`, `write_subtitles`;
- `vsubfind.joined` — `extract_sub_texts`, `subtitles_from_joined_results`;
  the id formats default to `[%d]` and `\[%d\]\s*([^\[]*)`;
- `vsubfind.join_layout` — `format_split_line`, `separator_heights` and
  `plan_batches`, the arithmetic for laying out joined images;
- `vsubfind.style` — `YiqLineHeight`, `AssTextLine` and `AssTextStyle`, whose
  `compute` averages line colours and scales the line height;
- `vsubfind.scrollbar` (`Rect`, `ScrollBar`), `vsubfind.separating_line`
  (`Orientation`, `SeparatingLine`), `vsubfind.resizable` (`Cursor`,
  `ResizableWindow`) and `vsubfind.text_layout` (`Align`, `text_origin`,
  `optimal_size`, `box_best_size`) — the state and geometry of interactive
  controls, free of any GUI toolkit;
- `vsubfind.cli` — `main`, `clear_work_folders`, `ocr_thread_count`.

```python
from vsubfind.subtitles import (
    SubtitleOptions, sorted_file_names, subtitles_from_txt_images, write_subtitles,
)

names = sorted_file_names("work/TXTImages", "*")
subs = subtitles_from_txt_images(names, SubtitleOptions(min_duration=0.5))
write_subtitles("movie.srt", subs)
```

## What it does not do

vsubfind works only on folders that already exist. It does not open video,
search frames for subtitles, clean text images, run OCR, or draw and save
joined images (`join_layout` only plans their layout). It has no graphical
interface; the control modules hold logic only.

## Tests

```
pip install .[test]
pytest
```
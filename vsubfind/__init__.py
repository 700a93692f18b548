"""Build SRT and ASS subtitles from the frame images and OCR results in a work folder."""

__version__ = "0.1.0"
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vsubfind"
version = "0.1.0"
description = "Build SRT and ASS subtitle files from the frame images and OCR results of hard-coded video subtitles"
requires-python = ">=3.10"
dependencies = []
keywords = ["subtitles", "srt", "ass", "ocr", "video", "hardsub"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vsubfind = "vsubfind.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vsubfind"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

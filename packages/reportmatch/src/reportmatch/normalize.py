"""Filename normalization."""

from __future__ import annotations

import re

_EXTENSION = re.compile(r"\.[^.]+\Z")
_DUPLICATE_MARKER = re.compile(r"\s*\([0-9]+\)\Z")
_TRAILING_MARKER = re.compile(r"\s*\([0-9]+\)\s*\Z")
_LEADING_SQUARE = re.compile(r"^\[([^\]]+)\]\s*")
_LEADING_ROUND = re.compile(r"^\(([^)]+)\)\s*")
_WHITESPACE = re.compile(r"\s+")


def normalize(filename: str) -> str:
    """Canonicalize a filename into its comparison key.

    "Report (2).PDF" and "report.pdf" both become "report". Only one
    extension and one trailing duplicate marker are removed.
    """
    # 1. Lowercase
    s = filename.lower()

    # 2. Drop the final extension
    s = _EXTENSION.sub("", s)

    # 3. Drop a trailing "(1)", "(2)", ... left by browsers and file managers
    s = _DUPLICATE_MARKER.sub("", s)

    # 4. Collapse whitespace
    return _WHITESPACE.sub(" ", s).strip()


def normalize_group_key(filename: str) -> str:
    """Grouping key used by exact-key pairing of bulk uploads.

    More aggressive than normalize(): every trailing duplicate marker is
    removed and a leading "[...]" or "(...)" group is unwrapped, so
    "[Guest] Document (45).docx" becomes "guest document".
    """
    s = filename.lower()
    s = _EXTENSION.sub("", s)

    while _TRAILING_MARKER.search(s):
        s = _TRAILING_MARKER.sub("", s)

    s = _LEADING_SQUARE.sub(r"\1 ", s)
    s = _LEADING_ROUND.sub(r"\1 ", s)

    return _WHITESPACE.sub(" ", s).strip()


_MAPPING_EXTENSION = re.compile(r"\.[^/.]+\Z")
_TRAILING_LETTERS = re.compile(r"[a-zA-Z]+\Z")


def extract_mapping_key(filename: str) -> str:
    """Key used by one-to-one auto-mapping of similarity reports.

    Report exports append a 6-7 letter code to the document name, so the
    trailing run of ASCII letters is cut: 7 letters when the run is 7 or
    longer, 6 when it is exactly 6, the whole run when shorter.
    """
    base = _MAPPING_EXTENSION.sub("", filename)

    m = _TRAILING_LETTERS.search(base)
    if m:
        run = len(m.group(0))
        if run >= 7:
            cut = 7
        elif run == 6:
            cut = 6
        else:
            cut = run
        base = base[: len(base) - cut]

    return _WHITESPACE.sub(" ", base.lower().strip())

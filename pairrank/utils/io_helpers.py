#!/usr/bin/env python
"""
io_helpers.py – tiny utilities for BOM-safe UTF-8 reading / writing.

All project code should import these instead of calling Path.read_text().
"""

from pathlib import Path
from typing import Iterable, List
import sys, os

from .text_processing import clean_label, repair_text

BOM = b"\xef\xbb\xbf"

# ── public API ─────────────────────────────────────────────────────────────
def read_utf8(path: Path) -> str:
    """
    Return file contents as str, decoded UTF-8, stripping BOM if present.
    Uses strict error-handling by default to catch encoding issues early.
    """
    raw = Path(path).read_bytes()
    if raw.startswith(BOM):
        raw = raw[len(BOM):]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        # Last resort: decode with replacement and let ftfy repair what it can
        return repair_text(raw.decode("utf-8", errors="replace"))


def write_utf8(path: Path, text: str) -> None:
    """Write text to file using UTF-8 encoding."""
    Path(path).write_text(text, encoding="utf-8")


def read_labels(path: Path) -> List[str]:
    """Read one item label per line, skipping blanks and ``#`` comments."""
    labels = []
    for line in read_utf8(path).splitlines():
        label = clean_label(line)
        if not label or label.startswith("#"):
            continue
        labels.append(label)
    return labels


def write_labels(path: Path, labels: Iterable[str]) -> None:
    """Write labels one per line, in order."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    write_utf8(path, "".join(f"{label}\n" for label in labels))


def ensure_utf8_windows() -> None:
    """Force UTF-8 on Windows terminals so Unicode output is readable."""
    if sys.platform == "win32":
        if sys.stdout.encoding != "utf-8":
            sys.stdout.reconfigure(encoding="utf-8")
        if sys.stderr.encoding != "utf-8":
            sys.stderr.reconfigure(encoding="utf-8")
        os.environ["PYTHONIOENCODING"] = "utf-8"

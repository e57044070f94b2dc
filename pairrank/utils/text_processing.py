"""
text_processing.py - Text processing and normalization utilities

Item labels arrive from hand-edited files and terminals, so they are
cleaned here before they become item identities.
"""

import re
import unicodedata
from ftfy import fix_text


def repair_text(text: str) -> str:
    """Fix mojibake and odd encodings, then apply NFC normalization.

    Args:
        text: Text that may contain encoding damage

    Returns:
        Repaired text
    """
    return unicodedata.normalize("NFC", fix_text(text))


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and strip the ends."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r'\s+', ' ', text)
    return text.strip()


def clean_label(text: str) -> str:
    """Return the canonical display form of an item label.

    Two labels that differ only in encoding damage or spacing clean to the
    same string, so they map to the same item identity.
    """
    return normalize_whitespace(repair_text(text))

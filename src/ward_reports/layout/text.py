"""Text helpers shared by the table builder and the renderer."""

from __future__ import annotations

from typing import Optional

# Helvetica (standard PDF font) lacks glyphs for many typographic characters
# (non-breaking hyphens, narrow spaces, smart quotes, etc.).  Cell text is
# sanitized before it is measured so wrapping matches what gets drawn.

_UNICODE_REPLACEMENTS: dict[str, str] = {
    # Dashes / hyphens
    "\u2011": "-",       # non-breaking hyphen
    "\u2010": "-",       # hyphen
    "\u2012": "-",       # figure dash
    "\u2013": "-",       # en-dash
    "\u2014": "-",       # em-dash
    # Spaces
    "\u202f": " ",       # narrow no-break space
    "\u00a0": " ",       # non-breaking space
    "\u2009": " ",       # thin space
    # Quotes
    "\u2018": "'",       # left single quote
    "\u2019": "'",       # right single quote
    "\u201c": '"',       # left double quote
    "\u201d": '"',       # right double quote
    # Misc punctuation
    "\u2026": "...",     # ellipsis
    "\u2192": "->",      # rightwards arrow
    "\t": "    ",
}

TRUNCATION_MARKER = "..."


def sanitize_text(text: str) -> str:
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def display_text(value: Optional[str], max_length: int = 100, placeholder: str = "N/A") -> str:
    """Return *value* bounded to *max_length* characters, or *placeholder* if blank.

    A cut value gets ``...`` appended, so the result may be up to
    ``max_length + 3`` characters long.
    """
    if value is None or not str(value).strip():
        return placeholder
    value = str(value)
    if len(value) > max_length:
        return f"{value[:max_length]}{TRUNCATION_MARKER}"
    return value

"""
Speech-safe text cleaning for model answers.

This is a small denylist filter, not a markdown parser: it removes the
characters that break speech synthesis markup and leaves everything else
alone. Rules run in a fixed order since later rules see earlier output.
"""

import re
from typing import Optional


MAX_SPEECH_CHARS = 6000

_ASTERISKS = re.compile(r"\*+")
_HASHES = re.compile(r"#+")
_SQUARE_BRACKETS = re.compile(r"[\[\]]")
_LINK_TARGET = re.compile(r"\(http[^)]*\)")
_ANGLE_BRACKETS = re.compile(r"[<>]")
_WHITESPACE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and strip ends."""
    return _WHITESPACE.sub(" ", text).strip()


def sanitize_for_speech(text: Optional[str], max_chars: int = MAX_SPEECH_CHARS) -> str:
    text = text or ""
    text = _ASTERISKS.sub("", text)
    text = _HASHES.sub("", text)
    text = _SQUARE_BRACKETS.sub("", text)
    text = _LINK_TARGET.sub("", text)
    text = _ANGLE_BRACKETS.sub("", text)
    text = text.replace("&", "and")
    return normalize_whitespace(text)[:max_chars]

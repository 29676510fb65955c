"""Answer normalization for comparison."""

from __future__ import annotations

import re

# Sentence punctuation, quotes, brackets, common symbols and the zero-width space.
PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()?\"'…\u200b"

_PUNCTUATION_RE = re.compile("[" + re.escape(PUNCTUATION) + "]")
_VARIANT_SEP = "/"
_CLOZE_VARIANT_RE = re.compile(r"[/,|]")


def normalize_text(text: str) -> str:
    """Normalize text for comparison: lowercase, drop punctuation, collapse whitespace."""
    text = text.lower()
    text = _PUNCTUATION_RE.sub("", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def split_variants(expected: str) -> list[str]:
    """Split a '/'-delimited expected answer into trimmed variants.

    Empty parts are kept so variant positions stay stable.
    """
    return [part.strip() for part in expected.split(_VARIANT_SEP)]


def split_cloze_variants(expected: str) -> list[str]:
    """Split a cloze answer on '/', ',' or '|' into trimmed variants."""
    return [part.strip() for part in _CLOZE_VARIANT_RE.split(expected)]

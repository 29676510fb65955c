"""Cloze masking: hide the answer word inside an example sentence."""

from __future__ import annotations

import re
from typing import Optional

from lingograde.engine.normalizer import split_cloze_variants
from lingograde.engine.similarity import similarity

# 0.6 lets "decision" match "decisions"
CLOZE_THRESHOLD = 0.6
MASK = "____"

# Word runs may be joined by inner hyphens/apostrophes ("tiba-tiba", "l'eau");
# everything else is a separator run.
_TOKEN_RE = re.compile(r"\w+(?:[-'’]\w+)*|\W+")
_WORD_RE = re.compile(r"\w")
_JOINER_RE = re.compile(r"([-'’])")


def tokenize_sentence(sentence: str) -> list[str]:
    """Split into word and separator tokens; joining them gives back ``sentence``."""
    return _TOKEN_RE.findall(sentence)


def _is_word(token: str) -> bool:
    return _WORD_RE.search(token) is not None


def _matches(text: str, variants: list[str], threshold: float) -> bool:
    return any(similarity(text, v) >= threshold for v in variants)


def _mask_parts(token: str, variants: list[str], threshold: float, mask: str) -> str:
    """Mask the parts of a joined word ('well-known', 'Anak-anak') that match.

    Joiners are kept, so the result still lines up with the sentence.
    """
    parts = _JOINER_RE.split(token)
    return "".join(
        mask if _is_word(part) and _matches(part, variants, threshold) else part
        for part in parts
    )


def mask_answer(
    sentence: str,
    expected_answer: str,
    *,
    fallback: Optional[str] = None,
    threshold: float = CLOZE_THRESHOLD,
    mask: str = MASK,
) -> str:
    """Replace every word token close enough to an expected variant with ``mask``.

    If nothing matches and ``fallback`` (usually the exercise prompt) is
    given, the single token that best matches either the answer or the
    prompt is masked instead. With no match at all the sentence comes back
    unchanged.
    """
    tokens = tokenize_sentence(sentence)
    variants = split_cloze_variants(expected_answer)

    masked = False
    out: list[str] = []
    for token in tokens:
        if not _is_word(token):
            out.append(token)
        elif _matches(token, variants, threshold):
            out.append(mask)
            masked = True
        else:
            partial = _mask_parts(token, variants, threshold, mask)
            masked = masked or partial != token
            out.append(partial)

    if masked or fallback is None:
        return "".join(out)

    best_index, best_score = -1, 0.0
    for idx, token in enumerate(tokens):
        if not _is_word(token):
            continue
        score = max(similarity(token, expected_answer), similarity(token, fallback))
        if score > best_score and score >= threshold:
            best_index, best_score = idx, score

    if best_index == -1:
        return sentence
    return "".join(mask if i == best_index else t for i, t in enumerate(tokens))

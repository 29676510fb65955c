"""Typo-tolerant answer validation against '/'-delimited variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from lingograde.engine.normalizer import split_variants
from lingograde.engine.similarity import similarity


class Tolerance(str, Enum):
    STRICT = "strict"
    NORMAL = "normal"
    LENIENT = "lenient"


# Minimum similarity needed to pass
DEFAULT_THRESHOLDS: Mapping[Tolerance, float] = MappingProxyType({
    Tolerance.STRICT: 1.0,    # exact match only
    Tolerance.NORMAL: 0.85,   # ~1 typo per 7 chars
    Tolerance.LENIENT: 0.70,  # ~2 typos per 7 chars
})


@dataclass(frozen=True)
class ValidationResult:
    is_correct: bool
    similarity: float
    matched_answer: str


def validate_answer(
    user_answer: str,
    expected_answer: str,
    tolerance: Union[Tolerance, str] = Tolerance.NORMAL,
    thresholds: Optional[Mapping[Tolerance, float]] = None,
) -> ValidationResult:
    """Grade ``user_answer`` against every variant of ``expected_answer``.

    The variant with the highest similarity wins; on a tie the earlier
    variant is kept. The answer is correct when that best score reaches the
    threshold bound to ``tolerance``.

    Raises:
        ValueError: if ``tolerance`` is not a known tolerance name.
    """
    tolerance = Tolerance(tolerance)
    threshold = (thresholds or DEFAULT_THRESHOLDS)[tolerance]
    variants = split_variants(expected_answer)

    best = ValidationResult(is_correct=False, similarity=-1.0, matched_answer=variants[0])
    for variant in variants:
        score = similarity(user_answer, variant)
        if score > best.similarity:
            best = ValidationResult(
                is_correct=score >= threshold,
                similarity=score,
                matched_answer=variant,
            )
    return best

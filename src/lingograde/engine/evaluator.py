"""Typed-answer evaluation: verdict plus visual feedback for one attempt."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from lingograde.config.settings import Settings
from lingograde.engine.cloze import mask_answer
from lingograde.engine.diff import FeedbackToken, visual_diff
from lingograde.engine.normalizer import normalize_text, split_cloze_variants
from lingograde.engine.validator import Tolerance, ValidationResult, validate_answer

logger = logging.getLogger(__name__)


@dataclass
class FeedbackItem:
    severity: str  # "error", "warning", "info", "success"
    message: str
    suggestion: Optional[str] = None


@dataclass
class EvalResult:
    passed: bool
    similarity: float = 0.0
    matched_answer: str = ""
    diff: list[FeedbackToken] = field(default_factory=list)
    feedback: list[FeedbackItem] = field(default_factory=list)
    encouragement: str = ""


class Evaluator:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings.load()

    def validate(
        self,
        user_answer: str,
        expected_answer: str,
        tolerance: Union[Tolerance, str, None] = None,
    ) -> ValidationResult:
        return validate_answer(
            user_answer,
            expected_answer,
            tolerance or self.settings.default_tolerance,
            thresholds=self.settings.thresholds.as_mapping(),
        )

    def diff(self, user_answer: str, expected_answer: str) -> list[FeedbackToken]:
        matching = self.settings.matching
        return visual_diff(
            user_answer,
            expected_answer,
            threshold=matching.diff_threshold,
            placeholder=matching.placeholder,
        )

    def mask(self, sentence: str, expected_answer: str, fallback: Optional[str] = None) -> str:
        matching = self.settings.matching
        return mask_answer(
            sentence,
            expected_answer,
            fallback=fallback,
            threshold=matching.cloze_threshold,
            mask=matching.mask,
        )

    def check_typed(
        self,
        user_answer: str,
        expected_answer: str,
        tolerance: Union[Tolerance, str, None] = None,
    ) -> EvalResult:
        """Grade a typed translation and explain the result.

        A wrong answer is diffed against the variant it came closest to. A
        passing answer that is not an exact match gets a note with the
        correct spelling.
        """
        verdict = self.validate(user_answer, expected_answer, tolerance)
        logger.debug(
            "graded %r against %r: correct=%s similarity=%.3f",
            user_answer, verdict.matched_answer, verdict.is_correct, verdict.similarity,
        )

        if not user_answer.strip():
            return EvalResult(
                passed=False,
                similarity=0.0,
                matched_answer=verdict.matched_answer,
                feedback=[FeedbackItem(
                    severity="warning",
                    message="No answer given.",
                    suggestion=f"The correct answer is: {verdict.matched_answer}",
                )],
            )

        if not verdict.is_correct:
            return EvalResult(
                passed=False,
                similarity=verdict.similarity,
                matched_answer=verdict.matched_answer,
                diff=self.diff(user_answer, verdict.matched_answer),
                feedback=[FeedbackItem(
                    severity="warning",
                    message=f"Not quite. The correct answer is: {verdict.matched_answer}",
                )],
            )

        feedback: list[FeedbackItem] = []
        if normalize_text(user_answer) != normalize_text(verdict.matched_answer):
            feedback.append(FeedbackItem(
                severity="info",
                message="Accepted with a typo.",
                suggestion=f"Correct spelling: {verdict.matched_answer}",
            ))
        return EvalResult(
            passed=True,
            similarity=verdict.similarity,
            matched_answer=verdict.matched_answer,
            feedback=feedback,
            encouragement="Correct!" if not feedback else "Almost perfect!",
        )

    def check_cloze(
        self,
        user_answer: str,
        expected_answer: str,
        tolerance: Union[Tolerance, str, None] = None,
    ) -> EvalResult:
        """Grade a cloze blank.

        Cloze answers list their variants with the same separators the masker
        accepts ('/', ',' or '|').
        """
        variants = "/".join(split_cloze_variants(expected_answer))
        return self.check_typed(user_answer, variants, tolerance)

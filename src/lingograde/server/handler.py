"""Server handler: dispatches JSON-lines requests to the grading engine."""

from __future__ import annotations

import logging
from typing import Optional

from lingograde.config.settings import Settings
from lingograde.engine.diff import FeedbackToken
from lingograde.engine.evaluator import EvalResult, Evaluator, FeedbackItem

from .protocol import Request

logger = logging.getLogger(__name__)


def _tokens_to_list(tokens: list[FeedbackToken]) -> list[dict]:
    return [t.to_dict() for t in tokens]


def _feedback_to_dict(item: FeedbackItem) -> dict:
    return {
        "severity": item.severity,
        "message": item.message,
        "suggestion": item.suggestion,
    }


def _eval_to_dict(result: EvalResult) -> dict:
    return {
        "passed": result.passed,
        "similarity": result.similarity,
        "matchedAnswer": result.matched_answer,
        "diff": _tokens_to_list(result.diff),
        "feedback": [_feedback_to_dict(f) for f in result.feedback],
        "encouragement": result.encouragement,
    }


class ServerHandler:
    """Routes incoming requests to evaluator methods and returns result dicts."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings.load()
        self.evaluator = Evaluator(settings=self.settings)

    async def dispatch(self, msg: dict) -> dict:
        """Route a request message to the appropriate handler method."""
        request = Request.from_dict(msg)

        handler_map = {
            "validate": self._validate,
            "diff": self._diff,
            "maskAnswer": self._mask_answer,
            "checkTyped": self._check_typed,
            "checkCloze": self._check_cloze,
            "getSettings": self._get_settings,
        }

        handler = handler_map.get(request.method)
        if handler is None:
            raise ValueError(f"Unknown method: {request.method}")

        logger.debug("dispatch %s id=%s", request.method, request.id)
        return await handler(request)

    async def _validate(self, request: Request) -> dict:
        verdict = self.evaluator.validate(
            request.require_str("userAnswer"),
            request.require_str("correctAnswer"),
            request.params.get("tolerance"),
        )
        return {
            "isCorrect": verdict.is_correct,
            "similarity": verdict.similarity,
            "matchedAnswer": verdict.matched_answer,
        }

    async def _diff(self, request: Request) -> dict:
        tokens = self.evaluator.diff(
            request.require_str("userAnswer"),
            request.require_str("correctAnswer"),
        )
        return {"tokens": _tokens_to_list(tokens)}

    async def _mask_answer(self, request: Request) -> dict:
        masked = self.evaluator.mask(
            request.require_str("sentence"),
            request.require_str("correctAnswer"),
            fallback=request.params.get("questionText"),
        )
        return {"sentence": masked}

    async def _check_typed(self, request: Request) -> dict:
        result = self.evaluator.check_typed(
            request.require_str("userAnswer"),
            request.require_str("correctAnswer"),
            request.params.get("tolerance"),
        )
        return _eval_to_dict(result)

    async def _check_cloze(self, request: Request) -> dict:
        result = self.evaluator.check_cloze(
            request.require_str("userAnswer"),
            request.require_str("correctAnswer"),
            request.params.get("tolerance"),
        )
        return _eval_to_dict(result)

    async def _get_settings(self, request: Request) -> dict:
        return self.settings.model_dump(mode="json", exclude={"data_dir"})

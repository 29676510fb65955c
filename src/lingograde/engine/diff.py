"""Character-level visual diff between a typed answer and one expected variant.

Two strategies are used. Answers that are close to the expected text are
aligned with an edit-distance backtrace so a typo shows up exactly where it
happened. Answers that are mostly different are compared position by
position instead: the backtrace would otherwise pick up stray shared letters
(the 'u' in "sound" vs "audio") and paint a wrong answer mostly green.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lingograde.engine.similarity import levenshtein_matrix, similarity

# Below this similarity the positional strategy is used
SMART_DIFF_THRESHOLD = 0.6
MISSING_PLACEHOLDER = "_"


class FeedbackStatus(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"      # substitution or extra character typed by the user
    MISSING = "missing"  # expected character the user never typed


@dataclass(frozen=True)
class FeedbackToken:
    char: str
    status: FeedbackStatus

    def to_dict(self) -> dict:
        return {"char": self.char, "status": self.status.value}


def visual_diff(
    user_answer: str,
    expected_answer: str,
    *,
    threshold: float = SMART_DIFF_THRESHOLD,
    placeholder: str = MISSING_PLACEHOLDER,
) -> list[FeedbackToken]:
    """Diff ``user_answer`` against a single expected variant."""
    if similarity(user_answer, expected_answer) < threshold:
        return positional_diff(user_answer, expected_answer, placeholder=placeholder)
    return aligned_diff(user_answer, expected_answer, placeholder=placeholder)


def positional_diff(
    user_answer: str, expected_answer: str, *, placeholder: str = MISSING_PLACEHOLDER
) -> list[FeedbackToken]:
    """Compare strictly by index, case-insensitively."""
    typed = user_answer.strip()
    expected = expected_answer.strip()

    tokens: list[FeedbackToken] = []
    for i in range(max(len(typed), len(expected))):
        if i < len(typed) and i < len(expected):
            if typed[i].lower() == expected[i].lower():
                tokens.append(FeedbackToken(typed[i], FeedbackStatus.CORRECT))
            else:
                tokens.append(FeedbackToken(typed[i], FeedbackStatus.WRONG))
        elif i < len(typed):
            tokens.append(FeedbackToken(typed[i], FeedbackStatus.WRONG))
        else:
            tokens.append(FeedbackToken(placeholder, FeedbackStatus.MISSING))
    return tokens


def aligned_diff(
    user_answer: str, expected_answer: str, *, placeholder: str = MISSING_PLACEHOLDER
) -> list[FeedbackToken]:
    """Align by edit-distance backtrace over case-folded characters.

    When several minimum-cost paths exist, moves are tried in this order:
    match, substitution, missing expected character, extra typed character.
    """
    typed = user_answer.strip()
    # Fold per character so indices keep pointing at the original text
    a = [c.lower() for c in typed]
    b = [c.lower() for c in expected_answer]
    dp = levenshtein_matrix(a, b)

    i, j = len(a), len(b)
    tokens: list[FeedbackToken] = []
    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1]:
            tokens.append(FeedbackToken(typed[i - 1], FeedbackStatus.CORRECT))
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
            tokens.append(FeedbackToken(typed[i - 1], FeedbackStatus.WRONG))
            i -= 1
            j -= 1
        elif j > 0 and dp[i][j] == dp[i][j - 1] + 1:
            tokens.append(FeedbackToken(placeholder, FeedbackStatus.MISSING))
            j -= 1
        else:
            tokens.append(FeedbackToken(typed[i - 1], FeedbackStatus.WRONG))
            i -= 1

    tokens.reverse()
    return tokens


def user_text(tokens: list[FeedbackToken]) -> str:
    """Rebuild what the user typed (outer whitespace stripped) from a diff."""
    return "".join(t.char for t in tokens if t.status is not FeedbackStatus.MISSING)

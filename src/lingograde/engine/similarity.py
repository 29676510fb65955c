"""Normalized Levenshtein similarity between two answers."""

from __future__ import annotations

from typing import Sequence

from lingograde.engine.normalizer import normalize_text


def levenshtein_matrix(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """Build the full edit-distance matrix, rows over ``a`` and columns over ``b``.

    ``matrix[i][j]`` is the distance between ``a[:i]`` and ``b[:j]`` with unit
    cost for insertion, deletion and substitution.
    """
    rows, cols = len(a), len(b)
    matrix = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(rows + 1):
        matrix[i][0] = i
    for j in range(cols + 1):
        matrix[0][j] = j

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            if a[i - 1] == b[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j - 1] + 1,  # substitution
                    matrix[i][j - 1] + 1,      # insertion
                    matrix[i - 1][j] + 1,      # deletion
                )
    return matrix


def levenshtein_distance(a: Sequence[str], b: Sequence[str]) -> int:
    return levenshtein_matrix(a, b)[len(a)][len(b)]


def similarity(a: str, b: str) -> float:
    """Return a similarity score in [0.0, 1.0] between two answers.

    Both sides are normalized first, so case and punctuation never count.
    The distance is scaled by the longer normalized length, which makes a
    single typo on a short word cost more than on a long one.
    """
    a_norm = normalize_text(a)
    b_norm = normalize_text(b)

    if a_norm == b_norm:
        return 1.0
    # Only punctuation on one side
    if not a_norm or not b_norm:
        return 0.0

    distance = levenshtein_distance(a_norm, b_norm)
    return 1.0 - distance / max(len(a_norm), len(b_norm))

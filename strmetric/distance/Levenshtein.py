"""strmetric.distance.Levenshtein"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from typing import Any

from ._initialize import (
    StringMetric,
    _normalized_distance_cutoff,
    _preprocess,
    _similarity_cutoff,
)


def _edit_distance(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    """Unit-cost edit distance, kept in two rows sized by *s1*."""
    n = len(s1)
    p = list(range(n + 1))
    d = [0] * (n + 1)

    for j, tj in enumerate(s2, 1):
        d[0] = j
        for i in range(1, n + 1):
            cost = 0 if s1[i - 1] == tj else 1
            # left + 1, up + 1, diagonal + cost
            d[i] = min(d[i - 1] + 1, p[i] + 1, p[i - 1] + cost)
        p, d = d, p

    # rows were swapped after the last pass, so p holds the final costs
    return p[n]


@dataclasses.dataclass(frozen=True)
class LevenshteinMetric(StringMetric):
    """
    Normalized Levenshtein similarity.

    ``similarity = 1 - edit_distance / max(len(s1), len(s2))``

    Examples
    --------
    >>> round(LevenshteinMetric().similarity("kitten", "sitting"), 4)
    0.5714
    """

    def _similarity(self, s1: Sequence[Any], s2: Sequence[Any]) -> float:
        return 1.0 - _edit_distance(s1, s2) / max(len(s1), len(s2))


_METRIC = LevenshteinMetric()


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Levenshtein edit distance between two strings.

    ``None`` is treated as an empty string.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    dist = _edit_distance(s1 or "", s2 or "")
    return dist if score_cutoff is None or dist <= score_cutoff else score_cutoff + 1


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the normalized Levenshtein distance between two strings.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    return _normalized_distance_cutoff(_METRIC.distance(s1, s2), score_cutoff)


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the normalized Levenshtein similarity between two strings.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    return _similarity_cutoff(_METRIC.similarity(s1, s2), score_cutoff)


__all__ = [
    "LevenshteinMetric",
    "distance",
    "normalized_distance",
    "normalized_similarity",
]

"""
strmetric.distance.NGram — Kondrak's position-based n-gram edit distance.

Based on Grzegorz Kondrak, "N-gram similarity and distance", SPIRE 2005.
Instead of comparing single characters, each DP cell compares an n-gram
window of ``s1`` with one of ``s2`` and charges the fraction of positions
that differ. Both sides are left-padded with ``n - 1`` padding slots so
the first character takes part in as many windows as an interior one.
Aligned padding slots are discounted from the window length, so strings
with no characters in common score ``0``.

The padding on ``s1`` is materialized once while the windows of ``s2``
are built per column, but both produce the same window shapes, so the
metric is symmetric: ``similarity(a, b) == similarity(b, a)``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from typing import Any

from ..errors import InvalidConfigurationError
from ._initialize import (
    StringMetric,
    _normalized_distance_cutoff,
    _preprocess,
    _similarity_cutoff,
)

# Padding marker; never equal to any element of a caller's sequence.
_PAD: Any = object()


def _position_matches(s1: Sequence[Any], s2: Sequence[Any]) -> float:
    matches = sum(1 for a, b in zip(s1, s2) if a == b)
    return matches / max(len(s1), len(s2))


def _ngram_distance(s1: Sequence[Any], s2: Sequence[Any], n: int) -> float:
    sl = len(s1)
    padded = [_PAD] * (n - 1) + list(s1)

    p = [float(i) for i in range(sl + 1)]
    d = [0.0] * (sl + 1)

    for j in range(1, len(s2) + 1):
        # j-th n-gram of s2, ending at s2[j - 1]
        if j < n:
            window = [_PAD] * (n - j) + list(s2[:j])
        else:
            window = list(s2[j - n : j])

        d[0] = float(j)
        for i in range(1, sl + 1):
            mismatch = 0
            effective_len = n
            for k in range(n):
                a = padded[i - 1 + k]
                if a != window[k]:
                    mismatch += 1
                elif a is _PAD:
                    effective_len -= 1
            cost = mismatch / effective_len if effective_len else 0.0
            d[i] = min(d[i - 1] + 1, p[i] + 1, p[i - 1] + cost)
        p, d = d, p

    return p[sl]


@dataclasses.dataclass(frozen=True)
class NGramMetric(StringMetric):
    """
    Normalized n-gram edit similarity.

    Parameters
    ----------
    n : int, default 2
        Size of the n-grams. Must be a positive integer.

    When either string is shorter than ``n`` the windowed algorithm is
    skipped and the score is the fraction of aligned positions holding the
    same character.

    Raises
    ------
    InvalidConfigurationError
        If ``n`` is not an integer ``>= 1``.

    Examples
    --------
    >>> NGramMetric(2).similarity("a", "ab")
    0.5
    >>> NGramMetric(2).similarity("aaaa", "bbbb")
    0.0
    """

    n: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int):
            raise InvalidConfigurationError(
                f"n-gram size must be an int, got {type(self.n).__name__}"
            )
        if self.n < 1:
            raise InvalidConfigurationError(
                f"n-gram size must be >= 1, got {self.n}"
            )

    def _similarity(self, s1: Sequence[Any], s2: Sequence[Any]) -> float:
        if len(s1) < self.n or len(s2) < self.n:
            return _position_matches(s1, s2)
        return 1.0 - _ngram_distance(s1, s2, self.n) / max(len(s1), len(s2))


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    n: int = 2,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates the normalized n-gram edit distance between two strings."""
    s1, s2 = _preprocess(s1, s2, processor)
    return _normalized_distance_cutoff(NGramMetric(n).distance(s1, s2), score_cutoff)


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    n: int = 2,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates the normalized n-gram edit similarity between two strings."""
    s1, s2 = _preprocess(s1, s2, processor)
    return _similarity_cutoff(NGramMetric(n).similarity(s1, s2), score_cutoff)


__all__ = ["NGramMetric", "normalized_distance", "normalized_similarity"]

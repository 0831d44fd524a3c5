"""
strmetric.distance._initialize — the shared string metric capability.

Every metric answers ``similarity(s1, s2)`` with a float in ``[0, 1]``.
The boundary cases (absent or empty input) are resolved here once, so the
concrete metrics only ever see two non-empty sequences.
"""

from __future__ import annotations

import abc
from collections.abc import Callable, Sequence
from typing import Any


class StringMetric(abc.ABC):
    """
    Base class for normalized string similarity metrics.

    Subclasses are frozen dataclasses: two metrics compare equal when they
    are the same class with the same configuration, and they can be used as
    dict keys or pickled for worker processes.

    Contract shared by all metrics:

    * ``s1 == s2`` (including both ``None``) gives ``1.0``
    * exactly one side ``None`` gives ``0.0``
    * one side empty gives ``1.0`` if both are empty, else ``0.0``
    """

    __slots__ = ()

    def similarity(
        self, s1: Sequence[Any] | None, s2: Sequence[Any] | None
    ) -> float:
        """Return the normalized similarity of *s1* and *s2* in ``[0, 1]``."""
        if s1 == s2:
            return 1.0
        if s1 is None or s2 is None:
            return 0.0
        if not s1 or not s2:
            return 1.0 if len(s1) == len(s2) else 0.0
        return self._similarity(s1, s2)

    def distance(
        self, s1: Sequence[Any] | None, s2: Sequence[Any] | None
    ) -> float:
        """Return ``1 - similarity(s1, s2)``."""
        return 1.0 - self.similarity(s1, s2)

    def __call__(
        self, s1: Sequence[Any] | None, s2: Sequence[Any] | None
    ) -> float:
        return self.similarity(s1, s2)

    @abc.abstractmethod
    def _similarity(self, s1: Sequence[Any], s2: Sequence[Any]) -> float:
        """Compute the similarity of two non-empty, unequal sequences."""


def _preprocess(
    s1: Any, s2: Any, processor: Callable[..., Any] | None
) -> tuple[Any, Any]:
    if processor is None:
        return s1, s2
    if s1 is not None:
        s1 = processor(s1)
    if s2 is not None:
        s2 = processor(s2)
    return s1, s2


def _similarity_cutoff(sim: float, score_cutoff: float | None) -> float:
    return sim if score_cutoff is None or sim >= score_cutoff else 0.0


def _normalized_distance_cutoff(dist: float, score_cutoff: float | None) -> float:
    return dist if score_cutoff is None or dist <= score_cutoff else 1.0


__all__ = ["StringMetric"]

"""
strmetric.process — batch matching and extraction utilities.

Every helper takes a ``scorer``: a :class:`~strmetric.distance.StringMetric`
instance, the name of one (see :func:`~strmetric.distance.get_metric`), or
any callable ``(s1, s2) -> float`` returning a similarity in ``[0, 1]``.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .distance import LevenshteinMetric, get_metric

logger = logging.getLogger(__name__)

_Scorer = Callable[[Any, Any], float]


def _resolve_scorer(scorer: _Scorer | str | None) -> _Scorer:
    """Resolve *scorer* to a two-argument similarity callable.

    Defaults to normalized Levenshtein similarity. Metric instances are
    callable themselves and are returned unchanged.
    """
    if scorer is None:
        return LevenshteinMetric()
    if isinstance(scorer, str):
        return get_metric(scorer)
    if not callable(scorer):
        raise TypeError(
            f"scorer must be callable or a metric name, got {type(scorer).__name__}"
        )
    return scorer


def extract_iter(
    query: Any,
    choices: Iterable[Any],
    *,
    scorer: _Scorer | str | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> Iterator[tuple[Any, float, int]]:
    """Yield ``(choice, score, index)`` for every choice, in input order.

    ``None`` choices are skipped. Choices scoring below *score_cutoff* are
    not yielded.
    """
    _scorer = _resolve_scorer(scorer)
    processed_query = query
    if processor is not None and query is not None:
        processed_query = processor(query)

    for index, choice in enumerate(choices):
        if choice is None:
            continue
        processed = processor(choice) if processor is not None else choice
        score = _scorer(processed_query, processed)
        if score_cutoff is None or score >= score_cutoff:
            yield choice, score, index


def extract(
    query: Any,
    choices: Iterable[Any],
    *,
    scorer: _Scorer | str | None = None,
    processor: Callable[..., Any] | None = None,
    limit: int | None = 5,
    score_cutoff: float | None = None,
) -> list[tuple[Any, float, int]]:
    """Return the best matches from *choices* for *query*.

    Results are ``(choice, score, index)`` sorted by score descending, ties
    broken by the lower index. ``limit=None`` returns every match.
    """
    matches = extract_iter(
        query,
        choices,
        scorer=scorer,
        processor=processor,
        score_cutoff=score_cutoff,
    )

    def key(m: tuple[Any, float, int]) -> tuple[float, int]:
        return -m[1], m[2]

    if limit is None:
        results = sorted(matches, key=key)
    else:
        results = heapq.nsmallest(limit, matches, key=key)
    logger.debug("extract: %d result(s) for query %r", len(results), query)
    return results


def extractOne(
    query: Any,
    choices: Iterable[Any],
    *,
    scorer: _Scorer | str | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> tuple[Any, float, int] | None:
    results = extract(
        query,
        choices,
        scorer=scorer,
        processor=processor,
        limit=1,
        score_cutoff=score_cutoff,
    )
    return results[0] if results else None


def cdist(
    queries: Iterable[Any],
    choices: Iterable[Any],
    *,
    scorer: _Scorer | str | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
    dtype: Any = None,
) -> Any:
    """Compute a pairwise similarity matrix. Requires numpy.

    Entry ``[i, j]`` is the score of ``queries[i]`` against ``choices[j]``;
    scores below *score_cutoff* are stored as ``0``.
    """
    try:
        import numpy as np
    except ImportError as e:
        msg = "cdist requires numpy: pip install strmetric[all]"
        raise ImportError(msg) from e

    _scorer = _resolve_scorer(scorer)
    if processor is not None:
        queries = [processor(q) if q is not None else q for q in queries]
        choices = [processor(c) if c is not None else c for c in choices]
    else:
        queries = list(queries)
        choices = list(choices)

    matrix = np.zeros(
        (len(queries), len(choices)),
        dtype=dtype if dtype is not None else np.float32,
    )
    for i, q in enumerate(queries):
        for j, c in enumerate(choices):
            score = _scorer(q, c)
            if score_cutoff is None or score >= score_cutoff:
                matrix[i, j] = score
    return matrix


__all__ = ["extract", "extractOne", "extract_iter", "cdist"]

"""
strmetric.distance — normalized string similarity metrics.
"""

from __future__ import annotations

import logging
from typing import Any

from . import Levenshtein, NGram  # noqa: F401
from ._initialize import StringMetric
from .Levenshtein import LevenshteinMetric
from .NGram import NGramMetric

logger = logging.getLogger(__name__)

# Maps user-friendly metric names to (metric class, default options)
_METRIC_MAP: dict[str, tuple[type[StringMetric], dict[str, Any]]] = {
    "levenshtein": (LevenshteinMetric, {}),
    "edit": (LevenshteinMetric, {}),
    "ngram": (NGramMetric, {}),
    "bigram": (NGramMetric, {"n": 2}),
    "trigram": (NGramMetric, {"n": 3}),
}


def get_metric(name: str, **options: Any) -> StringMetric:
    """
    Build a metric from its name.

    Parameters
    ----------
    name : str
        ``"levenshtein"`` (alias ``"edit"``), ``"ngram"``, ``"bigram"`` or
        ``"trigram"``. Case-insensitive.
    **options
        Passed to the metric constructor, e.g. ``n=3`` for ``"ngram"``.
        They override the defaults of an alias.

    Raises
    ------
    ValueError
        If *name* is unknown. ``InvalidConfigurationError`` (a subclass)
        if the options are rejected by the metric.

    Examples
    --------
    >>> get_metric("ngram", n=3)
    NGramMetric(n=3)
    """
    key = name.strip().lower()
    if key not in _METRIC_MAP:
        raise ValueError(
            f"Unknown metric {name!r}. Expected one of: {', '.join(sorted(_METRIC_MAP))}"
        )
    cls, defaults = _METRIC_MAP[key]
    kwargs = {**defaults, **options}
    try:
        metric = cls(**kwargs)
    except TypeError as e:
        raise ValueError(f"Invalid options for metric {name!r}: {e}") from e
    logger.debug("Built metric %r from name %r", metric, name)
    return metric


__all__ = [
    "StringMetric",
    "LevenshteinMetric",
    "NGramMetric",
    "Levenshtein",
    "NGram",
    "get_metric",
]

"""
strmetric — normalized string similarity: Levenshtein and Kondrak n-gram.
"""

from __future__ import annotations

from . import distance, errors, process, serialization
from .distance import LevenshteinMetric, NGramMetric, StringMetric, get_metric
from .errors import CodecError, InvalidConfigurationError
from .serialization import NGramMetricCodec

__version__: str = "0.1.0"

__all__ = [
    "distance",
    "errors",
    "process",
    "serialization",
    "StringMetric",
    "LevenshteinMetric",
    "NGramMetric",
    "NGramMetricCodec",
    "get_metric",
    "CodecError",
    "InvalidConfigurationError",
    "__version__",
]

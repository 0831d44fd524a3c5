"""
strmetric.errors — exceptions raised by metric configuration and codecs.
"""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """A metric was constructed with an unusable configuration value."""


class CodecError(ValueError):
    """A metric configuration could not be encoded or decoded."""


__all__ = ["InvalidConfigurationError", "CodecError"]

"""
strmetric.serialization — binary codec for metric configuration.

An :class:`~strmetric.distance.NGramMetric` is persisted as its n-gram
size only: one signed 32-bit integer, little-endian, 4 bytes.

Usage::

    from strmetric.serialization import NGramMetricCodec

    codec = NGramMetricCodec()
    data = codec.dumps(NGramMetric(3))   # b"\\x03\\x00\\x00\\x00"
    metric = codec.loads(data)
"""

from __future__ import annotations

import io
import logging
import struct
from typing import BinaryIO

from .distance import NGramMetric
from .errors import CodecError

logger = logging.getLogger(__name__)

_INT32 = struct.Struct("<i")


class NGramMetricCodec:
    """Reads and writes :class:`NGramMetric` configuration."""

    size = _INT32.size

    def serialize(self, stream: BinaryIO, metric: NGramMetric) -> None:
        if not isinstance(metric, NGramMetric):
            raise TypeError(f"Expected NGramMetric, got {type(metric).__name__}")
        try:
            data = _INT32.pack(metric.n)
        except struct.error as e:
            raise CodecError(f"n-gram size {metric.n} does not fit in int32") from e
        stream.write(data)
        logger.debug("Wrote n-gram size %d", metric.n)

    def deserialize(self, stream: BinaryIO) -> NGramMetric:
        """
        Read one metric from *stream*.

        Raises
        ------
        CodecError
            If fewer than 4 bytes are available.
        InvalidConfigurationError
            If the stored size is not a valid n-gram size.
        """
        data = stream.read(self.size) or b""
        if len(data) != self.size:
            raise CodecError(
                f"Expected {self.size} bytes for n-gram size, got {len(data)}"
            )
        (n,) = _INT32.unpack(data)
        logger.debug("Read n-gram size %d", n)
        return NGramMetric(n)

    def dumps(self, metric: NGramMetric) -> bytes:
        buf = io.BytesIO()
        self.serialize(buf, metric)
        return buf.getvalue()

    def loads(self, data: bytes) -> NGramMetric:
        if len(data) != self.size:
            raise CodecError(f"Expected exactly {self.size} bytes, got {len(data)}")
        return self.deserialize(io.BytesIO(data))


__all__ = ["NGramMetricCodec"]

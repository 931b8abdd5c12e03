"""Response body compressors."""

from __future__ import annotations

import zlib
from abc import ABC, abstractmethod


class Compressor(ABC):
    """Compresses data for a given content encoding."""

    encoding: str = ""

    @abstractmethod
    def compress(self, data: bytes | str) -> bytes:
        """Return the compressed form of ``data``."""


class GzipCompressor(Compressor):
    """Gzip compression at the default level."""

    encoding = "gzip"

    def compress(self, data: bytes | str) -> bytes:
        """Return ``data`` as a gzip stream; empty input gives empty output."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        if not data:
            return b""
        compressor = zlib.compressobj(
            zlib.Z_DEFAULT_COMPRESSION,
            zlib.DEFLATED,
            zlib.MAX_WBITS | 16,
            8,
            zlib.Z_DEFAULT_STRATEGY,
        )
        return compressor.compress(data) + compressor.flush(zlib.Z_FINISH)
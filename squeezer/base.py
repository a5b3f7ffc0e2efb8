"""Common interface shared by all compression algorithms."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import BinaryIO


class Compressor(ABC):
    """A compression algorithm that turns one binary stream into another."""

    name: str = ""

    @abstractmethod
    def compress(self, source: BinaryIO, sink: BinaryIO) -> None:
        """Read raw data from ``source`` and write compressed data to ``sink``."""

    @abstractmethod
    def decompress(self, source: BinaryIO, sink: BinaryIO) -> None:
        """Read compressed data from ``source`` and write the original to ``sink``."""

    def compress_bytes(self, data: bytes) -> bytes:
        """Compress an in-memory byte string."""
        sink = io.BytesIO()
        self.compress(io.BytesIO(data), sink)
        return sink.getvalue()

    def decompress_bytes(self, data: bytes) -> bytes:
        """Decompress an in-memory byte string."""
        sink = io.BytesIO()
        self.decompress(io.BytesIO(data), sink)
        return sink.getvalue()
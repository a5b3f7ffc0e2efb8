"""Bit-level reading and writing on top of binary byte streams.

Bits are packed most-significant first: the first bit written becomes the
high bit of the first byte. A partially filled byte is padded with zeros
when flushed.
"""

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional


class BitWriter:
    """Buffers single bits and writes them to a binary stream a byte at a time."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._count = 0

    def write_bit(self, bit: int) -> None:
        """Write one bit; any truthy value counts as 1."""
        if bit:
            self._buffer |= 1 << (7 - self._count)
        self._count += 1
        if self._count == 8:
            self._emit()

    def write_bits(self, value: int, num_bits: int) -> None:
        """Write the lowest ``num_bits`` bits of ``value``, high bit first."""
        for shift in range(num_bits - 1, -1, -1):
            self.write_bit((value >> shift) & 1)

    def write_byte(self, byte: int) -> None:
        """Write all eight bits of ``byte``."""
        self.write_bits(byte, 8)

    def flush(self) -> None:
        """Write out a partially filled byte, padded with zero bits."""
        if self._count:
            self._emit()

    def _emit(self) -> None:
        self._stream.write(bytes((self._buffer,)))
        self._buffer = 0
        self._count = 0

    def __enter__(self) -> "BitWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()


class BitReader:
    """Reads single bits from a binary stream, high bit of each byte first."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._count = 0

    def read_bit(self) -> Optional[int]:
        """Return the next bit, or ``None`` once the stream is exhausted."""
        if self._count == 0:
            chunk = self._stream.read(1)
            if not chunk:
                return None
            self._buffer = chunk[0]
            self._count = 8
        self._count -= 1
        return (self._buffer >> self._count) & 1

    def read_byte(self) -> Optional[int]:
        """Return the next eight bits as an integer.

        Returns ``None`` if no bit is left at all. If the stream ends part way
        through, the bits read so far are returned as they stand.
        """
        value = 0
        for position in range(8):
            bit = self.read_bit()
            if bit is None:
                return None if position == 0 else value
            value = (value << 1) | bit
        return value

    def __iter__(self) -> Iterator[int]:
        while (bit := self.read_bit()) is not None:
            yield bit
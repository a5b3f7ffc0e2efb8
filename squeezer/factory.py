"""Lookup of compression algorithms by name."""

from __future__ import annotations

from squeezer.base import Compressor
from squeezer.huffman import Huffman
from squeezer.lzw import LZW

_ALGORITHMS: dict[str, type[Compressor]] = {
    "huffman": Huffman,
    "lzw": LZW,
}


def create_compressor(algorithm: str) -> Compressor:
    """Return a new compressor for ``algorithm``, matched case-insensitively.

    Raises ``ValueError`` for a name that is not supported.
    """
    try:
        factory = _ALGORITHMS[algorithm.lower()]
    except KeyError:
        raise ValueError(f"Unknown compression algorithm: {algorithm}") from None
    return factory()


def supported_algorithms() -> list[str]:
    """Return the display names of the supported algorithms."""
    return [factory.name for factory in _ALGORITHMS.values()]
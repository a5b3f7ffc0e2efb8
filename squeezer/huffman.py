"""Huffman coding.

Compressed layout (all integers little-endian):

* ``uint16`` number of distinct byte values;
* for each value, one ``uint8`` byte value and its ``uint64`` frequency;
* ``uint64`` total number of input bytes;
* the code bits, packed high bit first and zero-padded to a whole byte.

Empty input compresses to empty output. The tree is rebuilt from the
frequencies with a deterministic tie-break (lowest frequency, then lowest
byte value in the subtree), so encoder and decoder always agree.
"""

from __future__ import annotations

import heapq
import struct
from dataclasses import dataclass
from typing import BinaryIO, Mapping, Optional

from squeezer.base import Compressor
from squeezer.bitstream import BitReader

_COUNT = struct.Struct("<H")
_ENTRY = struct.Struct("<BQ")
_TOTAL = struct.Struct("<Q")


@dataclass
class _Node:
    symbol: int
    frequency: int
    min_symbol: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _build_tree(frequencies: Mapping[int, int]) -> Optional[_Node]:
    heap = [(freq, symbol, _Node(symbol, freq, symbol)) for symbol, freq in frequencies.items()]
    if not heap:
        return None
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = _Node(
            0,
            left.frequency + right.frequency,
            min(left.min_symbol, right.min_symbol),
            left,
            right,
        )
        heapq.heappush(heap, (merged.frequency, merged.min_symbol, merged))
    return heap[0][2]


def build_codes(frequencies: Mapping[int, int]) -> dict[int, str]:
    """Return the bit string assigned to each byte value.

    A lone symbol gets the code ``"0"``.
    """
    root = _build_tree(frequencies)
    codes: dict[int, str] = {}
    if root is None:
        return codes
    pending = [(root, "")]
    while pending:
        node, prefix = pending.pop()
        if node.is_leaf:
            codes[node.symbol] = prefix or "0"
        else:
            pending.append((node.right, prefix + "1"))
            pending.append((node.left, prefix + "0"))
    return codes


def _read_exact(source: BinaryIO, size: int, what: str) -> bytes:
    chunk = source.read(size)
    if len(chunk) != size:
        raise ValueError(f"truncated Huffman {what}")
    return chunk


class Huffman(Compressor):
    """Static Huffman coding with the frequency table stored in the output."""

    name = "Huffman"

    def compress(self, source: BinaryIO, sink: BinaryIO) -> None:
        data = source.read()
        if not data:
            return

        frequencies: dict[int, int] = {}
        for byte in data:
            frequencies[byte] = frequencies.get(byte, 0) + 1

        header = bytearray(_COUNT.pack(len(frequencies)))
        for symbol in sorted(frequencies):
            header += _ENTRY.pack(symbol, frequencies[symbol])
        header += _TOTAL.pack(len(data))
        sink.write(bytes(header))

        codes = build_codes(frequencies)
        bits = "".join(codes[byte] for byte in data)
        padding = -len(bits) % 8
        bits += "0" * padding
        sink.write(int(bits, 2).to_bytes(len(bits) // 8, "big"))

    def decompress(self, source: BinaryIO, sink: BinaryIO) -> None:
        raw_count = source.read(_COUNT.size)
        if len(raw_count) < _COUNT.size:
            return
        (count,) = _COUNT.unpack(raw_count)

        frequencies: dict[int, int] = {}
        for _ in range(count):
            symbol, freq = _ENTRY.unpack(_read_exact(source, _ENTRY.size, "header"))
            frequencies[symbol] = freq
        if not frequencies:
            return

        (total,) = _TOTAL.unpack(_read_exact(source, _TOTAL.size, "length"))
        if total == 0:
            return

        root = _build_tree(frequencies)
        if root.is_leaf:
            sink.write(bytes((root.symbol,)) * total)
            return

        out = bytearray()
        node = root
        for bit in BitReader(source):
            node = node.right if bit else node.left
            if node.is_leaf:
                out.append(node.symbol)
                if len(out) == total:
                    break
                node = root
        sink.write(bytes(out))
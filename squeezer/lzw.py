"""Lempel-Ziv-Welch compression with fixed 16-bit little-endian codes.

The dictionary starts with all 256 single bytes and grows by one entry per
emitted code until code 65534 has been assigned; after that it is frozen.
"""

from __future__ import annotations

import struct
from typing import BinaryIO

from squeezer.base import Compressor

_CODE = struct.Struct("<H")
_DICTIONARY_LIMIT = 65535


class LZWError(ValueError):
    """Raised when compressed LZW data holds a code that cannot occur."""


class LZW(Compressor):
    """LZW compression writing each code as a two-byte little-endian integer."""

    name = "LZW"

    def compress(self, source: BinaryIO, sink: BinaryIO) -> None:
        dictionary = {bytes((value,)): value for value in range(256)}
        next_code = 256
        current = b""
        out = bytearray()

        for byte in source.read():
            symbol = bytes((byte,))
            extended = current + symbol
            if extended in dictionary:
                current = extended
                continue
            out += _CODE.pack(dictionary[current])
            if next_code < _DICTIONARY_LIMIT:
                dictionary[extended] = next_code
                next_code += 1
            current = symbol

        if current:
            out += _CODE.pack(dictionary[current])
        sink.write(bytes(out))

    def decompress(self, source: BinaryIO, sink: BinaryIO) -> None:
        data = source.read()
        usable = len(data) - len(data) % _CODE.size
        codes = (code for (code,) in _CODE.iter_unpack(data[:usable]))

        first = next(codes, None)
        if first is None:
            return
        if first >= 256:
            raise LZWError(f"LZW decompress: invalid code {first}")

        dictionary = {value: bytes((value,)) for value in range(256)}
        next_code = 256
        current = dictionary[first]
        out = bytearray(current)

        for code in codes:
            if code in dictionary:
                entry = dictionary[code]
            elif code == next_code:
                entry = current + current[:1]
            else:
                raise LZWError(f"LZW decompress: invalid code {code}")
            out += entry
            if next_code < _DICTIONARY_LIMIT:
                dictionary[next_code] = current + entry[:1]
                next_code += 1
            current = entry

        sink.write(bytes(out))
"""Command-line front end for compressing and decompressing files."""

from __future__ import annotations

import argparse
import os
import sys
import threading
import time
from typing import BinaryIO, Optional, Sequence

from squeezer import log
from squeezer.factory import create_compressor

_BAR_WIDTH = 40
_LEAD = "<==>"
_FILL = "·"
_TICK_SECONDS = 0.05
_YELLOW = "\x1b[33m"
_CYAN = "\x1b[36m"
_RESET = "\x1b[0m"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"


class _UsageError(Exception):
    """Raised for malformed command lines."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


class _Spinner:
    """An indeterminate progress bar animated by a background thread."""

    def __init__(self, postfix: str, colour: str) -> None:
        self._postfix = postfix
        self._colour = colour
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._position = 0
        self._step = 1
        self._stream = sys.stdout

    def _draw(self) -> None:
        before = _FILL * self._position
        after = _FILL * (_BAR_WIDTH - len(_LEAD) - self._position)
        self._stream.write(f"\r{self._colour}[{before}{_LEAD}{after}] {self._postfix}{_RESET}")
        self._stream.flush()

    def _tick(self) -> None:
        self._draw()
        last = _BAR_WIDTH - len(_LEAD)
        if not 0 <= self._position + self._step <= last:
            self._step = -self._step
        self._position += self._step

    def _run(self) -> None:
        while not self._stop.is_set():
            self._tick()
            self._stop.wait(_TICK_SECONDS)

    def __enter__(self) -> "_Spinner":
        self._stream = sys.stdout
        self._thread.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stop.set()
        self._thread.join()
        self._stream.write("\n")
        self._stream.flush()


def _open(path: str, mode: str, role: str) -> BinaryIO:
    try:
        return open(path, mode)
    except OSError as exc:
        raise OSError(f"Cannot open {role} file: {path}") from exc


def run_compression(input_path: str, output_path: str, algorithm: str) -> None:
    """Compress ``input_path`` into ``output_path`` and report statistics."""
    compressor = create_compressor(algorithm)
    with _open(input_path, "rb", "input") as source, _open(output_path, "wb", "output") as sink:
        input_size = os.path.getsize(input_path)
        log.info(f"Original Size: {input_size} bytes")
        log.info("Compressing...")

        with _Spinner(f"Running {compressor.name} Algorithm", _YELLOW):
            start = time.perf_counter()
            compressor.compress(source, sink)
            elapsed = time.perf_counter() - start

    output_size = os.path.getsize(output_path)
    log.success("Compression finished!")
    log.info(f"Compressed Size: {output_size} bytes")
    ratio = (1.0 - output_size / input_size) * 100.0 if input_size else float("nan")
    log.info(f"Space Saved: {ratio:.2f}%")
    log.info(f"Time Taken: {int(elapsed * 1000)}ms")


def run_decompression(input_path: str, output_path: str, algorithm: str) -> None:
    """Decompress ``input_path`` into ``output_path``."""
    compressor = create_compressor(algorithm)
    with _open(input_path, "rb", "input") as source, _open(output_path, "wb", "output") as sink:
        log.info("Decompressing...")

        sys.stdout.write(_HIDE_CURSOR)
        try:
            with _Spinner("Reconstructing Original Data", _CYAN):
                start = time.perf_counter()
                compressor.decompress(source, sink)
                elapsed = time.perf_counter() - start
        finally:
            sys.stdout.write(_SHOW_CURSOR)
            sys.stdout.flush()

    log.success("Decompression finished!")
    log.info(f"Time Taken: {int(elapsed * 1000)}ms")


def _build_parser() -> _Parser:
    parser = _Parser(
        prog="compressor",
        description="Advanced File Compression Tool",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-c", "--compress", action="store_true", help="Compress file")
    parser.add_argument("-d", "--decompress", action="store_true", help="Decompress file")
    parser.add_argument("-i", "--input", help="Input file")
    parser.add_argument("-o", "--output", help="Output file")
    parser.add_argument("-a", "--algo", default="huffman", help="Algorithm (huffman/lzw)")
    parser.add_argument("-h", "--help", action="store_true", help="Print usage")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the process exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)

        if args.help:
            print(parser.format_help())
            return 0

        if args.compress == args.decompress:
            log.error("Please specify either --compress (-c) or --decompress (-d)")
            return 1

        if args.input is None or args.output is None:
            log.error("Input and output files are required.")
            return 1

        log.header("FILE COMPRESSION TOOL")

        if args.compress:
            run_compression(args.input, args.output, args.algo)
        else:
            run_decompression(args.input, args.output, args.algo)
    except Exception as exc:  # every failure is reported, never propagated
        log.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
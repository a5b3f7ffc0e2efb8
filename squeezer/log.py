"""Coloured console messages."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_RESET = "\x1b[0m"
_CYAN = "\x1b[36m"
_GREEN = "\x1b[32m"
_BOLD_RED = "\x1b[1;31m"
_BOLD_YELLOW = "\x1b[1;33m"


def _emit(style: str, text: str, stream: Optional[TextIO]) -> None:
    target = sys.stdout if stream is None else stream
    target.write(f"{style}{text}{_RESET}")
    target.flush()


def info(msg: str, stream: Optional[TextIO] = None) -> None:
    """Print an informational line in cyan."""
    _emit(_CYAN, f"[-] {msg}\n", stream)


def success(msg: str, stream: Optional[TextIO] = None) -> None:
    """Print a success line in green."""
    _emit(_GREEN, f"[+] {msg}\n", stream)


def error(msg: str, stream: Optional[TextIO] = None) -> None:
    """Print an error line in bold red."""
    _emit(_BOLD_RED, f"[!] Error: {msg}\n", stream)


def header(title: str, stream: Optional[TextIO] = None) -> None:
    """Print a section title in bold yellow, preceded by a blank line."""
    _emit(_BOLD_YELLOW, f"\n=== {title} ===\n", stream)
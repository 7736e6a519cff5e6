"""Print arguments separated by spaces."""

from __future__ import annotations

import sys


def echo(args: list[str]) -> str:
    """Text echo writes for args: joined by spaces and newline-terminated."""
    if not args:
        return ""
    return " ".join(args) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Command entry point: echo [arg ...]."""
    args = sys.argv[1:] if argv is None else list(argv)
    sys.stdout.write(echo(args))
    return 0
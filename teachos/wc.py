"""Count lines, words and characters."""

from __future__ import annotations

import sys
from typing import IO, AnyStr

_BUFSIZE = 512
# The NUL character also ends a word.
_SPACE = frozenset(" \r\t\n\v\0")


def wc(stream: IO[AnyStr]) -> tuple[int, int, int]:
    """Return (lines, words, characters) read from stream."""
    lines = words = chars = 0
    inword = False
    while True:
        chunk = stream.read(_BUFSIZE)
        if not chunk:
            break
        text = chunk.decode("latin-1") if isinstance(chunk, bytes) else chunk
        for c in text:
            chars += 1
            if c == "\n":
                lines += 1
            if c in _SPACE:
                inword = False
            elif not inword:
                words += 1
                inword = True
    return lines, words, chars


def _report(stream: IO[bytes], name: str) -> bool:
    try:
        lines, words, chars = wc(stream)
    except OSError:
        sys.stdout.write("wc: read error\n")
        return False
    sys.stdout.write(f"{lines} {words} {chars} {name}\n")
    return True


def main(argv: list[str] | None = None) -> int:
    """Command entry point: wc [file ...]."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0 if _report(sys.stdin.buffer, "") else 1
    for name in args:
        try:
            handle = open(name, "rb")
        except OSError:
            sys.stdout.write(f"wc: cannot open {name}\n")
            return 1
        with handle:
            if not _report(handle, name):
                return 1
    return 0
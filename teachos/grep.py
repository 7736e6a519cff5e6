"""Line filter with a tiny regular-expression matcher: ^ . * $."""

from __future__ import annotations

import sys
from typing import IO

_BUFSIZE = 1024


def match(re: str, text: str) -> bool:
    """Whether re matches anywhere in text."""
    if re.startswith("^"):
        return _match_here(re[1:], text)
    return any(_match_here(re, text[i:]) for i in range(len(text) + 1))


def _match_here(re: str, text: str) -> bool:
    if not re:
        return True
    if len(re) > 1 and re[1] == "*":
        return _match_star(re[0], re[2:], text)
    if re == "$":
        return not text
    if text and (re[0] == "." or re[0] == text[0]):
        return _match_here(re[1:], text[1:])
    return False


def _match_star(c: str, re: str, text: str) -> bool:
    i = 0
    while True:
        if _match_here(re, text[i:]):
            return True
        if i < len(text) and (text[i] == c or c == "."):
            i += 1
        else:
            return False


def grep(pattern: str, stream: IO[str], out: IO[str]) -> None:
    """Write every newline-terminated line of stream that matches pattern.

    A pending partial line may hold at most 1023 characters; once it is
    that long, reading stops.
    """
    pending = ""
    while True:
        room = _BUFSIZE - 1 - len(pending)
        if room <= 0:
            break
        chunk = stream.read(room)
        if not chunk:
            break
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                out.write(line + "\n")


def main(argv: list[str] | None = None) -> int:
    """Command entry point: grep pattern [file ...]."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern, files = args[0], args[1:]
    if not files:
        grep(pattern, sys.stdin, sys.stdout)
        return 0
    for name in files:
        try:
            handle = open(name, encoding="utf-8", errors="replace")
        except OSError:
            sys.stdout.write(f"grep: cannot open {name}\n")
            return 1
        with handle:
            grep(pattern, handle, sys.stdout)
    return 0
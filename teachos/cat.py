"""Concatenate files to standard output."""

from __future__ import annotations

import sys
from typing import IO, AnyStr

_BUFSIZE = 512


class _WriteError(OSError):
    """Writing to the output failed."""


def cat(stream: IO[AnyStr], out: IO[AnyStr]) -> None:
    """Copy everything from stream to out in small chunks.

    Read failures propagate as OSError; write failures are raised as an
    OSError subclass so callers can tell the two apart.
    """
    while True:
        chunk = stream.read(_BUFSIZE)
        if not chunk:
            return
        try:
            out.write(chunk)
        except OSError as exc:
            raise _WriteError("cat: write error") from exc


def _copy(stream: IO[bytes], out: IO[bytes]) -> bool:
    try:
        cat(stream, out)
    except _WriteError:
        sys.stderr.write("cat: write error\n")
        return False
    except OSError:
        sys.stderr.write("cat: read error\n")
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Command entry point: cat [file ...]."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout.buffer
    if not args:
        ok = _copy(sys.stdin.buffer, out)
        out.flush()
        return 0 if ok else 1
    for name in args:
        try:
            handle = open(name, "rb")
        except OSError:
            sys.stderr.write(f"cat: cannot open {name}\n")
            return 1
        with handle:
            if not _copy(handle, out):
                return 1
    out.flush()
    return 0
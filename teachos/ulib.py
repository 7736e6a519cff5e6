"""Small string and input helpers."""

from __future__ import annotations

from typing import IO, AnyStr


def atoi(s: str) -> int:
    """Value of the leading decimal digits of s; 0 if there are none."""
    n = 0
    for ch in s:
        if not "0" <= ch <= "9":
            break
        n = n * 10 + ord(ch) - ord("0")
    return n


def _as_bytes(s: str | bytes) -> bytes:
    data = s.encode("latin-1") if isinstance(s, str) else bytes(s)
    nul = data.find(0)
    return data if nul < 0 else data[:nul]


def strcmp(p: str | bytes, q: str | bytes) -> int:
    """Compare two strings bytewise; the sign of the result orders them."""
    a, b = _as_bytes(p), _as_bytes(q)
    for x, y in zip(a, b):
        if x != y:
            return x - y
    if len(a) == len(b):
        return 0
    return a[len(b)] if len(a) > len(b) else -b[len(a)]


def gets(stream: IO[AnyStr], max: int) -> AnyStr:
    """Read one line of at most max-1 characters, newline or CR included."""
    parts = []
    empty = None
    while len(parts) + 1 < max:
        c = stream.read(1)
        empty = c[:0]
        if not c:
            break
        parts.append(c)
        if c in ("\n", "\r", b"\n", b"\r"):
            break
    if empty is None:
        return ""
    return empty.join(parts)
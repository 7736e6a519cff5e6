"""Minimal formatted output understanding %d, %l, %x, %p, %s, %c and %%."""

from __future__ import annotations

from operator import index
from typing import IO, Any, Iterator

_DIGITS = "0123456789ABCDEF"
_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: Any) -> int:
    v = index(value) & _U32
    return v - (1 << 32) if v & 0x80000000 else v


def _format_int(value: Any, base: int, signed: bool) -> str:
    xx = _to_int32(value)
    negative = signed and xx < 0
    x = -xx if negative else xx & _U32
    digits = []
    while True:
        digits.append(_DIGITS[x % base])
        x //= base
        if not x:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def _format_ptr(value: Any) -> str:
    return "0x" + format(index(value) & _U64, "016X")


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{conversion}") from None


def xformat(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the resulting text.

    %d prints a signed 32-bit value, %l and %x unsigned 32-bit values
    (decimal and upper-case hexadecimal), %p a 64-bit value as sixteen hex
    digits, %s a string (None as "(null)"), %c one character. Unknown
    conversions are echoed with their percent sign.
    """
    arg_iter = iter(args)
    out: list[str] = []
    pending = False
    for c in fmt:
        if not pending:
            if c == "%":
                pending = True
            else:
                out.append(c)
            continue
        pending = False
        if c == "d":
            out.append(_format_int(_next_arg(arg_iter, c), 10, True))
        elif c == "l":
            out.append(_format_int(_next_arg(arg_iter, c), 10, False))
        elif c == "x":
            out.append(_format_int(_next_arg(arg_iter, c), 16, False))
        elif c == "p":
            out.append(_format_ptr(_next_arg(arg_iter, c)))
        elif c == "s":
            s = _next_arg(arg_iter, c)
            out.append("(null)" if s is None else str(s))
        elif c == "c":
            ch = _next_arg(arg_iter, c)
            out.append(ch if isinstance(ch, str) else chr(index(ch) & 0xFF))
        elif c == "%":
            out.append("%")
        else:
            out.append("%" + c)
    return "".join(out)


def fprintf(stream: IO[str], fmt: str, *args: Any) -> None:
    """Write formatted output to a text stream."""
    stream.write(xformat(fmt, *args))
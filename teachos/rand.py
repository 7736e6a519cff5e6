"""Park-Miller minimal standard pseudo-random generator."""

from __future__ import annotations

from typing import Iterator

_MODULUS = 0x7FFFFFFF
_MULTIPLIER = 16807
_Q = 127773  # _MODULUS // _MULTIPLIER
_R = 2836  # _MODULUS % _MULTIPLIER


class ParkMiller:
    """Computes x = 7**5 * x mod (2**31 - 1); values lie in [0, 0x7ffffffd]."""

    def __init__(self, seed: int) -> None:
        if seed < 0:
            raise ValueError("seed must not be negative")
        self.state = seed

    def next(self) -> int:
        """Advance the generator and return the new value."""
        x = self.state % 0x7FFFFFFE + 1
        hi, lo = divmod(x, _Q)
        x = _MULTIPLIER * lo - _R * hi
        if x < 0:
            x += _MODULUS
        x -= 1
        self.state = x
        return x

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()
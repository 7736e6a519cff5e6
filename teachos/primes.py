"""Prime sieve built as a pipeline of filtering stages."""

from __future__ import annotations

import sys
from typing import Iterator

LIMIT = 32


def primes(limit: int) -> Iterator[int]:
    """Yield the primes from 2 to limit inclusive.

    Each stage takes the first surviving number as its prime and passes
    on only the numbers it does not divide.
    """
    numbers = list(range(2, limit + 1))
    while numbers:
        prime = numbers[0]
        yield prime
        numbers = [n for n in numbers[1:] if n % prime]


def main(argv: list[str] | None = None) -> int:
    """Command entry point: print the primes up to 32."""
    for prime in primes(LIMIT):
        sys.stdout.write(f"prime {prime} \n")
    return 0
"""Fibonacci series printer."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence


def _terms() -> Iterator[int]:
    current, following = 0, 1
    while True:
        yield current
        current, following = following, current + following


def fibonacci_series(n: int) -> list[int]:
    """Return the Fibonacci terms with indices 0 through ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    terms = _terms()
    return [next(terms) for _ in range(n + 1)]


def format_series(n: int) -> str:
    """Render the series up to index ``n`` as a single display line."""
    return f" {n} is: " + ", ".join(str(term) for term in fibonacci_series(n))


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for N and print the Fibonacci series up to it."""
    try:
        text = input("Enter N: ")
    except EOFError:
        text = ""
    parts = text.split()
    try:
        n = int(parts[0])
    except (IndexError, ValueError):
        print("Invalid Input ")
        return 0
    if n < 0:
        print("Invalid Input")
        return 0
    print(format_series(n))
    return 0


if __name__ == "__main__":
    sys.exit(main())
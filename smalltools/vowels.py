"""Vowel analysis: lowercase a string, extract its vowels and report on each."""

from __future__ import annotations

import string
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

VOWELS = "aeiou"
MAX_LENGTH = 100

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclass(frozen=True)
class VowelStat:
    """How often a vowel occurs and where it first appears (None if absent)."""

    vowel: str
    count: int
    first_index: int | None


def to_lower(text: str) -> str:
    """Lowercase ASCII letters A-Z, leaving every other character unchanged."""
    return text.translate(_LOWER)


def extract_vowels(text: str) -> str:
    """Return the lowercase vowels of ``text`` in order."""
    return "".join(char for char in text if char in VOWELS)


def analyze_vowels(vowels: str) -> list[VowelStat]:
    """Count each of a, e, i, o, u in ``vowels`` and find its first index."""
    return [
        VowelStat(vowel, vowels.count(vowel), vowels.index(vowel) if vowel in vowels else None)
        for vowel in VOWELS
    ]


def format_analysis(stats: Iterable[VowelStat]) -> str:
    """Render vowel statistics as display lines."""
    return "\n".join(
        f"'{stat.vowel}' occurs {stat.count} time(s) and first appears at index {stat.first_index}."
        if stat.count
        else f"'{stat.vowel}' does not appear in the string."
        for stat in stats
    )


def _ask_max_length() -> int | None:
    while True:
        try:
            line = input(f"Enter the maximum length of the string (<= {MAX_LENGTH}): ")
        except EOFError:
            return None
        parts = line.split()
        try:
            value = int(parts[0])
        except (IndexError, ValueError):
            continue
        if 0 < value <= MAX_LENGTH:
            return value


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a length and a string, then report on the vowels it holds."""
    max_length = _ask_max_length()
    if max_length is None:
        return 1
    try:
        text = input(f"Enter a string (max length {max_length}): ")
    except EOFError:
        text = ""
    text = to_lower(text[:max_length])
    print(f"Lowercase string: {text}")

    vowels = extract_vowels(text)
    if vowels:
        print(f"Extracted vowels: {vowels}")
        print(format_analysis(analyze_vowels(vowels)))
    else:
        print("No vowels found in the string.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Statistics for three integers: extremes, average, differences."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Summary:
    """Derived figures for three integers."""

    maximum: int
    minimum: int
    average: float
    max_min_difference: int
    max_avg_difference: float
    min_absolute: int


def summarize(a: int, b: int, c: int) -> Summary:
    """Compute the summary of three integers."""
    maximum = max(a, b, c)
    minimum = min(a, b, c)
    average = (a + b + c) / 3.0
    return Summary(
        maximum=maximum,
        minimum=minimum,
        average=average,
        max_min_difference=maximum - minimum,
        max_avg_difference=maximum - average,
        min_absolute=abs(minimum),
    )


def format_summary(summary: Summary) -> str:
    """Render a summary as display lines."""
    return "\n".join(
        [
            f"Maximum: {summary.maximum}",
            f"Minimum: {summary.minimum}",
            f"Average: {summary.average:.2f}",
            f"Difference between max and min: {summary.max_min_difference}",
            f"Difference between max and average: {summary.max_avg_difference:.2f}",
            f"Absolute value of the minimum number: {summary.min_absolute}",
        ]
    )


def _read_numbers(count: int) -> list[int]:
    tokens: list[str] = []
    prompt = "Enter three numbers: "
    while len(tokens) < count:
        try:
            tokens.extend(input(prompt).split())
        except EOFError:
            break
        prompt = ""
    return [int(token) for token in tokens[:count]]


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for three integers and print their summary."""
    try:
        numbers = _read_numbers(3)
    except ValueError:
        numbers = []
    if len(numbers) != 3:
        print("Invalid input")
        return 1
    print(format_summary(summarize(*numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
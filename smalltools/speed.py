"""Speed limit enforcement: classify a vehicle's speed and state the fine."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Sequence

SPEED_LIMIT = 60
WARNING_UPPER_LIMIT = SPEED_LIMIT + 5
FINE_80_UPPER_LIMIT = SPEED_LIMIT + 10
FINE_150_UPPER_LIMIT = SPEED_LIMIT + 20


class Verdict(Enum):
    """Outcome for a measured speed; the value is the fine, None when not speeding."""

    NOT_SPEEDING = None
    WARNING = 0
    FINE_80 = 80
    FINE_150 = 150
    FINE_500 = 500

    @property
    def speeding(self) -> bool:
        return self is not Verdict.NOT_SPEEDING

    @property
    def fine(self) -> int:
        return self.value or 0


def assess_speed(speed: int) -> Verdict:
    """Classify a speed in km/h; negative speeds raise ValueError."""
    if speed < 0:
        raise ValueError("speed must not be negative")
    if speed <= SPEED_LIMIT:
        return Verdict.NOT_SPEEDING
    if speed <= WARNING_UPPER_LIMIT:
        return Verdict.WARNING
    if speed <= FINE_80_UPPER_LIMIT:
        return Verdict.FINE_80
    if speed <= FINE_150_UPPER_LIMIT:
        return Verdict.FINE_150
    return Verdict.FINE_500


def format_verdict(verdict: Verdict) -> str:
    """Render a verdict as the lines shown to the user."""
    if not verdict.speeding:
        return "Not Speeding"
    if verdict is Verdict.WARNING:
        return "Speeding \nWarning"
    return f"Speeding \nFine: ${verdict.fine}"


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a speed and report the verdict."""
    try:
        text = input("Enter the speed of the vehicle (km/h): ")
    except EOFError:
        text = ""
    parts = text.split()
    try:
        verdict = assess_speed(int(parts[0]))
    except (IndexError, ValueError):
        print("Invalid input")
        return 0
    print(format_verdict(verdict))
    return 0


if __name__ == "__main__":
    sys.exit(main())
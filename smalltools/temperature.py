"""Temperature analysis of Kelvin samples: conversions, water state and statistics."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable, Sequence

SAMPLE_COUNT = 10
ABSOLUTE_ZERO_CELSIUS = 273.15


class WaterState(Enum):
    """State of water at a given temperature."""

    SOLID = "Solid"
    LIQUID = "Liquid"
    GAS = "Gas"


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - ABSOLUTE_ZERO_CELSIUS


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def water_state(celsius: float) -> WaterState:
    """Solid at or below 0 °C, gas at or above 100 °C, liquid between."""
    if celsius <= 0:
        return WaterState.SOLID
    if celsius >= 100:
        return WaterState.GAS
    return WaterState.LIQUID


def count_below(values: Iterable[float], threshold: float) -> int:
    """Count values strictly below ``threshold``."""
    return sum(1 for value in values if value < threshold)


def format_table(kelvins: Iterable[float]) -> str:
    """Render each sample in Kelvin, Celsius and Fahrenheit with its water state."""
    lines = ["Kelvin   Celsius   Fahrenheit   State"]
    for kelvin in kelvins:
        celsius = kelvin_to_celsius(kelvin)
        fahrenheit = celsius_to_fahrenheit(celsius)
        lines.append(
            f"{kelvin:.2f}     {celsius:.2f}     {fahrenheit:.2f}        "
            f"{water_state(celsius).value}"
        )
    return "\n".join(lines)


def _read_float(prompt: str) -> float:
    try:
        line = input(prompt)
    except EOFError as error:
        raise ValueError("no input") from error
    parts = line.split()
    if not parts:
        raise ValueError("no input")
    return float(parts[0])


def main(argv: Sequence[str] | None = None) -> int:
    """Read ten Kelvin samples, show them converted, then count those below a threshold."""
    try:
        kelvins = [
            _read_float(f"Enter temperature {index} in Kelvin: ")
            for index in range(1, SAMPLE_COUNT + 1)
        ]
    except ValueError:
        print("Invalid input")
        return 1

    print(format_table(kelvins))
    print(f"Max temperature: {max(kelvins):.2f} K ")
    print(f"Min temperature: {min(kelvins):.2f} K ")
    print(f"Average temperature: {sum(kelvins) / len(kelvins):.2f} K ")

    try:
        threshold = _read_float("Enter a threshold temperature in Kelvin: ")
    except ValueError:
        print("Invalid input")
        return 1
    print(f"Number of samples below {threshold:.2f} K: {count_below(kelvins, threshold)} ")
    return 0


if __name__ == "__main__":
    sys.exit(main())
# smalltools

A set of small interactive console programs. You can run each one as a
command or use its functions from Python.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `employees INPUT` | Reads up to 10 `name age wage` records from `INPUT` and lists them. It writes them to `output.csv` as `name,age,wage` lines, then asks for a name and shows that record. If the input file cannot be opened, it carries on with no records. |
| `employee-menu INPUT` | Reads up to 100 records from `INPUT` and lists them. It offers a search (option 1), then writes the records to `output.csv` in reverse order. If the input file cannot be opened, it exits with status 1. |
| `fibonacci` | Asks for N and prints the Fibonacci terms with indices 0 to N. |
| `speed-check` | Asks for a vehicle speed in km/h and prints the verdict. The limit is 60 km/h. Up to 65 km/h gets a warning, up to 70 a $80 fine, up to 80 a $150 fine, and above 80 a $500 fine. |
| `numstats` | Asks for three integers. It prints the maximum, minimum and average, the max−min and max−average differences, and the absolute value of the minimum. |
| `recycling` | Reads `coins.txt` from the current directory, with one `name plastic glass` record per line, and totals each child's bottles and earnings. Plastic bottles pay $0.05 each and glass bottles $0.10. A menu then lets you look up a child by name. Choosing Exit saves `payments.csv`. |
| `vowels` | Asks for a maximum length (1–100) and a string, and cuts the string to that length. It lowercases A–Z, extracts the vowels, and reports how often each of a, e, i, o, u occurs and where it first appears. |
| `temperature` | Asks for 10 Kelvin readings and shows each one in Celsius and Fahrenheit, with the state of water. It prints the max, min and average, then asks for a threshold and counts the readings below it. |

The record files are read as whitespace-separated words. Reading stops at the
first record that is incomplete or malformed.

## Use as a library

```python
from smalltools.fibonacci import fibonacci_series, format_series
from smalltools.speed import assess_speed, format_verdict
from smalltools.numstats import summarize, format_summary
from smalltools.vowels import to_lower, extract_vowels, analyze_vowels, format_analysis
from smalltools.temperature import kelvin_to_celsius, water_state, count_below, format_table

print(fibonacci_series(5))                 # [0, 1, 1, 2, 3, 5]
print(format_verdict(assess_speed(72)))    # Speeding / Fine: $150
print(format_summary(summarize(3, -7, 10)))
print(format_analysis(analyze_vowels(extract_vowels(to_lower("Education")))))
print(water_state(kelvin_to_celsius(300.0)))   # WaterState.LIQUID
print(count_below([250.0, 300.0, 380.0], 310.0))  # 2
```

`fibonacci_series` and `assess_speed` raise `ValueError` for negative input.

The record programs have matching functions in their own modules:

- `smalltools.employees`: `Employee`, `read_employees(path, limit=10)`, `write_csv`, `find_employee` and `format_employee`.
- `smalltools.employee_menu`: `write_reversed` and `search_report`.
- `smalltools.recycling`: `Collection`, `Payment`, `Ledger` (with `add` and `find`), `read_collections`, `write_payments` and `format_payment`. A `Ledger` tracks at most 100 children. Adding one more raises `ValueError`.
"""Employee records: read from a whitespace-separated file, list, export as CSV, search."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Sequence

MAX_RECORDS = 10
MAX_NAME_LEN = 50
OUTPUT_FILE = "output.csv"


@dataclass(frozen=True)
class Employee:
    """One employee: a single-word name, an age and an hourly wage."""

    name: str
    age: int
    wage: float


def _parse_records(tokens: Iterable[str]) -> Iterator[Employee]:
    """Yield employees from name/age/wage token triples, stopping at the first bad one."""
    stream = iter(tokens)
    for name in stream:
        fields = list(islice(stream, 2))
        if len(fields) < 2:
            return
        try:
            age = int(fields[0])
            wage = float(fields[1])
        except ValueError:
            return
        yield Employee(name, age, wage)


def read_employees(path, limit: int = MAX_RECORDS) -> list[Employee]:
    """Read at most ``limit`` records of the form ``name age wage`` from ``path``.

    Reading stops at the first incomplete or malformed record.
    Raises OSError if the file cannot be opened.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    return list(islice(_parse_records(tokens), limit))


def write_csv(path, employees: Iterable[Employee]) -> None:
    """Write employees to ``path`` as ``name,age,wage`` lines, wage to two decimals."""
    with open(path, "w", encoding="utf-8") as handle:
        for employee in employees:
            handle.write(f"{employee.name},{employee.age},{employee.wage:.2f}\n")


def find_employee(employees: Iterable[Employee], name: str) -> Employee | None:
    """Return the first employee whose name matches exactly, or None."""
    return next((employee for employee in employees if employee.name == name), None)


def format_employee(employee: Employee) -> str:
    """Render one employee as a display line."""
    return f"Name: {employee.name}, Age: {employee.age}, Wage: {employee.wage:.2f}"


def _read_token(prompt: str) -> str:
    try:
        line = input(prompt)
    except EOFError:
        return ""
    parts = line.split()
    return parts[0] if parts else ""


def main(argv: Sequence[str] | None = None) -> int:
    """List the records of an input file, export them to output.csv and search one."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: employees input.txt")
        return 1

    try:
        employees = read_employees(args[0])
    except OSError:
        print(f"Error: Unable to open file {args[0]}")
        employees = []

    print("All Records:")
    for employee in employees:
        print(format_employee(employee))

    try:
        write_csv(OUTPUT_FILE, employees)
    except OSError:
        print(f"Error: Unable to open file {OUTPUT_FILE}")
    else:
        print(f"Data written to {OUTPUT_FILE} successfully.")

    name = _read_token("Enter name to search: ")
    found = find_employee(employees, name)
    print(format_employee(found) if found is not None else "Name not found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Menu-driven employee records: list, optionally search, then save in reverse order."""

from __future__ import annotations

import sys
from typing import Sequence

from smalltools.employees import Employee, find_employee, format_employee, read_employees

MAX_RECORDS = 100
OUTPUT_FILE = "output.csv"


def write_reversed(path, employees: Sequence[Employee]) -> None:
    """Write employees to ``path`` as CSV lines, last record first."""
    with open(path, "w", encoding="utf-8") as handle:
        for employee in reversed(employees):
            handle.write(f"{employee.name},{employee.age},{employee.wage:.2f}\n")


def search_report(employees: Sequence[Employee], name: str) -> str:
    """Describe the first employee called ``name``, or say that none was found."""
    found = find_employee(employees, name)
    if found is None:
        return f"Name: {name} not found."
    return format_employee(found)


def _read_token(prompt: str) -> str:
    try:
        line = input(prompt)
    except EOFError:
        return ""
    parts = line.split()
    return parts[0] if parts else ""


def main(argv: Sequence[str] | None = None) -> int:
    """List records of an input file, offer a search, and save them reversed."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: employee_menu <input_file>")
        return 1

    try:
        employees = read_employees(args[0], MAX_RECORDS)
    except OSError:
        print(f"Error opening file: {args[0]}")
        return 1

    print("Employee Records:")
    for employee in employees:
        print(format_employee(employee))

    choice = _read_token(
        "\n1. Search by Name\n2. Write Data in Reverse to File and Exit\nChoose an option: "
    )
    if choice == "1":
        name = _read_token("Enter name to search: ")
        print(search_report(employees, name))

    try:
        write_reversed(OUTPUT_FILE, employees)
    except OSError:
        print(f"Error opening file: {OUTPUT_FILE}")
    else:
        print(f"Data written to {OUTPUT_FILE} in reverse order.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
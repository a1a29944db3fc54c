"""Recycling rewards: total each child's bottle collections and the money earned."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Sequence

MAX_CHILDREN = 100
INPUT_FILE = "coins.txt"
OUTPUT_FILE = "payments.csv"
PLASTIC_RATE = 0.05
GLASS_RATE = 0.10


@dataclass(frozen=True)
class Collection:
    """One delivery of bottles by a child."""

    name: str
    plastic_bottles: int
    glass_bottles: int

    @property
    def amount(self) -> float:
        """Money earned for this delivery."""
        return self.plastic_bottles * PLASTIC_RATE + self.glass_bottles * GLASS_RATE


@dataclass
class Payment:
    """Running totals for one child."""

    name: str
    total_plastic: int = 0
    total_glass: int = 0
    total_amount: float = 0.0


class Ledger:
    """Payments per child, kept in the order children first appear."""

    def __init__(self, collections: Iterable[Collection] = ()) -> None:
        self._payments: dict[str, Payment] = {}
        for collection in collections:
            self.add(collection)

    @property
    def payments(self) -> list[Payment]:
        return list(self._payments.values())

    def __len__(self) -> int:
        return len(self._payments)

    def __iter__(self) -> Iterator[Payment]:
        return iter(self._payments.values())

    def add(self, collection: Collection) -> Payment:
        """Add a collection to its child's totals and return the updated payment."""
        payment = self._payments.get(collection.name)
        if payment is None:
            if len(self._payments) >= MAX_CHILDREN:
                raise ValueError(f"cannot track more than {MAX_CHILDREN} children")
            payment = self._payments[collection.name] = Payment(collection.name)
        payment.total_plastic += collection.plastic_bottles
        payment.total_glass += collection.glass_bottles
        payment.total_amount += collection.amount
        return payment

    def find(self, name: str) -> Payment | None:
        """Return the payment of the child called ``name``, or None."""
        return self._payments.get(name)


def _parse_collections(words: Iterable[str]) -> Iterator[Collection]:
    stream = iter(words)
    for name in stream:
        fields = list(islice(stream, 2))
        if len(fields) < 2:
            return
        try:
            plastic, glass = (int(field) for field in fields)
        except ValueError:
            return
        yield Collection(name, plastic, glass)


def read_collections(path) -> list[Collection]:
    """Read ``name plastic glass`` records from ``path``, stopping at the first bad one.

    Raises OSError if the file cannot be opened.
    """
    with open(path, encoding="utf-8") as handle:
        return list(_parse_collections(handle.read().split()))


def write_payments(path, payments: Iterable[Payment]) -> None:
    """Write payments to ``path`` as ``name,plastic,glass,amount`` lines."""
    with open(path, "w", encoding="utf-8") as handle:
        for payment in payments:
            handle.write(
                f"{payment.name},{payment.total_plastic},"
                f"{payment.total_glass},{payment.total_amount:.2f}\n"
            )


def format_payment(payment: Payment) -> str:
    """Render one child's totals as display lines."""
    return "\n".join(
        [
            f"Child Name: {payment.name}",
            f"Total Plastic Bottles: {payment.total_plastic}",
            f"Total Glass Bottles: {payment.total_glass}",
            f"Total Amount: ${payment.total_amount:.2f}",
        ]
    )


def _read_word(prompt: str) -> str | None:
    try:
        line = input(prompt)
    except EOFError:
        return None
    parts = line.split()
    return parts[0] if parts else ""


def main(argv: Sequence[str] | None = None) -> int:
    """Load coins.txt, answer lookups by child name, and save payments.csv on exit."""
    try:
        collections = read_collections(INPUT_FILE)
    except OSError:
        print(f"Error: Could not open file {INPUT_FILE}")
        collections = []
    try:
        ledger = Ledger(collections)
    except ValueError as error:
        print(f"Error: {error}")
        return 1

    while True:
        print("\n=== Prince Gilagila Primary School Recycling Program ===")
        print("1. Enter Child Name")
        print("2. Exit")
        answer = _read_word("Choose an option: ")
        if answer is None:
            answer = "2"
        try:
            choice = int(answer)
        except ValueError:
            choice = 0

        if choice == 1:
            name = _read_word("\nEnter the child's name: ") or ""
            payment = ledger.find(name)
            if payment is None:
                print(f"\nNo data found for child: {name}")
            else:
                print("\n" + format_payment(payment))
        elif choice == 2:
            print(f"\nExiting and saving data to {OUTPUT_FILE}...")
            try:
                write_payments(OUTPUT_FILE, ledger)
            except OSError:
                print(f"Error: Could not open file {OUTPUT_FILE}")
            print("Data saved. Goodbye!")
            return 0
        else:
            print("\nInvalid choice! Please try again.")


if __name__ == "__main__":
    sys.exit(main())
import pytest

from smalltools.recycling import (
    MAX_CHILDREN,
    Collection,
    Ledger,
    Payment,
    format_payment,
    main,
    read_collections,
    write_payments,
)


def _feed(monkeypatch, *lines):
    it = iter(lines)

    def fake(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake)


def test_new_child_takes_collection_totals():
    ledger = Ledger()
    collection = Collection("ann", 7, 3)
    payment = ledger.add(collection)
    assert payment.name == "ann"
    assert payment.total_plastic == collection.plastic_bottles
    assert payment.total_glass == collection.glass_bottles
    assert payment.total_amount == pytest.approx(collection.amount)


def test_repeat_child_accumulates():
    first, second = Collection("ann", 7, 3), Collection("ann", 2, 5)
    ledger = Ledger([first, second])
    payment = ledger.find("ann")
    assert len(ledger) == 1
    assert payment.total_plastic == first.plastic_bottles + second.plastic_bottles
    assert payment.total_glass == first.glass_bottles + second.glass_bottles
    assert payment.total_amount == pytest.approx(first.amount + second.amount)


def test_amount_uses_source_rates():
    ledger = Ledger([Collection("ann", 20, 10)])
    assert format_payment(ledger.find("ann")).splitlines()[-1] == "Total Amount: $2.00"


def test_order_of_first_appearance_is_kept():
    ledger = Ledger([Collection("b", 1, 1), Collection("a", 1, 1), Collection("b", 1, 1)])
    assert [p.name for p in ledger.payments] == ["b", "a"]


def test_find_missing_returns_none():
    assert Ledger([Collection("ann", 1, 1)]).find("bob") is None


def test_child_limit():
    ledger = Ledger(Collection(f"c{n}", 1, 1) for n in range(MAX_CHILDREN))
    ledger.add(Collection("c0", 1, 1))
    with pytest.raises(ValueError):
        ledger.add(Collection("extra", 1, 1))
    assert len(ledger) == MAX_CHILDREN


def test_read_collections(tmp_path):
    path = tmp_path / "coins.txt"
    path.write_text("ann 7 3\nbob 2 5\n")
    assert read_collections(path) == [Collection("ann", 7, 3), Collection("bob", 2, 5)]


def test_read_stops_at_malformed_record(tmp_path):
    path = tmp_path / "coins.txt"
    path.write_text("ann 7 3\nbob x 5\ncid 1 1\n")
    assert read_collections(path) == [Collection("ann", 7, 3)]


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_collections(tmp_path / "absent.txt")


def test_write_payments_round_trip(tmp_path):
    path = tmp_path / "payments.csv"
    payments = [Payment("ann", 7, 3, 0.65), Payment("bob", 2, 5, 0.6)]
    write_payments(path, payments)
    rows = [line.split(",") for line in path.read_text().splitlines()]
    assert [(r[0], int(r[1]), int(r[2])) for r in rows] == [
        (p.name, p.total_plastic, p.total_glass) for p in payments
    ]
    assert [float(r[3]) for r in rows] == pytest.approx([p.total_amount for p in payments])
    assert all(len(r[3].split(".")[1]) == 2 for r in rows)


def test_format_payment_labels():
    lines = format_payment(Payment("ann", 7, 3, 0.65)).splitlines()
    assert lines[0] == "Child Name: ann"
    assert lines[1] == "Total Plastic Bottles: 7"
    assert lines[2] == "Total Glass Bottles: 3"


def test_main_lookup_and_save(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "coins.txt").write_text("ann 7 3\nann 2 5\n")
    _feed(monkeypatch, "1", "ann", "1", "bob", "9", "2")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Child Name: ann" in out
    assert "No data found for child: bob" in out
    assert "Invalid choice! Please try again." in out
    assert "Data saved. Goodbye!" in out
    saved = (tmp_path / "payments.csv").read_text().splitlines()
    assert len(saved) == 1
    assert saved[0].startswith("ann,9,8,")


def test_main_missing_input_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _feed(monkeypatch, "2")
    assert main([]) == 0
    assert "Error: Could not open file coins.txt" in capsys.readouterr().out
    assert (tmp_path / "payments.csv").read_text() == ""
import io

import pytest

from smalltools.speed import Verdict, assess_speed, format_verdict, main


@pytest.mark.parametrize(
    "speed, expected",
    [
        (0, Verdict.NOT_SPEEDING),
        (60, Verdict.NOT_SPEEDING),
        (61, Verdict.WARNING),
        (65, Verdict.WARNING),
        (66, Verdict.FINE_80),
        (70, Verdict.FINE_80),
        (71, Verdict.FINE_150),
        (80, Verdict.FINE_150),
        (81, Verdict.FINE_500),
        (200, Verdict.FINE_500),
    ],
)
def test_assess_speed(speed, expected):
    assert assess_speed(speed) is expected


def test_negative_speed():
    with pytest.raises(ValueError):
        assess_speed(-1)


def test_fines():
    assert [assess_speed(s).fine for s in (70, 80, 81)] == [80, 150, 500]
    assert assess_speed(63).fine == 0


def test_speeding_flag():
    assert assess_speed(60).speeding is False
    assert all(assess_speed(s).speeding for s in (61, 66, 71, 81))


def test_fines_increase_with_speed():
    fines = [assess_speed(s).fine for s in range(0, 120)]
    assert fines == sorted(fines)


def test_format_not_speeding():
    assert format_verdict(Verdict.NOT_SPEEDING) == "Not Speeding"


def test_format_warning():
    assert format_verdict(Verdict.WARNING) == "Speeding \nWarning"


def test_format_fine():
    assert format_verdict(Verdict.FINE_500) == "Speeding \nFine: $500"


def test_main_speeding(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("75\n"))
    assert main() == 0
    assert capsys.readouterr().out.endswith("Speeding \nFine: $150\n")


def test_main_negative(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("-5\n"))
    assert main() == 0
    assert capsys.readouterr().out.endswith("Invalid input\n")
import io

import pytest

from learnbox import binary


@pytest.mark.parametrize("number", [0, 1, 2, 7, 1024, 2**63, 2**64 - 1])
def test_round_trip(number):
    reading = binary.parse_binary(format(number, "b"))
    assert reading.value == number


def test_worked_example():
    reading = binary.parse_binary("101")
    assert reading.value == 5
    assert reading.bits == len("101")
    assert reading.digits == "101"


def test_garbage_becomes_zero():
    reading = binary.parse_binary("1x1z")
    assert set(reading.digits) <= {"0", "1"}
    assert reading.bits == len("1x1z")
    assert reading.value == int(reading.digits, 2)


def test_truncated_to_max_bits():
    reading = binary.parse_binary("1" * (binary.MAX_BITS + 10))
    assert reading.bits == binary.MAX_BITS
    assert reading.value == 2**binary.MAX_BITS - 1


def test_only_first_line_is_used():
    assert binary.parse_binary("11\n111").digits == "11"


def test_empty_input():
    reading = binary.parse_binary("")
    assert (reading.bits, reading.value) == (0, 0)


def test_main_converts_and_quits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("101\nq\n"))
    assert binary.main([]) == 0
    out = capsys.readouterr().out
    assert "Десятичное: 5" in out
    assert out.rstrip().endswith("Exit")


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert binary.main([]) == 0
    assert "Exit" not in capsys.readouterr().out
import pytest

from shiftlog.timeparse import INVALID, ClockTime, parse_time_input, resolve_time_field


@pytest.mark.parametrize("raw, expected", [
    ("5p", "17:00"),
    ("5 PM", "17:00"),
    ("5:30p", "17:30"),
    ("10", "10:00"),
    ("5", "17:00"),
    ("8", "20:00"),
    ("9", "09:00"),
    ("12", "12:00"),
    ("0", "00:00"),
    ("1.5", "01:30"),
    ("1.25", "01:15"),
    ("1730", "17:30"),
    ("530", "17:30"),
    ("930", "09:30"),
    ("12a", "00:00"),
    ("12am", "00:00"),
    ("12p", "12:00"),
    ("11a", "11:00"),
    ("1.5p", "13:30"),
])
def test_start_context(raw, expected):
    assert parse_time_input(raw, "start") == expected


@pytest.mark.parametrize("raw, paired, expected", [
    ("1", "17:00", "01:00"),
    ("5", "10:00", "17:00"),
    ("12", "17:00", "00:00"),
    ("12", "12:00", "00:00"),
    ("12", "11:00", "12:00"),
    ("2", "18:00", "02:00"),
    ("6", "17:00", "18:00"),
    ("11", "10:00", "11:00"),
    ("10", "10:00", "22:00"),
    ("9", "9:00", "21:00"),
    ("11", "23:00", "11:00"),
    ("230", "18:00", "02:30"),
    ("2a", "18:00", "02:00"),
    ("3p", "10:00", "15:00"),
])
def test_end_context_with_start(raw, paired, expected):
    assert parse_time_input(raw, "end", paired) == expected


def test_end_context_accepts_clock_time():
    assert parse_time_input("1", "end", ClockTime(17, 0)) == "01:00"


def test_end_without_paired_time_is_left_alone():
    assert parse_time_input("5", "end") == "05:00"


def test_end_with_unreadable_paired_time():
    assert parse_time_input("5", "end", "later") == "05:00"


@pytest.mark.parametrize("canonical", ["00:00", "05:00", "08:45", "12:00", "17:30", "23:59"])
@pytest.mark.parametrize("context", ["start", "end"])
def test_canonical_input_is_unchanged(canonical, context):
    assert parse_time_input(canonical, context, "18:00") == canonical


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_blank_is_no_value(raw):
    assert parse_time_input(raw) is None


@pytest.mark.parametrize("raw", ["abc", "p", "25", "2460", "1299", "5:75", "pm", "x.y"])
def test_invalid(raw):
    assert parse_time_input(raw) == INVALID


def test_clock_time_from_string():
    assert ClockTime.from_string("07:05") == ClockTime(7, 5)
    assert str(ClockTime(7, 5)) == "07:05"
    assert ClockTime.from_string("24:00") is None
    assert ClockTime.from_string("7:05") is None
    assert ClockTime.from_string("") is None


def test_resolve_time_field():
    assert resolve_time_field("5p", "18:00") == "17:00"
    assert resolve_time_field("nonsense", "18:00") == "18:00"
    assert resolve_time_field("", "18:00") is None
    assert resolve_time_field("1", "00:00", "end", "17:00") == "01:00"

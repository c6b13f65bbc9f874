import json

import pytest
from dateutil import tz

import shiftlog_main
from shiftlog.chump import resolve_chump_game
from shiftlog.models import EventList
from shiftlog.sheets import SHIFT_COLUMNS
from shiftlog.store import SheetStore
from shiftlog.utils import today_local


@pytest.fixture
def book(tmp_path, monkeypatch):
    monkeypatch.delenv("SHIFTLOG_USER_ID", raising=False)
    monkeypatch.delenv("SHIFTLOG_TZ", raising=False)
    monkeypatch.delenv("SHIFTLOG_DEFAULT_HOURLY_RATE", raising=False)
    return str(tmp_path / "book.json")


def run(book, *argv):
    return shiftlog_main.main(["--store", book, *argv])


def test_add_shift_from_typed_times(book, capsys):
    assert run(book, "coworkers", "--add", "1444", "Ian", "Ian", "Streeper", "Bartender", "--manager") == 0
    assert run(book, "coworkers", "--me", "1444") == 0

    assert run(book, "add", "--date", "2024-07-22", "--start", "6", "--end", "2",
               "--cash", "100", "--credit", "210.50", "--tip-out", "30",
               "--consideration", "-10", "--tip-diff", "20", "--role-flat", "15", "--overtime", "25",
               "--chump-coins", "1.50", "--chump-cash", "4", "--chump-player", "Jess",
               "--chump-winner", "Ian") == 0

    shift = SheetStore(book).get_shift("2024-07-22")
    assert (shift.start_time, shift.end_time) == ("18:00", "02:00")
    assert shift.tips == 310.50
    assert shift.duration == 8.0
    assert shift.tips_per_hour == 38.81
    assert shift.wage == 40
    assert shift.differential == 50
    assert shift.chump == 5.50
    assert shift.team_on_shift["Bartender"][0].name == "Ian"
    assert "Saved shift 2024-07-22" in capsys.readouterr().out


def test_update_keeps_existing_times(book):
    run(book, "add", "--date", "2024-07-21", "--start", "5", "--end", "130")
    assert run(book, "add", "--date", "2024-07-21", "--tips", "255") == 0
    shift = SheetStore(book).get_shift("2024-07-21")
    assert (shift.start_time, shift.end_time) == ("17:00", "01:30")
    assert shift.duration == 8.5
    assert shift.tips_per_hour == 30.0


def test_bad_time_is_an_error(book, capsys):
    assert run(book, "add", "--date", "2024-07-21", "--start", "banana", "--end", "2") == 1
    assert "Could not read start time" in capsys.readouterr().err


def test_missing_end_time(book, capsys):
    assert run(book, "add", "--date", "2024-07-21", "--start", "5") == 1
    assert "End time is required." in capsys.readouterr().err


def test_list_stats_and_delete(book, capsys):
    run(book, "add", "--date", "2024-07-22", "--start", "6", "--end", "2", "--tips", "300")
    run(book, "add", "--date", "2024-07-18", "--start", "8", "--end", "4")
    capsys.readouterr()

    assert run(book, "list") == 0
    out = capsys.readouterr().out
    assert "pending" in out
    assert "$300.00" in out

    assert run(book, "stats") == 0
    assert "Pending Tips" in capsys.readouterr().out

    assert run(book, "delete", "2024-07-18") == 0
    assert run(book, "delete", "2024-07-18") == 1
    assert "Shift not found to delete." in capsys.readouterr().err


def _me(book):
    run(book, "coworkers", "--add", "1444", "Ian", "Ian", "Streeper", "Bartender")
    run(book, "coworkers", "--me", "1444")


def test_typed_pot_replaces_coin_and_cash_breakdown(book):
    _me(book)
    run(book, "add", "--date", "2024-07-22", "--start", "6", "--end", "2",
        "--chump-coins", "1.50", "--chump-cash", "4", "--chump-winner", "Ian")
    assert SheetStore(book).get_shift("2024-07-22").chump == 5.50

    assert run(book, "add", "--date", "2024-07-22", "--chump-pot", "10") == 0
    shift = SheetStore(book).get_shift("2024-07-22")
    game = shift.chump_game
    assert (game.pot, game.coins, game.cash) == (10.0, None, None)
    assert shift.chump == 10.0
    assert resolve_chump_game(game).payout_to_user == 10.0

    # a later edit that doesn't touch the pot keeps the typed total
    assert run(book, "add", "--date", "2024-07-22", "--note", "won it") == 0
    assert SheetStore(book).get_shift("2024-07-22").chump == 10.0


def test_editing_coins_keeps_stored_cash(book):
    _me(book)
    run(book, "add", "--date", "2024-07-22", "--start", "6", "--end", "2",
        "--chump-coins", "1.50", "--chump-cash", "4", "--chump-winner", "Ian")

    assert run(book, "add", "--date", "2024-07-22", "--chump-coins", "2") == 0
    shift = SheetStore(book).get_shift("2024-07-22")
    assert (shift.chump_game.coins, shift.chump_game.cash) == (2.0, 4.0)
    assert shift.chump_game.pot == 6.0
    assert shift.chump == 6.0


def test_default_date_follows_configured_timezone(book, monkeypatch):
    monkeypatch.setenv("SHIFTLOG_TZ", "Pacific/Kiritimati")
    assert run(book, "add", "--start", "5", "--end", "1") == 0
    expected = today_local(tz.gettz("Pacific/Kiritimati"))
    assert [s.date for s in SheetStore(book).get_shifts()] == [expected]


def test_bad_week_date_is_an_error(book, capsys):
    assert run(book, "list", "--week", "junk") == 1
    assert "Error: Could not read week date" in capsys.readouterr().err


def test_corrupt_cell_is_an_error(book, capsys):
    run(book, "add", "--date", "2024-07-22", "--start", "6", "--end", "2")
    with open(book, encoding="utf-8") as f:
        workbook = json.load(f)
    workbook["Shifts"][1][SHIFT_COLUMNS.index("Differentials")] = '{"tip": '
    with open(book, "w", encoding="utf-8") as f:
        json.dump(workbook, f)
    capsys.readouterr()

    assert run(book, "list") == 1
    assert "Error: Could not read row 2 of the Shifts sheet" in capsys.readouterr().err


def test_edit_keeps_itemized_events_and_parties(book, busy_tuesday, wedding_party):
    SheetStore(book).add_shift(busy_tuesday.updated(parties=[wedding_party]))

    assert run(book, "add", "--date", "2024-07-22", "--tips", "320") == 0
    shift = SheetStore(book).get_shift("2024-07-22")
    assert shift.tips == 320
    assert isinstance(shift.differentials.consideration, EventList)
    assert shift.differentials.consideration.events[0].person == "Jess"
    assert [p.name for p in shift.parties] == ["Johnson Wedding Reception"]
    assert shift.differential == 50

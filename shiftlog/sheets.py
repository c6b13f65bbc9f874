"""
Row layout of the Shifts and Coworkers tabs.

Nested structures live in single cells as compact JSON. An absent
teamOnShift/differentials is written as "{}", an absent chumpGame as "[]",
and those placeholders read back as absent.
"""
import json
import logging

from .models import ChumpGame, Coworker, Differentials, PrivateParty, Shift, team_from_dict, team_to_dict

logger = logging.getLogger(__name__)

SHIFTS_SHEET = "Shifts"
COWORKERS_SHEET = "Coworkers"

SHIFT_COLUMNS = [
    "Date", "Start", "End", "Tips", "Duration", "Tips/Hour", "Notes", "Tip Out",
    "Cash Tips", "Credit Tips", "Team On Shift", "Parties", "Hourly Rate", "Wage",
    "Differential", "Chump", "Chump Game", "Wage Start", "Wage End", "Differentials",
]
COWORKER_COLUMNS = ["ID", "Name", "First", "Last", "Positions", "Manager", "Me", "Avatar"]


def _dumps(value):
    return json.dumps(value, separators=(",", ":"))


def _num(cell):
    """Cell -> float, or None for blank/unreadable cells."""
    if cell is None or cell == "":
        return None
    if isinstance(cell, bool):
        return None
    if isinstance(cell, (int, float)):
        return cell
    try:
        return float(cell)
    except (TypeError, ValueError):
        logger.warning("Non-numeric cell value %r", cell)
        return None


def _blank(value):
    return "" if value is None else value


def _json_cell(cell, placeholder):
    if not cell or cell == placeholder:
        return None
    return json.loads(cell)


def _cell(row, i):
    return row[i] if i < len(row) else ""


def shift_to_row(shift: Shift):
    return [
        shift.date,
        shift.start_time,
        shift.end_time,
        _blank(shift.tips),
        shift.duration,
        _blank(shift.tips_per_hour),
        shift.notes or "",
        _blank(shift.tip_out),
        _blank(shift.cash_tips),
        _blank(shift.credit_tips),
        _dumps(team_to_dict(shift.team_on_shift)) if shift.team_on_shift else "{}",
        _dumps([p.to_dict() for p in shift.parties]) if shift.parties else "[]",
        _blank(shift.hourly_rate),
        _blank(shift.wage),
        _blank(shift.differential),
        _blank(shift.chump),
        _dumps(shift.chump_game.to_dict()) if shift.chump_game else "[]",
        shift.wage_start_time or "",
        shift.wage_end_time or "",
        _dumps(shift.differentials.to_dict()) if shift.differentials else "{}",
    ]


def row_to_shift(row) -> Shift:
    team = _json_cell(_cell(row, 10), "{}")
    parties = _json_cell(_cell(row, 11), "[]")
    game = _json_cell(_cell(row, 16), "[]")
    diffs = _json_cell(_cell(row, 19), "{}")
    return Shift(
        date=row[0],
        start_time=_cell(row, 1),
        end_time=_cell(row, 2),
        tips=_num(_cell(row, 3)),
        duration=_num(_cell(row, 4)) or 0,
        tips_per_hour=_num(_cell(row, 5)),
        notes=_cell(row, 6) or "",
        tip_out=_num(_cell(row, 7)),
        cash_tips=_num(_cell(row, 8)),
        credit_tips=_num(_cell(row, 9)),
        team_on_shift=team_from_dict(team) if team else None,
        parties=[PrivateParty.from_dict(p) for p in parties or []],
        hourly_rate=_num(_cell(row, 12)),
        wage=_num(_cell(row, 13)),
        differential=_num(_cell(row, 14)),
        chump=_num(_cell(row, 15)),
        chump_game=ChumpGame.from_dict(game) if game else None,
        wage_start_time=_cell(row, 17) or None,
        wage_end_time=_cell(row, 18) or None,
        differentials=Differentials.from_dict(diffs) if diffs else None,
    )


def coworker_to_row(coworker: Coworker):
    return [
        coworker.id,
        coworker.name,
        coworker.first_name,
        coworker.last_name,
        ", ".join(coworker.positions),
        "TRUE" if coworker.manager else "FALSE",
        "TRUE" if coworker.is_user else "FALSE",
        coworker.avatar_url or "",
    ]


def _flag(cell):
    return cell is True or str(cell).upper() == "TRUE"


def row_to_coworker(row) -> Coworker:
    positions = _cell(row, 4)
    return Coworker(
        id=str(row[0]),
        name=_cell(row, 1),
        first_name=_cell(row, 2),
        last_name=_cell(row, 3),
        positions=[p.strip() for p in positions.split(",")] if positions else [],
        manager=_flag(_cell(row, 5)),
        is_user=_flag(_cell(row, 6)),
        avatar_url=_cell(row, 7) or None,
    )


def find_row_index_by_id(record_id, data):
    """
    1-based sheet row of record_id, counting the header as row 1.
    Returns 0 when there is no such record.
    """
    for i, row in enumerate(data):
        if i == 0:
            continue
        if row and str(row[0]) == str(record_id):
            return i + 1
    return 0

"""
Shift, coworker and the structures nested inside a shift.

Field names are snake_case here; to_dict()/from_dict() use the camelCase
keys that end up inside the stored JSON cells.
"""
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Union

PARTY_TYPES = ("wedding", "corporate", "birthday", "holiday", "other")
PARTY_LOCATIONS = ("deck", "main", "upstairs", "full venue")
PARTY_CUT_TYPES = ("day", "night", "event")


def _money(value):
    return round(value, 2)


# --- Differentials ---

@dataclass
class ConsiderationEvent:
    id: str
    amount: float
    person: str = ""
    reason: str = ""
    note: Optional[str] = None

    def to_dict(self):
        d = {"id": self.id, "amount": self.amount, "person": self.person, "reason": self.reason}
        if self.note is not None:
            d["note"] = self.note
        return d

    @classmethod
    def from_dict(cls, d):
        return cls(
            id=d.get("id", ""),
            amount=d.get("amount", 0),
            person=d.get("person", ""),
            reason=d.get("reason", ""),
            note=d.get("note"),
        )


@dataclass
class TipDifferentialEvent:
    id: str
    amount: float
    note: Optional[str] = None

    def to_dict(self):
        d = {"id": self.id, "amount": self.amount}
        if self.note is not None:
            d["note"] = self.note
        return d

    @classmethod
    def from_dict(cls, d):
        return cls(id=d.get("id", ""), amount=d.get("amount", 0), note=d.get("note"))


@dataclass
class TotalAmount:
    """A differential category entered as one number."""
    amount: float = 0


@dataclass
class EventList:
    """A differential category entered as individual events."""
    events: list = field(default_factory=list)

    @property
    def amount(self):
        return _money(sum(e.amount or 0 for e in self.events))


DifferentialCategory = Union[TotalAmount, EventList]


def _category_to_dict(category: DifferentialCategory):
    if isinstance(category, EventList):
        return {"total": category.amount, "events": [e.to_dict() for e in category.events]}
    return {"total": category.amount, "events": []}


def _category_from_dict(d, event_cls) -> DifferentialCategory:
    d = d or {}
    events = d.get("events") or []
    if events:
        return EventList([event_cls.from_dict(e) for e in events])
    return TotalAmount(d.get("total") or 0)


@dataclass
class RoleDifferential:
    hourly_bonus: float = 0
    flat_bonus: float = 0


@dataclass
class Differentials:
    consideration: DifferentialCategory = field(default_factory=TotalAmount)
    tip: DifferentialCategory = field(default_factory=TotalAmount)
    role: RoleDifferential = field(default_factory=RoleDifferential)
    overtime: float = 0

    def to_dict(self):
        return {
            "consideration": _category_to_dict(self.consideration),
            "tip": _category_to_dict(self.tip),
            "role": {"hourlyBonus": self.role.hourly_bonus, "flatBonus": self.role.flat_bonus},
            "overtime": self.overtime,
        }

    @classmethod
    def from_dict(cls, d):
        d = d or {}
        role = d.get("role") or {}
        return cls(
            consideration=_category_from_dict(d.get("consideration"), ConsiderationEvent),
            tip=_category_from_dict(d.get("tip"), TipDifferentialEvent),
            role=RoleDifferential(
                hourly_bonus=role.get("hourlyBonus") or 0,
                flat_bonus=role.get("flatBonus") or 0,
            ),
            overtime=d.get("overtime") or 0,
        )


# --- Chump change game ---

@dataclass
class ChumpGamePlayer:
    name: str
    is_user: bool = False

    def to_dict(self):
        return {"name": self.name, "isUser": self.is_user}


@dataclass
class ChumpGame:
    players: List[ChumpGamePlayer] = field(default_factory=list)
    pot: float = 0
    coins: Optional[float] = None
    cash: Optional[float] = None
    winner_name: Optional[str] = None

    def to_dict(self):
        d = {"players": [p.to_dict() for p in self.players], "pot": self.pot}
        if self.coins is not None:
            d["coins"] = self.coins
        if self.cash is not None:
            d["cash"] = self.cash
        d["winnerName"] = self.winner_name
        return d

    @classmethod
    def from_dict(cls, d):
        return cls(
            players=[ChumpGamePlayer(p.get("name", ""), bool(p.get("isUser"))) for p in d.get("players") or []],
            pot=d.get("pot") or 0,
            coins=d.get("coins"),
            cash=d.get("cash"),
            winner_name=d.get("winnerName"),
        )


# --- Team and parties ---

@dataclass
class CoworkerShift:
    row_id: str
    coworker_id: Optional[str]
    name: str
    start_time: str
    end_time: str
    location: str = ""

    def to_dict(self):
        return {
            "rowId": self.row_id,
            "coworkerId": self.coworker_id,
            "name": self.name,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "location": self.location,
        }

    @classmethod
    def from_dict(cls, d):
        return cls(
            row_id=d.get("rowId", ""),
            coworker_id=d.get("coworkerId"),
            name=d.get("name", ""),
            start_time=d.get("startTime", ""),
            end_time=d.get("endTime", ""),
            location=d.get("location", ""),
        )


TeamOnShift = Dict[str, List[CoworkerShift]]


def team_to_dict(team: TeamOnShift):
    return {position: [m.to_dict() for m in members] for position, members in team.items()}


def team_from_dict(d) -> TeamOnShift:
    return {position: [CoworkerShift.from_dict(m) for m in members or []] for position, members in d.items()}


@dataclass
class PartyTime:
    start: str
    end: str
    duration: float = 0


@dataclass
class PartyPackages:
    drink: str = ""
    food: str = ""


@dataclass
class PrivateParty:
    id: str
    name: str
    type: str
    cut_type: str
    location: str
    time: PartyTime
    size: int
    packages: PartyPackages = field(default_factory=PartyPackages)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "cutType": self.cut_type,
            "location": self.location,
            "time": {"start": self.time.start, "end": self.time.end, "duration": self.time.duration},
            "size": self.size,
            "packages": {"drink": self.packages.drink, "food": self.packages.food},
        }

    @classmethod
    def from_dict(cls, d):
        t = d.get("time") or {}
        p = d.get("packages") or {}
        return cls(
            id=d.get("id", ""),
            name=d.get("name", ""),
            type=d.get("type", "other"),
            cut_type=d.get("cutType", "night"),
            location=d.get("location", "main"),
            time=PartyTime(t.get("start", ""), t.get("end", ""), t.get("duration") or 0),
            size=d.get("size") or 0,
            packages=PartyPackages(p.get("drink", ""), p.get("food", "")),
        )


# --- Records ---

@dataclass
class Shift:
    date: str
    start_time: str
    end_time: str
    tips: Optional[float] = None
    duration: float = 0
    tips_per_hour: Optional[float] = None
    notes: str = ""
    tip_out: Optional[float] = None
    cash_tips: Optional[float] = None
    credit_tips: Optional[float] = None
    team_on_shift: Optional[TeamOnShift] = None
    parties: List[PrivateParty] = field(default_factory=list)
    hourly_rate: Optional[float] = None
    wage_start_time: Optional[str] = None
    wage_end_time: Optional[str] = None
    wage: Optional[float] = None
    differentials: Optional[Differentials] = None
    differential: Optional[float] = None
    chump: Optional[float] = None
    chump_game: Optional[ChumpGame] = None

    @property
    def id(self):
        # one shift per date
        return self.date

    @property
    def is_pending(self):
        return self.tips is None

    @property
    def effective_wage_start(self):
        return self.wage_start_time or self.start_time

    @property
    def effective_wage_end(self):
        return self.wage_end_time or self.end_time

    def updated(self, **changes) -> "Shift":
        return replace(self, **changes)

    def to_dict(self):
        d = {
            "id": self.id,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "tips": self.tips,
            "duration": self.duration,
            "tipsPerHour": self.tips_per_hour,
            "notes": self.notes,
            "tipOut": self.tip_out,
            "cashTips": self.cash_tips,
            "creditTips": self.credit_tips,
            "teamOnShift": team_to_dict(self.team_on_shift) if self.team_on_shift is not None else None,
            "parties": [p.to_dict() for p in self.parties],
            "hourlyRate": self.hourly_rate,
            "wageStartTime": self.wage_start_time,
            "wageEndTime": self.wage_end_time,
            "wage": self.wage,
            "differentials": self.differentials.to_dict() if self.differentials else None,
            "differential": self.differential,
            "chump": self.chump,
            "chumpGame": self.chump_game.to_dict() if self.chump_game else None,
        }
        return d

    @classmethod
    def from_dict(cls, d):
        team = d.get("teamOnShift")
        diffs = d.get("differentials")
        game = d.get("chumpGame")
        return cls(
            date=d["date"],
            start_time=d.get("startTime", ""),
            end_time=d.get("endTime", ""),
            tips=d.get("tips"),
            duration=d.get("duration") or 0,
            tips_per_hour=d.get("tipsPerHour"),
            notes=d.get("notes") or "",
            tip_out=d.get("tipOut"),
            cash_tips=d.get("cashTips"),
            credit_tips=d.get("creditTips"),
            team_on_shift=team_from_dict(team) if team is not None else None,
            parties=[PrivateParty.from_dict(p) for p in d.get("parties") or []],
            hourly_rate=d.get("hourlyRate"),
            wage_start_time=d.get("wageStartTime"),
            wage_end_time=d.get("wageEndTime"),
            wage=d.get("wage"),
            differentials=Differentials.from_dict(diffs) if diffs is not None else None,
            differential=d.get("differential"),
            chump=d.get("chump"),
            chump_game=ChumpGame.from_dict(game) if game is not None else None,
        )


@dataclass
class Coworker:
    id: str
    name: str
    first_name: str
    last_name: str
    positions: List[str] = field(default_factory=list)
    manager: bool = False
    is_user: bool = False
    avatar_url: Optional[str] = None

import pytest

from shiftlog.config import AppContext
from shiftlog.models import (
    ChumpGame, ChumpGamePlayer, ConsiderationEvent, CoworkerShift, Differentials, EventList,
    PartyPackages, PartyTime, PrivateParty, RoleDifferential, Shift, TipDifferentialEvent, TotalAmount,
)


@pytest.fixture
def context():
    return AppContext(current_user_id="1444", user_name="Ian")


@pytest.fixture
def busy_tuesday():
    """A fully filled-in overnight shift."""
    return Shift(
        date="2024-07-22",
        start_time="18:00",
        end_time="02:00",
        tips=310.50,
        notes="Busy Tuesday night.",
        tip_out=30,
        cash_tips=100,
        credit_tips=210.50,
        team_on_shift={
            "Bartender": [
                CoworkerShift("1", "1444", "Ian", "18:00", "02:00", "main"),
                CoworkerShift("2", "1278", "Jess", "18:00", "02:00", "main"),
            ],
        },
        hourly_rate=5,
        wage_start_time="18:00",
        wage_end_time="02:00",
        differentials=Differentials(
            consideration=EventList([ConsiderationEvent("c1", -10, "Jess", "Covered first 30 mins")]),
            tip=EventList([TipDifferentialEvent("t1", 20, "Customer paid in cash for drink spill")]),
            role=RoleDifferential(hourly_bonus=0, flat_bonus=15),
            overtime=25,
        ),
        chump_game=ChumpGame(
            players=[ChumpGamePlayer("Ian", True), ChumpGamePlayer("Jess", False)],
            pot=5.50, coins=1.50, cash=4.00, winner_name="Ian",
        ),
    )


@pytest.fixture
def wedding_party():
    return PrivateParty(
        id="party_1721503200000",
        name="Johnson Wedding Reception",
        type="wedding",
        cut_type="night",
        location="upstairs",
        time=PartyTime("18:00", "23:00", 5.0),
        size=120,
        packages=PartyPackages("Premium Open Bar", "Buffet Dinner"),
    )


@pytest.fixture
def flat_differentials():
    return Differentials(
        consideration=TotalAmount(-10),
        tip=TotalAmount(20),
        role=RoleDifferential(hourly_bonus=0, flat_bonus=15),
        overtime=25,
    )

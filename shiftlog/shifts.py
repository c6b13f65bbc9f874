"""
Shift lifecycle: defaults for a new shift, the checks run before saving,
and baking the derived numbers into the record that gets stored.
"""
import logging
import time
from dataclasses import replace

from .chump import ensure_user_player, resolve_chump_game
from .earnings import compute_earnings
from .hours import calculate_duration_hours
from .models import CoworkerShift, Differentials, PartyPackages, PartyTime, PrivateParty, Shift

logger = logging.getLogger(__name__)

USER_ROW_ID = "user-row"
DEFAULT_POSITION = "Bartender"


class ValidationError(Exception):
    """A record failed a save-time rule. The message is meant for the user."""


def _default_location(position):
    return "main" if position == DEFAULT_POSITION else ""


def new_shift(date_str, start_time, end_time, context, user=None):
    """
    A blank shift for date_str, with the user already on the team.

    `user` is the roster entry flagged as the app user, if there is one.
    """
    team = {DEFAULT_POSITION: []}
    if user is not None:
        if DEFAULT_POSITION in user.positions or not user.positions:
            position = DEFAULT_POSITION
        else:
            position = user.positions[0]
        team = {position: [CoworkerShift(
            row_id=USER_ROW_ID,
            coworker_id=user.id,
            name=user.name,
            start_time=start_time,
            end_time=end_time,
            location=_default_location(position),
        )]}

    return Shift(
        date=date_str,
        start_time=start_time,
        end_time=end_time,
        hourly_rate=context.default_hourly_rate,
        team_on_shift=team,
        differentials=Differentials(),
    )


def sync_user_row_times(shift):
    """The user's own team row always follows the shift's start/end."""
    if not shift.team_on_shift:
        return shift
    team = {
        position: [
            CoworkerShift(m.row_id, m.coworker_id, m.name, shift.start_time, shift.end_time, m.location)
            if m.row_id == USER_ROW_ID else m
            for m in members
        ]
        for position, members in shift.team_on_shift.items()
    }
    return shift.updated(team_on_shift=team)


def validate_shift(shift):
    """Raise ValidationError for the first rule the shift breaks."""
    if not shift.date:
        raise ValidationError("Date is required.")
    if not shift.start_time:
        raise ValidationError("Start time is required.")
    if not shift.end_time:
        raise ValidationError("End time is required.")
    if calculate_duration_hours(shift.date, shift.start_time, shift.end_time) <= 0:
        raise ValidationError("End time must be after start time.")


def finalize_shift(shift, context=None, chump_input_mode=None):
    """
    Validate and return the shift as it should be stored, derived
    fields (duration, tipsPerHour, wage, differential, chump) filled in.
    """
    validate_shift(shift)

    game = shift.chump_game
    if game is not None and context is not None and context.user_name:
        game = ensure_user_player(game, context.user_name)

    chump = resolve_chump_game(game, chump_input_mode)
    if game is not None:
        game = replace(game, pot=chump.pot)

    summary = compute_earnings(shift, chump.payout_to_user)
    logger.debug("Shift %s: %.2fh, total %.2f", shift.id, summary.duration, summary.total_earnings)

    return sync_user_row_times(shift).updated(
        duration=summary.duration,
        tips_per_hour=summary.tips_per_hour if shift.tips is not None else None,
        wage=summary.base_wage,
        differential=summary.total_differential,
        chump=chump.payout_to_user,
        chump_game=game,
    )


def new_party(shift_date, name, party_type, cut_type, location, start_time, end_time, size,
              drink="", food="", party_id=None):
    duration = calculate_duration_hours(shift_date, start_time, end_time)
    if not name or not size or duration <= 0:
        raise ValidationError("Please fill in Name, Size, and valid times.")
    return PrivateParty(
        id=party_id or f"party_{int(time.time() * 1000)}",
        name=name,
        type=party_type,
        cut_type=cut_type,
        location=location,
        time=PartyTime(start_time, end_time, duration),
        size=size,
        packages=PartyPackages(drink, food),
    )

"""
Earnings for a single shift: tips, wage, differentials and the chump pot.

Everything here is a pure function of its arguments.
"""
from dataclasses import dataclass

from .hours import calculate_duration_hours, calculate_tips_per_hour
from .models import Differentials, EventList, TotalAmount


@dataclass
class EarningsSummary:
    duration: float
    wage_duration: float
    tips_per_hour: float
    base_wage: float
    consideration_total: float
    tip_differential_total: float
    role_bonus: float
    overtime: float
    total_differential: float
    net_tips: float
    chump_payout: float
    total_earnings: float


def category_total(category):
    """Effective amount of a consideration/tip category."""
    if isinstance(category, (EventList, TotalAmount)):
        return category.amount or 0
    return 0


def role_differential_bonus(role, wage_duration):
    return (role.hourly_bonus or 0) * wage_duration + (role.flat_bonus or 0)


def total_differential(differentials, wage_duration):
    if differentials is None:
        return 0
    return (
        category_total(differentials.consideration)
        + category_total(differentials.tip)
        + role_differential_bonus(differentials.role, wage_duration)
        + (differentials.overtime or 0)
    )


def base_wage(hourly_rate, wage_duration):
    return (hourly_rate or 0) * wage_duration


def net_tips(tips, tip_out):
    return (tips or 0) - (tip_out or 0)


def wage_duration(shift):
    """Paid hours; the wage window falls back to the shift times when unset."""
    return calculate_duration_hours(shift.date, shift.effective_wage_start, shift.effective_wage_end)


def compute_earnings(shift, chump_payout=0):
    duration = calculate_duration_hours(shift.date, shift.start_time, shift.end_time)
    paid_hours = wage_duration(shift)
    diffs = shift.differentials or Differentials()

    consideration = category_total(diffs.consideration)
    tip_diff = category_total(diffs.tip)
    role = role_differential_bonus(diffs.role, paid_hours)
    overtime = diffs.overtime or 0
    diff_total = consideration + tip_diff + role + overtime

    wage = base_wage(shift.hourly_rate, paid_hours)
    tips_net = net_tips(shift.tips, shift.tip_out)

    return EarningsSummary(
        duration=duration,
        wage_duration=paid_hours,
        tips_per_hour=calculate_tips_per_hour(shift.tips, duration),
        base_wage=wage,
        consideration_total=consideration,
        tip_differential_total=tip_diff,
        role_bonus=role,
        overtime=overtime,
        total_differential=diff_total,
        net_tips=tips_net,
        chump_payout=chump_payout,
        total_earnings=tips_net + wage + diff_total + chump_payout,
    )


def sync_tips_from_breakdown(shift):
    """
    Cash + credit drive the tips total, never the other way round.

    Returns the same shift object when nothing needs to change.
    """
    cash = shift.cash_tips or 0
    credit = shift.credit_tips or 0
    new_total = cash + credit
    if (cash > 0 or credit > 0) and new_total != (shift.tips or 0):
        return shift.updated(tips=new_total)
    return shift

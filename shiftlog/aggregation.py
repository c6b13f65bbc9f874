from collections import defaultdict

from .utils import get_week_bounds


def dashboard_stats(shifts):
    """
    Totals across shifts. Shifts still waiting on tips count toward hours
    but are left out of every tip figure.
    """
    with_tips = [s for s in shifts if s.tips is not None]

    total_tips = sum(s.tips for s in with_tips)
    hours_with_tips = sum(s.duration for s in with_tips)
    wage = sum(s.wage or 0 for s in shifts)
    differential = sum(s.differential or 0 for s in shifts)
    chump = sum(s.chump or 0 for s in shifts)
    tip_out = sum(s.tip_out or 0 for s in with_tips)

    return {
        "total_shifts": len(shifts),
        "total_hours": sum(s.duration for s in shifts),
        "total_tips": total_tips,
        "avg_tips_per_hour": total_tips / hours_with_tips if hours_with_tips > 0 else 0,
        "pending_shifts": len(shifts) - len(with_tips),
        "total_tip_out": tip_out,
        "total_wage": wage,
        "total_differential": differential,
        "total_chump": chump,
        "total_earnings": total_tips - tip_out + wage + differential + chump,
    }


def shifts_in_week(shifts, date_str=None, tzinfo=None):
    start, end = get_week_bounds(date_str, tzinfo=tzinfo)
    return [s for s in shifts if start <= s.date < end]


def group_shifts_by_week(shifts):
    """week start date -> shifts in that week, oldest week first"""
    weeks = defaultdict(list)
    for s in shifts:
        start, _ = get_week_bounds(s.date)
        weeks[start].append(s)
    return dict(sorted(weeks.items()))

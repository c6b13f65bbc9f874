from textwrap import shorten

from .utils import format_currency, format_date_for_display, format_time_for_display


def print_shift_report(shifts, title="Shift Report"):
    print("\n" + title)
    print("=" * 112)
    print(f"{'Date':<18} {'Time':<20} {'Hours':>6} {'Tips':>11} {'Tips/Hr':>9} "
          f"{'Wage':>10} {'Diff':>10} {'Chump':>8} {'Notes':<14}")
    print("-" * 112)

    total_hours = 0
    total_tips = 0
    total_wage = 0
    total_diff = 0
    total_chump = 0

    for s in shifts:
        day, date = format_date_for_display(s.date)
        when = f"{day[:3]} {date}"
        span = f"{format_time_for_display(s.start_time)}-{format_time_for_display(s.end_time)}"
        tips = "pending" if s.tips is None else format_currency(s.tips)
        tph = "" if s.tips_per_hour is None else format_currency(s.tips_per_hour)
        notes = shorten(s.notes or "", width=14, placeholder="…")

        print(f"{when:<18} {span:<20} {s.duration:6.2f} {tips:>11} {tph:>9} "
              f"{format_currency(s.wage):>10} {format_currency(s.differential):>10} "
              f"{format_currency(s.chump):>8} {notes:<14}")

        total_hours += s.duration
        total_tips += s.tips or 0
        total_wage += s.wage or 0
        total_diff += s.differential or 0
        total_chump += s.chump or 0

    print("-" * 112)
    print(
        f"{'TOTALS':<18} {'':<20} "
        f"{total_hours:6.2f} "
        f"{format_currency(total_tips):>11} "
        f"{'':>9} "
        f"{format_currency(total_wage):>10} "
        f"{format_currency(total_diff):>10} "
        f"{format_currency(total_chump):>8}"
    )
    print("=" * 112)


def print_shift_summary(shift, summary):
    day, date = format_date_for_display(shift.date)
    print(f"\n🍸 {day}, {date}: {format_time_for_display(shift.start_time)} to "
          f"{format_time_for_display(shift.end_time)} ({summary.duration:.2f} hours)")
    print("-" * 40)
    rows = [
        ("Net Tips", summary.net_tips),
        ("Tips / Hour", summary.tips_per_hour),
        ("Base Wage", summary.base_wage),
        ("Consideration", summary.consideration_total),
        ("Tip Differential", summary.tip_differential_total),
        ("Role Bonus", summary.role_bonus),
        ("Overtime", summary.overtime),
        ("Chump", summary.chump_payout),
    ]
    for label, amount in rows:
        print(f"{label:<24} {format_currency(amount):>15}")
    print("-" * 40)
    print(f"{'Total':<24} {format_currency(summary.total_earnings):>15}")


def print_dashboard(stats):
    print("\n📊 Dashboard")
    print("=" * 40)
    print(f"{'Shifts':<24} {stats['total_shifts']:>15}")
    print(f"{'Hours':<24} {stats['total_hours']:>15.2f}")
    print(f"{'Tips':<24} {format_currency(stats['total_tips']):>15}")
    print(f"{'Avg Tips / Hour':<24} {format_currency(stats['avg_tips_per_hour']):>15}")
    print(f"{'Pending Tips':<24} {stats['pending_shifts']:>15}")
    print(f"{'Wage':<24} {format_currency(stats['total_wage']):>15}")
    print(f"{'Differential':<24} {format_currency(stats['total_differential']):>15}")
    print(f"{'Chump':<24} {format_currency(stats['total_chump']):>15}")
    print("-" * 40)
    print(f"{'Total Earnings':<24} {format_currency(stats['total_earnings']):>15}")
    print("=" * 40)


def print_roster(coworkers):
    print("\n👥 Coworkers")
    print("=" * 70)
    print(f"{'ID':<8} {'Name':<20} {'Positions':<30} {'Mgr':<4} {'Me':<3}")
    print("-" * 70)
    for c in coworkers:
        name = shorten(f"{c.first_name} {c.last_name}".strip() or c.name, width=20, placeholder="…")
        positions = shorten(", ".join(c.positions), width=30, placeholder="…")
        print(f"{c.id:<8} {name:<20} {positions:<30} {'Y' if c.manager else '':<4} {'★' if c.is_user else '':<3}")
    print("=" * 70)

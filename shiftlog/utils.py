from datetime import datetime, timedelta
from dateutil import tz, parser as date_parser

LOCAL_TZ = tz.gettz("America/New_York")


def get_week_bounds(date_str=None, start_of_week=0, tzinfo=None):
    """
    (start, end) dates as YYYY-MM-DD for the week holding date_str.
    The end date is exclusive. Weeks start on Monday by default.
    Without date_str the current week in tzinfo (default LOCAL_TZ) is used.
    """
    if date_str:
        target = datetime.strptime(date_str, "%Y-%m-%d").date()
    else:
        target = datetime.now(tzinfo or LOCAL_TZ).date()

    start = target - timedelta(days=(target.weekday() - start_of_week) % 7)
    end = start + timedelta(days=7)

    return start.isoformat(), end.isoformat()


def today_local(tzinfo=None):
    return datetime.now(tzinfo or LOCAL_TZ).date().isoformat()


def parse_money(value):
    """Numeric form field -> float. Blank means absent, not zero."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip().replace("$", "").replace(",", "")
    if not text:
        return None
    try:
        amount = float(text)
    except ValueError:
        return None
    # "nan" and "inf" parse as floats but aren't amounts
    if amount != amount or amount in (float("inf"), float("-inf")):
        return None
    return amount


def format_currency(amount):
    amount = amount or 0
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_time_for_display(time_str):
    """'17:05' -> '5:05 PM'"""
    if not time_str or ":" not in time_str:
        return ""
    try:
        t = datetime.strptime(time_str, "%H:%M")
    except ValueError:
        return time_str
    hour = t.hour % 12 or 12
    return f"{hour}:{t.minute:02d} {'PM' if t.hour >= 12 else 'AM'}"


def format_date_for_display(date_str):
    """'2024-07-22' -> ('Monday', 'Jul 22')"""
    if not date_str:
        return "", ""
    try:
        d = date_parser.isoparse(date_str)
    except ValueError:
        return "Invalid Date", date_str
    return d.strftime("%A"), f"{d.strftime('%b')} {d.day}"


def format_date_for_header(date_str):
    """'2024-07-22' -> ('Monday', 'July 22, 2024')"""
    if not date_str:
        return "", ""
    try:
        d = date_parser.isoparse(date_str)
    except ValueError:
        return "Invalid Date", date_str
    return d.strftime("%A"), f"{d.strftime('%B')} {d.day}, {d.year}"

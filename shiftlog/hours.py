"""
Shift length and tips-per-hour.
"""
import logging
from datetime import timedelta

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)


def calculate_duration_hours(date_str, start_time, end_time):
    """
    Hours between start_time and end_time on date_str (YYYY-MM-DD).

    An end time at or before the start time is on the next day.
    Returns 0 when anything is missing or unreadable.
    """
    if not date_str or not start_time or not end_time:
        return 0

    try:
        start = date_parser.isoparse(f"{date_str}T{start_time}")
        end = date_parser.isoparse(f"{date_str}T{end_time}")
    except (ValueError, OverflowError) as e:
        logger.debug("Bad shift times %s %s-%s: %s", date_str, start_time, end_time, e)
        return 0

    # overnight shift
    if end <= start:
        end += timedelta(days=1)

    hours = (end - start).total_seconds() / 3600
    if hours != hours or hours < 0:
        return 0
    return round(hours, 2)


def calculate_tips_per_hour(tips, duration_hours):
    """Tips / hours to the cent. Pending tips (None) or no hours -> 0."""
    if tips is None or not duration_hours or duration_hours <= 0:
        return 0
    return round(tips / duration_hours, 2)

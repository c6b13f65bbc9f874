"""
Free-form time-of-day parsing.

Turns what people actually type into a time box ("5p", "130", "1.5",
"1730", "17:00") into a canonical 24-hour "HH:MM" string.
"""
import logging
import math
import re
from typing import NamedTuple, Optional, Union

logger = logging.getLogger(__name__)

# Returned when the input is not blank but can't be read as a time
INVALID = ""

CANONICAL_RE = re.compile(r"^(\d{2}):(\d{2})$")
LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
FRACTION_RE = re.compile(r"^0\.(\d*)")


class ClockTime(NamedTuple):
    hour: int
    minute: int

    @classmethod
    def from_string(cls, value) -> Optional["ClockTime"]:
        """Read a canonical HH:MM string. Returns None if it isn't one."""
        if not value:
            return None
        m = CANONICAL_RE.match(str(value).strip())
        if not m:
            return None
        hour, minute = int(m.group(1)), int(m.group(2))
        if hour > 23 or minute > 59:
            return None
        return cls(hour, minute)

    def __str__(self):
        return f"{self.hour:02d}:{self.minute:02d}"


def _leading_int(text: str) -> Optional[int]:
    # "17:" -> 17, "" -> None
    m = LEADING_INT_RE.match(text)
    return int(m.group(1)) if m else None


def _fraction_minutes(frac: str) -> Optional[int]:
    m = FRACTION_RE.match(f"0.{frac}")
    if not m:
        return None
    digits = m.group(1)
    value = float(f"0.{digits}") if digits else 0.0
    # half-up, so 0.0083h (0.498 min) and 0.025h (1.5 min) round like a person would
    return math.floor(value * 60 + 0.5)


def _infer_meridiem(hour: int, context: str, paired_time) -> int:
    if context == "start":
        # 1-8 are afternoon/evening starts, 9-12 are morning
        if 1 <= hour <= 8:
            hour += 12
    elif context == "end" and paired_time:
        start_hour = _leading_int(str(paired_time).split(":")[0])
        if start_hour is None:
            return hour
        if hour <= start_hour and hour < 12 and hour + 12 > start_hour:
            hour += 12
        if hour == 12 and start_hour >= 12:
            # evening start, "12" means midnight
            hour = 0
    return hour


def parse_time_input(value: Optional[str], context: str = "start",
                     paired_time: Union[str, ClockTime, None] = None) -> Optional[str]:
    """
    Parse a typed time into "HH:MM".

    Returns None for blank input and INVALID ("") when the text can't be
    read as a time. Without an explicit a/p marker, `context` decides the
    half of the day: start times 1-8 are PM, end times are pushed past
    `paired_time` (the shift start) where that makes sense.

    A value already in canonical "HH:MM" form is taken as 24-hour as-is,
    and so is a decimal hour ("1.5" is 01:30) unless it carries a marker.
    """
    if value is None:
        return None
    cleaned = str(value).lower().strip().replace(" ", "")
    if not cleaned:
        return None

    canonical = ClockTime.from_string(cleaned)
    if canonical is not None:
        return str(canonical)

    has_am = "a" in cleaned
    has_pm = "p" in cleaned
    decimal_hours = "." in cleaned
    numeric_part = re.sub(r"[amp.]", "", cleaned)

    try:
        if decimal_hours:
            parts = re.sub(r"[amp]", "", cleaned).split(".")
            hour = _leading_int(parts[0])
            minute = _fraction_minutes(parts[1])
        elif len(numeric_part) >= 3:
            # military time or shorthand like 130
            hour = _leading_int(numeric_part[:-2])
            minute = _leading_int(numeric_part[-2:])
        else:
            hour = _leading_int(numeric_part)
            minute = 0

        if hour is None or minute is None:
            return INVALID

        if has_pm and hour < 12:
            hour += 12
        elif has_am and hour == 12:
            hour = 0
        elif not has_am and not has_pm and not decimal_hours:
            hour = _infer_meridiem(hour, context, paired_time)

        if 0 <= hour <= 23 and 0 <= minute <= 59:
            return f"{hour:02d}:{minute:02d}"
        return INVALID
    except (ValueError, IndexError) as e:
        logger.debug("Could not parse time %r: %s", value, e)
        return INVALID


def resolve_time_field(raw: Optional[str], previous: Optional[str], context: str = "start",
                       paired_time=None) -> Optional[str]:
    """
    Apply a typed time to a field that currently holds `previous`.

    Blank input clears the field, unreadable input leaves it alone.
    """
    parsed = parse_time_input(raw, context, paired_time)
    if parsed is None:
        return None
    if parsed == INVALID:
        logger.debug("Keeping %r, could not read %r", previous, raw)
        return previous
    return parsed

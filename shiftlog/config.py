"""
Settings for shiftlog, read from the environment (and a .env file if present).
"""
import os
from datetime import tzinfo
from dataclasses import dataclass, field
from typing import List, Optional

from dateutil import tz
from dotenv import load_dotenv

load_dotenv()

DEFAULT_POSITIONS = ["Bartender", "Server", "Door", "Expo", "Hostess", "Busser"]
DEFAULT_LOCATIONS = ["deck", "main", "upstairs"]


def _split_list(value, default):
    if not value:
        return list(default)
    items = [v.strip() for v in value.split(",") if v.strip()]
    return items or list(default)


class Config:
    """Environment-backed settings. Read once at construction."""

    def __init__(self):
        self.STORE_PATH: str = os.getenv("SHIFTLOG_STORE", "shiftlog.json")
        self.TIMEZONE: str = os.getenv("SHIFTLOG_TZ", "America/New_York")
        self.DEFAULT_HOURLY_RATE: float = float(os.getenv("SHIFTLOG_DEFAULT_HOURLY_RATE", "5.00"))
        self.POSITIONS: List[str] = _split_list(os.getenv("SHIFTLOG_POSITIONS"), DEFAULT_POSITIONS)
        self.LOCATIONS: List[str] = _split_list(os.getenv("SHIFTLOG_LOCATIONS"), DEFAULT_LOCATIONS)
        self.USER_ID: Optional[str] = os.getenv("SHIFTLOG_USER_ID") or None

        self.LOCAL_TZ = tz.gettz(self.TIMEZONE)
        if self.LOCAL_TZ is None:
            raise RuntimeError(f"Unknown timezone in SHIFTLOG_TZ: {self.TIMEZONE}")

    @classmethod
    def from_env(cls) -> "Config":
        return cls()


@dataclass
class AppContext:
    """What the core needs to know about the app user and their workplace."""
    positions: List[str] = field(default_factory=lambda: list(DEFAULT_POSITIONS))
    locations: List[str] = field(default_factory=lambda: list(DEFAULT_LOCATIONS))
    current_user_id: Optional[str] = None
    user_name: Optional[str] = None
    default_hourly_rate: float = 5.00
    # None falls back to utils.LOCAL_TZ
    local_tz: Optional[tzinfo] = None

    @classmethod
    def build(cls, config: Config, coworkers=()):
        """Combine config with the roster; the roster's isUser flag wins over SHIFTLOG_USER_ID."""
        user = next((c for c in coworkers if c.is_user), None)
        if user is None and config.USER_ID:
            user = next((c for c in coworkers if c.id == config.USER_ID), None)
        return cls(
            positions=list(config.POSITIONS),
            locations=list(config.LOCATIONS),
            current_user_id=user.id if user else config.USER_ID,
            user_name=user.name if user else None,
            default_hourly_rate=config.DEFAULT_HOURLY_RATE,
            local_tz=config.LOCAL_TZ,
        )

"""
Shift and tip tracking for bartenders and servers.

Usage:
    python3 shiftlog_main.py add --date 2024-07-22 --start 6p --end 2 --cash 100 --credit 210.50
"""
from .timeparse import ClockTime, parse_time_input, resolve_time_field
from .hours import calculate_duration_hours, calculate_tips_per_hour
from .earnings import compute_earnings, sync_tips_from_breakdown, total_differential
from .chump import candidate_players, ensure_user_player, resolve_chump_game
from .shifts import ValidationError, finalize_shift, new_shift, validate_shift
from .store import SheetStore, StoreError
from .utils import format_currency, format_time_for_display, get_week_bounds

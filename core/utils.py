import logging
import math

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    Python's built-in round() uses banker's rounding (round(12.5) == 12);
    every score in the engine rounds .5 upward instead (12.5 -> 13).
    """
    return int(math.floor(value + 0.5))


def clamp_score(value: float, lo: int = 0, hi: int = 100) -> int:
    """Clamp an integer-like score into [lo, hi]."""
    return int(max(lo, min(hi, value)))


def slot_key(day_of_week: str, time_slot: str) -> str:
    """
    Build the weekly-grid key for one availability cell.

    Formula: "<day_of_week>-<time_slot>", both lower-cased and stripped so
    "Friday"/"friday " land in the same cell.
    """
    return f"{day_of_week.strip().lower()}-{time_slot.strip().lower()}"

#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Optional, Any, Dict
from datetime import datetime

BREAKDOWN_KEYS = (
    'personality_score',
    'activity_score',
    'availability_score',
    'location_score',
    'budget_score',
)


def safe_int(value: Optional[Any], default: int = 0) -> int:
    """
    Safely convert value to int.

    Args:
        value: Value to convert.
        default: Default value if conversion fails or value is None.

    Returns:
        Integer value.
    """
    if value is None:
        return default

    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()


def normalize_breakdown(raw: Optional[Dict[str, Any]]) -> Optional[Dict[str, int]]:
    """Coerce a stored breakdown JSON blob into the five integer sub-scores."""
    if not raw:
        return None
    return {key: safe_int(raw.get(key)) for key in BREAKDOWN_KEYS}

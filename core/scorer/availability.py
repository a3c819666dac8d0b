#!/usr/bin/env python3
"""
Availability Overlap - Weekly time-slot overlap between two users.
"""

from typing import List, Set, Iterable
import logging

from core.matcher.models import AvailabilitySlot
from core.utils import round_half_up, slot_key

logger = logging.getLogger(__name__)

DEFAULT_AVAILABILITY_SCORE = 50


def available_slot_keys(availability: Iterable[AvailabilitySlot]) -> Set[str]:
    """Set of "day-timeslot" keys the user marked as available."""
    return {
        slot_key(slot.day_of_week, slot.time_slot)
        for slot in availability
        if slot.is_available
    }


def calculate_availability_score(
    availability1: List[AvailabilitySlot],
    availability2: List[AvailabilitySlot],
    default_score: int = DEFAULT_AVAILABILITY_SCORE
) -> int:
    """
    Jaccard overlap of the two users' available slots, scaled to [0, 100].

    Formula: round(|A ∩ B| / |A ∪ B| * 100)

    Returns default_score when either user has no availability rows at all,
    or when neither marked any slot available.
    """
    if not availability1 or not availability2:
        return default_score

    slots1 = available_slot_keys(availability1)
    slots2 = available_slot_keys(availability2)

    union = slots1 | slots2
    if not union:
        return default_score

    overlap = slots1 & slots2
    return round_half_up(len(overlap) / len(union) * 100)

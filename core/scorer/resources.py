#!/usr/bin/env python3
"""
Resource Compatibility - Location and budget scores.

Location is a soft signal: a missing record scores a neutral-positive 70
rather than a penalty.
"""

from typing import Optional, Tuple
import logging

from core.config_loader import BudgetConfig
from core.matcher.models import Resources
from core.matcher.similarity import LocationSimilarity, SubstringLocationSimilarity
from core.utils import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_SCORE = 70
DEFAULT_BUDGET_SCORE = 70


def calculate_location_score(
    resources1: Optional[Resources],
    resources2: Optional[Resources],
    location_similarity: Optional[LocationSimilarity] = None,
    default_score: int = DEFAULT_LOCATION_SCORE
) -> int:
    """
    Score location closeness in [0, 100].

    Returns default_score if either record, or either location string, is missing.
    """
    if resources1 is None or resources2 is None:
        return default_score

    location1 = resources1.location or ""
    location2 = resources2.location or ""
    if not location1.strip() or not location2.strip():
        return default_score

    similarity = location_similarity or SubstringLocationSimilarity()
    return similarity.score(location1, location2)


def _budget_interval(resources: Resources, config: BudgetConfig) -> Tuple[int, int]:
    # Unset (or zero) bounds fall back to the defaults
    low = resources.budget_min or config.default_min
    high = resources.budget_max or config.default_max
    return low, high


def calculate_budget_score(
    resources1: Optional[Resources],
    resources2: Optional[Resources],
    config: Optional[BudgetConfig] = None,
    default_score: int = DEFAULT_BUDGET_SCORE
) -> int:
    """
    Score budget-range overlap in [0, 100].

    Formula:
    - overlap = [max(min1, min2), min(max1, max2)]
    - no overlap -> no_overlap_score (20), regardless of gap size
    - avg_length = ((max1 - min1) + (max2 - min2)) / 2
    - avg_length == 0 -> 100 (two identical single-point budgets)
    - otherwise min(100, round(overlap_length / avg_length * 100) + overlap_bonus)
    """
    if resources1 is None or resources2 is None:
        return default_score

    cfg = config or BudgetConfig()
    min1, max1 = _budget_interval(resources1, cfg)
    min2, max2 = _budget_interval(resources2, cfg)

    overlap_min = max(min1, min2)
    overlap_max = min(max1, max2)

    if overlap_max < overlap_min:
        return cfg.no_overlap_score

    overlap_length = overlap_max - overlap_min
    avg_length = ((max1 - min1) + (max2 - min2)) / 2

    if avg_length == 0:
        return 100

    return min(100, round_half_up(overlap_length / avg_length * 100) + cfg.overlap_bonus)

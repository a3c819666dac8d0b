#!/usr/bin/env python3
"""
Trait Compatibility - Personality similarity between two trait vectors.

Two formulas live here and are intentionally kept apart:

- trait_similarity_score: used by the composite engine. A trait is only
  compared when BOTH users have a non-zero value for it; unknown traits
  are excluded from the average.
- strict_trait_similarity_score: used by the strict eligibility gate. A
  missing (or zero) trait is read as the midpoint 50 and all five traits
  are always averaged.

Both reward likeness: small gaps score high.
"""

from typing import Optional
import logging

from core.matcher.models import PersonalityTraits, TRAIT_NAMES
from core.utils import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_PERSONALITY_SCORE = 50
TRAIT_MIDPOINT = 50


def trait_similarity_score(
    traits1: Optional[PersonalityTraits],
    traits2: Optional[PersonalityTraits],
    default_score: int = DEFAULT_PERSONALITY_SCORE
) -> int:
    """
    Score personality likeness in [0, 100].

    Formula: max(0, round(100 - mean(|t1 - t2|))) over traits that are
    non-zero on both sides.

    Returns default_score if either vector is missing or no trait is
    comparable.
    """
    if traits1 is None or traits2 is None:
        return default_score

    total_difference = 0.0
    comparable = 0

    for name in TRAIT_NAMES:
        value1 = traits1.get(name) or 0
        value2 = traits2.get(name) or 0
        if value1 > 0 and value2 > 0:
            total_difference += abs(value1 - value2)
            comparable += 1

    if comparable == 0:
        return default_score

    return max(0, round_half_up(100 - total_difference / comparable))


def strict_trait_similarity_score(
    traits1: Optional[PersonalityTraits],
    traits2: Optional[PersonalityTraits],
    default_score: int = DEFAULT_PERSONALITY_SCORE
) -> int:
    """
    Strict-gate personality likeness in [0, 100].

    Unlike trait_similarity_score, missing traits are not skipped: they are
    treated as TRAIT_MIDPOINT, and the mean is always over all five traits.
    """
    if traits1 is None or traits2 is None:
        return default_score

    total_difference = 0.0
    for name in TRAIT_NAMES:
        value1 = traits1.get(name) or TRAIT_MIDPOINT
        value2 = traits2.get(name) or TRAIT_MIDPOINT
        total_difference += abs(value1 - value2)

    return max(0, round_half_up(100 - total_difference / len(TRAIT_NAMES)))

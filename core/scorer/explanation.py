#!/usr/bin/env python3
"""
Match Explanation - Deterministic, rule-based match reason text.

Phrases are collected from the breakdown in a fixed priority order
(personality, activity, availability, budget, location) and joined into a
single human-readable sentence fragment.
"""

from typing import List
import logging

from core.matcher.models import Activity
from core.scorer.models import ScoreBreakdown

logger = logging.getLogger(__name__)

STRONG_THRESHOLD = 80
MODERATE_THRESHOLD = 60


def collect_reason_phrases(breakdown: ScoreBreakdown) -> List[str]:
    """Return the qualifying phrases for a breakdown, in priority order."""
    reasons = []

    if breakdown.personality_score >= STRONG_THRESHOLD:
        reasons.append("highly compatible personalities")
    elif breakdown.personality_score >= MODERATE_THRESHOLD:
        reasons.append("complementary personality traits")

    if breakdown.activity_score >= STRONG_THRESHOLD:
        reasons.append("shared activity interests")
    elif breakdown.activity_score >= MODERATE_THRESHOLD:
        reasons.append("similar activity preferences")

    if breakdown.availability_score >= STRONG_THRESHOLD:
        reasons.append("excellent schedule compatibility")
    elif breakdown.availability_score >= MODERATE_THRESHOLD:
        reasons.append("good availability overlap")

    if breakdown.budget_score >= STRONG_THRESHOLD:
        reasons.append("matching budget preferences")

    if breakdown.location_score >= STRONG_THRESHOLD:
        reasons.append("nearby location")

    return reasons


def generate_match_reason(breakdown: ScoreBreakdown, activity: Activity) -> str:
    """
    Build the match reason for a scored pairing.

    - no phrase: "Both interested in <category> activities"
    - one phrase: "Match based on <phrase>"
    - two phrases: "<a> and <b>"
    - more: "<a>, <b>, and <c>"
    """
    reasons = collect_reason_phrases(breakdown)

    if not reasons:
        return f"Both interested in {(activity.category or '').lower()} activities"

    if len(reasons) == 1:
        return f"Match based on {reasons[0]}"

    if len(reasons) == 2:
        return f"{reasons[0]} and {reasons[1]}"

    return f"{', '.join(reasons[:-1])}, and {reasons[-1]}"


def strict_match_reason(activity: Activity) -> str:
    """Reason attached to every strict-gate match."""
    return f"Guaranteed availability overlap and {activity.category} activity compatibility"

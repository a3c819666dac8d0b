#!/usr/bin/env python3
"""
Activity Compatibility - How well a candidate's activity fits the source user's interests.
"""

from typing import List, Optional
import logging

from core.matcher.models import Activity
from core.matcher.similarity import CategorySimilarity, StringCategorySimilarity
from core.utils import clamp_score

logger = logging.getLogger(__name__)

BASE_ACTIVITY_SCORE = 60
SHARED_INTEREST_BONUS = 20
SKILL_MATCH_BONUS = 15
SKILL_MISMATCH_PENALTY = 10


def skill_levels_compatible(level1: Optional[str], level2: Optional[str]) -> bool:
    """Either side open to everyone ("all"), or the exact same level."""
    return level1 == 'all' or level2 == 'all' or level1 == level2


def _is_major_skill_gap(level1: Optional[str], level2: Optional[str]) -> bool:
    return {level1, level2} == {'beginner', 'advanced'}


def calculate_activity_score(
    target_activity: Activity,
    source_activities: List[Activity],
    category_similarity: Optional[CategorySimilarity] = None
) -> int:
    """
    Score a candidate's activity against the source user's activity list.

    Rules:
    - Base BASE_ACTIVITY_SCORE (60)
    - +20 if any source activity shares the category, or the names overlap
    - Skill level, against the first source activity in the same category:
        either "all" or equal -> +15; beginner vs advanced -> -10
    - Clamped to [0, 100]
    """
    similarity = category_similarity or StringCategorySimilarity()
    score = BASE_ACTIVITY_SCORE

    has_shared_interest = any(
        similarity.same_category(a.category, target_activity.category)
        or similarity.related_names(a.name, target_activity.name)
        for a in source_activities
    )
    if has_shared_interest:
        score += SHARED_INTEREST_BONUS

    same_category = [
        a for a in source_activities
        if similarity.same_category(a.category, target_activity.category)
    ]
    if same_category:
        source_skill = same_category[0].skill_level
        if skill_levels_compatible(source_skill, target_activity.skill_level):
            score += SKILL_MATCH_BONUS
        elif _is_major_skill_gap(source_skill, target_activity.skill_level):
            score -= SKILL_MISMATCH_PENALTY

    return clamp_score(score)

#!/usr/bin/env python3
"""
Scoring Service - Composite compatibility ranking.

Takes two user profiles and produces a ranked, explained compatibility result:
- Personality: trait likeness
- Activity: shared category / name and skill-level fit
- Availability: weekly slot overlap
- Location / Budget: coarse resource fit

The sub-scores are blended with MatchingWeights into a single 0-100 score.
The service holds no mutable state beyond its configuration; every call is
a pure function of the profiles passed in.
"""

from typing import List, Optional
import logging

from core.config_loader import MatchingConfig, MatchingWeights
from core.matcher.models import Activity, UserProfile
from core.matcher.similarity import (
    CategorySimilarity, LocationSimilarity,
    StringCategorySimilarity, SubstringLocationSimilarity
)
from core.utils import round_half_up

from core.scorer.models import ScoreBreakdown, MatchResult, RANKING_MODE_DISCOVERY
from core.scorer.traits import trait_similarity_score
from core.scorer.activity import calculate_activity_score
from core.scorer.availability import calculate_availability_score
from core.scorer.resources import calculate_location_score, calculate_budget_score
from core.scorer.explanation import generate_match_reason

logger = logging.getLogger(__name__)


def blend_scores(breakdown: ScoreBreakdown, weights: MatchingWeights) -> int:
    """
    Weighted sum of the sub-scores.

    Formula: round(w_p*P + w_ac*A + w_av*V + w_l*L + w_b*B)
    """
    return round_half_up(
        breakdown.personality_score * weights.personality +
        breakdown.activity_score * weights.activity +
        breakdown.availability_score * weights.availability +
        breakdown.location_score * weights.location +
        breakdown.budget_score * weights.budget
    )


class CompatibilityScorer:
    """
    Composite ranking engine.

    Scores (source, candidate, activity) triples and ranks every active
    activity of a set of candidates for one source user.
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        category_similarity: Optional[CategorySimilarity] = None,
        location_similarity: Optional[LocationSimilarity] = None
    ):
        self.config = config or MatchingConfig()
        self.category_similarity = category_similarity or StringCategorySimilarity()
        self.location_similarity = location_similarity or SubstringLocationSimilarity()

    @property
    def weights(self) -> MatchingWeights:
        return self.config.weights

    def calculate_breakdown(
        self,
        source: UserProfile,
        candidate: UserProfile,
        activity: Activity
    ) -> ScoreBreakdown:
        """Compute all five sub-scores for one candidate activity."""
        defaults = self.config.defaults
        return ScoreBreakdown(
            personality_score=trait_similarity_score(
                source.traits, candidate.traits, default_score=defaults.personality
            ),
            activity_score=calculate_activity_score(
                activity, source.activities, category_similarity=self.category_similarity
            ),
            availability_score=calculate_availability_score(
                source.availability, candidate.availability, default_score=defaults.availability
            ),
            location_score=calculate_location_score(
                source.resources, candidate.resources,
                location_similarity=self.location_similarity,
                default_score=defaults.location
            ),
            budget_score=calculate_budget_score(
                source.resources, candidate.resources,
                config=self.config.budget,
                default_score=defaults.budget
            ),
        )

    def calculate_compatibility(
        self,
        source: UserProfile,
        candidate: UserProfile,
        activity_id: int
    ) -> Optional[MatchResult]:
        """Score one candidate activity.

        Args:
            source: Profile of the user looking for partners
            candidate: Profile of the potential partner
            activity_id: Id of one of the candidate's activities

        Returns:
            MatchResult, or None if the candidate does not own activity_id
        """
        activity = candidate.find_activity(activity_id)
        if activity is None:
            logger.debug(f"Activity {activity_id} not found for user {candidate.user_id}")
            return None

        breakdown = self.calculate_breakdown(source, candidate, activity)
        compatibility_score = blend_scores(breakdown, self.weights)

        logger.debug(
            f"User {source.user_id} vs {candidate.user_id} activity {activity_id}: "
            f"score={compatibility_score} {breakdown.to_dict()}"
        )

        return MatchResult(
            user_id=source.user_id,
            matched_user_id=candidate.user_id,
            activity_id=activity.id,
            compatibility_score=compatibility_score,
            breakdown=breakdown,
            match_reason=generate_match_reason(breakdown, activity),
            ranking_mode=RANKING_MODE_DISCOVERY,
            activity_category=activity.category,
        )

    def find_matches(
        self,
        source: UserProfile,
        candidates: List[UserProfile],
        min_score: Optional[int] = None
    ) -> List[MatchResult]:
        """Rank every active activity of every candidate for the source user.

        Args:
            source: Profile of the user looking for partners
            candidates: Candidate profiles; the source user is skipped if present
            min_score: Minimum compatibility to keep (default from config, 60)

        Returns:
            MatchResults sorted by compatibility_score, highest first. Ties keep
            candidate iteration order.
        """
        threshold = self.config.min_compatibility_score if min_score is None else min_score
        matches = []

        for candidate in candidates:
            if candidate.user_id == source.user_id:
                continue

            for activity in candidate.active_activities():
                match = self.calculate_compatibility(source, candidate, activity.id)
                if match and match.compatibility_score >= threshold:
                    matches.append(match)

        matches.sort(key=lambda m: m.compatibility_score, reverse=True)

        logger.info(
            f"Found {len(matches)} matches >= {threshold} for user {source.user_id} "
            f"across {len(candidates)} candidates"
        )
        return matches

#!/usr/bin/env python3
"""
Strict Mode - Hard eligibility gates before scoring.

Used by the "generate matches" operation. Every surfaced match is
guaranteed to be schedule- and activity-workable:

1. Source user has no available slot -> no matches at all.
2. Candidate shares no available slot with the source -> candidate skipped.
3. Candidate activity has neither a shared category nor a compatible skill
   level with any source activity -> that activity skipped.
4. Survivors are scored 70 + personality bonus, capped at 95.

An empty result is a valid "no eligible matches" outcome, not an error.
"""
from typing import List, Optional
import logging

from core.config_loader import MatchingConfig
from core.matcher.models import Activity, UserProfile
from core.matcher.similarity import CategorySimilarity
from core.scorer.activity import skill_levels_compatible
from core.scorer.availability import available_slot_keys
from core.scorer.explanation import strict_match_reason
from core.scorer.models import MatchResult, RANKING_MODE_STRICT
from core.scorer.service import CompatibilityScorer
from core.scorer.traits import strict_trait_similarity_score
from core.utils import round_half_up

logger = logging.getLogger(__name__)


class StrictMatcher:
    """
    Strict eligibility gate.

    Reuses a CompatibilityScorer for its category strategy and for the
    informational sub-scores attached to each result; the strict score
    itself depends only on personality.
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        scorer: Optional[CompatibilityScorer] = None
    ):
        self.config = config or MatchingConfig()
        self.scorer = scorer or CompatibilityScorer(config=self.config)

    @property
    def category_similarity(self) -> CategorySimilarity:
        return self.scorer.category_similarity

    def is_activity_eligible(self, activity: Activity, source_activities: List[Activity]) -> bool:
        """Gate 2: shared category OR compatible skill level with any source activity."""
        return any(
            self.category_similarity.same_category(own.category, activity.category)
            or skill_levels_compatible(own.skill_level, activity.skill_level)
            for own in source_activities
        )

    def strict_score(self, personality_score: int) -> int:
        """
        Formula: min(max_score, base_score + round(personality * personality_factor))
        """
        cfg = self.config.strict
        return min(cfg.max_score, cfg.base_score + round_half_up(personality_score * cfg.personality_factor))

    def find_matches(
        self,
        source: UserProfile,
        candidates: List[UserProfile],
        top_k: Optional[int] = None
    ) -> List[MatchResult]:
        """Apply both gates to every candidate and score the survivors.

        Args:
            source: Profile of the user looking for partners
            candidates: Candidate profiles (expected to be quiz-completed users);
                the source user is skipped if present
            top_k: Maximum results (default from config, 10)

        Returns:
            At most top_k MatchResults, highest score first
        """
        limit = self.config.strict.top_k if top_k is None else top_k

        source_slots = available_slot_keys(source.availability)
        if not source_slots:
            logger.info(f"User {source.user_id} has no available slots; no strict matches")
            return []

        matches = []
        for candidate in candidates:
            if candidate.user_id == source.user_id:
                continue

            if not source_slots & available_slot_keys(candidate.availability):
                logger.debug(f"Candidate {candidate.user_id} skipped: no shared availability")
                continue

            for activity in candidate.active_activities():
                if not self.is_activity_eligible(activity, source.activities):
                    logger.debug(
                        f"Candidate {candidate.user_id} activity {activity.id} skipped: "
                        f"no category or skill affinity"
                    )
                    continue

                matches.append(self._score(source, candidate, activity))

        matches.sort(key=lambda m: m.compatibility_score, reverse=True)

        logger.info(
            f"Strict gate: {len(matches)} eligible pairings for user {source.user_id}, "
            f"returning top {min(len(matches), limit)}"
        )
        return matches[:limit]

    def _score(self, source: UserProfile, candidate: UserProfile, activity: Activity) -> MatchResult:
        breakdown = self.scorer.calculate_breakdown(source, candidate, activity)
        breakdown.personality_score = strict_trait_similarity_score(
            source.traits, candidate.traits,
            default_score=self.config.defaults.personality
        )

        return MatchResult(
            user_id=source.user_id,
            matched_user_id=candidate.user_id,
            activity_id=activity.id,
            compatibility_score=self.strict_score(breakdown.personality_score),
            breakdown=breakdown,
            match_reason=strict_match_reason(activity),
            ranking_mode=RANKING_MODE_STRICT,
            activity_category=activity.category,
        )

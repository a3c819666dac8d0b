#!/usr/bin/env python3
"""
Matching Service - Orchestrates profile assembly, scoring and persistence.

Pipeline for one "generate matches" request:
1. Assemble the source profile (None if the user does not exist)
2. Assemble every other quiz-completed user's profile
3. Rank with the strict gate or the composite engine
4. Upsert the results as Match rows and return them

The service is storage-agnostic past the repository it is handed; the
scoring engines never see the database.
"""

from typing import List, Dict, Optional
import logging

from core.config_loader import MatchingConfig, MatchingMode
from core.matcher.models import UserProfile
from core.personality import QuizOutcome, score_quiz
from core.scorer import CompatibilityScorer, StrictMatcher, MatchResult
from database.models import Match, MATCH_STATUSES, DECISION_STATUSES
from database.repository import ProfileRepository

logger = logging.getLogger(__name__)


class MatchingService:
    """
    Match generation, decision recording and quiz completion for one
    repository (one unit of work).
    """

    def __init__(
        self,
        repo: ProfileRepository,
        config: Optional[MatchingConfig] = None,
        scorer: Optional[CompatibilityScorer] = None
    ):
        self.repo = repo
        self.config = config or MatchingConfig()
        self.scorer = scorer or CompatibilityScorer(config=self.config)
        self.strict_matcher = StrictMatcher(config=self.config, scorer=self.scorer)

    def load_candidates(self, source_user_id: int) -> List[UserProfile]:
        """Profiles of every quiz-completed user other than the source."""
        profiles = []
        for user in self.repo.get_quiz_completed_users(exclude_user_id=source_user_id):
            profile = self.repo.get_user_with_details(user.id)
            if profile is not None:
                profiles.append(profile)
        return profiles

    def rank(
        self,
        source: UserProfile,
        candidates: List[UserProfile],
        mode: Optional[MatchingMode] = None
    ) -> List[MatchResult]:
        mode = mode or self.config.mode
        if mode == "strict":
            return self.strict_matcher.find_matches(source, candidates)
        if mode == "discovery":
            return self.scorer.find_matches(source, candidates)
        raise ValueError(f"Unknown matching mode: {mode}")

    def generate_matches(self, user_id: int, mode: Optional[MatchingMode] = None) -> Optional[List[Match]]:
        """Rank candidates for a user and save the results.

        Args:
            user_id: The user looking for partners
            mode: "strict" or "discovery" (default from config)

        Returns:
            Saved Match rows in rank order (possibly empty), or None if the
            user does not exist
        """
        if not self.config.enabled:
            logger.info("Matching disabled in config; skipping")
            return []

        source = self.repo.get_user_with_details(user_id)
        if source is None:
            logger.warning(f"User {user_id} not found; cannot generate matches")
            return None

        candidates = self.load_candidates(user_id)
        results = self.rank(source, candidates, mode)

        saved = [self.repo.save_match(result) for result in results]
        logger.info(
            f"Generated {len(saved)} {mode or self.config.mode} matches for user {user_id} "
            f"from {len(candidates)} candidates"
        )
        return saved

    def score_candidate_activity(
        self,
        user_id: int,
        candidate_id: int,
        activity_id: int
    ) -> Optional[MatchResult]:
        """Composite score for one candidate activity, without saving.

        Returns None when either user is missing or the candidate does not
        own the activity.
        """
        source = self.repo.get_user_with_details(user_id)
        if source is None:
            return None

        candidate = self.repo.get_user_with_details(candidate_id)
        if candidate is None:
            return None

        return self.scorer.calculate_compatibility(source, candidate, activity_id)

    def record_match_decision(self, match_id: int, status: str) -> Optional[Match]:
        if status not in DECISION_STATUSES:
            raise ValueError(f"Invalid match status {status!r}; expected one of {DECISION_STATUSES}")
        return self.repo.update_match_status(match_id, status)

    def get_matches_for_user(self, user_id: int, status: Optional[str] = None) -> List[Match]:
        if status is not None and status not in MATCH_STATUSES:
            raise ValueError(f"Invalid match status filter {status!r}; expected one of {MATCH_STATUSES}")
        return self.repo.get_matches_for_user(user_id, status=status)

    def complete_personality_quiz(self, user_id: int, answers: Dict[int, int]) -> Optional[QuizOutcome]:
        """
        Score the quiz answers and store the derived traits.

        The user is marked quiz-completed and becomes a candidate for other
        users' matching.

        Raises:
            ValueError: If an answer names an unknown question or option, or
                no answer contributes to a trait.
        """
        if self.repo.get_user_with_details(user_id) is None:
            return None

        questions = {q.id: q for q in self.repo.get_quiz_questions()}
        unknown = sorted(qid for qid in answers if qid not in questions)
        if unknown:
            raise ValueError(f"Unknown quiz question ids: {unknown}")
        out_of_range = sorted(
            qid for qid, index in answers.items()
            if not 0 <= index < len(questions[qid].options)
        )
        if out_of_range:
            raise ValueError(f"Selected option out of range for questions: {out_of_range}")

        outcome = score_quiz(list(questions.values()), answers)
        if outcome.answered == 0:
            raise ValueError("No quiz answers to derive traits from")

        self.repo.save_quiz_answers(user_id, answers)
        self.repo.update_personality(
            user_id,
            outcome.personality_type,
            outcome.personality_description,
            outcome.traits.to_dict(),
        )

        logger.info(f"User {user_id} completed the quiz: {outcome.personality_type}")
        return outcome

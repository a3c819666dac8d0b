#!/usr/bin/env python3
"""
Match service - API-facing match generation and decision recording.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig
from core.matching_service import MatchingService
from core.scorer import MatchResult
from database.models import Match
from database.repository import ProfileRepository
from ..config import get_config
from ..models.responses import (
    MatchSummary,
    MatchedUserSummary,
    ActivitySummary,
    MatchesResponse,
    ScoredCandidate,
    ScoreCandidateResponse,
    MatchStatusResponse
)
from ..utils import safe_datetime_iso, normalize_breakdown
from ..exceptions import UserNotFoundException, MatchNotFoundException, InvalidMatchStatusException

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No eligible matches found"


class MatchService:
    """Service for generating and managing activity matches."""

    def __init__(self, db: Session, config: Optional[MatchingConfig] = None):
        self.db = db
        self.repo = ProfileRepository(db)
        self.matching = MatchingService(self.repo, config=config or get_config().matching)

    def get_matches(self, user_id: int, status: Optional[str] = None) -> MatchesResponse:
        """
        Get the saved matches for a user, highest score first.

        Raises:
            UserNotFoundException: If the user does not exist.
        """
        self._require_user(user_id)
        matches = self.matching.get_matches_for_user(user_id, status=status)
        return self._to_matches_response(matches)

    def generate_matches(self, user_id: int, mode: Optional[str] = None) -> MatchesResponse:
        """
        Generate, save and return matches for a user.

        Raises:
            UserNotFoundException: If the user does not exist.
        """
        try:
            matches = self.matching.generate_matches(user_id, mode=mode)
            if matches is None:
                raise UserNotFoundException(f"User {user_id} not found")

            response = self._to_matches_response(matches)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        if not response.count:
            response.message = NO_MATCHES_MESSAGE
        return response

    def score_candidate(self, user_id: int, candidate_id: int, activity_id: int) -> ScoreCandidateResponse:
        """Composite score for one candidate activity; not applicable if anything is missing."""
        result = self.matching.score_candidate_activity(user_id, candidate_id, activity_id)
        if result is None:
            return ScoreCandidateResponse(success=True, applicable=False, match=None)

        return ScoreCandidateResponse(
            success=True,
            applicable=True,
            match=self._to_scored_candidate(result)
        )

    def update_status(self, match_id: int, status: str) -> MatchStatusResponse:
        """
        Record a connect/skip decision.

        Raises:
            MatchNotFoundException: If the match does not exist.
            InvalidMatchStatusException: If status is not connected/skipped.
        """
        try:
            match = self.matching.record_match_decision(match_id, status)
        except ValueError as e:
            raise InvalidMatchStatusException(str(e))

        if match is None:
            raise MatchNotFoundException(f"Match {match_id} not found")

        summary = self._to_match_summary(match)
        self.db.commit()
        return MatchStatusResponse(success=True, match=summary)

    def _require_user(self, user_id: int) -> None:
        if self.repo.users.get_user(user_id) is None:
            raise UserNotFoundException(f"User {user_id} not found")

    def _to_matches_response(self, matches: List[Match]) -> MatchesResponse:
        summaries = [self._to_match_summary(m) for m in matches]
        return MatchesResponse(success=True, count=len(summaries), matches=summaries)

    def _to_match_summary(self, match: Match) -> MatchSummary:
        """Convert a Match row to a MatchSummary."""
        matched_user = match.matched_user
        activity = match.activity

        return MatchSummary(
            match_id=match.id,
            user_id=match.user_id,
            matched_user_id=match.matched_user_id,
            activity_id=match.activity_id,
            compatibility_score=match.compatibility_score,
            breakdown=normalize_breakdown(match.breakdown),
            match_reason=match.match_reason,
            ranking_mode=match.ranking_mode,
            status=match.status,
            matched_user=MatchedUserSummary(
                user_id=matched_user.id,
                name=matched_user.name,
                personality_type=matched_user.personality_type
            ) if matched_user else None,
            activity=ActivitySummary(
                activity_id=activity.id,
                name=activity.name,
                category=activity.category,
                skill_level=activity.skill_level
            ) if activity else None,
            matched_at=safe_datetime_iso(match.matched_at),
            calculated_at=safe_datetime_iso(match.calculated_at)
        )

    def _to_scored_candidate(self, result: MatchResult) -> ScoredCandidate:
        return ScoredCandidate(
            user_id=result.user_id,
            matched_user_id=result.matched_user_id,
            activity_id=result.activity_id,
            compatibility_score=result.compatibility_score,
            breakdown=result.breakdown.to_dict(),
            match_reason=result.match_reason,
            ranking_mode=result.ranking_mode
        )

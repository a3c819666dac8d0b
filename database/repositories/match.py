import logging
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import select

from core.scorer.models import MatchResult
from database.models import Match
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def get_existing_match(
        self,
        user_id: int,
        matched_user_id: int,
        activity_id: int
    ) -> Optional[Match]:
        stmt = select(Match).where(
            Match.user_id == user_id,
            Match.matched_user_id == matched_user_id,
            Match.activity_id == activity_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_match_by_id(self, match_id: int) -> Optional[Match]:
        return self.db.get(Match, match_id)

    def upsert_match(self, result: MatchResult) -> Match:
        """
        Save a scored pairing keyed on (user, matched user, activity).

        An existing row has its score, breakdown, reason and ranking mode
        refreshed; its status is left as the user set it.
        """
        now = datetime.now(timezone.utc)
        match = self.get_existing_match(result.user_id, result.matched_user_id, result.activity_id)

        if match:
            match.compatibility_score = result.compatibility_score
            match.breakdown = result.breakdown.to_dict()
            match.match_reason = result.match_reason
            match.ranking_mode = result.ranking_mode
            match.calculated_at = now
            logger.debug(f"Refreshed match {match.id} (status={match.status})")
        else:
            match = Match(
                user_id=result.user_id,
                matched_user_id=result.matched_user_id,
                activity_id=result.activity_id,
                compatibility_score=result.compatibility_score,
                breakdown=result.breakdown.to_dict(),
                match_reason=result.match_reason,
                ranking_mode=result.ranking_mode,
                status='pending',
                matched_at=now,
                calculated_at=now,
            )
            self.db.add(match)

        self.flush()
        return match

    def get_matches_for_user(
        self,
        user_id: int,
        status: Optional[str] = None,
        min_score: Optional[int] = None
    ) -> List[Match]:
        stmt = select(Match).where(Match.user_id == user_id)

        if status is not None:
            stmt = stmt.where(Match.status == status)

        if min_score is not None:
            stmt = stmt.where(Match.compatibility_score >= min_score)

        stmt = stmt.order_by(Match.compatibility_score.desc(), Match.id)
        return self.db.execute(stmt).scalars().all()

    def update_status(self, match_id: int, status: str) -> Optional[Match]:
        match = self.get_match_by_id(match_id)
        if not match:
            return None

        match.status = status
        self.flush()
        logger.info(f"Match {match_id} marked {status}")
        return match

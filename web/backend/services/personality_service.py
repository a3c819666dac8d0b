#!/usr/bin/env python3
"""
Personality service - quiz completion.
"""

import logging
from typing import List
from sqlalchemy.orm import Session

from core.matching_service import MatchingService
from database.repository import ProfileRepository
from ..config import get_config
from ..models.requests import QuizAnswer
from ..models.responses import PersonalityResponse
from ..exceptions import UserNotFoundException, InvalidQuizAnswersException

logger = logging.getLogger(__name__)


class PersonalityService:
    def __init__(self, db: Session):
        self.db = db
        self.matching = MatchingService(ProfileRepository(db), config=get_config().matching)

    def complete_quiz(self, user_id: int, answers: List[QuizAnswer]) -> PersonalityResponse:
        """
        Derive and store a user's traits from their quiz answers.

        Raises:
            UserNotFoundException: If the user does not exist.
            InvalidQuizAnswersException: If the answers are unknown or empty.
        """
        answer_map = {a.question_id: a.selected_option for a in answers}

        try:
            outcome = self.matching.complete_personality_quiz(user_id, answer_map)
            if outcome is None:
                raise UserNotFoundException(f"User {user_id} not found")
            self.db.commit()
        except ValueError as e:
            self.db.rollback()
            raise InvalidQuizAnswersException(str(e))
        except Exception:
            self.db.rollback()
            raise

        return PersonalityResponse(
            success=True,
            user_id=user_id,
            personality_type=outcome.personality_type,
            personality_description=outcome.personality_description,
            personality_traits=outcome.traits.to_dict(),
            answered=outcome.answered
        )

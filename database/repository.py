import logging
from typing import List, Optional, Dict, Any

from sqlalchemy.orm import Session

from core.matcher.models import (
    User, Activity, AvailabilitySlot, Resources, UserProfile, PersonalityTraits
)
from core.matcher.provider import ProfileProvider
from core.personality import QuizQuestion
from core.scorer.models import MatchResult
from database import models
from database.repositories import (
    UserRepository, ActivityRepository, PersonalityRepository, MatchRepository
)

logger = logging.getLogger(__name__)


def to_user(row: models.User) -> User:
    return User(
        id=row.id,
        name=row.name or "",
        personality_traits=PersonalityTraits.from_dict(row.personality_traits),
        personality_type=row.personality_type,
        quiz_completed=bool(row.quiz_completed),
    )


def to_activity(row: models.Activity) -> Activity:
    return Activity(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        category=row.category,
        description=row.description or "",
        skill_level=row.skill_level,
        max_participants=row.max_participants,
        is_active=bool(row.is_active),
    )


def to_slot(row: models.Availability) -> AvailabilitySlot:
    return AvailabilitySlot(
        user_id=row.user_id,
        day_of_week=row.day_of_week,
        time_slot=row.time_slot,
        is_available=bool(row.is_available),
    )


def to_resources(row: Optional[models.Resource]) -> Optional[Resources]:
    if row is None:
        return None
    return Resources(
        user_id=row.user_id,
        has_vehicle=bool(row.has_vehicle),
        budget_min=row.budget_min,
        budget_max=row.budget_max,
        can_host=bool(row.can_host),
        location=row.location,
    )


class ProfileRepository(ProfileProvider):
    """
    Relational profile store.

    Wraps the per-table repositories behind one session and converts ORM
    rows into the detached dataclasses the matching engine scores.
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.activities = ActivityRepository(db)
        self.personality = PersonalityRepository(db)
        self.matches = MatchRepository(db)

    # Profile provider

    def get_user_with_details(self, user_id: int) -> Optional[UserProfile]:
        row = self.users.get_user(user_id)
        if row is None:
            return None

        return UserProfile(
            user=to_user(row),
            activities=self.get_activities_by_user(user_id),
            availability=self.get_availability_by_user(user_id),
            resources=to_resources(self.activities.get_resources_by_user(user_id)),
        )

    def get_all_users(self) -> List[User]:
        return [to_user(row) for row in self.users.get_all_users()]

    def get_quiz_completed_users(self, exclude_user_id: Optional[int] = None) -> List[User]:
        rows = self.users.get_quiz_completed_users(exclude_user_id=exclude_user_id)
        return [to_user(row) for row in rows]

    def get_activities_by_user(self, user_id: int) -> List[Activity]:
        return [to_activity(row) for row in self.activities.get_activities_by_user(user_id)]

    def get_availability_by_user(self, user_id: int) -> List[AvailabilitySlot]:
        return [to_slot(row) for row in self.activities.get_availability_by_user(user_id)]

    # Personality quiz

    def get_quiz_questions(self) -> List[QuizQuestion]:
        return [
            QuizQuestion(
                id=row.id,
                question=row.question,
                options=list(row.options or []),
                category=row.category or "",
                emoji=row.emoji,
            )
            for row in self.personality.get_all_questions()
        ]

    def save_quiz_answers(self, user_id: int, answers: Dict[int, int]) -> None:
        for question_id, selected_option in answers.items():
            self.personality.save_user_answer(user_id, question_id, selected_option)

    def update_personality(
        self,
        user_id: int,
        personality_type: str,
        personality_description: str,
        personality_traits: Dict[str, Any]
    ) -> Optional[models.User]:
        return self.users.update_personality(
            user_id, personality_type, personality_description, personality_traits
        )

    # Matches

    def save_match(self, result: MatchResult) -> models.Match:
        return self.matches.upsert_match(result)

    def get_matches_for_user(self, user_id: int, status: Optional[str] = None) -> List[models.Match]:
        return self.matches.get_matches_for_user(user_id, status=status)

    def get_match_by_id(self, match_id: int) -> Optional[models.Match]:
        return self.matches.get_match_by_id(match_id)

    def update_match_status(self, match_id: int, status: str) -> Optional[models.Match]:
        return self.matches.update_status(match_id, status)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

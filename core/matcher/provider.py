"""
Profile Provider Interface - Source of user profiles for the matching engine.

The engine never talks to storage directly; whatever assembles profiles
(the relational ProfileRepository in production, an in-memory fake in
tests) implements this interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from core.matcher.models import User, Activity, AvailabilitySlot, UserProfile


class ProfileProvider(ABC):
    """
    Abstract interface for profile aggregation.
    """

    @abstractmethod
    def get_user_with_details(self, user_id: int) -> Optional[UserProfile]:
        """
        Assemble a user's activities, availability, resources and traits.

        Returns None if the user does not exist.
        """
        pass

    @abstractmethod
    def get_all_users(self) -> List[User]:
        """
        List every user (quiz-completed or not).
        """
        pass

    @abstractmethod
    def get_activities_by_user(self, user_id: int) -> List[Activity]:
        pass

    @abstractmethod
    def get_availability_by_user(self, user_id: int) -> List[AvailabilitySlot]:
        pass

    def get_quiz_completed_users(self, exclude_user_id: Optional[int] = None) -> List[User]:
        """Users with a derived trait vector, optionally excluding one user."""
        return [
            u for u in self.get_all_users()
            if u.quiz_completed and u.id != exclude_user_id
        ]

#!/usr/bin/env python3
"""
Matcher Models - Profile data structures consumed by the matching engine.

These are plain dataclasses, detached from the ORM, so a profile can be
scored after the database session that produced it has closed.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional

TRAIT_NAMES = ('extroversion', 'adventure', 'planning', 'creativity', 'empathy')
DAYS_OF_WEEK = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')
TIME_SLOTS = ('morning', 'afternoon', 'evening')
SKILL_LEVELS = ('beginner', 'intermediate', 'advanced', 'all')


@dataclass
class PersonalityTraits:
    """Five quiz-derived trait scores in [0, 100]; None means unknown."""
    extroversion: Optional[float] = None
    adventure: Optional[float] = None
    planning: Optional[float] = None
    creativity: Optional[float] = None
    empathy: Optional[float] = None

    def __post_init__(self):
        for name in TRAIT_NAMES:
            value = getattr(self, name)
            if value is not None and not (0 <= value <= 100):
                raise ValueError(f"Trait {name}={value!r} outside [0, 100]")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['PersonalityTraits']:
        if not data:
            return None
        return cls(**{name: data.get(name) for name in TRAIT_NAMES})

    def to_dict(self) -> Dict[str, Optional[float]]:
        return asdict(self)

    def get(self, name: str) -> Optional[float]:
        return getattr(self, name)


@dataclass
class User:
    id: int
    name: str = ""
    personality_traits: Optional[PersonalityTraits] = None
    personality_type: Optional[str] = None
    quiz_completed: bool = False


@dataclass
class Activity:
    id: int
    user_id: int
    name: str
    category: str
    description: str = ""
    skill_level: Optional[str] = "all"
    max_participants: Optional[int] = None
    is_active: bool = True


@dataclass
class AvailabilitySlot:
    user_id: int
    day_of_week: str
    time_slot: str
    is_available: bool = True


@dataclass
class Resources:
    user_id: int
    has_vehicle: bool = False
    budget_min: Optional[int] = None
    budget_max: Optional[int] = None
    can_host: bool = False
    location: Optional[str] = None


@dataclass
class UserProfile:
    """Aggregate built fresh for every matching request; never persisted."""
    user: User
    activities: List[Activity] = field(default_factory=list)
    availability: List[AvailabilitySlot] = field(default_factory=list)
    resources: Optional[Resources] = None

    @property
    def user_id(self) -> int:
        return self.user.id

    @property
    def traits(self) -> Optional[PersonalityTraits]:
        return self.user.personality_traits

    def active_activities(self) -> List[Activity]:
        return [a for a in self.activities if a.is_active]

    def find_activity(self, activity_id: int) -> Optional[Activity]:
        return next((a for a in self.activities if a.id == activity_id), None)

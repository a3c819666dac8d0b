"""Matcher Module - Profile models, similarity strategies and the profile provider interface."""
from core.matcher.models import (
    PersonalityTraits, User, Activity, AvailabilitySlot, Resources, UserProfile,
    TRAIT_NAMES, DAYS_OF_WEEK, TIME_SLOTS, SKILL_LEVELS
)
from core.matcher.similarity import (
    CategorySimilarity, LocationSimilarity,
    StringCategorySimilarity, SubstringLocationSimilarity
)
from core.matcher.provider import ProfileProvider

__all__ = [
    'PersonalityTraits', 'User', 'Activity', 'AvailabilitySlot', 'Resources', 'UserProfile',
    'TRAIT_NAMES', 'DAYS_OF_WEEK', 'TIME_SLOTS', 'SKILL_LEVELS',
    'CategorySimilarity', 'LocationSimilarity',
    'StringCategorySimilarity', 'SubstringLocationSimilarity',
    'ProfileProvider',
]

"""Business logic services."""

from .match_service import MatchService
from .personality_service import PersonalityService

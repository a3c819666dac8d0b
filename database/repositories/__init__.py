from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.activity import ActivityRepository
from database.repositories.personality import PersonalityRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'ActivityRepository',
    'PersonalityRepository',
    'MatchRepository',
]

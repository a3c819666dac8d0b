from .base import Base, JSONType
from .user import User
from .activity import Activity, Availability, Resource
from .personality import PersonalityQuestion, UserAnswer
from .match import Match, MATCH_STATUSES, DECISION_STATUSES

__all__ = [
    'Base',
    'JSONType',
    'User',
    'Activity',
    'Availability',
    'Resource',
    'PersonalityQuestion',
    'UserAnswer',
    'Match',
    'MATCH_STATUSES',
    'DECISION_STATUSES',
]

from sqlalchemy import Column, Text, Integer, TIMESTAMP, ForeignKey, func, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from .base import Base, JSONType

MATCH_STATUSES = ('pending', 'connected', 'skipped')
DECISION_STATUSES = ('connected', 'skipped')


class Match(Base):
    """
    A saved pairing of a user with another user's activity.

    Tracks:
    - Compatibility score and its five-way breakdown
    - The generated match reason
    - The user's decision (pending -> connected | skipped)

    One row per (user, matched user, activity): regenerating matches
    refreshes the scores in place and leaves the decision untouched.
    """
    __tablename__ = 'matches'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    matched_user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    activity_id = Column(Integer, ForeignKey('activities.id', ondelete='CASCADE'), nullable=False)

    compatibility_score = Column(Integer, nullable=False)
    breakdown = Column(JSONType, default=dict)
    match_reason = Column(Text)
    ranking_mode = Column(Text, default='strict')

    status = Column(Text, nullable=False, default='pending')
    matched_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    calculated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    matched_user = relationship("User", foreign_keys=[matched_user_id])
    activity = relationship("Activity", back_populates="matches")

    __table_args__ = (
        UniqueConstraint('user_id', 'matched_user_id', 'activity_id', name='uq_match_user_candidate_activity'),
        Index('idx_match_user', 'user_id'),
        Index('idx_match_score', 'compatibility_score'),
        Index('idx_match_status', 'status'),
    )

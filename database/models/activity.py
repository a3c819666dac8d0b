from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, ForeignKey, func, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from .base import Base


class Activity(Base):
    """
    An activity a user wants partners for.

    Only active activities take part in matching; pausing flips is_active.
    """
    __tablename__ = 'activities'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default='')
    category = Column(Text, nullable=False)
    skill_level = Column(Text)  # beginner|intermediate|advanced|all
    max_participants = Column(Integer)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    owner = relationship("User", back_populates="activities")
    matches = relationship("Match", back_populates="activity", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_activities_user', 'user_id'),
        Index('idx_activities_active', 'is_active'),
    )


class Availability(Base):
    """
    One cell of a user's weekly availability grid (7 days x 3 time slots).
    """
    __tablename__ = 'availability'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    day_of_week = Column(Text, nullable=False)  # monday..sunday
    time_slot = Column(Text, nullable=False)  # morning|afternoon|evening
    is_available = Column(Boolean, nullable=False, default=True)

    user = relationship("User", back_populates="availability")

    __table_args__ = (
        Index('idx_availability_user', 'user_id'),
    )


class Resource(Base):
    """
    Per-user resource constraints; at most one row per user.
    """
    __tablename__ = 'resources'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    has_vehicle = Column(Boolean, nullable=False, default=False)
    budget_min = Column(Integer)
    budget_max = Column(Integer)
    can_host = Column(Boolean, nullable=False, default=False)
    location = Column(Text)

    user = relationship("User", back_populates="resources")

    __table_args__ = (
        UniqueConstraint('user_id', name='uq_resources_user'),
    )

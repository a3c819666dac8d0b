from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, func, Index
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class User(Base):
    """
    Application user with quiz-derived personality fields.

    personality_traits holds {extroversion, adventure, planning, creativity,
    empathy}, each 0-100, and stays NULL until the quiz is completed.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, nullable=False, unique=True)
    email = Column(Text, nullable=False, unique=True)
    name = Column(Text, nullable=False)
    profile_picture = Column(Text)

    # Personality quiz
    personality_type = Column(Text)
    personality_description = Column(Text)
    personality_traits = Column(JSONType)
    quiz_completed = Column(Boolean, nullable=False, default=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    activities = relationship("Activity", back_populates="owner", cascade="all, delete-orphan")
    availability = relationship("Availability", back_populates="user", cascade="all, delete-orphan")
    resources = relationship("Resource", back_populates="user", uselist=False, cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_users_quiz_completed', 'quiz_completed'),
    )

from sqlalchemy import Column, Text, Integer, TIMESTAMP, ForeignKey, func, Index

from .base import Base, JSONType


class PersonalityQuestion(Base):
    """
    Quiz question. options is a list of {text, subtext, trait, value}.
    """
    __tablename__ = 'personality_questions'

    id = Column(Integer, primary_key=True, autoincrement=True)
    question = Column(Text, nullable=False)
    options = Column(JSONType, nullable=False, default=list)
    emoji = Column(Text)
    category = Column(Text, nullable=False)


class UserAnswer(Base):
    __tablename__ = 'user_answers'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    question_id = Column(Integer, ForeignKey('personality_questions.id', ondelete='CASCADE'), nullable=False)
    selected_option = Column(Integer, nullable=False)
    answered_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index('idx_user_answers_user', 'user_id'),
    )

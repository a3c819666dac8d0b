#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class GenerateMatchesRequest(BaseModel):
    """Request to generate matches for a user."""
    user_id: int = Field(..., ge=1, description="User looking for activity partners")
    mode: Optional[Literal["strict", "discovery"]] = Field(
        None,
        description="Ranking mode; defaults to matching.mode from config"
    )


class ScoreCandidateRequest(BaseModel):
    """Request to score one candidate activity without saving it."""
    user_id: int = Field(..., ge=1)
    candidate_id: int = Field(..., ge=1)
    activity_id: int = Field(..., ge=1)


class MatchStatusUpdate(BaseModel):
    """Request to record the user's decision on a match."""
    status: Literal["connected", "skipped"] = Field(..., description="connected or skipped")


class QuizAnswer(BaseModel):
    question_id: int
    selected_option: int = Field(..., ge=0)


class CompletePersonalityRequest(BaseModel):
    """Request to submit quiz answers and derive the user's traits."""
    user_id: int = Field(..., ge=1)
    answers: List[QuizAnswer] = Field(default_factory=list)

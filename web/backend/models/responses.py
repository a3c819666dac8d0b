#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict


class ScoreBreakdownModel(BaseModel):
    personality_score: int = Field(ge=0, le=100)
    activity_score: int = Field(ge=0, le=100)
    availability_score: int = Field(ge=0, le=100)
    location_score: int = Field(ge=0, le=100)
    budget_score: int = Field(ge=0, le=100)


class MatchedUserSummary(BaseModel):
    user_id: int
    name: Optional[str]
    personality_type: Optional[str]


class ActivitySummary(BaseModel):
    activity_id: int
    name: Optional[str]
    category: Optional[str]
    skill_level: Optional[str]


class MatchSummary(BaseModel):
    """Summary of a saved match."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "match_id": 12,
                "user_id": 1,
                "matched_user_id": 2,
                "activity_id": 7,
                "compatibility_score": 96,
                "breakdown": {
                    "personality_score": 100,
                    "activity_score": 95,
                    "availability_score": 100,
                    "location_score": 70,
                    "budget_score": 70
                },
                "match_reason": "highly compatible personalities, shared activity interests, "
                                "and excellent schedule compatibility",
                "ranking_mode": "discovery",
                "status": "pending",
                "matched_at": "2026-02-01T12:00:00",
                "calculated_at": "2026-02-01T12:00:00"
            }
        }
    )

    match_id: int
    user_id: int
    matched_user_id: int
    activity_id: int
    compatibility_score: int = Field(ge=0, le=100)
    breakdown: Optional[ScoreBreakdownModel]
    match_reason: Optional[str]
    ranking_mode: Optional[str]
    status: str
    matched_user: Optional[MatchedUserSummary] = None
    activity: Optional[ActivitySummary] = None
    matched_at: Optional[str]
    calculated_at: Optional[str]


class MatchesResponse(BaseModel):
    """Response for the saved-matches and generate endpoints."""
    success: bool
    count: int
    matches: List[MatchSummary]
    message: Optional[str] = None


class ScoredCandidate(BaseModel):
    """An unsaved composite score for one candidate activity."""
    user_id: int
    matched_user_id: int
    activity_id: int
    compatibility_score: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdownModel
    match_reason: str
    ranking_mode: str


class ScoreCandidateResponse(BaseModel):
    success: bool
    applicable: bool
    match: Optional[ScoredCandidate] = None


class MatchStatusResponse(BaseModel):
    success: bool
    match: MatchSummary


class PersonalityResponse(BaseModel):
    """Response after completing the personality quiz."""
    success: bool
    user_id: int
    personality_type: str
    personality_description: str
    personality_traits: Dict[str, Optional[float]]
    answered: int

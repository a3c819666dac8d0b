#!/usr/bin/env python3
"""
Personality endpoints - quiz completion.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.personality_service import PersonalityService
from ..models.requests import CompletePersonalityRequest
from ..models.responses import PersonalityResponse

router = APIRouter(prefix="/api/personality", tags=["personality"])


@router.post("/complete", response_model=PersonalityResponse)
def complete_personality_quiz(
    request: CompletePersonalityRequest,
    db: Session = Depends(get_db)
):
    """
    Submit quiz answers, derive the five trait scores and personality type,
    and mark the user quiz-completed.
    """
    service = PersonalityService(db)
    return service.complete_quiz(request.user_id, request.answers)

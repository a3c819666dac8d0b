#!/usr/bin/env python3
"""
Match endpoints - generate, score and decide on activity matches.
"""

import logging
from typing import Literal, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.match_service import MatchService
from ..models.requests import GenerateMatchesRequest, ScoreCandidateRequest, MatchStatusUpdate
from ..models.responses import MatchesResponse, ScoreCandidateResponse, MatchStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.post("/generate", response_model=MatchesResponse)
def generate_matches(
    request: GenerateMatchesRequest,
    db: Session = Depends(get_db)
):
    """
    Generate and save matches for a user.

    Strict mode (default) only surfaces candidates that share an available
    slot and an activity affinity; discovery mode ranks everyone by the
    composite score. An empty result is returned with a message, not an error.
    """
    service = MatchService(db)
    return service.generate_matches(request.user_id, mode=request.mode)


@router.post("/score", response_model=ScoreCandidateResponse)
def score_candidate(
    request: ScoreCandidateRequest,
    db: Session = Depends(get_db)
):
    """
    Score one candidate activity without saving it.

    Returns applicable=false when either user or the activity is missing.
    """
    service = MatchService(db)
    return service.score_candidate(request.user_id, request.candidate_id, request.activity_id)


@router.patch("/{match_id}/status", response_model=MatchStatusResponse)
def update_match_status(
    match_id: int,
    request: MatchStatusUpdate,
    db: Session = Depends(get_db)
):
    """Record the user's connect/skip decision on a match."""
    service = MatchService(db)
    return service.update_status(match_id, request.status)


@router.get("/{user_id}", response_model=MatchesResponse)
def get_matches(
    user_id: int,
    status: Optional[Literal["pending", "connected", "skipped"]] = Query(
        default=None, description="Filter: pending, connected or skipped"
    ),
    db: Session = Depends(get_db)
):
    """
    Get a user's saved matches, highest compatibility first.
    """
    service = MatchService(db)
    return service.get_matches(user_id, status=status)

#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import Dict, Any
from dataclasses import dataclass, field, asdict

RANKING_MODE_DISCOVERY = "discovery"
RANKING_MODE_STRICT = "strict"


@dataclass
class ScoreBreakdown:
    """The five sub-scores (each 0-100) that compose a compatibility score."""
    personality_score: int = 0
    activity_score: int = 0
    availability_score: int = 0
    location_score: int = 0
    budget_score: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class MatchResult:
    """Complete scored pairing of a source user with one candidate activity."""
    user_id: int
    matched_user_id: int
    activity_id: int
    compatibility_score: int
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)
    match_reason: str = ""
    ranking_mode: str = RANKING_MODE_DISCOVERY
    activity_category: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['breakdown'] = self.breakdown.to_dict()
        return data

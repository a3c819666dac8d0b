#!/usr/bin/env python3
"""
Scoring Module - Compatibility scoring between two user profiles.

Public API:
- CompatibilityScorer: Composite (discovery) ranking engine
- StrictMatcher: Hard-gated (strict) matching
- MatchResult / ScoreBreakdown: Scored match results

The scoring module is split into focused, single-responsibility modules:

- models.py: Data structures (MatchResult, ScoreBreakdown)
- traits.py: Personality likeness (composite and strict variants)
- activity.py: Activity category / skill-level fit
- availability.py: Weekly slot overlap
- resources.py: Location and budget fit
- explanation.py: Match reason text
- service.py: CompatibilityScorer orchestrator
- strict.py: StrictMatcher eligibility gates
"""

from core.scorer.models import MatchResult, ScoreBreakdown
from core.scorer.service import CompatibilityScorer, blend_scores
from core.scorer.strict import StrictMatcher

__all__ = ['CompatibilityScorer', 'StrictMatcher', 'MatchResult', 'ScoreBreakdown', 'blend_scores']

#!/usr/bin/env python3
"""
Personality Quiz - Derive trait scores and a personality type from quiz answers.

Each quiz option carries a trait name and a 1-5 value. The chosen option's
value is scaled by 20 onto [0, 100] and averaged per trait. Traits no
answer touched stay at 0, which the composite trait scorer reads as
"unknown".
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Tuple, Optional
import logging

from core.matcher.models import PersonalityTraits, TRAIT_NAMES
from core.utils import round_half_up

logger = logging.getLogger(__name__)

OPTION_VALUE_SCALE = 20

# (type, description, predicate) in priority order; first match wins
PERSONALITY_TYPES = [
    ("The Explorer",
     "Adventurous, curious, and loves trying new experiences with others",
     lambda t: t['adventure'] >= 80 and t['extroversion'] >= 70),
    ("The Creator",
     "Creative and empathetic, enjoys meaningful artistic experiences",
     lambda t: t['creativity'] >= 80 and t['empathy'] >= 70),
    ("The Organizer",
     "Structured and social, loves planning perfect group activities",
     lambda t: t['planning'] >= 80 and t['extroversion'] >= 70),
    ("The Connector",
     "Warm and social, brings people together through shared interests",
     lambda t: t['empathy'] >= 80 and t['extroversion'] >= 70),
    ("The Strategist",
     "Analytical and creative, enjoys well-planned intellectual pursuits",
     lambda t: t['planning'] >= 80 and t['creativity'] >= 70),
]
BALANCED_TYPE = (
    "The Balanced",
    "Well-rounded personality with diverse interests and social flexibility",
)


@dataclass
class QuizQuestion:
    id: int
    question: str
    options: List[Dict[str, Any]] = field(default_factory=list)
    category: str = ""
    emoji: Optional[str] = None


@dataclass
class QuizOutcome:
    traits: PersonalityTraits
    personality_type: str
    personality_description: str
    answered: int = 0


def derive_traits(questions: List[QuizQuestion], answers: Dict[int, int]) -> Tuple[PersonalityTraits, int]:
    """Average the scaled option values per trait.

    Args:
        questions: Quiz questions with their options
        answers: question_id -> selected option index

    Returns:
        (traits, number of answers that contributed)
    """
    sums = {name: 0.0 for name in TRAIT_NAMES}
    counts = {name: 0 for name in TRAIT_NAMES}
    used = 0

    for question in questions:
        index = answers.get(question.id)
        if index is None or not (0 <= index < len(question.options)):
            continue

        option = question.options[index]
        trait = option.get('trait')
        if trait not in sums:
            logger.warning(f"Question {question.id} option {index} has unknown trait {trait!r}")
            continue

        sums[trait] += float(option.get('value', 0)) * OPTION_VALUE_SCALE
        counts[trait] += 1
        used += 1

    scores = {
        name: max(0, min(100, round_half_up(sums[name] / counts[name]))) if counts[name] else 0
        for name in TRAIT_NAMES
    }
    return PersonalityTraits(**scores), used


def determine_personality_type(traits: PersonalityTraits) -> Tuple[str, str]:
    """Return (personality_type, description) for the dominant traits."""
    values = {name: traits.get(name) or 0 for name in TRAIT_NAMES}
    for personality_type, description, predicate in PERSONALITY_TYPES:
        if predicate(values):
            return personality_type, description
    return BALANCED_TYPE


def score_quiz(questions: List[QuizQuestion], answers: Dict[int, int]) -> QuizOutcome:
    """Derive traits and the personality type label in one step."""
    traits, answered = derive_traits(questions, answers)
    personality_type, description = determine_personality_type(traits)
    logger.debug(f"Quiz scored from {answered} answers: {personality_type} {traits.to_dict()}")
    return QuizOutcome(
        traits=traits,
        personality_type=personality_type,
        personality_description=description,
        answered=answered,
    )

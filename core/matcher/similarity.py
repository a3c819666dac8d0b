#!/usr/bin/env python3
"""
Similarity Strategies - Category and location comparison heuristics.

The default implementations are deliberately loose string heuristics
(case-insensitive equality and substring containment). They sit behind
small interfaces so a taxonomy lookup or geodistance service can replace
them without touching the scorers that consume them.
"""
from abc import ABC, abstractmethod
from typing import Optional


def _norm(value: Optional[str]) -> str:
    return (value or "").lower()


class CategorySimilarity(ABC):
    """
    Interface for deciding whether two activities are "the same kind of thing".
    """

    @abstractmethod
    def same_category(self, category1: Optional[str], category2: Optional[str]) -> bool:
        """Return True if both categories denote the same activity category."""
        pass

    @abstractmethod
    def related_names(self, name1: Optional[str], name2: Optional[str]) -> bool:
        """Return True if two activity names describe related activities."""
        pass


class LocationSimilarity(ABC):
    """
    Interface for scoring how close two free-text locations are.
    """

    @abstractmethod
    def score(self, location1: str, location2: str) -> int:
        """
        Score two non-empty locations in [0, 100].
        """
        pass


class StringCategorySimilarity(CategorySimilarity):
    """Case-insensitive category equality; names match on substring either way."""

    def same_category(self, category1: Optional[str], category2: Optional[str]) -> bool:
        c1, c2 = _norm(category1), _norm(category2)
        return bool(c1) and c1 == c2

    def related_names(self, name1: Optional[str], name2: Optional[str]) -> bool:
        n1, n2 = _norm(name1), _norm(name2)
        if not n1 or not n2:
            return False
        return n1 in n2 or n2 in n1


class SubstringLocationSimilarity(LocationSimilarity):
    """
    Coarse location match on lower-cased strings.

    Rules:
    - identical -> exact_score (100)
    - one contains the other ("Brooklyn" / "Brooklyn, NY") -> partial_score (85)
    - otherwise -> mismatch_score (60)
    """

    def __init__(self, exact_score: int = 100, partial_score: int = 85, mismatch_score: int = 60):
        self.exact_score = exact_score
        self.partial_score = partial_score
        self.mismatch_score = mismatch_score

    def score(self, location1: str, location2: str) -> int:
        l1, l2 = _norm(location1), _norm(location2)
        if l1 == l2:
            return self.exact_score
        if l1 in l2 or l2 in l1:
            return self.partial_score
        return self.mismatch_score

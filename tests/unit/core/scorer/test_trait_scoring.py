#!/usr/bin/env python3
"""
Unit tests for personality trait similarity (composite and strict variants).
"""

import unittest

from core.matcher.models import PersonalityTraits, TRAIT_NAMES
from core.scorer.traits import trait_similarity_score, strict_trait_similarity_score
from tests.mocks.profile_mocks import make_traits


class TestTraitSimilarityScore(unittest.TestCase):
    """Composite-engine formula: unknown traits are excluded."""

    def test_01_identical_vectors_score_100(self):
        """A vector compared with itself is a perfect match."""
        traits = make_traits()
        self.assertEqual(trait_similarity_score(traits, traits), 100)

    def test_02_symmetric(self):
        """Swapping the arguments never changes the score."""
        a = make_traits(extroversion=20, planning=95)
        b = make_traits(adventure=10, empathy=40)
        self.assertEqual(trait_similarity_score(a, b), trait_similarity_score(b, a))

    def test_03_mean_absolute_difference(self):
        """Score is 100 minus the mean gap across comparable traits."""
        a = PersonalityTraits(extroversion=80, adventure=60, planning=40, creativity=20, empathy=100)
        b = PersonalityTraits(extroversion=60, adventure=60, planning=50, creativity=30, empathy=90)
        # gaps 20, 0, 10, 10, 10 -> mean 10
        self.assertEqual(trait_similarity_score(a, b), 90)

    def test_04_zero_traits_excluded(self):
        """Traits that are zero on either side do not count toward the mean."""
        a = PersonalityTraits(extroversion=80, adventure=0, planning=50)
        b = PersonalityTraits(extroversion=70, adventure=100, planning=50)
        # only extroversion (10) and planning (0) compared -> mean 5
        self.assertEqual(trait_similarity_score(a, b), 95)

    def test_05_missing_vector_is_neutral(self):
        """Either side missing a trait vector scores the neutral default."""
        self.assertEqual(trait_similarity_score(None, make_traits()), 50)
        self.assertEqual(trait_similarity_score(make_traits(), None), 50)
        self.assertEqual(trait_similarity_score(None, None, default_score=42), 42)

    def test_06_no_comparable_trait_is_neutral(self):
        """Disjoint non-zero traits leave nothing to compare."""
        a = PersonalityTraits(extroversion=90)
        b = PersonalityTraits(empathy=90)
        self.assertEqual(trait_similarity_score(a, b), 50)

    def test_07_rounds_half_up(self):
        """A mean gap of x.5 rounds upward, not to even."""
        a = PersonalityTraits(extroversion=50, adventure=50)
        b = PersonalityTraits(extroversion=60, adventure=75)
        # gaps 10, 25 -> mean 17.5 -> 82.5 -> 83
        self.assertEqual(trait_similarity_score(a, b), 83)

    def test_08_opposite_extremes_stay_in_range(self):
        """The furthest possible vectors still score within [0, 100]."""
        low = PersonalityTraits(**{name: 1 for name in TRAIT_NAMES})
        high = PersonalityTraits(**{name: 100 for name in TRAIT_NAMES})
        score = trait_similarity_score(low, high)
        self.assertGreaterEqual(score, 0)
        self.assertLessEqual(score, 100)
        self.assertEqual(score, 1)


class TestStrictTraitSimilarityScore(unittest.TestCase):
    """Strict-gate formula: missing traits read as 50, all five averaged."""

    def test_01_identical_vectors_score_100(self):
        traits = make_traits()
        self.assertEqual(strict_trait_similarity_score(traits, traits), 100)

    def test_02_missing_traits_read_as_midpoint(self):
        """A trait missing on one side is compared against 50."""
        a = PersonalityTraits(extroversion=100)
        b = PersonalityTraits()
        # extroversion gap 50, others 50 vs 50 -> mean 10
        self.assertEqual(strict_trait_similarity_score(a, b), 90)

    def test_03_differs_from_composite_formula(self):
        """The two formulas disagree when a trait is unknown on one side."""
        a = PersonalityTraits(extroversion=100, adventure=100)
        b = PersonalityTraits(extroversion=100)
        self.assertEqual(trait_similarity_score(a, b), 100)
        # adventure 100 vs 50 -> gap 50 over five traits
        self.assertEqual(strict_trait_similarity_score(a, b), 90)

    def test_04_missing_vector_is_neutral(self):
        self.assertEqual(strict_trait_similarity_score(None, make_traits()), 50)

    def test_05_symmetric(self):
        a = make_traits(extroversion=10)
        b = make_traits(creativity=95)
        self.assertEqual(strict_trait_similarity_score(a, b), strict_trait_similarity_score(b, a))


class TestPersonalityTraitsModel(unittest.TestCase):

    def test_out_of_range_trait_rejected(self):
        """Trait values outside [0, 100] are a data error."""
        with self.assertRaises(ValueError):
            PersonalityTraits(extroversion=101)

    def test_from_dict_ignores_unknown_keys(self):
        traits = PersonalityTraits.from_dict({'extroversion': 70, 'humor': 99})
        self.assertEqual(traits.extroversion, 70)
        self.assertIsNone(traits.empathy)

    def test_from_empty_dict_is_none(self):
        self.assertIsNone(PersonalityTraits.from_dict({}))
        self.assertIsNone(PersonalityTraits.from_dict(None))


if __name__ == '__main__':
    unittest.main()

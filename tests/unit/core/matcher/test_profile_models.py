#!/usr/bin/env python3
"""
Unit tests for matcher profile models, similarity strategies and the
profile provider interface.
"""

import unittest

from core.matcher.models import Activity
from core.matcher.similarity import StringCategorySimilarity, SubstringLocationSimilarity
from tests.mocks.profile_mocks import InMemoryProfileProvider, make_profile, make_traits


class TestUserProfile(unittest.TestCase):

    def setUp(self):
        self.profile = make_profile(
            1, traits=make_traits(),
            activities=[
                Activity(id=1, user_id=1, name="Hiking", category="Outdoors"),
                Activity(id=2, user_id=1, name="Chess", category="Games", is_active=False),
            ]
        )

    def test_active_activities(self):
        self.assertEqual([a.id for a in self.profile.active_activities()], [1])

    def test_find_activity_includes_inactive(self):
        self.assertEqual(self.profile.find_activity(2).name, "Chess")
        self.assertIsNone(self.profile.find_activity(3))

    def test_traits_shortcut(self):
        self.assertEqual(self.profile.traits.empathy, 90)
        self.assertEqual(self.profile.user_id, 1)


class TestSimilarityStrategies(unittest.TestCase):

    def test_category_equality_ignores_case_only(self):
        similarity = StringCategorySimilarity()
        self.assertTrue(similarity.same_category("SPORTS", "sports"))
        self.assertFalse(similarity.same_category("Sports ", "sports"))
        self.assertFalse(similarity.same_category("", ""))
        self.assertFalse(similarity.same_category(None, "Sports"))

    def test_related_names_substring_either_way(self):
        similarity = StringCategorySimilarity()
        self.assertTrue(similarity.related_names("Yoga", "Hot Yoga"))
        self.assertTrue(similarity.related_names("Hot Yoga", "yoga"))
        self.assertFalse(similarity.related_names("Yoga", "Pilates"))
        self.assertFalse(similarity.related_names("", "Pilates"))

    def test_location_scores_configurable(self):
        similarity = SubstringLocationSimilarity(exact_score=90, partial_score=80, mismatch_score=10)
        self.assertEqual(similarity.score("Austin", "Austin"), 90)
        self.assertEqual(similarity.score("Austin", "Austin, TX"), 80)
        self.assertEqual(similarity.score("Austin", "Boston"), 10)


class TestProfileProvider(unittest.TestCase):

    def test_quiz_completed_users_exclude_source(self):
        provider = InMemoryProfileProvider([
            make_profile(1, traits=make_traits()),
            make_profile(2, traits=make_traits()),
            make_profile(3, quiz_completed=False),
        ])
        users = provider.get_quiz_completed_users(exclude_user_id=1)
        self.assertEqual([u.id for u in users], [2])

    def test_quiz_completed_users_without_exclusion(self):
        provider = InMemoryProfileProvider([make_profile(1), make_profile(2, quiz_completed=False)])
        self.assertEqual([u.id for u in provider.get_quiz_completed_users()], [1])


if __name__ == '__main__':
    unittest.main()

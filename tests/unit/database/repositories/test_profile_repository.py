#!/usr/bin/env python3
"""
Unit tests for the ProfileRepository facade and the per-table repositories
behind it.
"""

import unittest

from core.matcher.models import UserProfile, PersonalityTraits
from database.models import Availability, UserAnswer
from database.repository import ProfileRepository
from tests import make_session_factory
from tests.mocks.profile_mocks import seed_user, seed_questions


class TestProfileAssembly(unittest.TestCase):

    def setUp(self):
        self.session = make_session_factory()()
        self.repo = ProfileRepository(self.session)
        self.user = seed_user(
            self.session, "carol",
            traits={'extroversion': 80, 'adventure': 70, 'planning': 50, 'creativity': 60, 'empathy': 90},
            cells=[('friday', 'evening'), ('sunday', 'morning')],
            activities=[
                {'name': 'Bouldering', 'category': 'Sports', 'skill_level': 'intermediate'},
                {'name': 'Book Club', 'category': 'Social', 'is_active': False},
            ],
            resources={'location': 'Denver', 'budget_min': 10, 'budget_max': 60, 'has_vehicle': True},
        )
        self.pending = seed_user(self.session, "dave")

    def tearDown(self):
        self.session.close()

    def test_01_profile_detached_from_orm(self):
        profile = self.repo.get_user_with_details(self.user.id)

        self.assertIsInstance(profile, UserProfile)
        self.assertEqual(profile.traits, PersonalityTraits(80, 70, 50, 60, 90))
        self.assertEqual([a.name for a in profile.activities], ['Bouldering', 'Book Club'])
        self.assertEqual([a.name for a in profile.active_activities()], ['Bouldering'])
        self.assertEqual(len(profile.availability), 2)
        self.assertEqual(profile.resources.location, 'Denver')
        self.assertTrue(profile.resources.has_vehicle)

    def test_02_missing_user_is_none(self):
        self.assertIsNone(self.repo.get_user_with_details(9999))

    def test_03_user_without_quiz_or_resources(self):
        profile = self.repo.get_user_with_details(self.pending.id)
        self.assertIsNone(profile.traits)
        self.assertIsNone(profile.resources)
        self.assertEqual(profile.activities, [])
        self.assertFalse(profile.user.quiz_completed)

    def test_04_quiz_completed_users(self):
        users = self.repo.get_quiz_completed_users()
        self.assertEqual([u.id for u in users], [self.user.id])
        self.assertEqual(self.repo.get_quiz_completed_users(exclude_user_id=self.user.id), [])

    def test_05_all_users(self):
        self.assertEqual(len(self.repo.get_all_users()), 2)


class TestActivityRepository(unittest.TestCase):

    def setUp(self):
        self.session = make_session_factory()()
        self.repo = ProfileRepository(self.session)
        self.user = seed_user(self.session, "erin", cells=[('monday', 'morning')])

    def tearDown(self):
        self.session.close()

    def test_set_availability_replaces_grid(self):
        self.repo.activities.set_availability(self.user.id, [
            {'day_of_week': 'friday', 'time_slot': 'evening'},
            {'day_of_week': 'saturday', 'time_slot': 'afternoon', 'is_available': False},
        ])
        rows = self.session.query(Availability).filter_by(user_id=self.user.id).all()
        self.assertEqual(
            sorted((r.day_of_week, r.time_slot, r.is_available) for r in rows),
            [('friday', 'evening', True), ('saturday', 'afternoon', False)]
        )

    def test_set_availability_empty_clears(self):
        self.repo.activities.set_availability(self.user.id, [])
        self.assertEqual(self.repo.get_availability_by_user(self.user.id), [])

    def test_set_resources_upserts(self):
        first = self.repo.activities.set_resources(self.user.id, location='Austin', budget_max=100)
        second = self.repo.activities.set_resources(self.user.id, location='Dallas')
        self.assertEqual(first.id, second.id)
        self.assertEqual(second.location, 'Dallas')
        self.assertEqual(second.budget_max, 100)

    def test_create_and_pause_activity(self):
        activity = self.repo.activities.create_activity(self.user.id, 'Salsa', 'Dance', skill_level='beginner')
        self.repo.activities.set_activity_active(activity.id, False)
        activities = self.repo.get_activities_by_user(self.user.id)
        self.assertEqual(len(activities), 1)
        self.assertFalse(activities[0].is_active)
        self.assertIsNone(self.repo.activities.set_activity_active(9999, True))


class TestPersonalityPersistence(unittest.TestCase):

    def setUp(self):
        self.session = make_session_factory()()
        self.repo = ProfileRepository(self.session)
        self.user = seed_user(self.session, "frank")
        self.questions = seed_questions(self.session)

    def tearDown(self):
        self.session.close()

    def test_quiz_questions_as_dataclasses(self):
        questions = self.repo.get_quiz_questions()
        self.assertEqual(len(questions), 3)
        self.assertEqual(questions[0].options[0]['trait'], 'adventure')

    def test_save_answers(self):
        self.repo.save_quiz_answers(self.user.id, {self.questions[0].id: 0, self.questions[1].id: 1})
        self.assertEqual(self.session.query(UserAnswer).filter_by(user_id=self.user.id).count(), 2)
        self.assertEqual(
            self.repo.personality.get_latest_answers(self.user.id),
            {self.questions[0].id: 0, self.questions[1].id: 1}
        )

    def test_update_personality_marks_quiz_completed(self):
        self.repo.update_personality(self.user.id, "The Explorer", "Adventurous", {'adventure': 100})
        profile = self.repo.get_user_with_details(self.user.id)
        self.assertTrue(profile.user.quiz_completed)
        self.assertEqual(profile.user.personality_type, "The Explorer")
        self.assertEqual(profile.traits.adventure, 100)

    def test_update_personality_unknown_user(self):
        self.assertIsNone(self.repo.update_personality(9999, "x", "y", {}))


if __name__ == '__main__':
    unittest.main()

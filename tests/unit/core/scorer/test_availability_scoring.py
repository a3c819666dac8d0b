#!/usr/bin/env python3
"""
Unit tests for weekly availability overlap.
"""

import unittest

from core.scorer.availability import calculate_availability_score, available_slot_keys
from tests.mocks.profile_mocks import make_slots


class TestAvailabilityScore(unittest.TestCase):

    def test_01_identical_slots_score_100(self):
        a = make_slots(1, [('friday', 'evening')])
        b = make_slots(2, [('friday', 'evening')])
        self.assertEqual(calculate_availability_score(a, b), 100)

    def test_02_empty_list_is_neutral(self):
        """A user with no availability rows scores 50 against anyone."""
        b = make_slots(2, [('monday', 'morning')])
        self.assertEqual(calculate_availability_score([], b), 50)
        self.assertEqual(calculate_availability_score(b, []), 50)
        self.assertEqual(calculate_availability_score([], []), 50)

    def test_03_jaccard_overlap(self):
        """Two shared out of four distinct slots -> 50."""
        a = make_slots(1, [('monday', 'morning'), ('tuesday', 'evening'), ('friday', 'evening')])
        b = make_slots(2, [('tuesday', 'evening'), ('friday', 'evening'), ('sunday', 'afternoon')])
        self.assertEqual(calculate_availability_score(a, b), 50)

    def test_04_disjoint_slots_score_0(self):
        a = make_slots(1, [('monday', 'morning')])
        b = make_slots(2, [('sunday', 'evening')])
        self.assertEqual(calculate_availability_score(a, b), 0)

    def test_05_unavailable_rows_ignored(self):
        """Rows marked unavailable do not join the slot set."""
        a = make_slots(1, [('monday', 'morning')]) + make_slots(1, [('friday', 'evening')], is_available=False)
        b = make_slots(2, [('monday', 'morning'), ('friday', 'evening')])
        # {mon-morning} vs {mon-morning, fri-evening} -> 1/2
        self.assertEqual(calculate_availability_score(a, b), 50)

    def test_06_rounds_half_up(self):
        """One of eight slots shared is 12.5 -> 13."""
        a = make_slots(1, [('monday', s) for s in ('morning', 'afternoon', 'evening')] + [('tuesday', 'morning')])
        b = make_slots(2, [('monday', 'morning'), ('wednesday', 'morning'), ('thursday', 'morning'),
                           ('friday', 'morning'), ('saturday', 'morning')])
        self.assertEqual(calculate_availability_score(a, b), 13)

    def test_07_slot_keys_normalized(self):
        """Day and slot names compare case-insensitively."""
        slots = make_slots(1, [('Friday', 'Evening ')])
        self.assertEqual(available_slot_keys(slots), {'friday-evening'})

    def test_08_symmetric(self):
        a = make_slots(1, [('monday', 'morning'), ('friday', 'evening')])
        b = make_slots(2, [('friday', 'evening')])
        self.assertEqual(calculate_availability_score(a, b), calculate_availability_score(b, a))


if __name__ == '__main__':
    unittest.main()

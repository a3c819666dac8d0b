import unittest

from core.utils import round_half_up, clamp_score, slot_key


class TestRoundHalfUp(unittest.TestCase):

    def test_halves_round_up(self):
        self.assertEqual(round_half_up(95.5), 96)
        self.assertEqual(round_half_up(12.5), 13)
        # built-in round() would give 12 here
        self.assertEqual(round(12.5), 12)

    def test_non_halves(self):
        self.assertEqual(round_half_up(82.49), 82)
        self.assertEqual(round_half_up(82.51), 83)
        self.assertEqual(round_half_up(0), 0)

    def test_negative_halves_toward_positive_infinity(self):
        self.assertEqual(round_half_up(-2.5), -2)


class TestClampScore(unittest.TestCase):

    def test_clamps(self):
        self.assertEqual(clamp_score(120), 100)
        self.assertEqual(clamp_score(-5), 0)
        self.assertEqual(clamp_score(55), 55)


class TestSlotKey(unittest.TestCase):

    def test_normalizes(self):
        self.assertEqual(slot_key(" Friday", "EVENING"), "friday-evening")


if __name__ == '__main__':
    unittest.main()

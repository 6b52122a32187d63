"""
Test cases for landmark types and distance helpers.
"""
import unittest
from types import SimpleNamespace

from hand_factory import make_hand

from fistbump.errors import MalformedHandError
from fistbump.geometry import distance_2d, distance_3d
from fistbump.types import Hand, HandIndex, Landmark, WorldPosition


class TestDistance(unittest.TestCase):
    """Test 2-D and 3-D distances."""

    def test_distance_2d_is_symmetric(self):
        a = Landmark(0.1, 0.2)
        b = Landmark(0.4, 0.6)
        self.assertEqual(distance_2d(a, b), distance_2d(b, a))
        self.assertAlmostEqual(distance_2d(a, b), 0.5)

    def test_distance_2d_to_self_is_zero(self):
        a = Landmark(0.3, 0.7, 0.2)
        self.assertEqual(distance_2d(a, a), 0.0)

    def test_distance_2d_ignores_z(self):
        a = Landmark(0.0, 0.0, 0.0)
        b = Landmark(0.3, 0.4, 0.9)
        self.assertAlmostEqual(distance_2d(a, b), 0.5)

    def test_distance_3d_matches_2d_when_flat(self):
        """Absent z and zero z both behave as 0."""
        a = Landmark(0.1, 0.2)
        b = Landmark(0.7, 0.9, 0.0)
        self.assertAlmostEqual(distance_3d(a, b), distance_2d(a, b))

    def test_distance_3d_missing_z_is_zero(self):
        a = Landmark(0.0, 0.0)
        b = Landmark(0.0, 0.0, 0.5)
        self.assertAlmostEqual(distance_3d(a, b), 0.5)
        self.assertAlmostEqual(distance_3d(b, a), 0.5)

    def test_distance_3d_on_world_positions(self):
        a = WorldPosition(1.0, 2.0, 2.0)
        b = WorldPosition(0.0, 0.0, 0.0)
        self.assertAlmostEqual(distance_3d(a, b), 3.0)


class TestHand(unittest.TestCase):
    """Test hand construction and accessors."""

    def test_wrong_length_rejected(self):
        with self.assertRaises(MalformedHandError):
            Hand(tuple(Landmark(0.5, 0.5) for _ in range(20)))

    def test_list_input_is_frozen_to_tuple(self):
        landmarks = [Landmark(0.5, 0.5) for _ in range(21)]
        hand = Hand(landmarks)
        landmarks.append(Landmark(0.0, 0.0))

        self.assertIsInstance(hand.landmarks, tuple)
        self.assertEqual(len(hand), 21)
        self.assertEqual(hash(hand), hash(Hand(tuple(landmarks[:21]))))

    def test_from_points_accepts_tuples(self):
        points = [(i / 100, 0.5) for i in range(21)]
        hand = Hand.from_points(points)
        self.assertEqual(len(hand), 21)
        self.assertEqual(hand.middle_mcp, Landmark(0.09, 0.5))
        self.assertEqual(hand.wrist.depth, 0.0)

    def test_from_points_accepts_objects_and_mappings(self):
        objects = [SimpleNamespace(x=0.1, y=0.2, z=-0.05) for _ in range(21)]
        hand = Hand.from_points(objects)
        self.assertEqual(hand.thumb_tip.z, -0.05)

        mappings = [{"x": 0.3, "y": 0.4} for _ in range(21)]
        hand = Hand.from_points(mappings)
        self.assertIsNone(hand.wrist.z)

    def test_from_points_rejects_bad_entries(self):
        with self.assertRaises(MalformedHandError):
            Hand.from_points([(0.1,)] * 21)
        with self.assertRaises(MalformedHandError):
            Hand.from_points([{"x": 0.1}] * 21)
        with self.assertRaises(MalformedHandError):
            Hand.from_points(["wrist"] * 21)

    def test_named_accessors_follow_index(self):
        hand = make_hand({HandIndex.THUMB_IP: (0.2, 0.3), HandIndex.THUMB_CMC: (0.4, 0.1)})
        self.assertEqual(hand.thumb_ip, Landmark(0.2, 0.3))
        self.assertEqual(hand.thumb_cmc, Landmark(0.4, 0.1))
        self.assertEqual(hand[HandIndex.THUMB_IP], hand.landmarks[3])


if __name__ == '__main__':
    unittest.main()

"""
Test cases for depth estimation and world projection.
"""
import math
import unittest

from hand_factory import fist_hand, make_hand

from fistbump.config import ProjectionConfig
from fistbump.errors import ProjectionError
from fistbump.projection import (
    estimate_hand_depth,
    hand_pose,
    hand_to_world,
    landmark_to_world,
    world_extent,
)
from fistbump.types import HandIndex, Landmark

WORLD_HEIGHT = 2 * math.tan(math.radians(75) / 2) * 5


def sized_hand(size, wrist=(0.5, 0.5)):
    """Hand whose wrist to middle knuckle span is `size`."""
    return make_hand({
        HandIndex.WRIST: wrist,
        HandIndex.MIDDLE_MCP: (wrist[0], wrist[1] - size),
    })


class TestHandDepth(unittest.TestCase):
    """Test the apparent-size depth heuristic."""

    def test_smallest_size_maps_to_near_depth(self):
        self.assertAlmostEqual(estimate_hand_depth(sized_hand(0.05)), -2.5)

    def test_largest_size_maps_to_far_end(self):
        self.assertAlmostEqual(estimate_hand_depth(sized_hand(0.2)), -4.5)

    def test_midpoint(self):
        self.assertAlmostEqual(estimate_hand_depth(sized_hand(0.125)), -3.5)

    def test_clamped_below_and_above(self):
        self.assertAlmostEqual(estimate_hand_depth(sized_hand(0.01)), -2.5)
        self.assertAlmostEqual(estimate_hand_depth(sized_hand(0.4)), -4.5)

    def test_custom_range(self):
        cfg = ProjectionConfig(near_depth=-1.0, depth_span=1.0)
        self.assertAlmostEqual(estimate_hand_depth(sized_hand(0.2), cfg), -2.0)


class TestLandmarkToWorld(unittest.TestCase):
    """Test projection of normalized landmarks."""

    def test_centre_maps_to_origin(self):
        pos = landmark_to_world(Landmark(0.5, 0.5), 480, 480, depth=-3.0)
        self.assertEqual(pos.x, 0.0)
        self.assertEqual(pos.y, 0.0)
        self.assertEqual(pos.z, -3.0)

    def test_default_depth(self):
        pos = landmark_to_world(Landmark(0.5, 0.5), 640, 480)
        self.assertEqual(pos.z, -2.5)

    def test_top_left_corner(self):
        """Image y grows down, world y grows up."""
        pos = landmark_to_world(Landmark(0.0, 0.0), 480, 480)
        self.assertAlmostEqual(pos.x, -WORLD_HEIGHT / 2)
        self.assertAlmostEqual(pos.y, WORLD_HEIGHT / 2)

    def test_aspect_widens_x(self):
        pos = landmark_to_world(Landmark(1.0, 1.0), 640, 480)
        self.assertAlmostEqual(pos.x, WORLD_HEIGHT * (640 / 480) / 2)
        self.assertAlmostEqual(pos.y, -WORLD_HEIGHT / 2)

    def test_world_extent(self):
        width, height = world_extent(800, 400)
        self.assertAlmostEqual(height, WORLD_HEIGHT)
        self.assertAlmostEqual(width, 2 * WORLD_HEIGHT)

    def test_non_positive_canvas_rejected(self):
        with self.assertRaises(ProjectionError):
            landmark_to_world(Landmark(0.5, 0.5), 0, 480)
        with self.assertRaises(ProjectionError):
            world_extent(640, -1)


class TestHandToWorld(unittest.TestCase):
    """Test hand-level composition."""

    def test_wrist_at_estimated_depth(self):
        pos = hand_to_world(sized_hand(0.2, wrist=(0.5, 0.5)), 640, 480)
        self.assertAlmostEqual(pos.x, 0.0)
        self.assertAlmostEqual(pos.y, 0.0)
        self.assertAlmostEqual(pos.z, -4.5)

    def test_hand_pose_combines_position_and_rotation(self):
        hand = fist_hand(wrist=(0.3, 0.5), knuckles=(0.4, 0.5))
        pose = hand_pose(hand, 640, 480)
        self.assertLess(pose.position.x, 0.0)
        self.assertAlmostEqual(pose.rotation.yaw, math.pi / 2)


if __name__ == '__main__':
    unittest.main()

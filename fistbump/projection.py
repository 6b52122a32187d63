"""
Map normalized landmarks into 3-D scene coordinates.

The virtual camera here (field of view, reference distance) is a fixed
design parameter. It must match the rendering camera or objects will drift
away from the hands on screen.
"""
import math
from typing import Optional, Tuple

from .config import ProjectionConfig, DEFAULT_PROJECTION
from .errors import ProjectionError
from .geometry import distance_2d
from .pose import estimate_fist_rotation
from .types import Hand, Landmark, Pose3D, WorldPosition


def estimate_hand_depth(hand: Hand, cfg: Optional[ProjectionConfig] = None) -> float:
    """
    Approximate camera distance from apparent hand size.

    A monocular size cue, not metric depth: the wrist to middle knuckle
    span is clamped to [min_hand_size, max_hand_size] and mapped linearly
    so min_hand_size lands at near_depth and max_hand_size at
    near_depth - depth_span. It gets worse for hands turned away from the
    camera and for unusual hand sizes.

    Args:
        hand: Hand landmarks
        cfg: Projection parameters, defaults to DEFAULT_PROJECTION

    Returns:
        Scene z in [near_depth - depth_span, near_depth]
    """
    cfg = cfg or DEFAULT_PROJECTION
    hand_size = distance_2d(hand.wrist, hand.middle_mcp)
    clamped = max(cfg.min_hand_size, min(cfg.max_hand_size, hand_size))
    size_range = cfg.max_hand_size - cfg.min_hand_size
    return cfg.near_depth - (clamped - cfg.min_hand_size) * (cfg.depth_span / size_range)


def world_extent(canvas_width: float, canvas_height: float,
                 cfg: Optional[ProjectionConfig] = None) -> Tuple[float, float]:
    """
    Visible world size at the reference distance.

    Returns:
        (world_width, world_height) in scene units
    """
    if canvas_width <= 0 or canvas_height <= 0:
        raise ProjectionError(f"Canvas size must be positive, got {canvas_width}x{canvas_height}")
    cfg = cfg or DEFAULT_PROJECTION
    aspect = canvas_width / canvas_height
    world_height = 2 * math.tan(math.radians(cfg.fov_deg) / 2) * cfg.reference_distance
    return world_height * aspect, world_height


def landmark_to_world(landmark: Landmark, canvas_width: float, canvas_height: float,
                      depth: Optional[float] = None,
                      cfg: Optional[ProjectionConfig] = None) -> WorldPosition:
    """
    Project a normalized landmark into the scene.

    Frame centre maps to the x/y origin; y is flipped because image y grows
    downward while scene y grows upward.

    Args:
        landmark: Normalized landmark
        canvas_width: Frame width in pixels
        canvas_height: Frame height in pixels
        depth: Scene z, defaults to cfg.default_depth
        cfg: Projection parameters, defaults to DEFAULT_PROJECTION

    Returns:
        World position in scene units
    """
    cfg = cfg or DEFAULT_PROJECTION
    world_width, world_height = world_extent(canvas_width, canvas_height, cfg)
    return WorldPosition(
        x=(landmark.x - 0.5) * world_width,
        y=(0.5 - landmark.y) * world_height,
        z=cfg.default_depth if depth is None else depth,
    )


def hand_to_world(hand: Hand, canvas_width: float, canvas_height: float,
                  cfg: Optional[ProjectionConfig] = None) -> WorldPosition:
    """Project the wrist at the hand's estimated depth."""
    depth = estimate_hand_depth(hand, cfg)
    return landmark_to_world(hand.wrist, canvas_width, canvas_height, depth=depth, cfg=cfg)


def hand_pose(hand: Hand, canvas_width: float, canvas_height: float,
              cfg: Optional[ProjectionConfig] = None) -> Pose3D:
    """World position and fist rotation together."""
    return Pose3D(
        position=hand_to_world(hand, canvas_width, canvas_height, cfg),
        rotation=estimate_fist_rotation(hand),
    )

"""
Fist Bump

Turns per-frame hand landmarks into gesture flags, a coarse fist orientation,
a heuristic 3-D fist pose, and two-hand interaction checks.
"""

__version__ = "0.1.0"

from .types import (
    Landmark,
    HandIndex,
    Hand,
    HandSet,
    Rotation,
    WorldPosition,
    Pose3D,
    GestureResult,
    EffectSinkProto,
)
from .errors import FistBumpError, MalformedHandError, ProjectionError, ConfigError
from .config import load_config, Cfg, GestureThresholds, ProjectionConfig, InteractionConfig
from .geometry import distance_2d, distance_3d
from .gestures import is_fist, is_peace, is_thumbs_up, fist_orientation, classify_hand
from .pose import estimate_fist_rotation
from .projection import estimate_hand_depth, landmark_to_world, hand_to_world, hand_pose
from .interactions import hands_close, is_near_object, facing_each_other
from .processor import FrameProcessor, FrameReport

__all__ = [
    "Landmark",
    "HandIndex",
    "Hand",
    "HandSet",
    "Rotation",
    "WorldPosition",
    "Pose3D",
    "GestureResult",
    "EffectSinkProto",
    "FistBumpError",
    "MalformedHandError",
    "ProjectionError",
    "ConfigError",
    "load_config",
    "Cfg",
    "GestureThresholds",
    "ProjectionConfig",
    "InteractionConfig",
    "distance_2d",
    "distance_3d",
    "is_fist",
    "is_peace",
    "is_thumbs_up",
    "fist_orientation",
    "classify_hand",
    "estimate_fist_rotation",
    "estimate_hand_depth",
    "landmark_to_world",
    "hand_to_world",
    "hand_pose",
    "hands_close",
    "is_near_object",
    "facing_each_other",
    "FrameProcessor",
    "FrameReport",
]

"""
Two-hand and hand-to-object predicates.
"""
from typing import Optional, Tuple

from .config import InteractionConfig, DEFAULT_INTERACTION
from .geometry import distance_2d, distance_3d
from .types import Hand, Orientation, WorldPosition


def hands_close(hand_a: Hand, hand_b: Hand, cfg: Optional[InteractionConfig] = None) -> bool:
    """Check if two wrists are close enough for a fist bump (strictly closer)."""
    cfg = cfg or DEFAULT_INTERACTION
    return distance_2d(hand_a.wrist, hand_b.wrist) < cfg.hands_close_dist


def is_near_object(hand_pos: Optional[WorldPosition], object_pos: Optional[WorldPosition],
                   threshold: float = DEFAULT_INTERACTION.near_object_dist) -> bool:
    """
    Check if a hand is within reach of a scene object.

    Args:
        hand_pos: Hand position in scene units, None if unknown
        object_pos: Object position in scene units, None if unknown
        threshold: Inclusive reach distance

    Returns:
        False when either position is missing
    """
    if hand_pos is None or object_pos is None:
        return False
    return distance_3d(hand_pos, object_pos) <= threshold


def facing_each_other(orient_a: Orientation, orient_b: Orientation) -> bool:
    """True when one fist points left and the other right."""
    return {orient_a, orient_b} == {"left", "right"}


def wrist_midpoint(hand_a: Hand, hand_b: Hand) -> Tuple[float, float]:
    """Normalized point halfway between the two wrists."""
    return ((hand_a.wrist.x + hand_b.wrist.x) / 2, (hand_a.wrist.y + hand_b.wrist.y) / 2)

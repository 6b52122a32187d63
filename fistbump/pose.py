"""
Single-frame rotation estimate for a fist from three anatomical landmarks.

This is a heuristic, not a calibrated orientation sensor. The caller is
expected to have checked is_fist() first; no smoothing is applied here.
"""
import math

import numpy as np

from .types import Hand, Rotation

MIN_VECTOR_LENGTH = 0.001

# Aligns roll with the tracked object's resting orientation.
# TODO: recheck against the scene once visual calibration is redone.
ROLL_OFFSET = math.pi / 2


def estimate_fist_rotation(hand: Hand, min_vector_length: float = MIN_VECTOR_LENGTH) -> Rotation:
    """
    Estimate pitch, yaw and roll of a fist.

    Forward is wrist to middle knuckle, right is wrist to thumb tip in the
    image plane.

    Args:
        hand: Hand landmarks, assumed to be a fist
        min_vector_length: Below this a vector is too foreshortened to use

    Returns:
        Rotation in radians; all zeros when the forward vector is degenerate
    """
    wrist = hand.wrist
    forward = np.array([
        hand.middle_mcp.x - wrist.x,
        hand.middle_mcp.y - wrist.y,
        hand.middle_mcp.depth - wrist.depth,
    ])
    length = np.linalg.norm(forward)
    if length < min_vector_length:
        return Rotation(pitch=0.0, yaw=0.0, roll=0.0)

    fx, fy, fz = forward / length
    yaw = math.atan2(fx, fz)
    # Clip guards asin against rounding just past +-1
    pitch = -math.asin(float(np.clip(fy, -1.0, 1.0)))

    right = np.array([hand.thumb_tip.x - wrist.x, hand.thumb_tip.y - wrist.y])
    right_length = np.linalg.norm(right)
    if right_length < min_vector_length:
        roll = 0.0
    else:
        rx, ry = right / right_length
        roll = math.atan2(ry, rx) - ROLL_OFFSET

    return Rotation(pitch=float(pitch), yaw=float(yaw), roll=float(roll))

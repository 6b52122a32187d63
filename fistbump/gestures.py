"""
Gesture recognition predicates over a single hand's landmarks.

Every check is fixed-threshold geometry on normalized coordinates. The
predicates are independent; no priority is applied between them.
"""
from typing import Optional

from .config import GestureThresholds, DEFAULT_THRESHOLDS
from .geometry import distance_2d
from .types import FINGER_TIPS, GestureResult, Hand, HandIndex, Orientation


def folded_fingers(hand: Hand, thresholds: Optional[GestureThresholds] = None) -> int:
    """
    Count folded non-thumb fingers.

    A finger is folded when its tip sits close to the joint two below it
    (the PIP for MediaPipe indexing).

    Args:
        hand: Hand landmarks
        thresholds: Gesture thresholds, defaults to DEFAULT_THRESHOLDS

    Returns:
        Number of folded fingers (0-4)
    """
    t = thresholds or DEFAULT_THRESHOLDS
    return sum(
        1 for tip in FINGER_TIPS
        if distance_2d(hand[tip], hand[tip - 2]) < t.fold_dist
    )


def is_fist(hand: Hand, thresholds: Optional[GestureThresholds] = None) -> bool:
    """
    Check if the hand is closed into a fist.

    Majority vote: one noisy or occluded finger does not break the fist.
    """
    t = thresholds or DEFAULT_THRESHOLDS
    return folded_fingers(hand, t) >= t.fist_min_folded


def is_peace(hand: Hand, thresholds: Optional[GestureThresholds] = None) -> bool:
    """
    Check for a peace sign: index and middle up, ring and pinky folded.

    All four conditions must hold.
    """
    t = thresholds or DEFAULT_THRESHOLDS

    index_up = distance_2d(hand[HandIndex.INDEX_TIP], hand[HandIndex.INDEX_MCP]) > t.finger_up_dist
    middle_up = distance_2d(hand[HandIndex.MIDDLE_TIP], hand[HandIndex.MIDDLE_MCP]) > t.finger_up_dist
    ring_down = distance_2d(hand[HandIndex.RING_TIP], hand[HandIndex.RING_PIP]) < t.fold_dist
    pinky_down = distance_2d(hand[HandIndex.PINKY_TIP], hand[HandIndex.PINKY_PIP]) < t.fold_dist

    return index_up and middle_up and ring_down and pinky_down


def is_thumbs_up(hand: Hand, thresholds: Optional[GestureThresholds] = None) -> bool:
    """
    Check for a thumbs up: thumb extended and reaching away from the wrist.
    """
    t = thresholds or DEFAULT_THRESHOLDS

    thumb_extended = distance_2d(hand.thumb_tip, hand.thumb_ip) > t.thumb_extended_dist
    thumb_far_from_palm = distance_2d(hand.thumb_tip, hand.wrist) > distance_2d(hand.thumb_cmc, hand.wrist)

    return thumb_extended and thumb_far_from_palm


def fist_orientation(hand: Hand, thresholds: Optional[GestureThresholds] = None) -> Orientation:
    """
    Coarse pointing direction of a fist from wrist to middle knuckle.

    Image coordinates are assumed (y grows downward), so "up" means the
    knuckle sits above the wrist by more than the up threshold.

    Args:
        hand: Hand landmarks
        thresholds: Gesture thresholds, defaults to DEFAULT_THRESHOLDS

    Returns:
        'left', 'right', 'up' or 'unknown'
    """
    t = thresholds or DEFAULT_THRESHOLDS
    dx = hand.middle_mcp.x - hand.wrist.x
    dy = hand.middle_mcp.y - hand.wrist.y

    if abs(dx) > abs(dy):
        return "right" if dx > 0 else "left"
    if dy < -t.up_dy:
        return "up"
    return "unknown"


def classify_hand(hand: Hand, thresholds: Optional[GestureThresholds] = None) -> GestureResult:
    """Run every single-hand classifier and bundle the flags."""
    return GestureResult(
        fist=is_fist(hand, thresholds),
        peace=is_peace(hand, thresholds),
        thumbs_up=is_thumbs_up(hand, thresholds),
        orientation=fist_orientation(hand, thresholds),
    )

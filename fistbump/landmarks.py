"""
Hand landmark detection using MediaPipe.
"""
import logging

import cv2
import mediapipe as mp
import numpy as np
from typing import Iterable

from .types import Hand, HandSet

logger = logging.getLogger(__name__)


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 2, min_detection_conf: float = 0.6, min_tracking_conf: float = 0.6):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )
        logger.info(f"MediaPipe Hands ready (max_num_hands={max_num_hands})")

    def process(self, frame_bgr: np.ndarray) -> HandSet:
        """
        Process a frame and return every detected hand.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            Hands in detector order (empty if none); order is the only
            thing telling hand A from hand B
        """
        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)

        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            return []

        return [Hand.from_points(hand_landmarks.landmark) for hand_landmarks in results.multi_hand_landmarks]

    def close(self) -> None:
        """Release the MediaPipe graph."""
        self.hands.close()


def draw_hands(frame: np.ndarray, hands: Iterable[Hand]) -> np.ndarray:
    """
    Draw hand landmarks on the frame.

    Args:
        frame: Input frame
        hands: Hands with normalized landmarks

    Returns:
        Frame with landmarks drawn
    """
    height, width = frame.shape[:2]

    for hand in hands:
        # Convert normalized coordinates to pixel coordinates and draw
        for landmark in hand.landmarks:
            px = int(landmark.x * width)
            py = int(landmark.y * height)
            cv2.rectangle(frame, (px, py), (px + 3, py + 3), (255, 255, 0), -1)

    return frame

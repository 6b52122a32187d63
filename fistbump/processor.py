"""
Per-frame pipeline from detected hands to gesture and interaction state.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import Cfg, GestureThresholds, InteractionConfig, ProjectionConfig
from .geometry import distance_2d
from .gestures import classify_hand
from .interactions import facing_each_other, hands_close, wrist_midpoint
from .projection import hand_pose
from .types import GestureResult, Hand, HandSet


@dataclass
class FrameReport:
    """Everything derived from one frame of hands."""
    hands: int
    gestures: List[GestureResult] = field(default_factory=list)
    wrist_distance: Optional[float] = None
    facing: Optional[bool] = None
    close: Optional[bool] = None
    fist_bump: bool = False
    bump_point: Optional[Tuple[float, float]] = None

    def first_fist(self) -> Optional[GestureResult]:
        """The first hand (detector order) that is a fist, if any."""
        for result in self.gestures:
            if result.fist:
                return result
        return None

    def debug_lines(self) -> List[str]:
        """Render the debug panel, '-' where a value is unavailable."""
        def show(value) -> str:
            return "-" if value is None else str(value)

        def hand_section(label: str, idx: int) -> List[str]:
            # Per-hand flags are only shown when both hands are present
            result = self.gestures[idx] if self.hands == 2 else None
            return [
                f"Hand {label} Gestures",
                "-" * 15,
                f"Fist: {show(result and result.fist)}",
                f"Peace: {show(result and result.peace)}",
                f"Thumbs Up: {show(result and result.thumbs_up)}",
                f"Orientation: {show(result and result.orientation)}",
                "",
            ]

        distance = "-" if self.wrist_distance is None else f"{self.wrist_distance:.3f}"
        lines = [
            "Detection Info",
            "-" * 15,
            f"Hands: {self.hands}",
            f"Distance: {distance}",
            "",
        ]
        lines += hand_section("A", 0)
        lines += hand_section("B", 1)
        lines += [
            "Interaction",
            "-" * 15,
            f"Facing Each Other: {show(self.facing)}",
            f"Close: {show(self.close)}",
        ]
        return lines


class FrameProcessor:
    """
    Turns a frame's hands into a FrameReport.

    Holds configuration only. Hand A and hand B are whatever the detector
    listed first and second, so they may swap between frames.
    """

    def __init__(self, cfg: Optional[Cfg] = None,
                 thresholds: Optional[GestureThresholds] = None,
                 projection: Optional[ProjectionConfig] = None,
                 interaction: Optional[InteractionConfig] = None):
        """Initialize from a full config or from individual sections."""
        self.thresholds = thresholds or (cfg.thresholds if cfg else GestureThresholds())
        self.projection = projection or (cfg.projection if cfg else ProjectionConfig())
        self.interaction = interaction or (cfg.interaction if cfg else InteractionConfig())

    def analyze_hand(self, hand: Hand, frame_wh: Tuple[int, int]) -> GestureResult:
        """Classify one hand, adding a world pose when it is a fist."""
        result = classify_hand(hand, self.thresholds)
        if result.fist:
            frame_width, frame_height = frame_wh
            result.pose = hand_pose(hand, frame_width, frame_height, self.projection)
        return result

    def process_frame(self, hands: HandSet, frame_wh: Tuple[int, int]) -> FrameReport:
        """
        Process a frame's hands.

        Args:
            hands: Hands in detector order
            frame_wh: Frame dimensions (width, height)

        Returns:
            FrameReport; two-hand fields stay None unless exactly two hands
            were detected
        """
        report = FrameReport(
            hands=len(hands),
            gestures=[self.analyze_hand(hand, frame_wh) for hand in hands],
        )

        if len(hands) != 2:
            return report

        hand_a, hand_b = hands
        result_a, result_b = report.gestures

        report.wrist_distance = distance_2d(hand_a.wrist, hand_b.wrist)
        report.facing = facing_each_other(result_a.orientation, result_b.orientation)
        report.close = hands_close(hand_a, hand_b, self.interaction)
        report.fist_bump = result_a.fist and result_b.fist and report.facing and report.close
        if report.fist_bump:
            report.bump_point = wrist_midpoint(hand_a, hand_b)

        return report

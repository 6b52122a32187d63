"""
State of the virtual object a fist drives around the scene.
"""
from dataclasses import dataclass, field
from typing import Optional

from .config import InteractionConfig, ProjectionConfig, DEFAULT_INTERACTION, DEFAULT_PROJECTION
from .interactions import is_near_object
from .types import Pose3D, Rotation, WorldPosition

ZERO_ROTATION = Rotation(pitch=0.0, yaw=0.0, roll=0.0)


@dataclass
class TrackedObject:
    """
    Position, rotation and visibility handed to the 3-D renderer.

    Rests at the frame centre at the default hand depth until a fist
    takes hold of it.
    """
    projection: ProjectionConfig = field(default_factory=lambda: DEFAULT_PROJECTION)
    interaction: InteractionConfig = field(default_factory=lambda: DEFAULT_INTERACTION)
    position: Optional[WorldPosition] = None
    rotation: Rotation = ZERO_ROTATION
    visible: bool = True

    def __post_init__(self):
        if self.position is None:
            self.position = self.home_position

    @property
    def home_position(self) -> WorldPosition:
        return WorldPosition(0.0, 0.0, self.projection.default_depth)

    def follow(self, pose: Pose3D) -> None:
        """Move and turn the object to match a hand pose."""
        self.position = pose.position
        self.rotation = pose.rotation

    def reset(self) -> None:
        """Put the object back at rest."""
        self.position = self.home_position
        self.rotation = ZERO_ROTATION

    def is_near(self, hand_pos: Optional[WorldPosition], threshold: Optional[float] = None) -> bool:
        """Check if a hand is within reach, by default interaction.near_object_dist."""
        if threshold is None:
            threshold = self.interaction.near_object_dist
        return is_near_object(hand_pos, self.position, threshold)

"""
Type definitions for hand landmark semantics.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, List, Literal, Optional, Protocol, Tuple, runtime_checkable

from .errors import MalformedHandError

LANDMARK_COUNT = 21

Orientation = Literal["left", "right", "up", "unknown"]


@dataclass(frozen=True)
class Landmark:
    """A single tracked point, x/y normalized to [0..1], optional relative z."""
    x: float
    y: float
    z: Optional[float] = None  # relative depth, None when the detector gave none

    @property
    def depth(self) -> float:
        """Relative depth with an absent z read as 0."""
        return 0.0 if self.z is None else self.z


class HandIndex(IntEnum):
    """Anatomical landmark indices (MediaPipe Hands convention)."""
    WRIST = 0
    THUMB_CMC = 1
    THUMB_MCP = 2
    THUMB_IP = 3
    THUMB_TIP = 4
    INDEX_MCP = 5
    INDEX_PIP = 6
    INDEX_DIP = 7
    INDEX_TIP = 8
    MIDDLE_MCP = 9
    MIDDLE_PIP = 10
    MIDDLE_DIP = 11
    MIDDLE_TIP = 12
    RING_MCP = 13
    RING_PIP = 14
    RING_DIP = 15
    RING_TIP = 16
    PINKY_MCP = 17
    PINKY_PIP = 18
    PINKY_DIP = 19
    PINKY_TIP = 20


# Tips of the four non-thumb fingers, index through pinky
FINGER_TIPS: Tuple[HandIndex, ...] = (
    HandIndex.INDEX_TIP,
    HandIndex.MIDDLE_TIP,
    HandIndex.RING_TIP,
    HandIndex.PINKY_TIP,
)


def _to_landmark(entry: Any) -> Landmark:
    """Convert a detector point (object, mapping or tuple) into a Landmark."""
    if isinstance(entry, Landmark):
        return entry
    if isinstance(entry, dict):
        if "x" not in entry or "y" not in entry:
            raise MalformedHandError(f"Landmark mapping needs x and y keys, got {sorted(entry)}")
        z = entry.get("z")
        return Landmark(float(entry["x"]), float(entry["y"]), None if z is None else float(z))
    if isinstance(entry, (list, tuple)):
        if len(entry) == 2:
            return Landmark(float(entry[0]), float(entry[1]))
        if len(entry) == 3:
            return Landmark(float(entry[0]), float(entry[1]), float(entry[2]))
        raise MalformedHandError(f"Landmark sequence must have 2 or 3 values, got {len(entry)}")
    if hasattr(entry, "x") and hasattr(entry, "y"):
        z = getattr(entry, "z", None)
        return Landmark(float(entry.x), float(entry.y), None if z is None else float(z))
    raise MalformedHandError(f"Unsupported landmark format: {type(entry).__name__}")


@dataclass(frozen=True)
class Hand:
    """
    The 21-point skeleton of one detected hand.

    Index order never changes: wrist first, then four joints per finger
    (MCP, PIP, DIP, TIP) from thumb to pinky. Use HandIndex or the named
    properties rather than raw integers.
    """
    landmarks: Tuple[Landmark, ...]

    def __post_init__(self):
        # Freeze whatever sequence was passed in
        object.__setattr__(self, "landmarks", tuple(self.landmarks))
        if len(self.landmarks) != LANDMARK_COUNT:
            raise MalformedHandError(
                f"A hand needs exactly {LANDMARK_COUNT} landmarks, got {len(self.landmarks)}"
            )

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> "Hand":
        """
        Build a hand from detector output.

        Args:
            points: 21 entries, each an (x, y) or (x, y, z) tuple, a mapping
                with x/y[/z] keys, or an object with x/y[/z] attributes

        Returns:
            Validated Hand
        """
        return cls(tuple(_to_landmark(p) for p in points))

    def __getitem__(self, index: HandIndex) -> Landmark:
        return self.landmarks[index]

    def __len__(self) -> int:
        return len(self.landmarks)

    @property
    def wrist(self) -> Landmark:
        return self.landmarks[HandIndex.WRIST]

    @property
    def thumb_cmc(self) -> Landmark:
        return self.landmarks[HandIndex.THUMB_CMC]

    @property
    def thumb_ip(self) -> Landmark:
        return self.landmarks[HandIndex.THUMB_IP]

    @property
    def thumb_tip(self) -> Landmark:
        return self.landmarks[HandIndex.THUMB_TIP]

    @property
    def middle_mcp(self) -> Landmark:
        return self.landmarks[HandIndex.MIDDLE_MCP]


HandSet = List[Hand]


@dataclass(frozen=True)
class Rotation:
    """Euler rotation in radians."""
    pitch: float
    yaw: float
    roll: float

    def as_xyz(self) -> Tuple[float, float, float]:
        """Rotation about the scene's (x, y, z) axes."""
        return (self.pitch, self.yaw, self.roll)


@dataclass(frozen=True)
class WorldPosition:
    """Position in scene units."""
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Pose3D:
    """Heuristic world pose of a fist."""
    position: WorldPosition
    rotation: Rotation


@dataclass
class GestureResult:
    """Per-hand gesture snapshot for one frame."""
    fist: bool
    peace: bool
    thumbs_up: bool
    orientation: Orientation
    pose: Optional[Pose3D] = None


@runtime_checkable
class EffectSinkProto(Protocol):
    """Abstract protocol for the layer that renders celebratory effects."""

    async def celebrate(self, x: float, y: float, message: str) -> None:
        """Play an effect centred on normalized frame coordinates."""
        ...

"""
Configuration management for the fistbump gesture pipeline.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field, fields

from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass(frozen=True)
class GestureThresholds:
    """Empirical distance thresholds for normalized [0..1] landmarks."""
    fold_dist: float = 0.05  # tip-to-joint distance below which a finger is folded
    fist_min_folded: int = 3  # folded fingers (of four) needed for a fist
    finger_up_dist: float = 0.09  # tip-to-MCP distance above which a finger is up
    thumb_extended_dist: float = 0.07
    up_dy: float = 0.05  # wrist-to-knuckle rise needed for "up"


@dataclass(frozen=True)
class ProjectionConfig:
    """Virtual camera and monocular depth parameters."""
    fov_deg: float = 75.0
    reference_distance: float = 5.0
    default_depth: float = -2.5
    near_depth: float = -2.5
    depth_span: float = 2.0
    min_hand_size: float = 0.05
    max_hand_size: float = 0.20

    def __post_init__(self):
        if not 0 < self.fov_deg < 180:
            raise ConfigError(f"projection.fov_deg must be between 0 and 180, got {self.fov_deg}")
        if self.reference_distance <= 0:
            raise ConfigError(f"projection.reference_distance must be positive, got {self.reference_distance}")
        if self.max_hand_size <= self.min_hand_size:
            raise ConfigError(
                f"projection.max_hand_size ({self.max_hand_size}) must exceed "
                f"min_hand_size ({self.min_hand_size})"
            )


@dataclass(frozen=True)
class InteractionConfig:
    """Two-hand and hand-to-object thresholds."""
    hands_close_dist: float = 0.25
    near_object_dist: float = 0.8


@dataclass
class EffectConfig:
    """Celebration effect settings."""
    cooldown_ms: int = 1000
    message: str = "FIST BUMP!"


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    show_debug: bool
    window_name: str


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    display: DisplayConfig
    thresholds: GestureThresholds = field(default_factory=GestureThresholds)
    projection: ProjectionConfig = field(default_factory=ProjectionConfig)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    effects: EffectConfig = field(default_factory=EffectConfig)


DEFAULT_THRESHOLDS = GestureThresholds()
DEFAULT_PROJECTION = ProjectionConfig()
DEFAULT_INTERACTION = InteractionConfig()


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses config.default.yaml

    Returns:
        Configuration object with all settings
    """
    if path is None:
        # Use default config file in project root
        project_root = Path(__file__).parent.parent
        path = project_root / "config.default.yaml"

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} does not contain a mapping")

    cfg = _dict_to_config(data)
    logger.info(f"Loaded config from {config_path}")
    return cfg


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Fetch a required top-level section."""
    try:
        section = data[name]
    except KeyError:
        raise ConfigError(f"Missing config section: {name}") from None
    if not isinstance(section, dict):
        raise ConfigError(f"Config section {name} must be a mapping")
    return section


def _tunable(cls, data: Dict[str, Any], name: str):
    """Build an optional section, falling back to the dataclass defaults."""
    section = data.get(name)
    if section is None:
        return cls()
    if not isinstance(section, dict):
        raise ConfigError(f"Config section {name} must be a mapping")

    known = {f.name: f.type for f in fields(cls)}
    unknown = set(section) - set(known)
    if unknown:
        raise ConfigError(f"Unknown keys in config section {name}: {sorted(unknown)}")

    for key, value in section.items():
        expected = known[key]
        if expected is float:
            ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        elif expected is int:
            ok = isinstance(value, int) and not isinstance(value, bool)
        else:
            ok = isinstance(value, expected)
        if not ok:
            raise ConfigError(f"{name}.{key} must be {expected.__name__}, got {value!r}")

    return cls(**section)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    try:
        camera_data = _section(data, 'camera')
        camera = CameraConfig(
            index=camera_data['index'],
            width=camera_data['width'],
            height=camera_data['height'],
            fps=camera_data['fps']
        )

        mp_data = _section(data, 'mediapipe')
        mediapipe = MediaPipeConfig(
            max_num_hands=mp_data['max_num_hands'],
            min_detection_confidence=mp_data['min_detection_confidence'],
            min_tracking_confidence=mp_data['min_tracking_confidence']
        )

        display_data = _section(data, 'display')
        display = DisplayConfig(
            show_landmarks=display_data['show_landmarks'],
            show_debug=display_data['show_debug'],
            window_name=display_data['window_name']
        )
    except KeyError as e:
        raise ConfigError(f"Missing config key: {e.args[0]}") from None

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        display=display,
        thresholds=_tunable(GestureThresholds, data, 'thresholds'),
        projection=_tunable(ProjectionConfig, data, 'projection'),
        interaction=_tunable(InteractionConfig, data, 'interaction'),
        effects=_tunable(EffectConfig, data, 'effects')
    )

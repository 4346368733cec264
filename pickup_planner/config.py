"""
Planner Configuration

Frozen dataclasses holding every tunable of a pickup planning session.
Defaults reproduce the UR3e cube-handling simulation: three 25mm cubes in a
0.6m x 0.6m area, a 50mm cylinder at (0, -0.3) with 10mm clearance, and a
hover altitude of 20cm above the table.

Configs can be loaded from JSON:

    {
        "start": [0.0, 0.0, 0.2],
        "layout": {"count": 5, "seed": 7, "policy": "fail_fast"},
        "planner": {"resolution": 60, "middle_segment": "arc"},
        "obstacle": {"center": [0.0, -0.3], "base_radius": 0.05}
    }
"""

import json
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .errors import InvalidConfigurationError
from .models import Obstacle, Point2, Point3, WorkspaceBounds, as_point2, as_point3


class ExhaustionPolicy(Enum):
    """What the layout generator does when an item cannot be separated"""
    FAIL_FAST = "fail_fast"      # raise PartialLayoutError with the placed subset
    BEST_EFFORT = "best_effort"  # keep the last (overlapping) sample, log a warning


class MiddleSegment(Enum):
    """How the detour travels between the two tangent points"""
    CHORD = "chord"  # straight line, may cut inside the safety disk
    ARC = "arc"      # samples along the safety circle


@dataclass(frozen=True)
class LayoutConfig:
    """Random cube placement settings"""
    count: int = 3
    bounds: WorkspaceBounds = field(
        default_factory=lambda: WorkspaceBounds.from_flat([-0.3, 0.3, -0.3, 0.3, 0.0, 0.2]))
    cube_size: float = 0.025
    min_separation: Optional[float] = None  # None -> 2 * cube_size
    max_attempts_per_item: int = 50
    policy: ExhaustionPolicy = ExhaustionPolicy.BEST_EFFORT
    seed: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.bounds, (list, tuple)):
            object.__setattr__(self, 'bounds', WorkspaceBounds.from_flat(self.bounds))
        if not isinstance(self.bounds, WorkspaceBounds):
            raise InvalidConfigurationError(
                f"bounds must be [xmin, xmax, ymin, ymax, zmin, zmax], got {self.bounds!r}")
        if not isinstance(self.policy, ExhaustionPolicy):
            object.__setattr__(self, 'policy', _parse_enum(ExhaustionPolicy, self.policy, 'policy'))
        if self.min_separation is None:
            object.__setattr__(self, 'min_separation', 2 * self.cube_size)
        if self.count < 0:
            raise InvalidConfigurationError(f"count must be >= 0, got {self.count}")
        if self.cube_size <= 0:
            raise InvalidConfigurationError(f"cube_size must be positive, got {self.cube_size}")
        if self.min_separation < 0:
            raise InvalidConfigurationError(
                f"min_separation must be >= 0, got {self.min_separation}")
        if self.max_attempts_per_item < 1:
            raise InvalidConfigurationError(
                f"max_attempts_per_item must be >= 1, got {self.max_attempts_per_item}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidConfigurationError(f"seed must be an integer or None, got {self.seed!r}")


@dataclass(frozen=True)
class PlannerConfig:
    """
    Path planning settings.

    split_ratios gives the share of waypoints for the approach and the
    middle segment of a detour; the departure segment takes the rest.
    """
    z_constant: float = 0.2
    resolution: int = 40
    split_ratios: Tuple[float, float] = (0.3, 0.4)
    middle_segment: MiddleSegment = MiddleSegment.CHORD

    def __post_init__(self):
        if not isinstance(self.middle_segment, MiddleSegment):
            object.__setattr__(self, 'middle_segment',
                               _parse_enum(MiddleSegment, self.middle_segment, 'middle_segment'))
        object.__setattr__(self, 'split_ratios', tuple(float(r) for r in self.split_ratios))
        validate_resolution(self.resolution)
        if len(self.split_ratios) != 2:
            raise InvalidConfigurationError(
                f"split_ratios must have 2 values, got {len(self.split_ratios)}")
        first, middle = self.split_ratios
        if first <= 0 or middle <= 0 or first + middle >= 1:
            raise InvalidConfigurationError(
                f"split_ratios must be positive and sum below 1, got {self.split_ratios}")


@dataclass(frozen=True)
class ObstacleConfig:
    """Single cylinder obstacle"""
    center: Point2 = (0.0, -0.3)
    base_radius: float = 0.05
    clearance_margin: float = 0.01

    def __post_init__(self):
        object.__setattr__(self, 'center', as_point2(self.center))
        self.to_obstacle()

    def to_obstacle(self) -> Obstacle:
        return Obstacle(center=self.center, base_radius=self.base_radius,
                        clearance_margin=self.clearance_margin)


@dataclass(frozen=True)
class SessionConfig:
    """
    Everything needed for one planning session.

    The place_* fields describe the stacking area: place_per_layer cubes
    side by side along Y, then the next layer place_layer_height higher.
    """
    start: Point3 = (0.0, 0.0, 0.2)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    planner: PlannerConfig = field(default_factory=PlannerConfig)
    obstacle: ObstacleConfig = field(default_factory=ObstacleConfig)
    approach_height: float = 0.2
    place_origin: Point3 = (-1.0, -0.18, 0.025)
    place_spacing: float = 1 / 7.7
    place_layer_height: float = 0.035
    place_per_layer: int = 3

    def __post_init__(self):
        object.__setattr__(self, 'start', as_point3(self.start))
        object.__setattr__(self, 'place_origin', as_point3(self.place_origin))
        if self.approach_height < 0:
            raise InvalidConfigurationError(
                f"approach_height must be >= 0, got {self.approach_height}")
        if self.place_per_layer < 1:
            raise InvalidConfigurationError(
                f"place_per_layer must be >= 1, got {self.place_per_layer}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionConfig":
        """Build a config from plain JSON-style data, rejecting unknown keys."""
        data = dict(data)
        _reject_unknown(cls, data, 'session')
        sections = {
            'layout': LayoutConfig,
            'planner': PlannerConfig,
            'obstacle': ObstacleConfig,
        }
        for key, section_cls in sections.items():
            if key in data:
                if not isinstance(data[key], dict):
                    raise InvalidConfigurationError(
                        f"{key} config must be an object, got {type(data[key]).__name__}")
                section = dict(data[key])
                _reject_unknown(section_cls, section, key)
                try:
                    data[key] = section_cls(**section)
                except InvalidConfigurationError:
                    raise
                except (TypeError, ValueError) as e:
                    raise InvalidConfigurationError(f"Invalid {key} config: {e}")
        try:
            return cls(**data)
        except InvalidConfigurationError:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationError(f"Invalid session config: {e}")

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['layout']['bounds'] = self.layout.bounds.to_flat()
        data['layout']['policy'] = self.layout.policy.value
        data['planner']['middle_segment'] = self.planner.middle_segment.value
        return data


def validate_resolution(resolution: Any) -> int:
    """Detour paths are split in three, so at least 3 waypoints are needed."""
    if isinstance(resolution, bool) or not isinstance(resolution, int):
        raise InvalidConfigurationError(f"resolution must be an integer, got {resolution!r}")
    if resolution < 3:
        raise InvalidConfigurationError(f"resolution must be >= 3, got {resolution}")
    return resolution


def load_config(filename: str) -> SessionConfig:
    """
    Load a session config from a JSON file.

    Args:
        filename: Path to the JSON file

    Returns:
        SessionConfig with defaults for every omitted field
    """
    with open(filename, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfigurationError(f"Could not parse {filename}: {e}")
    if not isinstance(data, dict):
        raise InvalidConfigurationError(f"{filename} must contain a JSON object")
    return SessionConfig.from_dict(data)


def _reject_unknown(cls, data: Dict[str, Any], section: str):
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidConfigurationError(f"Unknown {section} config keys: {unknown}")


def _parse_enum(enum_cls, value: str, name: str):
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = [e.value for e in enum_cls]
        raise InvalidConfigurationError(f"{name} must be one of {choices}, got {value!r}")

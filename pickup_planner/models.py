"""
Data Model for Cube Pickup Planning

Plain value types exchanged between the layout generator, the pickup
sequencer and the obstacle-aware path planner. Positions are immutable
float tuples; only WaypointPath carries a numpy array since it is handed
straight to the motion executor.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidConfigurationError

Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]


def as_point2(point: Sequence[float]) -> Point2:
    """Return the planar (x, y) part of a 2D or 3D point as floats."""
    if len(point) < 2:
        raise InvalidConfigurationError(f"Expected at least [x, y], got {len(point)} values")
    return (float(point[0]), float(point[1]))


def as_point3(point: Sequence[float], z: float = 0.0) -> Point3:
    """
    Return a 3D float tuple for a 2D or 3D point.

    Args:
        point: [x, y] or [x, y, z] (list, tuple or numpy array)
        z: Height used when point is 2D (default: 0.0)

    Example:
        >>> as_point3([0.1, 0.2])
        (0.1, 0.2, 0.0)
    """
    if len(point) == 2:
        return (float(point[0]), float(point[1]), float(z))
    if len(point) == 3:
        return (float(point[0]), float(point[1]), float(point[2]))
    raise InvalidConfigurationError(f"Expected [x, y] or [x, y, z], got {len(point)} values")


def planar_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance in the XY plane; z is ignored."""
    return math.hypot(float(b[0]) - float(a[0]), float(b[1]) - float(a[1]))


class ShapeKind(Enum):
    """Visual shape of a pickup item. Only renderers look at this."""
    CUBE = "cube"
    SPHERE = "sphere"
    PYRAMID = "pyramid"


@dataclass(frozen=True)
class Target:
    """
    An item to pick up.

    Attributes:
        id: Stable identifier (e.g. 'cube_1')
        position: Item center [x, y, z] in meters
        tag: Opaque metadata, typically an RGB colour tuple
        shape: Visual shape, never used for planning
    """
    id: str
    position: Point3
    tag: Any = None
    shape: ShapeKind = ShapeKind.CUBE

    def __post_init__(self):
        object.__setattr__(self, 'position', as_point3(self.position))


@dataclass(frozen=True)
class Obstacle:
    """
    Vertical cylinder obstacle projected onto the XY plane.

    Collision checks use the inflated safety disk, not the bare radius.

    Attributes:
        center: Cylinder axis position [x, y]
        base_radius: Physical radius in meters
        clearance_margin: Extra margin added around the cylinder

    Example:
        >>> obs = Obstacle(center=(0.0, -0.3), base_radius=0.05, clearance_margin=0.01)
        >>> round(obs.safe_radius, 3)
        0.06
    """
    center: Point2
    base_radius: float
    clearance_margin: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'center', as_point2(self.center))
        if self.safe_radius <= 0:
            raise InvalidConfigurationError(
                f"Safe radius must be positive, got {self.safe_radius:.4f}m "
                f"(base {self.base_radius}, margin {self.clearance_margin})"
            )

    @property
    def safe_radius(self) -> float:
        return float(self.base_radius) + float(self.clearance_margin)

    def contains(self, point: Sequence[float]) -> bool:
        """True if the point lies strictly inside the safety disk."""
        return planar_distance(self.center, point) < self.safe_radius


@dataclass(frozen=True)
class WorkspaceBounds:
    """
    Axis-aligned workspace box, one (min, max) range per axis in meters.

    Example:
        >>> bounds = WorkspaceBounds.from_flat([-0.3, 0.3, -0.3, 0.3, 0.0, 0.2])
        >>> bounds.x
        (-0.3, 0.3)
    """
    x: Tuple[float, float]
    y: Tuple[float, float]
    z: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self):
        for axis in ('x', 'y', 'z'):
            rng = getattr(self, axis)
            if len(rng) != 2:
                raise InvalidConfigurationError(f"{axis} range must be (min, max), got {rng}")
            lo, hi = float(rng[0]), float(rng[1])
            if lo > hi:
                raise InvalidConfigurationError(
                    f"{axis.upper()} bounds inverted: min {lo} > max {hi}"
                )
            object.__setattr__(self, axis, (lo, hi))

    @classmethod
    def from_flat(cls, limits: Sequence[float]) -> "WorkspaceBounds":
        """Build from [xmin, xmax, ymin, ymax, zmin, zmax]."""
        if len(limits) != 6:
            raise InvalidConfigurationError(
                f"Expected [xmin, xmax, ymin, ymax, zmin, zmax], got {len(limits)} values"
            )
        return cls(x=(limits[0], limits[1]), y=(limits[2], limits[3]), z=(limits[4], limits[5]))

    def to_flat(self) -> List[float]:
        return [self.x[0], self.x[1], self.y[0], self.y[1], self.z[0], self.z[1]]

    def contains(self, point: Sequence[float]) -> bool:
        p = as_point3(point, z=self.z[0])
        return all(lo <= v <= hi for v, (lo, hi) in zip(p, (self.x, self.y, self.z)))


@dataclass(frozen=True)
class Leg:
    """One hop of a tour: from the previous position to the next target."""
    start: Point3
    goal: Point3

    def __post_init__(self):
        object.__setattr__(self, 'start', as_point3(self.start))
        object.__setattr__(self, 'goal', as_point3(self.goal))

    @property
    def planar_length(self) -> float:
        return planar_distance(self.start, self.goal)


@dataclass(frozen=True)
class Tour:
    """
    Ordered visiting sequence of targets.

    Every target appears at most once; a Tour built by PickupSequencer
    contains every input target exactly once.
    """
    targets: Tuple[Target, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'targets', tuple(self.targets))
        ids = [t.id for t in self.targets]
        if len(set(ids)) != len(ids):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            raise InvalidConfigurationError(f"Duplicate target ids in tour: {duplicates}")

    def __len__(self) -> int:
        return len(self.targets)

    def __iter__(self) -> Iterator[Target]:
        return iter(self.targets)

    def __getitem__(self, index):
        return self.targets[index]

    @property
    def ids(self) -> List[str]:
        return [t.id for t in self.targets]

    @property
    def positions(self) -> List[Point3]:
        return [t.position for t in self.targets]

    def legs(self, start: Sequence[float]) -> List[Leg]:
        """Pair each target with the position visited before it."""
        legs = []
        current = as_point3(start)
        for target in self.targets:
            legs.append(Leg(current, target.position))
            current = target.position
        return legs

    def length(self, start: Sequence[float]) -> float:
        """Total planar travel distance of the straight-line tour."""
        return sum(leg.planar_length for leg in self.legs(start))


@dataclass
class WaypointPath:
    """
    Waypoints for one leg at a fixed planning altitude.

    Attributes:
        leg: The leg this path was planned for
        waypoints: Array of shape (N, 3)
        is_detour: True if the path goes around the obstacle
        tangent_points: (T1, T3) on the safety circle for a detour, else None
    """
    leg: Leg
    waypoints: np.ndarray
    is_detour: bool = False
    tangent_points: Optional[Tuple[Point2, Point2]] = None
    segment_counts: Tuple[int, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self):
        return iter(self.waypoints)

    @property
    def planar_length(self) -> float:
        if len(self.waypoints) < 2:
            return 0.0
        steps = np.diff(self.waypoints[:, :2], axis=0)
        return float(np.sum(np.linalg.norm(steps, axis=1)))

    def tolist(self) -> List[List[float]]:
        return self.waypoints.tolist()

    def to_dict(self) -> dict:
        return {
            'start': list(self.leg.start),
            'goal': list(self.leg.goal),
            'is_detour': self.is_detour,
            'tangent_points': [list(t) for t in self.tangent_points] if self.tangent_points else None,
            'waypoints': self.tolist(),
        }

"""
Obstacle-Aware Path Planning

Plans a planar waypoint path for each leg of a pickup tour around a single
cylinder obstacle. A leg whose straight segment stays clear of the safety
disk becomes a two-point direct path. Otherwise the path detours along the
tangent lines from each endpoint to the safety circle:

    start --> T1 ~~~ T3 --> goal

T1 and T3 are tangent points on the circle of radius safe_radius. The
middle T1 -> T3 section is a straight chord by default, or an arc along the
circle when MiddleSegment.ARC is configured. Every waypoint is lifted to the
fixed planning altitude z_constant.
"""

import itertools
import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import MiddleSegment, PlannerConfig, validate_resolution
from .errors import InvalidConfigurationError, UnreachableTargetError
from .interpolation import PathInterpolator
from .models import Leg, Obstacle, Point2, Tour, WaypointPath, as_point3, planar_distance

logger = logging.getLogger(__name__)


def closest_point_on_segment(a: Sequence[float], b: Sequence[float],
                             point: Sequence[float]) -> Point2:
    """
    Closest point to point on the segment a-b (XY plane).

    The projection parameter is clamped to [0, 1], so the answer can be an
    endpoint. A zero-length segment returns a.
    """
    ax, ay = float(a[0]), float(a[1])
    dx, dy = float(b[0]) - ax, float(b[1]) - ay
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return (ax, ay)
    t = ((float(point[0]) - ax) * dx + (float(point[1]) - ay) * dy) / length_sq
    t = min(1.0, max(0.0, t))
    return (ax + t * dx, ay + t * dy)


def segment_intersects_disk(a: Sequence[float], b: Sequence[float],
                            center: Sequence[float], radius: float) -> bool:
    """
    True if segment a-b passes strictly closer than radius to center.

    Example:
        >>> segment_intersects_disk((0, 0), (0, -0.6), (0, -0.3), 0.06)
        True
        >>> segment_intersects_disk((0, 0), (0.3, 0.3), (0, -0.3), 0.06)
        False
    """
    closest = closest_point_on_segment(a, b, center)
    return planar_distance(closest, center) < radius


def min_clearance(path: WaypointPath, obstacle: Obstacle) -> float:
    """Smallest planar distance from the obstacle center to any segment of path."""
    points = path.waypoints
    if len(points) == 1:
        return planar_distance(points[0], obstacle.center)
    return min(
        planar_distance(closest_point_on_segment(p, q, obstacle.center), obstacle.center)
        for p, q in zip(points[:-1], points[1:])
    )


def tangent_angles(point: Sequence[float], center: Sequence[float],
                   radius: float) -> Tuple[float, float]:
    """
    Angles (around center) of the two tangent points seen from point.

    Returns:
        (theta + alpha, theta - alpha) where theta is the bearing of point
        from center and alpha = acos(radius / distance)

    Raises:
        UnreachableTargetError: point is inside the circle
    """
    distance = planar_distance(point, center)
    if distance < radius:
        raise UnreachableTargetError(as_point3(point), distance, radius)
    theta = math.atan2(float(point[1]) - float(center[1]), float(point[0]) - float(center[0]))
    alpha = math.acos(radius / distance)
    return (theta + alpha, theta - alpha)


class ObstacleAwarePathPlanner:
    """
    Direct-or-detour leg planner for a single circular obstacle.

    Example:
        >>> planner = ObstacleAwarePathPlanner(PlannerConfig(z_constant=0.2))
        >>> obstacle = Obstacle(center=(0.0, -0.3), base_radius=0.05, clearance_margin=0.01)
        >>> path = planner.plan_leg((0, 0, 0), (0, -0.6, 0), obstacle, resolution=30)
        >>> path.is_detour, len(path)
        (True, 30)
    """

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config or PlannerConfig()

    def plan_leg(self, start: Sequence[float], goal: Sequence[float],
                 obstacle: Obstacle, resolution: Optional[int] = None) -> WaypointPath:
        """
        Plan one leg.

        Args:
            start: Leg start [x, y] or [x, y, z]
            goal: Leg goal [x, y] or [x, y, z]
            obstacle: Obstacle to avoid
            resolution: Waypoint count for a detour (default: config.resolution)

        Returns:
            WaypointPath with 2 waypoints (direct) or resolution waypoints (detour)

        Raises:
            InvalidConfigurationError: resolution < 3 or non-positive safe radius
            UnreachableTargetError: start or goal lies inside the safety disk
        """
        if resolution is None:
            resolution = self.config.resolution
        validate_resolution(resolution)
        if obstacle.safe_radius <= 0:
            raise InvalidConfigurationError(
                f"Safe radius must be positive, got {obstacle.safe_radius}")
        counts = PathInterpolator.split_counts(resolution, self.config.split_ratios)
        if min(counts) < 1:
            raise InvalidConfigurationError(
                f"resolution {resolution} too small for split ratios {self.config.split_ratios}")

        leg = Leg(start, goal)
        radius = obstacle.safe_radius

        if not segment_intersects_disk(leg.start, leg.goal, obstacle.center, radius):
            logger.debug("Direct leg (%.3f, %.3f) -> (%.3f, %.3f)",
                         leg.start[0], leg.start[1], leg.goal[0], leg.goal[1])
            xy = np.array([leg.start[:2], leg.goal[:2]], dtype=float)
            return WaypointPath(leg=leg, waypoints=self._lift(xy), is_detour=False,
                                segment_counts=(2,))

        theta_start, theta_goal = self._select_tangents(leg, obstacle)
        cx, cy = obstacle.center
        t1 = (cx + radius * math.cos(theta_start), cy + radius * math.sin(theta_start))
        t3 = (cx + radius * math.cos(theta_goal), cy + radius * math.sin(theta_goal))

        n1, n2, n3 = counts
        approach = self._segment(leg.start[:2], t1, n1, anchor_end=False)
        if self.config.middle_segment is MiddleSegment.ARC:
            sweep = PathInterpolator.wrap_angle(theta_goal - theta_start)
            middle = PathInterpolator.arc_interpolation(obstacle.center, radius,
                                                        theta_start, sweep, n2)
        else:
            middle = self._segment(t1, t3, n2, anchor_end=False)
        departure = self._segment(t3, leg.goal[:2], n3, anchor_end=True)

        xy = np.vstack((approach, middle, departure))
        logger.debug("Detour leg via T1=(%.4f, %.4f) T3=(%.4f, %.4f), %d/%d/%d points",
                     t1[0], t1[1], t3[0], t3[1], n1, n2, n3)
        return WaypointPath(leg=leg, waypoints=self._lift(xy), is_detour=True,
                            tangent_points=(t1, t3), segment_counts=(n1, n2, n3))

    def plan_tour(self, start: Sequence[float], tour: Tour, obstacle: Obstacle,
                  resolution: Optional[int] = None) -> List[WaypointPath]:
        """
        Plan every leg of a tour.

        The first leg starts at start; each later leg starts at the previous
        target. Legs are planned independently of each other.
        """
        return [self.plan_leg(leg.start, leg.goal, obstacle, resolution)
                for leg in tour.legs(start)]

    def _select_tangents(self, leg: Leg, obstacle: Obstacle) -> Tuple[float, float]:
        """Pick the tangent pair with the smallest wrapped angular gap."""
        radius = obstacle.safe_radius
        candidates = []
        for endpoint, name in ((leg.start, 'start'), (leg.goal, 'goal')):
            try:
                candidates.append(tangent_angles(endpoint, obstacle.center, radius))
            except UnreachableTargetError as e:
                raise UnreachableTargetError(endpoint, e.distance, radius, endpoint=name) from None

        best = None
        best_gap = math.inf
        for a, b in itertools.product(candidates[0], candidates[1]):
            gap = abs(PathInterpolator.wrap_angle(b - a))
            if gap < best_gap:
                best, best_gap = (a, b), gap
        return best

    def _segment(self, a: Sequence[float], b: Sequence[float], num_points: int,
                 anchor_end: bool) -> np.ndarray:
        # a lone point sits on the leg endpoint it borders
        if num_points == 1 and anchor_end:
            return np.array([b], dtype=float)
        return PathInterpolator.linear_interpolation(a, b, num_points)

    def _lift(self, xy: np.ndarray) -> np.ndarray:
        z = np.full((len(xy), 1), self.config.z_constant)
        return np.hstack((xy, z))

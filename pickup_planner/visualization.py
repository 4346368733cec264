"""
PyBullet Debug Overlay for Pickup Plans

Draws the layout box, the obstacle safety circle, the target positions and
the planned waypoint paths as PyBullet debug lines. Purely visual: nothing
here feeds back into planning.

Requires the optional 'sim' extra (pybullet).
"""

from typing import List, Optional, Sequence

import numpy as np
import pybullet as p

from .models import Obstacle, WaypointPath, WorkspaceBounds

DIRECT_COLOR = [0, 0.6, 0]    # green
DETOUR_COLOR = [1, 0.5, 0]    # orange
OBSTACLE_COLOR = [1, 0, 0]    # red
SAFETY_COLOR = [1, 1, 0]      # yellow
BOUNDS_COLOR = [0, 0, 1]      # blue
TARGET_COLOR = [0.1, 0.2, 0.8]


class PlanVisualizer:
    """
    Debug-line renderer for a PyBullet client.

    Every draw_* method returns the debug item ids it created so the caller
    can remove them later with clear().

    Example:
        >>> import pybullet as p
        >>> client = p.connect(p.DIRECT)
        >>> viz = PlanVisualizer(client)
        >>> ids = viz.draw_obstacle(obstacle, height=0.3)
        >>> viz.clear()
    """

    def __init__(self, physics_client: int = 0, num_segments: int = 36):
        self.physics_client = physics_client
        self.num_segments = num_segments
        self.item_ids: List[int] = []

    def _line(self, a: Sequence[float], b: Sequence[float], color, width: float = 1) -> int:
        item = p.addUserDebugLine([float(v) for v in a], [float(v) for v in b], color, width,
                                  physicsClientId=self.physics_client)
        self.item_ids.append(item)
        return item

    def _circle(self, center: Sequence[float], radius: float, z: float, color,
                width: float = 2) -> List[int]:
        angles = np.linspace(0.0, 2 * np.pi, self.num_segments + 1)
        xs = center[0] + radius * np.cos(angles)
        ys = center[1] + radius * np.sin(angles)
        return [self._line([xs[i], ys[i], z], [xs[i + 1], ys[i + 1], z], color, width)
                for i in range(self.num_segments)]

    def draw_bounds(self, bounds: WorkspaceBounds) -> List[int]:
        """Draw the bottom rectangle of the layout box."""
        z = bounds.z[0]
        corners = [
            [bounds.x[0], bounds.y[0], z], [bounds.x[1], bounds.y[0], z],
            [bounds.x[1], bounds.y[1], z], [bounds.x[0], bounds.y[1], z],
        ]
        return [self._line(corners[i], corners[(i + 1) % 4], BOUNDS_COLOR)
                for i in range(4)]

    def draw_obstacle(self, obstacle: Obstacle, height: float, z_base: float = 0.0) -> List[int]:
        """
        Draw the obstacle cylinder (red) and its safety circle (yellow).

        The cylinder gets a bottom and top circle plus a few vertical edges;
        the safety circle is drawn at the top height where paths fly.
        """
        ids = []
        ids += self._circle(obstacle.center, obstacle.base_radius, z_base, OBSTACLE_COLOR)
        ids += self._circle(obstacle.center, obstacle.base_radius, z_base + height, OBSTACLE_COLOR)
        for angle in np.linspace(0.0, 2 * np.pi, 4, endpoint=False):
            x = obstacle.center[0] + obstacle.base_radius * np.cos(angle)
            y = obstacle.center[1] + obstacle.base_radius * np.sin(angle)
            ids.append(self._line([x, y, z_base], [x, y, z_base + height], OBSTACLE_COLOR))
        ids += self._circle(obstacle.center, obstacle.safe_radius, z_base + height, SAFETY_COLOR, 1)
        return ids

    def draw_targets(self, positions: Sequence[Sequence[float]], size: float = 0.025) -> List[int]:
        """Mark each target with a small cross."""
        ids = []
        h = size / 2
        for x, y, z in positions:
            ids.append(self._line([x - h, y, z], [x + h, y, z], TARGET_COLOR, 2))
            ids.append(self._line([x, y - h, z], [x, y + h, z], TARGET_COLOR, 2))
        return ids

    def draw_path(self, path: WaypointPath, color: Optional[Sequence[float]] = None) -> List[int]:
        """Draw consecutive waypoints of a path as line segments."""
        if color is None:
            color = DETOUR_COLOR if path.is_detour else DIRECT_COLOR
        points = path.waypoints
        return [self._line(points[i], points[i + 1], color, 2) for i in range(len(points) - 1)]

    def draw_plan(self, plan, bounds: Optional[WorkspaceBounds] = None) -> List[int]:
        """Draw a complete SessionPlan."""
        z = plan.paths[0].waypoints[0][2] if plan.paths else plan.start[2]
        ids = []
        if bounds is not None:
            ids += self.draw_bounds(bounds)
        ids += self.draw_obstacle(plan.obstacle, height=z)
        ids += self.draw_targets(plan.tour.positions)
        for path in plan.paths:
            ids += self.draw_path(path)
        return ids

    def clear(self):
        """Remove every debug item drawn by this visualizer."""
        for item in self.item_ids:
            p.removeUserDebugItem(item, physicsClientId=self.physics_client)
        self.item_ids = []

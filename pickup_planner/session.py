"""
Pickup Planning Session

Runs the full pipeline for one planning call:

    layout -> sequence -> plan every leg

and packages the result together with the hover poses above each cube and
the stacking slots the cubes are carried to. Nothing is kept between calls;
each plan() recomputes the tour and all paths from its inputs.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .config import SessionConfig
from .layout_generator import LayoutGenerator
from .models import Obstacle, Point3, Target, Tour, WaypointPath, as_point3
from .path_planner import ObstacleAwarePathPlanner, min_clearance
from .pickup_sequencer import PickupSequencer
from .workspace_boundaries import WorkspaceBoundary

logger = logging.getLogger(__name__)


@dataclass
class SessionPlan:
    """Result of one planning session"""
    start: Point3
    obstacle: Obstacle
    tour: Tour
    paths: List[WaypointPath]
    approach_poses: List[Point3] = field(default_factory=list)
    drop_slots: List[Point3] = field(default_factory=list)

    @property
    def n_detours(self) -> int:
        return sum(1 for p in self.paths if p.is_detour)

    @property
    def total_waypoints(self) -> int:
        return sum(len(p) for p in self.paths)

    @property
    def tour_length(self) -> float:
        """Planar length of the planned paths, detours included."""
        return sum(p.planar_length for p in self.paths)

    def clearances(self) -> List[float]:
        return [min_clearance(p, self.obstacle) for p in self.paths]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'start': list(self.start),
            'obstacle': {
                'center': list(self.obstacle.center),
                'base_radius': self.obstacle.base_radius,
                'clearance_margin': self.obstacle.clearance_margin,
                'safe_radius': self.obstacle.safe_radius,
            },
            'tour': [
                {'id': t.id, 'position': list(t.position), 'tag': t.tag, 'shape': t.shape.value}
                for t in self.tour
            ],
            'paths': [p.to_dict() for p in self.paths],
            'approach_poses': [list(p) for p in self.approach_poses],
            'drop_slots': [list(s) for s in self.drop_slots],
        }


class PickupSession:
    """
    Planning pipeline built from a SessionConfig.

    Example:
        >>> session = PickupSession(SessionConfig())
        >>> plan = session.plan(session.layout())
        >>> len(plan.paths) == len(plan.tour)
        True
    """

    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config or SessionConfig()
        self.sequencer = PickupSequencer()
        self.planner = ObstacleAwarePathPlanner(self.config.planner)

    @property
    def obstacle(self) -> Obstacle:
        return self.config.obstacle.to_obstacle()

    def layout(self) -> List[Target]:
        """Generate targets with the configured layout settings and seed."""
        cfg = self.config.layout
        generator = LayoutGenerator(policy=cfg.policy, rng=cfg.seed)
        return generator.generate_targets(cfg.count, cfg.bounds, cfg.min_separation,
                                          cfg.max_attempts_per_item, keep_out=self.obstacle)

    def plan(self, targets: Optional[Sequence[Target]] = None,
             start: Optional[Sequence[float]] = None) -> SessionPlan:
        """
        Sequence the targets and plan every leg.

        Args:
            targets: Targets to visit (default: a fresh layout())
            start: Start position (default: config.start)

        Raises:
            UnreachableTargetError: A target or the start is inside the safety disk
        """
        if targets is None:
            targets = self.layout()
        start = as_point3(start) if start is not None else self.config.start
        obstacle = self.obstacle

        outside = WorkspaceBoundary.out_of_bounds([t.position for t in targets],
                                                  self.config.layout.bounds)
        for i in outside:
            logger.warning("Target %s at (%.3f, %.3f) lies outside the layout bounds",
                           targets[i].id, targets[i].position[0], targets[i].position[1])

        tour = self.sequencer.sequence(start, targets)
        paths = self.planner.plan_tour(start, tour, obstacle)

        plan = SessionPlan(
            start=start,
            obstacle=obstacle,
            tour=tour,
            paths=paths,
            approach_poses=self.approach_poses(tour),
            drop_slots=self.drop_slots(len(tour)),
        )
        logger.info("Planned %d legs (%d detours, %d waypoints, %.3fm)",
                    len(paths), plan.n_detours, plan.total_waypoints, plan.tour_length)
        return plan

    def approach_poses(self, tour: Tour) -> List[Point3]:
        """Hover positions approach_height above each target, in tour order."""
        h = self.config.approach_height
        return [(x, y, z + h) for (x, y, z) in tour.positions]

    def drop_slots(self, count: int) -> List[Point3]:
        """
        Stacking positions for count cubes.

        Slots fill place_per_layer positions along Y, then start a new layer
        place_layer_height higher.
        """
        cfg = self.config
        ox, oy, oz = cfg.place_origin
        slots = []
        for k in range(count):
            column, layer = k % cfg.place_per_layer, k // cfg.place_per_layer
            slots.append((ox, oy + (column + 1) * cfg.place_spacing,
                          oz + layer * cfg.place_layer_height))
        return slots

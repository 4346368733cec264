"""
Cube pickup sequencing and obstacle-aware path planning.

    LayoutGenerator -> PickupSequencer -> ObstacleAwarePathPlanner

The planner only exchanges Cartesian positions and waypoint lists; inverse
kinematics, joint trajectories and rendering belong to the motion layer.
"""

from .config import (ExhaustionPolicy, LayoutConfig, MiddleSegment, ObstacleConfig,
                     PlannerConfig, SessionConfig, load_config)
from .errors import (InvalidConfigurationError, PartialLayoutError, PlanningError,
                     UnreachableTargetError)
from .interpolation import PathInterpolator
from .layout_generator import LayoutGenerator
from .models import (Leg, Obstacle, ShapeKind, Target, Tour, WaypointPath, WorkspaceBounds,
                     as_point3, planar_distance)
from .path_planner import (ObstacleAwarePathPlanner, closest_point_on_segment, min_clearance,
                           segment_intersects_disk, tangent_angles)
from .pickup_sequencer import PickupSequencer
from .session import PickupSession, SessionPlan
from .workspace_boundaries import WorkspaceBoundary

__version__ = '0.1.0'

__all__ = [
    'ExhaustionPolicy', 'LayoutConfig', 'MiddleSegment', 'ObstacleConfig', 'PlannerConfig',
    'SessionConfig', 'load_config',
    'InvalidConfigurationError', 'PartialLayoutError', 'PlanningError', 'UnreachableTargetError',
    'PathInterpolator',
    'LayoutGenerator',
    'Leg', 'Obstacle', 'ShapeKind', 'Target', 'Tour', 'WaypointPath', 'WorkspaceBounds',
    'as_point3', 'planar_distance',
    'ObstacleAwarePathPlanner', 'closest_point_on_segment', 'min_clearance',
    'segment_intersects_disk', 'tangent_angles',
    'PickupSequencer',
    'PickupSession', 'SessionPlan',
    'WorkspaceBoundary',
]

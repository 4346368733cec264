"""
Error Types for the Pickup Planner

Every failure the planner reports derives from PlanningError so callers can
catch the whole family in one place. Nothing in the core retries or swallows
these; they go straight back to the immediate caller.
"""

from typing import List, Optional, Tuple


class PlanningError(Exception):
    """Base class for all pickup planner errors"""


class InvalidConfigurationError(PlanningError, ValueError):
    """
    Malformed input detected before any geometry is computed.

    Raised for inverted workspace bounds, a non-positive safety radius,
    a path resolution below 3, and similar configuration mistakes.
    """


class PartialLayoutError(PlanningError):
    """
    Layout generation ran out of attempts under the fail-fast policy.

    Attributes:
        placed: Positions successfully placed before exhaustion
        requested: Number of positions originally requested
    """

    def __init__(self, placed: List[Tuple[float, float, float]], requested: int):
        self.placed = list(placed)
        self.requested = requested
        super().__init__(
            f"Placed {len(self.placed)} of {requested} items before running out of attempts"
        )


class UnreachableTargetError(PlanningError):
    """
    A leg endpoint lies inside the obstacle's safety disk.

    No tangent line exists from a point inside the circle, so the leg cannot
    be planned. The caller must relax the clearance or move the target.

    Attributes:
        point: The offending endpoint (x, y, z)
        distance: Planar distance from the endpoint to the obstacle center
        safe_radius: Radius of the safety disk
        endpoint: 'start' or 'goal'
    """

    def __init__(self, point: Tuple[float, float, float], distance: float,
                 safe_radius: float, endpoint: Optional[str] = None):
        self.point = tuple(point)
        self.distance = distance
        self.safe_radius = safe_radius
        self.endpoint = endpoint
        label = f"Leg {endpoint}" if endpoint else "Point"
        super().__init__(
            f"{label} ({point[0]:.4f}, {point[1]:.4f}) is inside the safety disk: "
            f"{distance:.4f}m < {safe_radius:.4f}m"
        )

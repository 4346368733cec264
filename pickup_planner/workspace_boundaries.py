"""
Workspace Boundary Checks for Pickup Planning

Validates target positions and planned waypoints against the Cartesian
workspace box, in the (is_valid, message) style used by the robot-side
boundary checks. These checks never raise: the bounds describe where cubes
are laid out, and the caller decides what an out-of-bounds point means.
"""

from typing import List, Sequence, Tuple

from .models import WaypointPath, WorkspaceBounds


class WorkspaceBoundary:
    """
    Cartesian workspace checks against a WorkspaceBounds box.

    Example:
        >>> bounds = WorkspaceBounds.from_flat([-0.3, 0.3, -0.3, 0.3, 0.0, 0.2])
        >>> WorkspaceBoundary.check_cartesian_position([0.1, 0.0, 0.0], bounds)
        (True, 'OK')
    """

    @classmethod
    def check_cartesian_position(cls, position: Sequence[float],
                                 bounds: WorkspaceBounds) -> Tuple[bool, str]:
        """
        Check if a position lies inside the workspace box.

        Args:
            position: [x, y, z] in meters
            bounds: Workspace box

        Returns:
            Tuple of (is_valid, message):
                - is_valid: True if inside the box (boundary included)
                - message: "OK" if valid, error description if invalid
        """
        if len(position) != 3:
            return False, f"Expected [x, y, z] position, got {len(position)} values"

        for axis, value, (lo, hi) in zip('XYZ', position, (bounds.x, bounds.y, bounds.z)):
            if not (lo <= value <= hi):
                return False, f"{axis} position {value:.3f}m out of bounds ({lo}, {hi})"

        return True, "OK"

    @classmethod
    def check_planar_position(cls, position: Sequence[float],
                              bounds: WorkspaceBounds) -> Tuple[bool, str]:
        """Same as check_cartesian_position but ignores Z."""
        if len(position) < 2:
            return False, f"Expected at least [x, y], got {len(position)} values"

        for axis, value, (lo, hi) in zip('XY', position[:2], (bounds.x, bounds.y)):
            if not (lo <= value <= hi):
                return False, f"{axis} position {value:.3f}m out of bounds ({lo}, {hi})"

        return True, "OK"

    @classmethod
    def check_path(cls, path: WaypointPath, bounds: WorkspaceBounds,
                   planar: bool = True) -> Tuple[bool, str]:
        """
        Check every waypoint of a path.

        Paths fly at the planning altitude, which is usually above the
        layout box, so only X and Y are checked unless planar=False.
        """
        check = cls.check_planar_position if planar else cls.check_cartesian_position
        for i, waypoint in enumerate(path.waypoints):
            valid, msg = check(waypoint.tolist(), bounds)
            if not valid:
                return False, f"Waypoint {i}: {msg}"
        return True, "OK"

    @classmethod
    def get_workspace_info(cls, bounds: WorkspaceBounds) -> str:
        """
        Get human-readable workspace information.

        Returns:
            str: Formatted workspace boundary information
        """
        info = []
        info.append("Pickup Workspace Boundaries")
        info.append("=" * 50)
        info.append("\nCartesian Workspace (meters):")
        info.append(f"  X range: [{bounds.x[0]:.2f}, {bounds.x[1]:.2f}]")
        info.append(f"  Y range: [{bounds.y[0]:.2f}, {bounds.y[1]:.2f}]")
        info.append(f"  Z range: [{bounds.z[0]:.2f}, {bounds.z[1]:.2f}]")
        info.append("=" * 50)

        return "\n".join(info)

    @classmethod
    def out_of_bounds(cls, positions: Sequence[Sequence[float]],
                      bounds: WorkspaceBounds) -> List[int]:
        """Indices of positions whose XY lies outside the box."""
        return [i for i, pos in enumerate(positions)
                if not cls.check_planar_position(pos, bounds)[0]]

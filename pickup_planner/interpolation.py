"""
Waypoint Interpolation

Straight-line and circular-arc sampling used to discretize the sub-paths of
a leg. Both samplers are end-inclusive: the first point is the segment start
and the last point is the segment end.
"""

import math
from typing import List, Sequence, Union

import numpy as np


class PathInterpolator:
    """Discretization helpers for planar waypoint paths"""

    @staticmethod
    def linear_interpolation(p_start: Union[Sequence[float], np.ndarray],
                             p_end: Union[Sequence[float], np.ndarray],
                             num_points: int) -> np.ndarray:
        """
        Sample a straight segment at evenly spaced points.

        Args:
            p_start: Segment start (any dimension)
            p_end: Segment end, same shape as p_start
            num_points: Number of points to generate (>= 1)

        Returns:
            np.ndarray: Array of shape (num_points, dim). A single point
            request returns just p_start.

        Example:
            >>> PathInterpolator.linear_interpolation([0, 0], [1, 2], 3)
            array([[0. , 0. ],
                   [0.5, 1. ],
                   [1. , 2. ]])
        """
        p_start = np.array(p_start, dtype=float)
        p_end = np.array(p_end, dtype=float)

        if p_start.shape != p_end.shape:
            raise ValueError(f"Start and end points must have same shape: "
                             f"{p_start.shape} vs {p_end.shape}")

        if num_points < 1:
            raise ValueError(f"num_points must be >= 1, got {num_points}")

        if num_points == 1:
            return p_start[np.newaxis, :]

        t = np.linspace(0.0, 1.0, num_points)[:, np.newaxis]
        return p_start + (p_end - p_start) * t

    @staticmethod
    def arc_interpolation(center: Sequence[float], radius: float,
                          theta_start: float, sweep: float,
                          num_points: int) -> np.ndarray:
        """
        Sample a circular arc in the XY plane.

        Args:
            center: Circle center [x, y]
            radius: Circle radius
            theta_start: Start angle in radians
            sweep: Signed angular extent in radians (positive = counter-clockwise)
            num_points: Number of points to generate (>= 1)

        Returns:
            np.ndarray: Array of shape (num_points, 2) on the circle
        """
        if num_points < 1:
            raise ValueError(f"num_points must be >= 1, got {num_points}")

        if num_points == 1:
            angles = np.array([theta_start])
        else:
            angles = theta_start + sweep * np.linspace(0.0, 1.0, num_points)

        cx, cy = float(center[0]), float(center[1])
        return np.column_stack((cx + radius * np.cos(angles), cy + radius * np.sin(angles)))

    @staticmethod
    def split_counts(total: int, ratios: Sequence[float]) -> List[int]:
        """
        Split a point budget into len(ratios) + 1 parts that sum to total.

        Each ratio is rounded half-up; the last part takes the remainder.

        Example:
            >>> PathInterpolator.split_counts(40, (0.3, 0.4))
            [12, 16, 12]
        """
        counts = [int(math.floor(r * total + 0.5)) for r in ratios]
        counts.append(total - sum(counts))
        return counts

    @staticmethod
    def wrap_angle(angle: float) -> float:
        """Wrap an angle to [-pi, pi]."""
        return math.atan2(math.sin(angle), math.cos(angle))

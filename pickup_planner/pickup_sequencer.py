"""
Pickup Sequencing

Orders the targets with a greedy nearest-neighbour rule: from the current
position, always go to the closest remaining target in the XY plane.

This is a heuristic. The resulting tour is usually short but carries no
shortest-tour guarantee; for the handful of cubes on a table it is good
enough and fully deterministic.
"""

import logging
from typing import List, Sequence

import numpy as np

from .errors import InvalidConfigurationError
from .models import Target, Tour, as_point3

logger = logging.getLogger(__name__)


class PickupSequencer:
    """
    Greedy nearest-neighbour tour builder.

    Distances are planar (z ignored). Ties go to the target that came first
    in the input list. Runs in O(n^2) for n targets.

    Example:
        >>> targets = [Target('a', (0.4, 0.2, 0.0)), Target('b', (0.1, 0.5, 0.0)),
        ...            Target('c', (0.3, 0.3, 0.0))]
        >>> PickupSequencer().sequence((0.0, 0.0, 0.0), targets).ids
        ['c', 'a', 'b']
    """

    def sequence(self, start: Sequence[float], targets: Sequence[Target]) -> Tour:
        """
        Build a visiting order starting from start.

        Args:
            start: Current robot position [x, y] or [x, y, z]
            targets: Targets to visit, each exactly once

        Returns:
            Tour containing every input target exactly once

        Raises:
            InvalidConfigurationError: Two targets share the same id
        """
        targets = list(targets)
        ids = [t.id for t in targets]
        if len(set(ids)) != len(ids):
            raise InvalidConfigurationError(f"Target ids must be unique, got {ids}")

        if not targets:
            return Tour(())

        xy = np.array([t.position[:2] for t in targets], dtype=float)
        remaining: List[int] = list(range(len(targets)))
        current = np.array(as_point3(start)[:2])
        order: List[int] = []

        while remaining:
            candidates = xy[remaining]
            distances = np.hypot(candidates[:, 0] - current[0], candidates[:, 1] - current[1])
            # remaining stays in input order, so argmin breaks ties by lowest index
            pick = int(np.argmin(distances))
            index = remaining.pop(pick)
            order.append(index)
            logger.debug("Step %d: %s at %.4fm", len(order), targets[index].id, distances[pick])
            current = xy[index]

        return Tour(tuple(targets[i] for i in order))

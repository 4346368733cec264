"""
Random Cube Layout Generation

Places pickup items at random, non-overlapping positions inside the
workspace bounds. Items sit on the floor of the bounds (z = zmin) so they
never stack. The random source is injected, so a seeded generator gives the
same layout every run.
"""

import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from .config import ExhaustionPolicy
from .errors import InvalidConfigurationError, PartialLayoutError
from .models import Obstacle, Point3, ShapeKind, Target, WorkspaceBounds

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


class LayoutGenerator:
    """
    Rejection-sampling layout generator.

    Each item is sampled uniformly inside the bounds and accepted once its
    planar distance to every accepted item is at least min_separation. When
    max_attempts_per_item samples all fail, the exhaustion policy decides:
    FAIL_FAST raises PartialLayoutError, BEST_EFFORT keeps the last sample.

    Example:
        >>> gen = LayoutGenerator(rng=42)
        >>> bounds = WorkspaceBounds.from_flat([-0.3, 0.3, -0.3, 0.3, 0.0, 0.2])
        >>> positions = gen.generate(3, bounds, min_separation=0.05)
        >>> len(positions)
        3
    """

    def __init__(self, policy: ExhaustionPolicy = ExhaustionPolicy.BEST_EFFORT,
                 rng: RandomSource = None):
        """
        Args:
            policy: Behaviour when an item cannot be separated (default: BEST_EFFORT)
            rng: numpy Generator, integer seed, or None for fresh OS entropy
        """
        if isinstance(policy, str):
            policy = ExhaustionPolicy(policy)
        self.policy = policy
        self.rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)

    def generate(self, count: int, bounds: WorkspaceBounds, min_separation: float,
                 max_attempts_per_item: int = 50,
                 keep_out: Optional[Obstacle] = None) -> List[Point3]:
        """
        Generate count separated positions.

        Args:
            count: Number of positions
            bounds: Sampling area; z is fixed at bounds.z[0]
            min_separation: Minimum planar distance between any two positions
            max_attempts_per_item: Samples tried per item before giving up
            keep_out: Obstacle whose safety disk samples must stay out of (optional)

        Returns:
            List of (x, y, z) tuples in placement order

        Raises:
            InvalidConfigurationError: Negative count or separation, attempts < 1
            PartialLayoutError: FAIL_FAST policy and an item could not be placed, or
                (any policy) every sample for an item fell inside keep_out
        """
        if count < 0:
            raise InvalidConfigurationError(f"count must be >= 0, got {count}")
        if min_separation < 0:
            raise InvalidConfigurationError(f"min_separation must be >= 0, got {min_separation}")
        if max_attempts_per_item < 1:
            raise InvalidConfigurationError(
                f"max_attempts_per_item must be >= 1, got {max_attempts_per_item}")

        placed: List[Point3] = []
        z = bounds.z[0]

        for i in range(count):
            fallback = None
            accepted = False
            for _ in range(max_attempts_per_item):
                candidate = self._sample(bounds, z)
                if keep_out is not None and keep_out.contains(candidate):
                    continue
                fallback = candidate
                if self._is_separated(candidate, placed, min_separation):
                    accepted = True
                    break

            if not accepted:
                # only separation may be relaxed, never the keep-out disk
                if self.policy is ExhaustionPolicy.FAIL_FAST or fallback is None:
                    raise PartialLayoutError(placed, count)
                logger.warning(
                    "Max attempts (%d) reached for item %d, placing it anyway at (%.4f, %.4f)",
                    max_attempts_per_item, i + 1, fallback[0], fallback[1])

            placed.append(fallback)

        logger.debug("Generated %d positions within %s", len(placed), bounds.to_flat())
        return placed

    def generate_targets(self, count: int, bounds: WorkspaceBounds, min_separation: float,
                         max_attempts_per_item: int = 50,
                         keep_out: Optional[Obstacle] = None,
                         shape: ShapeKind = ShapeKind.CUBE) -> List[Target]:
        """
        Generate positions and wrap them as Targets with random colour tags.

        Ids are '<shape>_1' ... '<shape>_n'. Colours are drawn after all
        positions, so the positions match generate() for the same seed.
        """
        positions = self.generate(count, bounds, min_separation, max_attempts_per_item,
                                  keep_out=keep_out)
        colours = self.rng.random((len(positions), 3))
        return [
            Target(id=f"{shape.value}_{i + 1}", position=pos,
                   tag=tuple(float(c) for c in colour), shape=shape)
            for i, (pos, colour) in enumerate(zip(positions, colours))
        ]

    def _sample(self, bounds: WorkspaceBounds, z: float) -> Point3:
        x = bounds.x[0] + (bounds.x[1] - bounds.x[0]) * self.rng.random()
        y = bounds.y[0] + (bounds.y[1] - bounds.y[0]) * self.rng.random()
        return (float(x), float(y), float(z))

    @staticmethod
    def _is_separated(candidate: Point3, placed: Sequence[Point3], min_separation: float) -> bool:
        if not placed:
            return True
        others = np.asarray(placed)[:, :2]
        distances = np.hypot(others[:, 0] - candidate[0], others[:, 1] - candidate[1])
        return bool(np.all(distances >= min_separation))

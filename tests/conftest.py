"""
conftest.py - pytest markers and fixtures shared across the test suite.
"""

import pytest

from pickup_planner import Obstacle, PlannerConfig, Target, WorkspaceBounds


def pytest_configure(config):
    for marker, text in [
        ("unit", "fast tests of a single module"),
        ("integration", "tests running the full planning pipeline"),
        ("layout", "layout generator tests"),
        ("sequencing", "pickup sequencer tests"),
        ("planning", "path planner tests"),
        ("workspace", "workspace boundary tests"),
        ("simulation", "tests needing pybullet"),
        ("slow", "long-running tests"),
    ]:
        config.addinivalue_line("markers", f"{marker}: {text}")


@pytest.fixture
def obstacle():
    """Cylinder at (0, -0.3) with a 0.06m safety radius."""
    return Obstacle(center=(0.0, -0.3), base_radius=0.05, clearance_margin=0.01)


@pytest.fixture
def bounds():
    return WorkspaceBounds.from_flat([-0.3, 0.3, -0.3, 0.3, 0.0, 0.2])


@pytest.fixture
def planner_config():
    return PlannerConfig(z_constant=0.2, resolution=40)


@pytest.fixture
def three_cubes():
    """Cubes whose nearest-neighbour order from the origin is c, a, b."""
    return [
        Target('a', (0.4, 0.2, 0.0)),
        Target('b', (0.1, 0.5, 0.0)),
        Target('c', (0.3, 0.3, 0.0)),
    ]

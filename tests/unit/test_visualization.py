"""
Unit tests for PlanVisualizer

Runs against a headless PyBullet server (DIRECT mode); only the number of
debug items is checked since DIRECT mode renders nothing.
"""

import numpy as np
import pytest

p = pytest.importorskip("pybullet")

from pickup_planner import Leg, PickupSession, SessionConfig, WaypointPath  # noqa: E402
from pickup_planner.visualization import PlanVisualizer  # noqa: E402


@pytest.fixture
def client():
    physics_client = p.connect(p.DIRECT)
    yield physics_client
    p.disconnect(physics_client)


class TestPlanVisualizer:
    """Test suite for PlanVisualizer"""

    @pytest.mark.unit
    @pytest.mark.simulation
    def test_draw_bounds(self, client, bounds):
        viz = PlanVisualizer(client)
        assert len(viz.draw_bounds(bounds)) == 4

    @pytest.mark.unit
    @pytest.mark.simulation
    def test_draw_obstacle(self, client, obstacle):
        viz = PlanVisualizer(client, num_segments=36)
        ids = viz.draw_obstacle(obstacle, height=0.2)

        # bottom, top and safety circles plus four vertical edges
        assert len(ids) == 36 * 3 + 4

    @pytest.mark.unit
    @pytest.mark.simulation
    def test_draw_targets_and_path(self, client):
        viz = PlanVisualizer(client)
        assert len(viz.draw_targets([(0, 0, 0), (0.1, 0.1, 0)])) == 4

        leg = Leg((0, 0, 0), (0.2, 0, 0))
        path = WaypointPath(leg=leg, waypoints=np.array([[0, 0, 0.2], [0.1, 0.05, 0.2],
                                                          [0.2, 0, 0.2]]))
        assert len(viz.draw_path(path)) == 2

    @pytest.mark.unit
    @pytest.mark.simulation
    def test_draw_plan_and_clear(self, client, three_cubes, bounds):
        plan = PickupSession(SessionConfig()).plan(three_cubes)
        viz = PlanVisualizer(client)
        ids = viz.draw_plan(plan, bounds=bounds)

        expected = 4 + (36 * 3 + 4) + 2 * 3 + sum(len(path) - 1 for path in plan.paths)
        assert len(ids) == expected
        assert len(viz.item_ids) == expected

        viz.clear()
        assert viz.item_ids == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

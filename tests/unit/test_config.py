"""
Unit tests for session configuration loading and validation
"""

import json

import pytest

from pickup_planner import (ExhaustionPolicy, InvalidConfigurationError, LayoutConfig,
                            MiddleSegment, ObstacleConfig, PlannerConfig, SessionConfig,
                            load_config)


class TestDefaults:
    """Default values reproduce the cube-handling simulation"""

    @pytest.mark.unit
    def test_layout_defaults(self):
        cfg = LayoutConfig()
        assert cfg.count == 3
        assert cfg.bounds.to_flat() == [-0.3, 0.3, -0.3, 0.3, 0.0, 0.2]
        assert cfg.min_separation == pytest.approx(0.05)
        assert cfg.policy is ExhaustionPolicy.BEST_EFFORT

    @pytest.mark.unit
    def test_obstacle_defaults(self):
        assert ObstacleConfig().to_obstacle().safe_radius == pytest.approx(0.06)

    @pytest.mark.unit
    def test_planner_defaults(self):
        cfg = PlannerConfig()
        assert cfg.resolution == 40
        assert cfg.middle_segment is MiddleSegment.CHORD


class TestValidation:
    """Config validation tests"""

    @pytest.mark.unit
    @pytest.mark.parametrize("kwargs", [
        {"resolution": 2},
        {"split_ratios": (0.5, 0.5)},
        {"split_ratios": (0.0, 0.4)},
        {"split_ratios": (0.3,)},
        {"middle_segment": "spline"},
    ])
    def test_invalid_planner_config(self, kwargs):
        with pytest.raises(InvalidConfigurationError):
            PlannerConfig(**kwargs)

    @pytest.mark.unit
    @pytest.mark.parametrize("kwargs", [
        {"count": -1},
        {"cube_size": 0.0},
        {"max_attempts_per_item": 0},
        {"bounds": [0.3, -0.3, -0.3, 0.3, 0.0, 0.2]},
        {"policy": "sometimes"},
    ])
    def test_invalid_layout_config(self, kwargs):
        with pytest.raises(InvalidConfigurationError):
            LayoutConfig(**kwargs)

    @pytest.mark.unit
    def test_invalid_obstacle_config(self):
        with pytest.raises(InvalidConfigurationError):
            ObstacleConfig(base_radius=0.0, clearance_margin=0.0)


class TestLoadConfig:
    """JSON loading tests"""

    @pytest.mark.unit
    def test_load_partial_file(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({
            "start": [0.1, 0.0],
            "layout": {"count": 5, "seed": 7, "policy": "fail_fast",
                       "bounds": [-0.2, 0.2, -0.2, 0.2, 0.0, 0.1]},
            "planner": {"resolution": 60, "middle_segment": "arc"},
            "obstacle": {"center": [0.0, -0.25]},
        }))

        cfg = load_config(str(path))

        assert cfg.start == (0.1, 0.0, 0.0)
        assert cfg.layout.count == 5
        assert cfg.layout.policy is ExhaustionPolicy.FAIL_FAST
        assert cfg.layout.bounds.x == (-0.2, 0.2)
        assert cfg.planner.middle_segment is MiddleSegment.ARC
        assert cfg.obstacle.center == (0.0, -0.25)
        assert cfg.obstacle.base_radius == pytest.approx(0.05)

    @pytest.mark.unit
    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"planner": {"resolutoin": 60}}))

        with pytest.raises(InvalidConfigurationError, match="resolutoin"):
            load_config(str(path))

    @pytest.mark.unit
    def test_malformed_json(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json")

        with pytest.raises(InvalidConfigurationError):
            load_config(str(path))

    @pytest.mark.unit
    @pytest.mark.parametrize("data", [
        {"layout": {"count": "3"}},
        {"layout": {"seed": "7"}},
        {"layout": {"bounds": {"x": [0, 1]}}},
        {"layout": {"policy": 5}},
        {"planner": 5},
        {"planner": {"split_ratios": 0.3}},
        {"obstacle": {"center": ["a", "b"]}},
        {"start": "home"},
    ])
    def test_wrongly_typed_values_rejected(self, data):
        with pytest.raises(InvalidConfigurationError):
            SessionConfig.from_dict(data)

    @pytest.mark.unit
    def test_validation_message_not_rewrapped(self):
        with pytest.raises(InvalidConfigurationError, match="^resolution must be >= 3"):
            SessionConfig.from_dict({"planner": {"resolution": 2}})

    @pytest.mark.unit
    def test_to_dict_round_trip(self):
        cfg = SessionConfig(layout=LayoutConfig(count=4, seed=3),
                            planner=PlannerConfig(middle_segment=MiddleSegment.ARC))

        assert SessionConfig.from_dict(json.loads(json.dumps(cfg.to_dict()))) == cfg


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

#!/usr/bin/env python3
"""
Cube Pickup Planner command line

Generates a seeded cube layout, orders the pickups and plans an
obstacle-free path for every leg, then prints a summary:

    pickup-plan --count 5 --seed 7 --resolution 40
    pickup-plan --config session.json --json plan.json
    pickup-plan --seed 3 --arc --visualize
"""

import argparse
import dataclasses
import json
import logging
import sys

from .config import ExhaustionPolicy, MiddleSegment, SessionConfig, load_config
from .errors import PlanningError
from .session import PickupSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cube pickup sequencing and obstacle-aware path planning")
    parser.add_argument("--config", help="JSON session config file")
    parser.add_argument("--count", type=int, help="Number of cubes to lay out")
    parser.add_argument("--seed", type=int, help="Random seed for the layout")
    parser.add_argument("--resolution", type=int, help="Waypoints per detour leg")
    parser.add_argument("--arc", action="store_true", help="Follow the safety circle between tangent points")
    parser.add_argument("--fail-fast", action="store_true",
                        help="Abort if a cube cannot be placed without overlap")
    parser.add_argument("--json", dest="json_out", help="Write the plan to this JSON file")
    parser.add_argument("--visualize", action="store_true", help="Show the plan in the PyBullet GUI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> SessionConfig:
    """Apply command line overrides on top of the file (or default) config."""
    config = load_config(args.config) if args.config else SessionConfig()

    layout_overrides = {}
    if args.count is not None:
        layout_overrides['count'] = args.count
    if args.seed is not None:
        layout_overrides['seed'] = args.seed
    if args.fail_fast:
        layout_overrides['policy'] = ExhaustionPolicy.FAIL_FAST

    planner_overrides = {}
    if args.resolution is not None:
        planner_overrides['resolution'] = args.resolution
    if args.arc:
        planner_overrides['middle_segment'] = MiddleSegment.ARC

    return dataclasses.replace(
        config,
        layout=dataclasses.replace(config.layout, **layout_overrides),
        planner=dataclasses.replace(config.planner, **planner_overrides),
    )


def print_summary(plan):
    print("=" * 70)
    print("Cube Pickup Plan")
    print("=" * 70)
    print(f"\nStart: ({plan.start[0]:.3f}, {plan.start[1]:.3f}, {plan.start[2]:.3f})")
    obs = plan.obstacle
    print(f"Obstacle: center ({obs.center[0]:.3f}, {obs.center[1]:.3f}), "
          f"safe radius {obs.safe_radius:.3f}m")

    print("\nPickup order:")
    print("-" * 70)
    clearances = plan.clearances()
    for i, (target, path) in enumerate(zip(plan.tour, plan.paths), 1):
        x, y, z = target.position
        kind = "detour" if path.is_detour else "direct"
        print(f"  {i}. {target.id:<10} ({x:+.3f}, {y:+.3f}, {z:.3f})  "
              f"{kind:<6} {len(path):>3} waypoints  clearance {clearances[i - 1]:.3f}m")

    print("-" * 70)
    print(f"Legs: {len(plan.paths)}  Detours: {plan.n_detours}  "
          f"Waypoints: {plan.total_waypoints}  Path length: {plan.tour_length:.3f}m")
    print("=" * 70)


def show_in_pybullet(plan, config: SessionConfig):
    import time
    import pybullet as p
    from .visualization import PlanVisualizer

    client = p.connect(p.GUI)
    try:
        p.resetDebugVisualizerCamera(1.2, 45, -40, [0, 0, 0], physicsClientId=client)
        PlanVisualizer(client).draw_plan(plan, bounds=config.layout.bounds)
        print("\nShowing plan in PyBullet. Press Ctrl-C to exit.")
        while p.isConnected(client):
            time.sleep(0.1)
    except KeyboardInterrupt:
        pass
    finally:
        if p.isConnected(client):
            p.disconnect(client)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
        session = PickupSession(config)
        plan = session.plan()
    except PlanningError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(plan)

    if args.json_out:
        with open(args.json_out, "w") as f:
            json.dump(plan.to_dict(), f, indent=2)
        print(f"Saved plan to {args.json_out}")

    if args.visualize:
        show_in_pybullet(plan, config)

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Example: Cube Pickup Planning

Lays out random cubes, orders the pickups nearest-first and plans a path
around the cylinder obstacle for every leg, then shows the result in
PyBullet if it is installed.
"""

import time

from pickup_planner import LayoutConfig, PickupSession, SessionConfig, WorkspaceBoundary


def main():
    print("=" * 70)
    print("Cube Pickup Planning Example")
    print("=" * 70)
    print("\nThis example plans a full pickup session for a seeded cube layout.\n")

    config = SessionConfig(layout=LayoutConfig(count=6, seed=7))
    session = PickupSession(config)

    print(WorkspaceBoundary.get_workspace_info(config.layout.bounds))

    targets = session.layout()
    print(f"\n✓ Generated {len(targets)} cubes")

    plan = session.plan(targets)
    print(f"✓ Pickup order: {' -> '.join(plan.tour.ids)}\n")

    print("-" * 70)
    for target, path, hover, slot in zip(plan.tour, plan.paths, plan.approach_poses,
                                         plan.drop_slots):
        kind = "detour" if path.is_detour else "direct"
        print(f"{target.id}: {kind}, {len(path)} waypoints")
        print(f"   Hover at ({hover[0]:.3f}, {hover[1]:.3f}, {hover[2]:.3f})")
        print(f"   Drop at  ({slot[0]:.3f}, {slot[1]:.3f}, {slot[2]:.3f})")
    print("-" * 70)
    print(f"\nTotal path length: {plan.tour_length:.3f}m with {plan.n_detours} detour(s)")

    try:
        import pybullet as p
    except ImportError:
        print("\npybullet not installed, skipping visualization (pip install .[sim])")
        return

    from pickup_planner.visualization import PlanVisualizer

    client = p.connect(p.GUI)
    PlanVisualizer(client).draw_plan(plan, bounds=config.layout.bounds)
    print("\n✓ Plan drawn in PyBullet")
    print("\nPress Ctrl+C to exit...")
    try:
        while p.isConnected(client):
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n\nExiting...")
    finally:
        if p.isConnected(client):
            p.disconnect(client)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Example: Obstacle Detour

Plans a single leg straight through the obstacle and compares the chord and
arc variants of the tangent detour.
"""

from pickup_planner import (MiddleSegment, Obstacle, ObstacleAwarePathPlanner, PlannerConfig,
                            UnreachableTargetError, min_clearance, segment_intersects_disk)


def main():
    print("=" * 70)
    print("Obstacle Detour Example")
    print("=" * 70)

    obstacle = Obstacle(center=(0.0, -0.3), base_radius=0.05, clearance_margin=0.01)
    start, goal = (0.0, 0.0, 0.0), (0.0, -0.6, 0.0)

    print(f"\nObstacle at {obstacle.center}, safe radius {obstacle.safe_radius:.3f}m")
    print(f"Leg {start[:2]} -> {goal[:2]}")
    print(f"Straight line collides: {segment_intersects_disk(start, goal, obstacle.center, obstacle.safe_radius)}\n")

    print("-" * 70)
    for middle in MiddleSegment:
        planner = ObstacleAwarePathPlanner(PlannerConfig(resolution=40, middle_segment=middle))
        path = planner.plan_leg(start, goal, obstacle)
        t1, t3 = path.tangent_points
        print(f"{middle.value}:")
        print(f"   Tangent points ({t1[0]:+.4f}, {t1[1]:+.4f}) and ({t3[0]:+.4f}, {t3[1]:+.4f})")
        print(f"   Segments {path.segment_counts}, length {path.planar_length:.4f}m")
        print(f"   Min clearance {min_clearance(path, obstacle):.4f}m")
    print("-" * 70)

    print("\nGoal inside the safety disk:")
    try:
        ObstacleAwarePathPlanner().plan_leg(start, (0.0, -0.27, 0.0), obstacle)
    except UnreachableTargetError as e:
        print(f"   ✗ {e}")

    print("\n" + "=" * 70)


if __name__ == "__main__":
    main()

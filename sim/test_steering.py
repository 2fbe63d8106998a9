#!/usr/bin/env python3
"""
Tests for the pursuit steering controller.
"""

from __future__ import annotations

import math
import unittest

from sim.geometry import Point
from sim.network import RoadNetwork, RoadSegment
from sim.steering import SteeringPolicy, compute_steering, desired_heading, steer
from sim.vehicle import Direction, PathStep, Vehicle

_EAST_ROAD = RoadSegment(Point(0, 0), Point(10, 0))
_NORTH_ROAD = RoadSegment(Point(10, 0), Point(10, 10))


def _car(x: float, y: float, rot: float = 0.0, *steps: PathStep) -> Vehicle:
    return Vehicle(name="CAR", position=Point(x, y), rotation_deg=rot,
                   speed=4.0, path_queue=list(steps))


class ComputeSteeringTests(unittest.TestCase):
    def test_on_line_heading_at_waypoint_needs_no_steering(self) -> None:
        cmd = compute_steering(_car(2, 0), _EAST_ROAD, Direction.FORWARD)
        self.assertEqual(cmd.projected, Point(2, 0))
        self.assertEqual(cmd.line_deviation, 0.0)
        self.assertEqual(cmd.blend_weight, 1.0)
        self.assertAlmostEqual(cmd.aim.x, 6.0)
        self.assertAlmostEqual(cmd.aim.y, 0.0)
        self.assertAlmostEqual(cmd.desired_deg, 360.0)
        self.assertAlmostEqual(cmd.steering_deg, 0.0)
        self.assertFalse(cmd.arrived)

    def test_backward_targets_road_start(self) -> None:
        cmd = compute_steering(_car(5, 0), _EAST_ROAD, Direction.BACKWARD)
        self.assertEqual(cmd.waypoint, Point(0, 0))
        self.assertAlmostEqual(cmd.aim.x, 2.5)
        self.assertAlmostEqual(cmd.steering_deg, 180.0)

    def test_deviation_is_square_root_of_distance(self) -> None:
        cmd = compute_steering(_car(0, -4), _EAST_ROAD, Direction.FORWARD)
        self.assertAlmostEqual(cmd.line_deviation, 2.0)
        self.assertAlmostEqual(cmd.blend_weight, math.exp(6.0))

    def test_far_from_line_aims_near_projection(self) -> None:
        cmd = compute_steering(_car(0, -4), _EAST_ROAD, Direction.FORWARD)
        # Weight ~403 pulls the aim point almost onto the projection.
        self.assertLess(cmd.aim.x, 0.05)
        self.assertAlmostEqual(cmd.aim.y, 0.0)
        # Vehicle faces east and must turn left (towards +y).
        self.assertGreater(cmd.steering_deg, 80.0)
        self.assertLess(cmd.steering_deg, 90.0)

    def test_vertical_road(self) -> None:
        cmd = compute_steering(_car(7, 3, 90.0), _NORTH_ROAD, Direction.FORWARD)
        self.assertEqual(cmd.projected, Point(10, 3))
        self.assertGreater(cmd.line_deviation, 0.0)
        # Heading north, line is to the east: turn right.
        self.assertLess(cmd.steering_deg, 0.0)

    def test_steering_compares_normalized_angles(self) -> None:
        # Same pose, rotation stored with extra full turns.
        a = compute_steering(_car(0, -4, 0.0), _EAST_ROAD, Direction.FORWARD)
        b = compute_steering(_car(0, -4, 720.0), _EAST_ROAD, Direction.FORWARD)
        self.assertAlmostEqual(a.steering_deg, b.steering_deg)

    def test_desired_heading_formula(self) -> None:
        # Aim due north of the vehicle: atan2 gives -90, result is 90.
        self.assertAlmostEqual(desired_heading(Point(0, 0), Point(0, 5)), 90.0)
        # Aim due west: atan2 gives 0, result is 180.
        self.assertAlmostEqual(desired_heading(Point(0, 0), Point(-5, 0)), 180.0)

    def test_desired_heading_closed_range(self) -> None:
        # Aim due east: atan2 gives exactly 180, the result is 360.
        self.assertEqual(desired_heading(Point(0, 0), Point(5, 0)), 360.0)
        for deg in range(-180, 181, 15):
            aim = Point(math.cos(math.radians(deg)), math.sin(math.radians(deg)))
            h = desired_heading(Point(0, 0), aim)
            self.assertGreaterEqual(h, 0.0, msg=f"deg={deg}")
            self.assertLessEqual(h, 360.0, msg=f"deg={deg}")

    def test_does_not_mutate_vehicle(self) -> None:
        car = _car(0, -4, 0.0, PathStep(0))
        compute_steering(car, _EAST_ROAD, Direction.FORWARD)
        self.assertEqual(car.steering_deg, 0.0)
        self.assertEqual(len(car.path_queue), 1)


class SteerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.roads = RoadNetwork([_EAST_ROAD, _NORTH_ROAD])

    def test_pops_step_when_within_arrival_radius(self) -> None:
        car = _car(9.5, 0, 0.0, PathStep(0), PathStep(1))
        cmd = steer(car, self.roads)
        self.assertTrue(cmd.arrived)
        self.assertEqual(list(car.path_queue), [PathStep(1)])

    def test_keeps_step_at_exactly_arrival_radius(self) -> None:
        car = _car(9.0, 0, 0.0, PathStep(0), PathStep(1))
        steer(car, self.roads)
        self.assertEqual(car.current_step, PathStep(0))

    def test_keeps_step_when_far(self) -> None:
        car = _car(0, -4, 0.0, PathStep(0))
        cmd = steer(car, self.roads)
        self.assertFalse(cmd.arrived)
        self.assertEqual(len(car.path_queue), 1)
        self.assertEqual(car.steering_deg, cmd.steering_deg)

    def test_custom_arrival_radius(self) -> None:
        car = _car(7.0, 0, 0.0, PathStep(0))
        steer(car, self.roads, SteeringPolicy(arrival_radius=5.0))
        self.assertFalse(car.has_path)

    def test_empty_queue_leaves_steering_alone(self) -> None:
        car = _car(0, 0)
        car.steering_deg = 12.5
        self.assertIsNone(steer(car, self.roads))
        self.assertEqual(car.steering_deg, 12.5)

    def test_unknown_road_fails_fast(self) -> None:
        car = _car(0, 0, 0.0, PathStep(7))
        with self.assertRaises(IndexError):
            steer(car, self.roads)


if __name__ == "__main__":
    unittest.main()

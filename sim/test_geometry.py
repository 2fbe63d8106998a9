#!/usr/bin/env python3
"""
Tests for angle wrapping and line projection helpers.
"""

from __future__ import annotations

import math
import unittest

from sim.geometry import (
    Point,
    distance,
    normalize_angle,
    project_onto_line,
    to_degrees,
    to_radians,
)


class NormalizeAngleTests(unittest.TestCase):
    _SAMPLES = (
        -1e6 - 0.3, -720.0, -540.0, -181.0, -180.0, -179.5, -0.25,
        0.0, 45.0, 179.9, 180.0, 181.0, 359.0, 360.0, 540.0, 1234.5,
    )

    def test_result_in_half_open_range(self) -> None:
        for a in self._SAMPLES:
            n = normalize_angle(a)
            self.assertGreater(n, -180.0, msg=f"a={a}")
            self.assertLessEqual(n, 180.0, msg=f"a={a}")

    def test_result_congruent_mod_360(self) -> None:
        for a in self._SAMPLES:
            n = normalize_angle(a)
            self.assertAlmostEqual(math.remainder(a - n, 360.0), 0.0, places=6,
                                   msg=f"a={a}")

    def test_half_turn_maps_to_positive_180(self) -> None:
        self.assertEqual(normalize_angle(180.0), 180.0)
        self.assertEqual(normalize_angle(-180.0), 180.0)
        self.assertEqual(normalize_angle(540.0), 180.0)

    def test_small_angles_unchanged(self) -> None:
        self.assertAlmostEqual(normalize_angle(30.0), 30.0)
        self.assertAlmostEqual(normalize_angle(-30.0), -30.0)
        self.assertAlmostEqual(normalize_angle(390.0), 30.0)


class ConversionTests(unittest.TestCase):
    def test_degrees_radians(self) -> None:
        self.assertAlmostEqual(to_radians(180.0), math.pi)
        self.assertAlmostEqual(to_degrees(math.pi / 2), 90.0)
        self.assertAlmostEqual(to_degrees(to_radians(-37.5)), -37.5)


class ProjectionTests(unittest.TestCase):
    def test_vertical_line_projects_horizontally(self) -> None:
        cx, cy = project_onto_line(Point(7, 8), Point(10, 5), Point(10, 10))
        self.assertEqual((cx, cy), (10, 8))

    def test_diagonal_line(self) -> None:
        cx, cy = project_onto_line(Point(0, 10), Point(0, 0), Point(10, 10))
        self.assertAlmostEqual(cx, 5.0)
        self.assertAlmostEqual(cy, 5.0)

    def test_horizontal_line(self) -> None:
        cx, cy = project_onto_line(Point(0, 0), Point(5, 5), Point(10, 5))
        self.assertAlmostEqual(cx, 0.0)
        self.assertAlmostEqual(cy, 5.0)

    def test_projection_may_fall_outside_segment(self) -> None:
        cx, cy = project_onto_line(Point(30, 1), Point(0, 0), Point(10, 0))
        self.assertAlmostEqual(cx, 30.0)
        self.assertAlmostEqual(cy, 0.0)

    def test_distance(self) -> None:
        self.assertAlmostEqual(distance(Point(1, 1), Point(4, 5)), 5.0)


if __name__ == "__main__":
    unittest.main()

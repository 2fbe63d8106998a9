#!/usr/bin/env python3
"""
sim/geometry.py
===============
Low-level geometry helpers used by :mod:`sim.vehicle` and :mod:`sim.steering`.

Keeping these in a separate module avoids circular imports and makes unit
testing straightforward.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Immutable 2-D world coordinate."""

    x: float
    y: float

    def translated(self, dx: float, dy: float) -> "Point":
        """Return a new point offset by *(dx, dy)*."""
        return Point(self.x + dx, self.y + dy)

    def as_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


# Aliases so callers import every angle helper from one place.
to_radians = math.radians
to_degrees = math.degrees


def normalize_angle(angle_deg: float) -> float:
    """Wrap *angle_deg* into the half-open interval (-180, 180].

    The result is congruent to the input modulo 360.
    """
    wrapped = (angle_deg + 180.0) % 360.0 - 180.0
    if wrapped <= -180.0:
        return wrapped + 360.0
    return wrapped


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def project_onto_line(p: Point, start: Point, end: Point) -> Tuple[float, float]:
    """Closest point to *p* on the infinite line through *start* and *end*.

    Parameters
    ----------
    p : Point
        The point to project.
    start, end : Point
        Two points defining the line.  They are not treated as a finite
        segment, so the result may lie beyond either endpoint.

    Returns
    -------
    (float, float)
        Coordinates of the orthogonal projection.  A vertical line
        (``start.x == end.x``) projects horizontally: ``(start.x, p.y)``.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    if dx == 0:
        return start.x, p.y

    slope = dy / dx
    intercept = start.y - slope * start.x
    cx = (p.x + slope * p.y - slope * intercept) / (1.0 + slope * slope)
    cy = slope * cx + intercept
    return cx, cy

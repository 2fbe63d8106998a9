#!/usr/bin/env python3
"""
sim/steering.py
===============
Pursuit-style path following.

Each tick the controller looks at the road a vehicle is currently
targeting and aims it at a point blended between

* the vehicle's orthogonal projection onto the road's infinite line, and
* the waypoint at the end of the road it is driving towards.

The blend weight grows exponentially with the (square-rooted) distance
to the line, so a vehicle far off the line heads for its projection
first, while a vehicle on the line heads for the waypoint.

Public helpers
--------------
* :class:`SteeringPolicy`: frozen bag of controller constants.
* :func:`compute_steering`: pure computation, returns a
  :class:`SteeringCommand`.
* :func:`steer`: applies the command to a vehicle and pops its path
  queue when the waypoint is reached.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from config import ARRIVAL_RADIUS, BLEND_SHARPNESS, STEERING_GAIN
from sim.geometry import (
    Point,
    distance,
    normalize_angle,
    project_onto_line,
    to_degrees,
)
from sim.network import RoadNetwork, RoadSegment
from sim.vehicle import Direction, PathStep, Vehicle

log = logging.getLogger("steering")


@dataclass(frozen=True)
class SteeringPolicy:
    """Immutable controller constants."""

    steering_gain: float = STEERING_GAIN
    """Degrees of rotation per second per degree of steering."""

    blend_sharpness: float = BLEND_SHARPNESS
    """Exponent factor turning line deviation into a blend weight."""

    arrival_radius: float = ARRIVAL_RADIUS
    """A waypoint closer than this counts as reached."""


@dataclass(frozen=True)
class SteeringCommand:
    """Result of one controller evaluation for one vehicle."""

    projected: Point
    line_deviation: float
    blend_weight: float
    waypoint: Point
    aim: Point
    desired_deg: float
    steering_deg: float
    waypoint_distance: float
    arrived: bool


def desired_heading(position: Point, aim: Point) -> float:
    """Heading in degrees from *position* towards *aim*.

    Computed as ``fmod(atan2(position - aim), 360) + 180``, so the result
    lies in [0, 360] rather than (-180, 180].  Callers compare it only
    through :func:`~sim.geometry.normalize_angle`.
    """
    away = to_degrees(math.atan2(position.y - aim.y, position.x - aim.x))
    return math.fmod(away, 360.0) + 180.0


def compute_steering(
    vehicle: Vehicle,
    road: RoadSegment,
    direction: Direction,
    policy: Optional[SteeringPolicy] = None,
) -> SteeringCommand:
    """Evaluate the controller for *vehicle* following *road*.

    Does not mutate *vehicle*.
    """
    policy = policy or SteeringPolicy()
    p = vehicle.position

    cx, cy = project_onto_line(p, road.start, road.end)
    ox = p.x - cx
    oy = p.y - cy
    line_deviation = (ox * ox + oy * oy) ** 0.25
    blend_weight = math.exp(policy.blend_sharpness * line_deviation)

    waypoint = road.end if direction == Direction.FORWARD else road.start
    aim = Point(
        (cx * blend_weight + waypoint.x) / (blend_weight + 1.0),
        (cy * blend_weight + waypoint.y) / (blend_weight + 1.0),
    )

    desired_deg = desired_heading(p, aim)
    steering_deg = normalize_angle(desired_deg - vehicle.rotation_deg)

    remaining = distance(p, waypoint)
    return SteeringCommand(
        projected=Point(cx, cy),
        line_deviation=line_deviation,
        blend_weight=blend_weight,
        waypoint=waypoint,
        aim=aim,
        desired_deg=desired_deg,
        steering_deg=steering_deg,
        waypoint_distance=remaining,
        arrived=remaining < policy.arrival_radius,
    )


def steer(
    vehicle: Vehicle,
    roads: RoadNetwork,
    policy: Optional[SteeringPolicy] = None,
) -> Optional[SteeringCommand]:
    """Update *vehicle*'s steering towards the front of its path queue.

    Returns the applied command, or *None* when the queue is empty (the
    vehicle keeps its last steering value and drives on).
    """
    step: Optional[PathStep] = vehicle.current_step
    if step is None:
        return None

    cmd = compute_steering(vehicle, roads.road(step.road_index), step.direction, policy)
    vehicle.steering_deg = cmd.steering_deg

    if cmd.arrived:
        vehicle.advance_path()
        log.debug(
            "%s reached road %d (%s), %d step(s) left",
            vehicle.name, step.road_index, step.direction.name,
            len(vehicle.path_queue),
        )
    return cmd

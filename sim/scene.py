#!/usr/bin/env python3
"""
sim/scene.py
============
Scene bootstrap: builds the starting :class:`~sim.traffic.Traffic`.

:func:`default_traffic` returns the built-in demo scene, five roads and
two cars.  :func:`load_scene` reads a JSON file with the same shape as
the ``/Cars`` snapshot, so a captured snapshot can be replayed.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from sim.geometry import Point
from sim.network import RoadNetwork, RoadSegment
from sim.steering import SteeringPolicy
from sim.traffic import Traffic
from sim.vehicle import Direction, PathStep, Vehicle

log = logging.getLogger("scene")

FORWARD = Direction.FORWARD
BACKWARD = Direction.BACKWARD


def default_network() -> RoadNetwork:
    """The demo road layout: a short east road, a northbound link,
    a long east road, a diagonal feeder and a diagonal exit."""
    return RoadNetwork([
        RoadSegment(Point(5, 5), Point(10, 5), None, 1),
        RoadSegment(Point(10, 5), Point(10, 10), 0, 2),
        RoadSegment(Point(10, 10), Point(20, 10), 1, None),
        RoadSegment(Point(5, 15), Point(10, 10), None, 1),
        RoadSegment(Point(10, 5), Point(15, 0), 1, None),
    ])


def default_traffic(policy: Optional[SteeringPolicy] = None) -> Traffic:
    """Fresh copy of the demo scene."""
    vehicles = [
        Vehicle(
            name="Lucas",
            position=Point(0, 0),
            speed=4.0,
            path_queue=[
                PathStep(0, FORWARD),
                PathStep(1, FORWARD),
                PathStep(2, FORWARD),
            ],
        ),
        Vehicle(
            name="Felix",
            position=Point(2, 20),
            speed=4.0,
            path_queue=[
                PathStep(3, FORWARD),
                PathStep(1, BACKWARD),
                PathStep(4, FORWARD),
            ],
        ),
    ]
    return Traffic(vehicles, default_network(), policy=policy)


def traffic_from_dict(
    data: Dict[str, Any],
    policy: Optional[SteeringPolicy] = None,
) -> Traffic:
    """Build a :class:`Traffic` from a ``{cars, roads}`` mapping.

    Raises
    ------
    KeyError
        If a required field is missing.
    ValueError
        If a value has the wrong type or a path step names a missing road.
    """
    roads = RoadNetwork([RoadSegment.from_dict(r) for r in data.get("roads", [])])
    vehicles = [Vehicle.from_dict(c) for c in data.get("cars", [])]
    return Traffic(vehicles, roads, policy=policy)


def load_scene(path: str, policy: Optional[SteeringPolicy] = None) -> Traffic:
    """Read a scene file written in the snapshot format."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    traffic = traffic_from_dict(data, policy=policy)
    log.info(
        "Loaded scene %s: %d car(s), %d road(s)",
        path, len(traffic.vehicles), len(traffic.roads),
    )
    return traffic

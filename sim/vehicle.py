#!/usr/bin/env python3
"""
sim/vehicle.py
==============
A single simulated vehicle.  Each vehicle:
  - owns its pose (position + rotation), constant speed and steering
  - carries a queue of :class:`PathStep` entries it must drive along
  - integrates its own pose forward in time (:meth:`Vehicle.integrate`)
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Deque, Dict, Iterable, Optional

from sim.geometry import Point, to_radians


class Direction(IntEnum):
    """Which end of a road the vehicle is heading for.

    Values match the integers the front end expects on the wire.
    """

    FORWARD = 0
    BACKWARD = 1


@dataclass(frozen=True)
class PathStep:
    """One entry of a vehicle's path queue."""

    road_index: int
    direction: Direction = Direction.FORWARD

    def as_dict(self) -> Dict[str, int]:
        return {"road": self.road_index, "direction": int(self.direction)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PathStep":
        return cls(
            road_index=int(data["road"]),
            direction=Direction(int(data.get("direction", Direction.FORWARD))),
        )


@dataclass
class Vehicle:
    """A vehicle driving at constant speed.

    Attributes
    ----------
    name : str
        Display name, unique within a scene.
    position : Point
        World-space position.
    rotation_deg : float
        Heading in degrees, counter-clockwise from +x.  Stored unbounded.
    speed : float
        Distance units per second.  Never changes during a run.
    steering_deg : float
        Signed steering command in degrees, set by the steering controller.
    path_queue : deque of PathStep
        Remaining path, front entry is the current target.
    """

    name: str
    position: Point
    rotation_deg: float = 0.0
    speed: float = 0.0
    steering_deg: float = 0.0
    path_queue: Deque[PathStep] = field(default_factory=deque)

    def __post_init__(self) -> None:
        if not isinstance(self.path_queue, deque):
            self.path_queue = deque(self.path_queue)

    @property
    def current_step(self) -> Optional[PathStep]:
        """Front of the path queue, or *None* once the path is exhausted."""
        return self.path_queue[0] if self.path_queue else None

    @property
    def has_path(self) -> bool:
        return len(self.path_queue) > 0

    # ── physics ───────────────────────────────────────────────────────────

    def integrate(self, elapsed_s: float, steering_gain: float) -> None:
        """Advance the pose by *elapsed_s* seconds.

        Translates along the current heading at constant speed, then turns
        by ``steering_deg * elapsed_s * steering_gain``.  The rotation is
        not wrapped here.
        """
        theta = to_radians(self.rotation_deg)
        step = elapsed_s * self.speed
        self.position = self.position.translated(
            math.cos(theta) * step, math.sin(theta) * step,
        )
        self.rotation_deg += self.steering_deg * elapsed_s * steering_gain

    def advance_path(self) -> PathStep:
        """Drop and return the current target step."""
        return self.path_queue.popleft()

    def assign_path(self, steps: Iterable[PathStep]) -> None:
        """Replace the remaining path with *steps*."""
        self.path_queue = deque(steps)

    # ── serialisation ─────────────────────────────────────────────────────

    def as_dict(self) -> Dict[str, Any]:
        """Wire mapping consumed by the renderer."""
        return {
            "name": self.name,
            "pos": self.position.as_dict(),
            "rot": self.rotation_deg,
            "vel": self.speed,
            "steering": self.steering_deg,
            "ai": {"road_queue": [step.as_dict() for step in self.path_queue]},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vehicle":
        ai = data.get("ai") or {}
        return cls(
            name=str(data["name"]),
            position=Point(float(data["pos"]["x"]), float(data["pos"]["y"])),
            rotation_deg=float(data.get("rot", 0.0)),
            speed=float(data.get("vel", 0.0)),
            steering_deg=float(data.get("steering", 0.0)),
            path_queue=deque(
                PathStep.from_dict(step) for step in ai.get("road_queue", [])
            ),
        )

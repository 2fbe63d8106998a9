#!/usr/bin/env python3
"""
sim/traffic.py
==============
The :class:`Traffic` aggregate: every vehicle plus the road network they
drive on.  This is the unit the simulation loop mutates and the HTTP
server serialises.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from sim.network import RoadNetwork
from sim.steering import SteeringPolicy, steer
from sim.vehicle import Vehicle

log = logging.getLogger("traffic")


class Traffic:
    """Vehicles and roads of one running scene.

    Parameters
    ----------
    vehicles : sequence of Vehicle
        Processed in this order every tick.
    roads : RoadNetwork
        Read-only during simulation.
    policy : SteeringPolicy or None
        Controller constants; uses defaults when *None*.

    Raises
    ------
    ValueError
        If any vehicle's path queue names a road that does not exist.
    """

    def __init__(
        self,
        vehicles: Sequence[Vehicle],
        roads: RoadNetwork,
        policy: Optional[SteeringPolicy] = None,
    ) -> None:
        self.vehicles: List[Vehicle] = list(vehicles)
        self.roads = roads
        self.policy = policy or SteeringPolicy()
        self.validate()

    def validate(self) -> None:
        """Check every queued path step against the road network."""
        for vehicle in self.vehicles:
            for step in vehicle.path_queue:
                if not self.roads.has_road(step.road_index):
                    raise ValueError(
                        f"vehicle {vehicle.name!r} queues road "
                        f"{step.road_index}, but the network has "
                        f"{len(self.roads)} roads"
                    )

    def vehicle(self, name: str) -> Vehicle:
        """Look a vehicle up by name (raises ``KeyError`` if absent)."""
        for vehicle in self.vehicles:
            if vehicle.name == name:
                return vehicle
        raise KeyError(name)

    # ── tick ──────────────────────────────────────────────────────────────

    def step(self, elapsed_s: float) -> None:
        """Advance every vehicle by *elapsed_s* seconds.

        For each vehicle in order: integrate the pose, then, if it still
        has a path, recompute its steering.
        """
        gain = self.policy.steering_gain
        for vehicle in self.vehicles:
            vehicle.integrate(elapsed_s, gain)
            if vehicle.has_path:
                steer(vehicle, self.roads, self.policy)
                if not vehicle.has_path:
                    log.info("%s finished its path", vehicle.name)

    # ── serialisation ─────────────────────────────────────────────────────

    def as_dict(self) -> Dict[str, Any]:
        """Fresh JSON-ready snapshot ``{cars: [...], roads: [...]}``."""
        return {
            "cars": [vehicle.as_dict() for vehicle in self.vehicles],
            "roads": self.roads.as_list(),
        }

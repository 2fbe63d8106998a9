#!/usr/bin/env python3
"""
sim/network.py
==============
Road-network topology for the traffic simulation.

Defines :class:`RoadSegment` and :class:`RoadNetwork`, an ordered,
read-only collection of directed straight roads.  Vehicles refer to
roads by their index in the network.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence

from sim.geometry import Point

# Wire value for "no linked road" used by the front end.
NO_LINK = -1


# ── Road segment ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RoadSegment:
    """A directed straight road from ``start`` to ``end``.

    ``incoming_link`` / ``outgoing_link`` hold the index of the road that
    feeds into ``start`` and the road that continues from ``end``.  They
    are topology metadata kept for the renderer and are not read by the
    simulation.
    """

    start: Point
    end: Point
    incoming_link: Optional[int] = None
    outgoing_link: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start.as_dict(),
            "end": self.end.as_dict(),
            "startRoadIdx": _link_to_wire(self.incoming_link),
            "endRoadIdx": _link_to_wire(self.outgoing_link),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoadSegment":
        return cls(
            start=Point(float(data["start"]["x"]), float(data["start"]["y"])),
            end=Point(float(data["end"]["x"]), float(data["end"]["y"])),
            incoming_link=_link_from_wire(data.get("startRoadIdx", NO_LINK)),
            outgoing_link=_link_from_wire(data.get("endRoadIdx", NO_LINK)),
        )


def _link_to_wire(link: Optional[int]) -> int:
    return NO_LINK if link is None else link


def _link_from_wire(value: Optional[int]) -> Optional[int]:
    if value is None or int(value) < 0:
        return None
    return int(value)


# ── Road network ──────────────────────────────────────────────────────────────

class RoadNetwork:
    """Ordered list of road segments, addressed by index.

    The network is built once at scene setup and never mutated while the
    simulation runs.
    """

    def __init__(self, roads: Sequence[RoadSegment]) -> None:
        self._roads: List[RoadSegment] = list(roads)

    def __len__(self) -> int:
        return len(self._roads)

    def __iter__(self) -> Iterator[RoadSegment]:
        return iter(self._roads)

    def has_road(self, index: int) -> bool:
        return 0 <= index < len(self._roads)

    def road(self, index: int) -> RoadSegment:
        """Return the road at *index*.

        Raises
        ------
        IndexError
            If *index* does not name a road in this network.
        """
        if not self.has_road(index):
            raise IndexError(
                f"road index {index} out of range for network of "
                f"{len(self._roads)} roads"
            )
        return self._roads[index]

    def as_list(self) -> List[Dict[str, Any]]:
        return [road.as_dict() for road in self]

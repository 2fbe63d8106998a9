"""
server/schemas.py
=================
Pydantic models describing the snapshot the renderer polls.

Field names are the renderer's wire names, so they are not snake_case.
"""

from typing import List

from pydantic import BaseModel


class PointModel(BaseModel):
    x: float
    y: float


class PathStepModel(BaseModel):
    """One queued road, ``direction`` is 0 (forward) or 1 (backward)."""
    road: int
    direction: int


class AiModel(BaseModel):
    road_queue: List[PathStepModel]


class CarModel(BaseModel):
    """Single vehicle in the snapshot."""
    name: str
    pos: PointModel
    rot: float
    vel: float
    steering: float
    ai: AiModel


class RoadModel(BaseModel):
    """Single road; link indices are ``-1`` when absent."""
    start: PointModel
    end: PointModel
    startRoadIdx: int
    endRoadIdx: int


class TrafficSnapshot(BaseModel):
    """Whole simulation state served at ``/Cars``."""
    cars: List[CarModel]
    roads: List[RoadModel]

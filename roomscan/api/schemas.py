"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from roomscan.models import (
    Wall, Room, WallElement, PlaneObservation, FloorPlan, Bounds3D,
    ReconstructionParams,
)


class ObservationRequest(BaseModel):
    """Request body for the /observations endpoint."""
    observations: list[PlaneObservation]
    room: Room = Field(default_factory=Room)
    elements: dict[str, list[WallElement]] = {}
    params: ReconstructionParams = Field(default_factory=ReconstructionParams)


class ObservationResponse(BaseModel):
    room: Room
    accepted: list[Wall]


class WallsRequest(BaseModel):
    """Request body for the /reconstruct and /floorplan endpoints."""
    walls: list[Wall]
    room_id: str | None = None
    params: ReconstructionParams = Field(default_factory=ReconstructionParams)


class ReconstructResponse(BaseModel):
    room: Room
    complete: bool
    bounds: Bounds3D | None
    gap_count: int
    inferred_count: int
    floor_plan: FloorPlan


class FloorPlanResponse(BaseModel):
    floor_plan: FloorPlan
    area: float
    volume: float

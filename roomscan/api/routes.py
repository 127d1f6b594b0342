"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from roomscan.models import Room, ReconstructionParams
from roomscan.services.scan_service import ScanService
from roomscan.api.schemas import (
    ObservationRequest, ObservationResponse,
    WallsRequest, ReconstructResponse, FloorPlanResponse,
)

router = APIRouter()


@router.post("/observations", response_model=ObservationResponse)
async def ingest_observations(request: ObservationRequest) -> ObservationResponse:
    """Promote and deduplicate observed planes into the given room."""
    service = ScanService(request.params)
    room, accepted = service.ingest(request.room, request.observations, request.elements)
    return ObservationResponse(room=room, accepted=accepted)


@router.post("/reconstruct", response_model=ReconstructResponse)
async def reconstruct_room(request: WallsRequest) -> ReconstructResponse:
    """Run one reconstruction pass over the given walls."""
    service = ScanService(request.params)
    context = service.reconstruct(request.walls, request.room_id)
    room = context.room

    return ReconstructResponse(
        room=room,
        complete=service.is_complete(room),
        bounds=context.bounds,
        gap_count=len(context.gaps),
        inferred_count=len(context.inferred),
        floor_plan=service.floor_plan(room),
    )


@router.post("/floorplan", response_model=FloorPlanResponse)
async def floor_plan(request: WallsRequest) -> FloorPlanResponse:
    """Project walls as they are, without reconstruction."""
    service = ScanService(request.params)
    room = Room(walls=request.walls)
    plan = service.floor_plan(room)
    return FloorPlanResponse(floor_plan=plan, area=plan.area, volume=plan.volume)


@router.get("/params", response_model=ReconstructionParams)
async def default_params() -> ReconstructionParams:
    return ReconstructionParams()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}

"""High-level scan service — facade for the API layer and scan sessions."""

from __future__ import annotations
import logging

from roomscan.models import (
    Room, Wall, WallElement, PlaneObservation, FloorPlan,
    ReconstructionParams, ReconstructionContext,
)
from roomscan.core.converter import PlaneConverter
from roomscan.core.deduplicator import WallDeduplicator
from roomscan.core.assembler import RoomAssembler
from roomscan.core.projector import FloorPlanProjector

logger = logging.getLogger(__name__)


class ScanService:
    """Wires the reconstruction stages together around one parameter set."""

    def __init__(self, params: ReconstructionParams | None = None) -> None:
        self.params = params or ReconstructionParams()
        self.converter = PlaneConverter(self.params)
        self.deduplicator = WallDeduplicator(self.params)
        self.assembler = RoomAssembler(self.params)
        self.projector = FloorPlanProjector(self.params)

    def ingest(
        self,
        room: Room,
        observations: list[PlaneObservation],
        elements_by_wall: dict[str, list[WallElement]] | None = None,
    ) -> tuple[Room, list[Wall]]:
        """
        Add newly observed walls to a copy of ``room``.

        Returns the new room and the walls that were accepted into it.

        ``elements_by_wall`` keys fixtures by wall id or by plane id. New
        walls get fresh ids, so fixtures for walls accepted in this same call
        must use the plane id (``PlaneConverter.plane_key`` of the observation).
        """
        updated = room.model_copy(deep=True)
        candidates = self.converter.convert_all(observations)
        fresh = self.deduplicator.filter_new(candidates, updated.walls)

        accepted: list[Wall] = []
        for wall in fresh:
            if updated.add_wall(wall):
                accepted.append(wall)

        if elements_by_wall:
            self.attach_elements(updated, elements_by_wall)

        logger.debug(
            "ingested %d observations: %d candidates, %d accepted",
            len(observations), len(candidates), len(accepted),
        )
        return updated, accepted

    def attach_elements(
        self, room: Room, elements_by_wall: dict[str, list[WallElement]],
    ) -> None:
        for key, elements in elements_by_wall.items():
            wall = room.get_wall(key) or room.get_wall_by_plane(key)
            if wall is None:
                logger.debug("no wall or plane %s for %d elements", key, len(elements))
                continue
            wall.elements.extend(elements)

    def is_complete(self, room: Room) -> bool:
        return self.assembler.graph_builder.is_complete(room)

    def reconstruct(self, walls: list[Wall], room_id: str | None = None) -> ReconstructionContext:
        return self.assembler.run(walls, room_id)

    def floor_plan(self, room: Room) -> FloorPlan:
        return self.projector.project(room)

    def floor_area(self, room: Room) -> float:
        return self.projector.floor_area(room)

    def volume(self, room: Room) -> float:
        return self.projector.volume(room)

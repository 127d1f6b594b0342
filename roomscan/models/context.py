"""Reconstruction context — accumulates state during one assembler pass."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field

from .building import Gap, Room, Wall
from .geometry import Bounds3D
from .parameters import ReconstructionParams


class PassState(str, Enum):
    INITIAL = "initial"
    GRAPH_BUILT = "graph_built"
    BOUNDARY_DETECTED = "boundary_detected"
    ALIGNED = "aligned"
    GAPS_FILLED = "gaps_filled"
    DONE = "done"


class ReconstructionContext(BaseModel):
    """
    Holds all state during a single reconstruction pass.

    Each stage reads what the previous stage left and advances `state`.
    Nothing here outlives the pass except `room`.
    """
    # Input
    walls: list[Wall]
    params: ReconstructionParams = Field(default_factory=ReconstructionParams)
    room_id: str | None = None

    state: PassState = PassState.INITIAL

    # Stage results
    adjacency: dict[str, list[str]] = {}
    bounds: Bounds3D | None = None
    aligned: list[Wall] = []
    gaps: list[Gap] = []
    inferred: list[Wall] = []

    # Output
    room: Room | None = None

    def neighbours(self, wall_id: str) -> list[str]:
        return self.adjacency.get(wall_id, [])

"""Floor plan output models."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .geometry import Point2D


class WallSegment(BaseModel):
    """A wall seen from above."""
    model_config = ConfigDict(frozen=True)

    start: Point2D
    end: Point2D
    thickness: float
    wall_id: str = ""

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


class ElementMarker(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: Point2D
    type: str


class FloorPlan(BaseModel):
    """Top-down projection of a room. Plan coordinates are world (x, z)."""
    model_config = ConfigDict(frozen=True)

    walls: tuple[WallSegment, ...] = ()
    elements: tuple[ElementMarker, ...] = ()
    area: float = 0.0
    volume: float = 0.0

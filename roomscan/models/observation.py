"""Raw planar surface observations as reported by a tracker."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field


class TrackingState(str, Enum):
    TRACKING = "tracking"
    PAUSED = "paused"
    STOPPED = "stopped"


def identity_pose() -> list[list[float]]:
    return [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]


class PlaneObservation(BaseModel):
    """
    One sensor sample of a vertical planar surface.

    `polygon` holds boundary samples in the plane's local X-Z frame.
    `pose` is the plane's center pose as a row-major 4x4 transform;
    its third column is the surface's forward (outward) axis.
    """
    polygon: list[tuple[float, float]]
    pose: list[list[float]] = Field(default_factory=identity_pose)
    tracking_state: TrackingState = TrackingState.TRACKING
    extent_x: float = 0.0
    extent_z: float = 0.0
    trackable_id: str | None = None  # Tracker's handle, stable across frames

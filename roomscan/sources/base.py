"""Abstract interfaces for the collaborators that feed the engine.

The engine never talks to a sensor or a vision model itself. Anything
that produces planar observations or wall fixtures implements one of
these interfaces and hands its output over in batches:
- Plane sources run on the tracker's cadence and yield observations
- Element sources look at one wall at a time and yield fixtures
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from roomscan.models import PlaneObservation, Wall, WallElement


class PlaneSource(ABC):
    """Produces planar surface observations from a tracking session."""

    @abstractmethod
    def observations(self) -> list[PlaneObservation]:
        """Return the observations available since the last call."""
        ...


class ElementSource(ABC):
    """Finds fixtures (outlets, switches, windows, doors) on a wall."""

    @abstractmethod
    def detect(self, wall: Wall, image: Any) -> list[WallElement]:
        """
        Detect fixtures on ``wall`` given a captured ``image`` of it.

        Returned positions are in world space on the wall's face; the
        wall's `bounds` give the face rectangle the image covers.
        """
        ...


class StaticPlaneSource(PlaneSource):
    """Replays a fixed batch, once."""

    def __init__(self, observations: list[PlaneObservation]) -> None:
        self._pending = list(observations)

    def observations(self) -> list[PlaneObservation]:
        batch, self._pending = self._pending, []
        return batch

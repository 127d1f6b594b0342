"""Size-and-height fixture classification from detector boxes.

A detector (any object-detection model) reports boxes in normalized
image coordinates; the image is assumed to frame the wall's face.
Each box is mapped onto the face and classified by its real-world size
and mounting height.
"""

from __future__ import annotations
import logging
from typing import Any

from pydantic import BaseModel, Field

from roomscan.models import (
    Wall, WallElement, Outlet, Switch, Window, Door,
    Point3D, Size2D, Bounds2D, OutletType, WindowType, DoorType,
)
from roomscan.sources.base import ElementSource

logger = logging.getLogger(__name__)


class DetectionBox(BaseModel):
    """Detector output: box center and size as fractions of the image."""
    center_x: float = Field(ge=0.0, le=1.0)
    center_y: float = Field(ge=0.0, le=1.0)
    width: float = Field(ge=0.0, le=1.0)
    height: float = Field(ge=0.0, le=1.0)


class BoxElementClassifier(ElementSource):
    """
    Turns detector boxes into wall fixtures.

    ``image`` passed to `detect` is the list of `DetectionBox` found in
    the wall's capture.
    """

    def detect(self, wall: Wall, image: Any) -> list[WallElement]:
        boxes: list[DetectionBox] = list(image or [])
        depth = wall.center.z
        return self.classify_boxes(boxes, wall.bounds, depth)

    def classify_boxes(
        self, boxes: list[DetectionBox], bounds: Bounds2D, depth: float,
    ) -> list[WallElement]:
        elements: list[WallElement] = []
        for box in boxes:
            position = Point3D(
                x=bounds.left + box.center_x * bounds.width,
                y=bounds.top + box.center_y * bounds.height,
                z=depth,
            )
            size = Size2D(width=box.width * bounds.width, height=box.height * bounds.height)
            element = self.classify(position, size)
            if element is None:
                logger.debug("unclassified box at %s size %s", position, size)
                continue
            elements.append(element)
        return elements

    def classify(self, position: Point3D, size: Size2D) -> WallElement | None:
        """First matching rule wins; None when nothing fits."""
        w, h, y = size.width, size.height, position.y

        if w < 0.15 and h < 0.15 and y < 0.6:
            return Outlet(position=position, size=size, outlet_type=OutletType.SINGLE)
        if w < 0.2 and h < 0.25 and 1.0 < y < 1.6:
            return Switch(position=position, size=size, gang_count=1)
        if w > 0.4 and h > 0.4 and y > 0.8:
            return Window(position=position, size=size, window_type=WindowType.STANDARD)
        if h > 1.8 and 0.7 < w < 1.2 and y < 1.0:
            return Door(position=position, size=size, door_type=DoorType.SINGLE)
        return None

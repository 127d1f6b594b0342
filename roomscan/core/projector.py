"""Floor-plan projection, floor area and room volume."""

from __future__ import annotations
import logging
import math

from roomscan.models import (
    Room, Point2D, FloorPlan, WallSegment, ElementMarker,
    ReconstructionParams, element_label, shoelace_area,
)

logger = logging.getLogger(__name__)


class FloorPlanProjector:
    """Projects a room onto the floor (world X-Z)."""

    def __init__(self, params: ReconstructionParams | None = None) -> None:
        self.params = params or ReconstructionParams()

    def project(self, room: Room) -> FloorPlan:
        thickness = self.params.wall_thickness
        segments = tuple(
            WallSegment(
                start=Point2D(x=w.corners[0].x, y=w.corners[0].z),
                end=Point2D(x=w.corners[1].x, y=w.corners[1].z),
                thickness=thickness,
                wall_id=w.id,
            )
            for w in room.walls
        )
        markers = tuple(
            ElementMarker(
                position=Point2D(x=e.position.x, y=e.position.z),
                type=element_label(e),
            )
            for w in room.walls
            for e in w.elements
        )
        return FloorPlan(
            walls=segments,
            elements=markers,
            area=self.floor_area(room),
            volume=self.volume(room),
        )

    def floor_points(self, room: Room) -> list[Point2D]:
        """
        Distinct floor-level corners in boundary order.

        Corners are merged on rounded (x, z) and sorted by angle around
        their centroid, so the result does not depend on wall order.
        """
        digits = self.params.floor_point_decimals
        seen: dict[tuple[float, float], Point2D] = {}
        for wall in room.walls:
            for c in wall.corners:
                if not c.is_finite() or c.y >= self.params.floor_level:
                    continue
                key = (round(c.x, digits) + 0.0, round(c.z, digits) + 0.0)
                if key not in seen:
                    seen[key] = Point2D(x=key[0], y=key[1])

        points = list(seen.values())
        if len(points) < 3:
            return points
        cx = sum(p.x for p in points) / len(points)
        cy = sum(p.y for p in points) / len(points)
        points.sort(key=lambda p: (math.atan2(p.y - cy, p.x - cx), p.x, p.y))
        return points

    def floor_area(self, room: Room) -> float:
        points = self.floor_points(room)
        if len(points) < 3:
            return 0.0
        return shoelace_area(points)

    def volume(self, room: Room) -> float:
        if len(room.walls) < self.params.min_enclosing_walls:
            return 0.0
        heights = [w.height for w in room.walls if math.isfinite(w.height)]
        if not heights:
            return 0.0
        return self.floor_area(room) * (sum(heights) / len(heights))

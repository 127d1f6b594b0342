"""One reconstruction pass over an accepted wall set."""

from __future__ import annotations
import hashlib
import logging
import math

from roomscan.models import (
    Wall, Room, Gap, Vector3D, Bounds3D,
    ReconstructionContext, ReconstructionParams, PassState,
)
from roomscan.core.graph import AdjacencyGraphBuilder

logger = logging.getLogger(__name__)

# Unit horizontal directions at 0, 90, 180 and 270 degrees (atan2(z, x))
_QUADRANTS = ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))


def snap_normal(normal: Vector3D) -> Vector3D:
    """
    Rotate a normal about Y to the nearest multiple of 90 degrees.

    The horizontal length and the Y component are kept as they are, so the
    result has the input's length and snapping it again returns it unchanged.
    """
    if normal.x == 0 and normal.z == 0:
        return normal
    if not (math.isfinite(normal.x) and math.isfinite(normal.z)):
        return normal
    angle = math.degrees(math.atan2(normal.z, normal.x))
    cx, cz = _QUADRANTS[round(angle / 90.0) % 4]
    horizontal = math.hypot(normal.x, normal.z)
    return Vector3D(x=cx * horizontal, y=normal.y, z=cz * horizontal)


class RoomAssembler:
    """
    Stateless room reconstruction.

    Runs graph building, boundary detection, alignment and gap filling
    in sequence and returns a new Room. The input walls are never mutated.
    """

    def __init__(self, params: ReconstructionParams | None = None) -> None:
        self.params = params or ReconstructionParams()
        self.graph_builder = AdjacencyGraphBuilder(self.params)

    def reconstruct(self, walls: list[Wall], room_id: str | None = None) -> Room:
        return self.run(walls, room_id).room

    def run(self, walls: list[Wall], room_id: str | None = None) -> ReconstructionContext:
        context = ReconstructionContext(
            walls=list(walls),
            params=self.params,
            room_id=room_id,
        )

        self._build_graph(context)
        self._detect_boundary(context)
        self._align(context)
        self._fill_gaps(context)
        self._finish(context)

        logger.info(
            "reconstructed room %s: %d walls in, %d out, %d gaps, complete=%s",
            context.room.id, len(context.walls), len(context.room.walls),
            len(context.gaps), self.graph_builder.is_complete(context.room),
        )
        return context

    # -- stages -------------------------------------------------------------

    def _build_graph(self, context: ReconstructionContext) -> None:
        graph = self.graph_builder.build(context.walls)
        context.adjacency = graph.neighbours
        context.state = PassState.GRAPH_BUILT

    def _detect_boundary(self, context: ReconstructionContext) -> None:
        corners = [c for w in context.walls for c in w.corners]
        context.bounds = Bounds3D.around(corners)
        context.state = PassState.BOUNDARY_DETECTED

    def _align(self, context: ReconstructionContext) -> None:
        walls = context.walls
        corners = [list(w.corners) for w in walls]
        limit = self.params.adjacency_distance

        # Midpoint of every near-coincident corner pair on adjacent walls.
        # One sweep per pass; later passes absorb any residual drift.
        for i in range(len(walls)):
            for j in range(i + 1, len(walls)):
                if walls[j].id not in context.neighbours(walls[i].id):
                    continue
                for a in range(4):
                    for b in range(4):
                        if corners[i][a].distance_to(corners[j][b]) < limit:
                            mid = corners[i][a].midpoint(corners[j][b])
                            corners[i][a] = mid
                            corners[j][b] = mid

        context.aligned = [
            w.model_copy(
                update={"corners": corners[k], "normal": snap_normal(w.normal)},
                deep=True,
            )
            for k, w in enumerate(walls)
        ]
        context.state = PassState.ALIGNED

    def _fill_gaps(self, context: ReconstructionContext) -> None:
        walls = context.aligned
        gaps: list[Gap] = []

        for wall in walls:
            if len(context.neighbours(wall.id)) >= self.params.min_neighbours:
                continue
            for corner in wall.corners:
                if not self.graph_builder.is_matched(corner, wall, walls):
                    gaps.append(Gap(position=corner, normal=wall.normal, wall_id=wall.id))

        # Coincident open corners (e.g. on a zero-width wall) share one inferred wall
        inferred: dict[str, Wall] = {}
        for gap in gaps:
            wall = self.wall_from_gap(gap)
            inferred.setdefault(wall.plane_id, wall)

        context.gaps = gaps
        context.inferred = list(inferred.values())
        context.state = PassState.GAPS_FILLED

    def _finish(self, context: ReconstructionContext) -> None:
        room = Room(id=context.room_id) if context.room_id else Room()
        for wall in context.aligned:
            room.add_wall(wall)
        context.inferred = [w for w in context.inferred if room.add_wall(w)]
        if room.walls:
            room.name = room.estimate_room_type().display_name
        context.room = room
        context.state = PassState.DONE

    # -- inference ----------------------------------------------------------

    def wall_from_gap(self, gap: Gap) -> Wall:
        """
        Hypothetical wall anchored at an open corner, running horizontally
        in the plane of the wall the corner belongs to.
        """
        along = gap.normal.horizontal_perpendicular()
        up = Vector3D(x=0.0, y=1.0, z=0.0)
        width = self.params.inferred_wall_width
        height = self.params.inferred_wall_height

        start = gap.position
        end = start.offset(along, width)
        key = _gap_key(gap)
        return Wall(
            id=f"inferred-{key}",
            corners=[start, end, end.offset(up, height), start.offset(up, height)],
            normal=gap.normal,
            confidence=self.params.inferred_confidence,
            plane_id=f"inferred:{key}",
            inferred=True,
        )


def _gap_key(gap: Gap) -> str:
    p, n = gap.position, gap.normal
    basis = ",".join(f"{v:.4f}" for v in (p.x, p.y, p.z, n.x, n.y, n.z))
    return hashlib.sha1(basis.encode()).hexdigest()[:12]

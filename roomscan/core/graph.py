"""Which walls physically meet."""

from __future__ import annotations
import logging

from pydantic import BaseModel

from roomscan.models import Wall, Room, Point3D, ReconstructionParams

logger = logging.getLogger(__name__)


class AdjacencyGraph(BaseModel):
    """Undirected graph stored as one neighbour list per wall id."""
    neighbours: dict[str, list[str]] = {}

    def degree(self, wall_id: str) -> int:
        return len(self.neighbours.get(wall_id, []))

    def are_adjacent(self, a: str, b: str) -> bool:
        return b in self.neighbours.get(a, [])

    def edge_count(self) -> int:
        return sum(len(n) for n in self.neighbours.values()) // 2

    def is_enclosed(self, min_walls: int, min_neighbours: int) -> bool:
        """At least ``min_walls`` walls each touching ``min_neighbours`` others."""
        if len(self.neighbours) < min_walls:
            return False
        connected = sum(1 for n in self.neighbours.values() if len(n) >= min_neighbours)
        return connected >= min_walls


class AdjacencyGraphBuilder:
    """
    Two walls are adjacent when a corner of one lies within the adjacency
    distance of a corner of the other, or when they are near-perpendicular
    and their centers are that close.
    """

    def __init__(self, params: ReconstructionParams | None = None) -> None:
        self.params = params or ReconstructionParams()

    def build(self, walls: list[Wall]) -> AdjacencyGraph:
        neighbours: dict[str, list[str]] = {w.id: [] for w in walls}

        for i in range(len(walls)):
            for j in range(i + 1, len(walls)):
                a, b = walls[i], walls[j]
                if a.id == b.id or not self.are_connected(a, b):
                    continue
                neighbours[a.id].append(b.id)
                neighbours[b.id].append(a.id)

        graph = AdjacencyGraph(neighbours=neighbours)
        logger.debug("adjacency graph: %d walls, %d edges", len(walls), graph.edge_count())
        return graph

    def are_connected(self, a: Wall, b: Wall) -> bool:
        if self.shared_corners(a, b):
            return True

        angle = a.normal.angle_to(b.normal)
        if abs(angle - 90.0) < self.params.perpendicular_tolerance_deg:
            return a.center.distance_to(b.center) < self.params.adjacency_distance

        return False

    def shared_corners(self, a: Wall, b: Wall) -> list[tuple[int, int]]:
        """Index pairs (corner of a, corner of b) closer than the adjacency distance."""
        return [
            (i, j)
            for i, ca in enumerate(a.corners)
            for j, cb in enumerate(b.corners)
            if ca.distance_to(cb) < self.params.adjacency_distance
        ]

    def is_complete(self, room: Room) -> bool:
        """
        Closed-loop heuristic over the room's sensed walls: at least three
        walls, at least three of which touch two or more others.

        This is not a planar cycle check; overlapping or non-convex wall
        sets can be misjudged.
        """
        walls = room.sensed_walls
        if len(walls) < self.params.min_enclosing_walls:
            return False
        graph = self.build(walls)
        return graph.is_enclosed(self.params.min_enclosing_walls, self.params.min_neighbours)

    def is_matched(self, corner: Point3D, wall: Wall, walls: list[Wall]) -> bool:
        """True if any other wall has a corner near ``corner``."""
        limit = self.params.adjacency_distance
        for other in walls:
            if other.id == wall.id:
                continue
            if any(corner.distance_to(c) < limit for c in other.corners):
                return True
        return False

"""Wall identity: is a candidate a wall we already have?"""

from __future__ import annotations
import logging

from roomscan.models import Wall, ReconstructionParams

logger = logging.getLogger(__name__)


class WallDeduplicator:
    """
    A candidate duplicates an accepted wall when their centers are close
    and their normals agree. Looser than adjacency: this is identity,
    not topology.
    """

    def __init__(self, params: ReconstructionParams | None = None) -> None:
        self.params = params or ReconstructionParams()

    def is_duplicate(self, candidate: Wall, accepted: Wall) -> bool:
        distance = candidate.center.distance_to(accepted.center)
        similarity = candidate.normal.dot(accepted.normal)
        return (
            distance < self.params.dedup_distance
            and similarity > self.params.dedup_normal_similarity
        )

    def is_already_detected(self, candidate: Wall, accepted: list[Wall]) -> bool:
        for wall in accepted:
            if self.is_duplicate(candidate, wall):
                logger.debug("wall %s duplicates %s", candidate.id, wall.id)
                return True
        return False

    def filter_new(self, candidates: list[Wall], accepted: list[Wall]) -> list[Wall]:
        """Candidates that are new, checked against earlier winners in the batch too."""
        seen = list(accepted)
        fresh: list[Wall] = []
        for wall in candidates:
            if self.is_already_detected(wall, seen):
                continue
            fresh.append(wall)
            seen.append(wall)
        return fresh

"""Turns tracker plane observations into candidate walls."""

from __future__ import annotations
import hashlib
import logging
import math

import numpy as np

from roomscan.models import (
    PlaneObservation, TrackingState, Wall, Point3D, Vector3D,
    ReconstructionParams,
)

logger = logging.getLogger(__name__)


class PlaneConverter:
    """Scores observations and builds wall quads from them."""

    def __init__(self, params: ReconstructionParams | None = None) -> None:
        self.params = params or ReconstructionParams()

    def convert(self, observation: PlaneObservation) -> Wall | None:
        """Return a wall only if the observation scores above the promotion cutoff."""
        wall = self.to_candidate(observation)
        if wall is None:
            return None
        if wall.confidence <= self.params.promotion_threshold:
            logger.debug(
                "dropping plane %s: confidence %.3f <= %.2f",
                wall.plane_id, wall.confidence, self.params.promotion_threshold,
            )
            return None
        return wall

    def convert_all(self, observations: list[PlaneObservation]) -> list[Wall]:
        walls: list[Wall] = []
        for obs in observations:
            wall = self.convert(obs)
            if wall is not None:
                walls.append(wall)
        return walls

    def to_candidate(self, observation: PlaneObservation) -> Wall | None:
        """Build a scored candidate wall, or None for a malformed observation."""
        pose = self._pose_matrix(observation)
        if pose is None:
            return None

        samples = np.asarray(observation.polygon, dtype=float).reshape(-1, 2)
        if len(samples) < self.params.min_polygon_points:
            logger.debug("dropping observation: %d polygon samples", len(samples))
            return None
        if not np.all(np.isfinite(samples)):
            logger.debug("dropping observation: non-finite polygon samples")
            return None
        if not (math.isfinite(observation.extent_x) and math.isfinite(observation.extent_z)):
            logger.debug("dropping observation: non-finite extents")
            return None

        corners = self._extract_corners(samples, pose)
        normal = Vector3D(
            x=float(pose[0, 2]), y=float(pose[1, 2]), z=float(pose[2, 2]),
        ).normalized()

        return Wall(
            corners=corners,
            normal=normal,
            confidence=self.score(observation, len(corners)),
            plane_id=self.plane_key(observation, pose),
        )

    def score(self, observation: PlaneObservation, corner_count: int = 4) -> float:
        """Weighted confidence: surface area, corner completeness, tracking."""
        confidence = min(observation.extent_x * observation.extent_z / 10, 0.4)
        confidence += min(corner_count / 4 * 0.3, 0.3)
        if observation.tracking_state == TrackingState.TRACKING:
            confidence += 0.3
        # Rounded so that 0.4 + 0.3 compares equal to the 0.7 cutoff
        return round(max(0.0, min(confidence, 1.0)), 6)

    def refine(self, wall: Wall) -> Wall:
        """Copy of ``wall`` with confidence raised by dense point support."""
        boosted = min(wall.confidence + self.params.refinement_boost, 1.0)
        return wall.model_copy(update={"confidence": boosted})

    def plane_key(self, observation: PlaneObservation, pose: np.ndarray | None = None) -> str:
        """
        Content-derived key for the observed surface.

        Uses the tracker's own handle when it has one, otherwise the pose
        translation and forward axis rounded to a decimetre.
        """
        if observation.trackable_id:
            basis = f"trackable:{observation.trackable_id}"
        else:
            if pose is None:
                pose = self._pose_matrix(observation)
            if pose is None:
                return ""
            # +0.0 folds -0.0 into 0.0 so the key is sign-stable
            feature = [round(float(v), 1) + 0.0 for v in (*pose[:3, 3], *pose[:3, 2])]
            basis = "pose:" + ",".join(f"{v:.1f}" for v in feature)
        return hashlib.sha1(basis.encode()).hexdigest()[:16]

    def _pose_matrix(self, observation: PlaneObservation) -> np.ndarray | None:
        rows = observation.pose
        if len(rows) != 4 or any(len(r) != 4 for r in rows):
            logger.debug("dropping observation: pose is not 4x4")
            return None
        pose = np.asarray(rows, dtype=float)
        if not np.all(np.isfinite(pose)):
            logger.debug("dropping observation: non-finite pose")
            return None
        return pose

    def _extract_corners(self, samples: np.ndarray, pose: np.ndarray) -> list[Point3D]:
        min_x, min_z = samples.min(axis=0)
        max_x, max_z = samples.max(axis=0)
        h = self.params.wall_height

        # Bounding box bottom edge, then the same edge raised to ceiling height
        local = np.array([
            [min_x, 0.0, min_z, 1.0],
            [max_x, 0.0, min_z, 1.0],
            [max_x, h, min_z, 1.0],
            [min_x, h, min_z, 1.0],
        ])
        world = local @ pose.T
        return [Point3D(x=float(p[0]), y=float(p[1]), z=float(p[2])) for p in world]

"""Reconstruction thresholds and their defaults."""

from __future__ import annotations
from pydantic import BaseModel

# Observation -> wall
PROMOTION_THRESHOLD = 0.7       # Candidates must score strictly above this
MIN_POLYGON_POINTS = 3
WALL_HEIGHT = 2.5               # Floor-to-ceiling approximation (meters)
REFINEMENT_BOOST = 0.1

# Identity
DEDUP_DISTANCE = 0.5            # Center-to-center (meters)
DEDUP_NORMAL_SIMILARITY = 0.9   # Dot product of normals

# Topology
ADJACENCY_DISTANCE = 0.2        # Corner matching (meters)
PERPENDICULAR_TOLERANCE_DEG = 15.0
MIN_NEIGHBOURS = 2
MIN_ENCLOSING_WALLS = 3

# Gap inference
INFERRED_WALL_WIDTH = 3.0
INFERRED_WALL_HEIGHT = 2.5
INFERRED_CONFIDENCE = 0.3

# Floor plan
FLOOR_LEVEL = 0.5               # Corners below this height sit on the floor
FLOOR_POINT_DECIMALS = 3        # Rounding used to merge floor corners
WALL_THICKNESS = 0.15


class ReconstructionParams(BaseModel):
    """Tunable thresholds for one reconstruction pipeline."""
    promotion_threshold: float = PROMOTION_THRESHOLD
    min_polygon_points: int = MIN_POLYGON_POINTS
    wall_height: float = WALL_HEIGHT
    refinement_boost: float = REFINEMENT_BOOST

    dedup_distance: float = DEDUP_DISTANCE
    dedup_normal_similarity: float = DEDUP_NORMAL_SIMILARITY

    adjacency_distance: float = ADJACENCY_DISTANCE
    perpendicular_tolerance_deg: float = PERPENDICULAR_TOLERANCE_DEG
    min_neighbours: int = MIN_NEIGHBOURS
    min_enclosing_walls: int = MIN_ENCLOSING_WALLS

    inferred_wall_width: float = INFERRED_WALL_WIDTH
    inferred_wall_height: float = INFERRED_WALL_HEIGHT
    inferred_confidence: float = INFERRED_CONFIDENCE

    floor_level: float = FLOOR_LEVEL
    floor_point_decimals: int = FLOOR_POINT_DECIMALS
    wall_thickness: float = WALL_THICKNESS

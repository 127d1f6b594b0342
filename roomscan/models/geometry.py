"""Geometric primitives shared by every reconstruction stage.

World frame follows the tracker convention: Y is up, X-Z is the floor.
"""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point on a 2D plane (floor plan or a wall's projected face)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


class Point3D(BaseModel):
    """Point in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def midpoint(self, other: Point3D) -> Point3D:
        return Point3D(
            x=(self.x + other.x) / 2,
            y=(self.y + other.y) / 2,
            z=(self.z + other.z) / 2,
        )

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.z))

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def __mul__(self, scalar: float) -> Point3D:
        return Point3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)

    def offset(self, vector: Vector3D, distance: float = 1.0) -> Point3D:
        """Move along ``vector`` by ``distance`` times its length."""
        return Point3D(
            x=self.x + vector.x * distance,
            y=self.y + vector.y * distance,
            z=self.z + vector.z * distance,
        )


class Vector3D(BaseModel):
    """Direction in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        """Unit vector; a zero-length vector is returned unchanged."""
        ln = self.length()
        if ln == 0:
            return self
        return Vector3D(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )

    def angle_to(self, other: Vector3D) -> float:
        """Angle between two unit vectors in degrees."""
        d = max(-1.0, min(1.0, self.dot(other)))
        return math.degrees(math.acos(d))

    def horizontal_perpendicular(self) -> Vector3D:
        """Horizontal direction lying in the plane this vector is normal to."""
        return Vector3D(x=-self.z, y=0.0, z=self.x).normalized()


class Size2D(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


class Bounds2D(BaseModel):
    """Axis-aligned rectangle, used for a wall's projected face."""
    model_config = ConfigDict(frozen=True)

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


class Bounds3D(BaseModel):
    """Axis-aligned box around a set of points."""
    model_config = ConfigDict(frozen=True)

    min: Point3D
    max: Point3D

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def depth(self) -> float:
        return self.max.z - self.min.z

    @classmethod
    def around(cls, points: list[Point3D]) -> Bounds3D | None:
        if not points:
            return None
        return cls(
            min=Point3D(
                x=min(p.x for p in points),
                y=min(p.y for p in points),
                z=min(p.z for p in points),
            ),
            max=Point3D(
                x=max(p.x for p in points),
                y=max(p.y for p in points),
                z=max(p.z for p in points),
            ),
        )


def centroid(points: list[Point3D]) -> Point3D:
    """Mean of a point set (origin for an empty set)."""
    if not points:
        return Point3D(x=0.0, y=0.0, z=0.0)
    n = len(points)
    return Point3D(
        x=sum(p.x for p in points) / n,
        y=sum(p.y for p in points) / n,
        z=sum(p.z for p in points) / n,
    )


def shoelace_area(points: list[Point2D]) -> float:
    """Unsigned area of a simple polygon given in boundary order."""
    if len(points) < 3:
        return 0.0
    total = 0.0
    for i, p in enumerate(points):
        q = points[(i + 1) % len(points)]
        total += p.x * q.y - q.x * p.y
    return abs(total) / 2

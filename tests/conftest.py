from __future__ import annotations

import pytest

from roomscan.models import Wall, Point3D, Vector3D, PlaneObservation, TrackingState


def make_wall(
    x0: float, z0: float, x1: float, z1: float,
    normal: tuple[float, float, float],
    *,
    height: float = 2.5,
    base: float = 0.0,
    confidence: float = 0.9,
    wall_id: str | None = None,
    plane_id: str | None = None,
) -> Wall:
    """Vertical quad from a floor edge (x0, z0) -> (x1, z1)."""
    corners = [
        Point3D(x=x0, y=base, z=z0),
        Point3D(x=x1, y=base, z=z1),
        Point3D(x=x1, y=base + height, z=z1),
        Point3D(x=x0, y=base + height, z=z0),
    ]
    kwargs = {}
    if wall_id is not None:
        kwargs["id"] = wall_id
    return Wall(
        corners=corners,
        normal=Vector3D(x=normal[0], y=normal[1], z=normal[2]),
        confidence=confidence,
        plane_id=plane_id if plane_id is not None else (wall_id or f"{x0},{z0},{x1},{z1}"),
        **kwargs,
    )


def quad(points: list[tuple[float, float, float]], normal: tuple[float, float, float],
         wall_id: str) -> Wall:
    return Wall(
        id=wall_id,
        corners=[Point3D(x=x, y=y, z=z) for x, y, z in points],
        normal=Vector3D(x=normal[0], y=normal[1], z=normal[2]),
        confidence=0.9,
        plane_id=wall_id,
    )


@pytest.fixture
def square_walls() -> list[Wall]:
    """Unit square room: four walls sharing their vertical edges."""
    return [
        make_wall(0, 0, 1, 0, (0, 0, -1), wall_id="south"),
        make_wall(1, 0, 1, 1, (1, 0, 0), wall_id="east"),
        make_wall(1, 1, 0, 1, (0, 0, 1), wall_id="north"),
        make_wall(0, 1, 0, 0, (-1, 0, 0), wall_id="west"),
    ]


@pytest.fixture
def observation() -> PlaneObservation:
    """A large, tracked plane 2 m wide, facing +Z at the origin."""
    return PlaneObservation(
        polygon=[(-1.0, -0.5), (1.0, -0.5), (1.0, 0.5), (-1.0, 0.5)],
        tracking_state=TrackingState.TRACKING,
        extent_x=4.0,
        extent_z=3.0,
        trackable_id="plane-7",
    )

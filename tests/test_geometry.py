import math

from roomscan.models import Point2D, Point3D, Vector3D, Bounds3D, centroid, shoelace_area


def test_point_arithmetic():
    a = Point3D(x=1, y=2, z=3)
    b = Point3D(x=4, y=6, z=3)
    assert a.distance_to(b) == 5.0
    assert a + b == Point3D(x=5, y=8, z=6)
    assert b - a == Point3D(x=3, y=4, z=0)
    assert a * 2 == Point3D(x=2, y=4, z=6)
    assert a.midpoint(b) == Point3D(x=2.5, y=4, z=3)


def test_zero_vector_normalizes_to_itself():
    zero = Vector3D(x=0, y=0, z=0)
    assert zero.normalized() == zero
    assert Vector3D(x=3, y=0, z=4).normalized() == Vector3D(x=0.6, y=0, z=0.8)


def test_cross_and_angle():
    x = Vector3D(x=1, y=0, z=0)
    y = Vector3D(x=0, y=1, z=0)
    assert x.cross(y) == Vector3D(x=0, y=0, z=1)
    assert math.isclose(x.angle_to(y), 90.0)
    # Slightly over unit length still clamps into acos' domain
    assert x.angle_to(Vector3D(x=1.0000001, y=0, z=0)) == 0.0


def test_horizontal_perpendicular_lies_in_the_wall_plane():
    n = Vector3D(x=0, y=0, z=1)
    along = n.horizontal_perpendicular()
    assert along.dot(n) == 0
    assert along.y == 0
    assert math.isclose(along.length(), 1.0)


def test_bounds_and_centroid():
    pts = [Point3D(x=0, y=0, z=0), Point3D(x=2, y=1, z=-1)]
    box = Bounds3D.around(pts)
    assert (box.width, box.height, box.depth) == (2, 1, 1)
    assert Bounds3D.around([]) is None
    assert centroid(pts) == Point3D(x=1, y=0.5, z=-0.5)


def test_shoelace_is_unsigned():
    ccw = [Point2D(x=0, y=0), Point2D(x=2, y=0), Point2D(x=2, y=3), Point2D(x=0, y=3)]
    assert shoelace_area(ccw) == 6.0
    assert shoelace_area(list(reversed(ccw))) == 6.0
    assert shoelace_area(ccw[:2]) == 0.0

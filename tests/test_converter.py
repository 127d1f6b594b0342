import math

import pytest

from roomscan.core.converter import PlaneConverter
from roomscan.core.deduplicator import WallDeduplicator
from roomscan.models import PlaneObservation, TrackingState, ReconstructionParams


def _close(p, x, y, z):
    return math.isclose(p.x, x, abs_tol=1e-9) and math.isclose(p.y, y, abs_tol=1e-9) \
        and math.isclose(p.z, z, abs_tol=1e-9)


def test_corners_from_polygon_bounding_box(observation):
    wall = PlaneConverter().convert(observation)
    assert wall is not None
    assert _close(wall.corners[0], -1, 0, -0.5)
    assert _close(wall.corners[1], 1, 0, -0.5)
    assert _close(wall.corners[2], 1, 2.5, -0.5)
    assert _close(wall.corners[3], -1, 2.5, -0.5)
    assert wall.normal.z == 1.0
    assert wall.confidence == 1.0
    assert wall.width == 2.0
    assert wall.height == 2.5


def test_pose_rotates_and_translates_corners(observation):
    # 90 degrees about Y, then 2 m along X
    pose = [
        [0.0, 0.0, 1.0, 2.0],
        [0.0, 1.0, 0.0, 0.0],
        [-1.0, 0.0, 0.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]
    obs = observation.model_copy(update={"pose": pose})
    wall = PlaneConverter().convert(obs)
    assert wall is not None
    assert _close(wall.corners[1], 1.5, 0, -1)
    assert math.isclose(wall.normal.x, 1.0)
    assert math.isclose(wall.normal.z, 0.0, abs_tol=1e-12)


def test_confidence_weights():
    conv = PlaneConverter()
    small = PlaneObservation(polygon=[(0, 0), (1, 0), (1, 1)], extent_x=1.0, extent_z=0.5)
    assert math.isclose(conv.score(small), 0.65)

    paused = small.model_copy(update={"tracking_state": TrackingState.PAUSED})
    assert math.isclose(conv.score(paused), 0.35)

    big = small.model_copy(update={"extent_x": 10.0, "extent_z": 10.0})
    assert conv.score(big) == 1.0


def test_confidence_065_is_not_promoted():
    obs = PlaneObservation(polygon=[(0, 0), (1, 0), (1, 1)], extent_x=1.0, extent_z=0.5)
    conv = PlaneConverter()
    candidate = conv.to_candidate(obs)
    assert candidate is not None
    assert math.isclose(candidate.confidence, 0.65)
    assert conv.convert(obs) is None


def test_promotion_is_strictly_above_threshold():
    # 0.4 (area) + 0.3 (corners), not tracking: exactly at the cutoff
    obs = PlaneObservation(
        polygon=[(0, 0), (1, 0), (1, 1)],
        extent_x=5.0, extent_z=5.0,
        tracking_state=TrackingState.STOPPED,
    )
    conv = PlaneConverter()
    assert conv.to_candidate(obs).confidence == 0.7
    assert conv.convert(obs) is None

    lenient = PlaneConverter(ReconstructionParams(promotion_threshold=0.6))
    assert lenient.convert(obs) is not None


@pytest.mark.parametrize("polygon", [
    [],
    [(0.0, 0.0), (1.0, 0.0)],
    [(0.0, 0.0), (float("nan"), 0.0), (1.0, 1.0)],
    [(0.0, 0.0), (float("inf"), 0.0), (1.0, 1.0)],
])
def test_malformed_polygons_are_dropped(polygon):
    obs = PlaneObservation(polygon=polygon, extent_x=4.0, extent_z=3.0)
    assert PlaneConverter().to_candidate(obs) is None


def test_malformed_pose_is_dropped(observation):
    conv = PlaneConverter()
    bad_shape = observation.model_copy(update={"pose": [[1.0, 0.0, 0.0]] * 3})
    assert conv.convert(bad_shape) is None

    bad_value = observation.model_copy(update={"pose": [
        [1.0, 0.0, 0.0, float("nan")],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]})
    assert conv.convert(bad_value) is None

    bad_extent = observation.model_copy(update={"extent_x": float("inf")})
    assert conv.convert(bad_extent) is None


def test_plane_key_is_content_derived(observation):
    conv = PlaneConverter()
    first = conv.convert(observation)
    again = conv.convert(observation.model_copy())
    assert first.plane_id == again.plane_id
    assert first.id != again.id

    other = observation.model_copy(update={"trackable_id": "plane-8"})
    assert conv.convert(other).plane_id != first.plane_id

    # Without a tracker handle the pose is the key
    anon = observation.model_copy(update={"trackable_id": None})
    assert conv.plane_key(anon) == conv.plane_key(anon.model_copy())
    assert conv.plane_key(anon) != first.plane_id


def test_same_observation_twice_is_a_duplicate(observation):
    conv = PlaneConverter()
    first = conv.convert(observation)
    second = conv.convert(observation)
    assert WallDeduplicator().is_already_detected(second, [first])


def test_refine_raises_confidence_with_cap(observation):
    conv = PlaneConverter()
    obs = PlaneObservation(polygon=[(0, 0), (1, 0), (1, 1)], extent_x=1.0, extent_z=0.5)
    wall = conv.to_candidate(obs)
    assert math.isclose(conv.refine(wall).confidence, 0.75)
    assert wall.confidence == 0.65

    strong = conv.convert(observation)
    assert conv.refine(strong).confidence == 1.0


def test_convert_all_keeps_only_promoted(observation):
    weak = PlaneObservation(polygon=[(0, 0), (1, 0), (1, 1)], extent_x=1.0, extent_z=0.5)
    walls = PlaneConverter().convert_all([observation, weak, observation])
    assert len(walls) == 2

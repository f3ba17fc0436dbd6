"""Tests for point cloud construction and normalization."""

import math

import pytest

from pointcloud_gestures.gestures.point_cloud import PointCloud
from pointcloud_gestures.utils.gesture_utils import PathUtils, Point


def _resampled(strokes, resolution=32):
    """Run only the resampling stage on raw strokes."""
    cloud = PointCloud("probe", [[(0, 0), (1, 0)]], resolution=resolution)
    cloud.points = PathUtils.flatten_strokes(strokes)
    return cloud.resample()


def test_cloud_has_resolution_points():
    cloud = PointCloud("line", [[(0, 0), (100, 0)]])
    assert cloud.name == "line"
    assert cloud.resolution == 32
    assert len(cloud.points) == 32


@pytest.mark.parametrize("strokes", [
    [[(0, 0), (3, 0), (50, 0), (51, 0), (100, 0)]],
    [[(0, 0), (100, 0), (100, 100)]],
    [[(0, 0), (10, 0)], [(0, 100), (10, 100)]],
    [[(177, 92), (177, 2)], [(182, 1), (246, 95)], [(247, 87), (247, 1)]],
    [[(5, 5), (5, 5)], [(0, 0), (40, 30)]],
])
def test_point_count_for_various_inputs(strokes):
    assert len(PointCloud("g", strokes).points) == 32


def test_custom_resolution():
    cloud = PointCloud("g", [[(0, 0), (100, 50), (200, 0)]], resolution=16)
    assert len(cloud.points) == 16


def test_resample_spacing_is_equal_on_straight_stroke():
    # uneven raw sampling must not matter
    points = _resampled([[(0, 0), (3, 0), (50, 0), (51, 0), (100, 0)]])
    interval = 100 / 31

    assert len(points) == 32
    assert points[0].x == pytest.approx(0.0)
    assert points[-1].x == pytest.approx(100.0)
    for a, b in zip(points, points[1:]):
        assert a.distance_to(b) == pytest.approx(interval, abs=1e-6)

    total = sum(a.distance_to(b) for a, b in zip(points, points[1:]))
    assert total == pytest.approx(31 * interval, abs=1e-6)


def test_resample_points_lie_on_the_path():
    points = _resampled([[(0, 0), (100, 0), (100, 100)]])
    for p in points:
        on_first_leg = abs(p.y) < 1e-9 and -1e-9 <= p.x <= 100 + 1e-9
        on_second_leg = abs(p.x - 100) < 1e-9 and -1e-9 <= p.y <= 100 + 1e-9
        assert on_first_leg or on_second_leg


def test_resample_never_bridges_strokes():
    points = _resampled([[(0, 0), (10, 0)], [(0, 100), (10, 100)]])
    assert len(points) == 32
    for p in points:
        assert p.y in (0.0, 100.0)
        assert p.id == (0 if p.y == 0.0 else 1)


def test_resample_does_not_mutate_input_points():
    cloud = PointCloud("probe", [[(0, 0), (1, 0)]])
    cloud.points = PathUtils.flatten_strokes([[(0, 0), (10, 0), (20, 5)]])
    before = [(p.x, p.y, p.id) for p in cloud.points]
    cloud.resample()
    assert [(p.x, p.y, p.id) for p in cloud.points] == before


def test_scale_keeps_aspect_ratio():
    cloud = PointCloud("wide", [[(0, 0), (200, 0), (200, 50)]])
    xs = [p.x for p in cloud.points]
    ys = [p.y for p in cloud.points]
    assert max(xs) - min(xs) == pytest.approx(1.0)
    assert max(ys) - min(ys) == pytest.approx(0.25)


def test_tall_gesture_scales_by_height():
    cloud = PointCloud("tall", [[(10, 0), (10, 300)], [(0, 0), (60, 0)]])
    xs = [p.x for p in cloud.points]
    ys = [p.y for p in cloud.points]
    assert max(ys) - min(ys) == pytest.approx(1.0)
    assert max(xs) - min(xs) < 0.25


def test_cloud_is_centered_on_origin():
    cloud = PointCloud("g", [[(30, 7), (103, 7)], [(66, 7), (66, 87)]])
    c = cloud.centroid()
    assert c.x == pytest.approx(0.0, abs=1e-12)
    assert c.y == pytest.approx(0.0, abs=1e-12)


def test_stroke_ids_are_preserved_in_order():
    cloud = PointCloud("g", [[(0, 0), (50, 0)], [(0, 20), (50, 20)], [(0, 40), (50, 40)]])
    ids = [p.id for p in cloud.points]
    assert ids[0] == 0
    assert ids[-1] == 2
    assert ids == sorted(ids)
    assert set(ids) == {0, 1, 2}


def test_zero_length_stroke_collapses_to_origin():
    cloud = PointCloud("tap", [[(5, 5), (5, 5), (5, 5)]])
    assert len(cloud.points) == 32
    for p in cloud.points:
        assert not math.isnan(p.x) and not math.isnan(p.y)
        assert p.x == pytest.approx(0.0)
        assert p.y == pytest.approx(0.0)
        assert p.id == 0


def test_path_length_skips_gaps_between_strokes():
    cloud = PointCloud("probe", [[(0, 0), (1, 0)]])
    cloud.points = PathUtils.flatten_strokes([[(0, 0), (3, 4)], [(100, 100), (100, 110)]])
    assert cloud.path_length() == pytest.approx(15.0)


def test_translate_to_custom_origin():
    cloud = PointCloud("g", [[(0, 0), (100, 0)]])
    moved = cloud.translate_to(Point(2, 3))
    assert sum(p.x for p in moved) / len(moved) == pytest.approx(2.0)
    assert sum(p.y for p in moved) / len(moved) == pytest.approx(3.0)


@pytest.mark.parametrize("resolution", [1, 0, -4, 2.5, "32", True])
def test_resolution_must_be_an_integer_of_at_least_two(resolution):
    with pytest.raises(ValueError):
        PointCloud("g", [[(0, 0), (10, 0)]], resolution=resolution)


def test_smallest_resolution_keeps_the_endpoints():
    cloud = PointCloud("g", [[(0, 0), (10, 0)]], resolution=2)
    assert [p.x for p in cloud.points] == pytest.approx([-0.5, 0.5])


def test_multi_stroke_arc_length_adds_up():
    # horizontal strokes starting at x=0, so x is the arc length within a stroke
    ends = {0: 10.0, 1: 10.0, 2: 25.0}
    points = _resampled([[(0, 0), (10, 0)], [(0, 100), (10, 100)], [(0, 200), (25, 200)]])
    interval = 45 / 31

    assert len(points) == 32
    assert points[-1].x == pytest.approx(25.0)
    assert points[-1].id == 2

    within_strokes = 0.0
    carried = 0.0
    transitions = 0
    for a, b in zip(points, points[1:]):
        if a.id == b.id:
            step = a.distance_to(b)
            assert step == pytest.approx(interval, abs=1e-6)
            within_strokes += step
        else:
            transitions += 1
            # rest of the old stroke plus the lead-in on the new one
            gap = (ends[a.id] - a.x) + b.x
            assert gap == pytest.approx(interval, abs=1e-6)
            carried += gap

    assert transitions == 2
    assert within_strokes == pytest.approx((31 - transitions) * interval, abs=1e-6)
    assert within_strokes + carried == pytest.approx(31 * interval, abs=1e-6)

import math

import numpy as np
import pytest

from intersection import Intersection, find_intersections, intersect_pair


def test_known_pair():
    first, second = intersect_pair((0.0, 0.0), 5.0, (8.0, 0.0), 5.0)
    assert first == pytest.approx((4.0, -3.0))
    assert second == pytest.approx((4.0, 3.0))


def test_points_lie_on_both_boundaries():
    rng = np.random.default_rng(7)
    checked = 0
    while checked < 200:
        a = rng.uniform(0, 100, 2)
        b = rng.uniform(0, 100, 2)
        ra, rb = rng.uniform(5, 60, 2)
        result = intersect_pair(a, ra, b, rb)
        d = math.hypot(*(b - a))
        if d > ra + rb or d < abs(ra - rb):
            assert result is None
            continue
        for point in result:
            assert math.hypot(point[0] - a[0], point[1] - a[1]) == pytest.approx(ra, abs=1e-7)
            assert math.hypot(point[0] - b[0], point[1] - b[1]) == pytest.approx(rb, abs=1e-7)
        checked += 1


def test_tangent_circles_give_coincident_points():
    first, second = intersect_pair((0.0, 0.0), 3.0, (7.0, 0.0), 4.0)
    assert first == pytest.approx((3.0, 0.0))
    assert second == pytest.approx(first)


def test_tangency_at_an_angle_stays_finite():
    a = (10.0, 20.0)
    ra, rb = 0.1, 0.2
    angle = 1.234
    b = (a[0] + (ra + rb) * math.cos(angle), a[1] + (ra + rb) * math.sin(angle))
    result = intersect_pair(a, ra, b, rb)
    # Rounding may push d just past ra + rb; either way nothing non-finite escapes.
    for point in result or ():
        assert all(math.isfinite(v) for v in point)


def test_separate_circles_do_not_intersect():
    assert intersect_pair((0.0, 0.0), 5.0, (10.5, 0.0), 5.0) is None


def test_concentric_circles_are_skipped():
    assert intersect_pair((3.0, 3.0), 5.0, (3.0, 3.0), 5.0) is None
    assert intersect_pair((3.0, 3.0), 5.0, (3.0, 3.0), 2.0) is None


def test_zero_radius_is_skipped():
    assert intersect_pair((0.0, 0.0), 0.0, (1.0, 0.0), 5.0) is None
    assert intersect_pair((0.0, 0.0), 5.0, (1.0, 0.0), 0.0) is None


def test_contained_circle_is_skipped():
    assert intersect_pair((0.0, 0.0), 10.0, (1.0, 1.0), 2.0) is None
    assert intersect_pair((1.0, 1.0), 2.0, (0.0, 0.0), 10.0) is None


def test_internal_tangency_gives_one_touching_point():
    first, second = intersect_pair((0.0, 0.0), 10.0, (4.0, 0.0), 6.0)
    assert first == pytest.approx((10.0, 0.0))
    assert second == pytest.approx((10.0, 0.0))


def test_point_order_follows_rotation_from_a_to_b():
    # B straight above A: base angle pi/2, first point rotated clockwise (to +x).
    first, second = intersect_pair((0.0, 0.0), 5.0, (0.0, 8.0), 5.0)
    assert first == pytest.approx((3.0, 4.0))
    assert second == pytest.approx((-3.0, 4.0))


def test_find_intersections_enumerates_each_pair_once_in_order():
    positions = [(0.0, 0.0), (8.0, 0.0), (4.0, 6.0), (100.0, 100.0)]
    radii = [5.0, 5.0, 5.0, 1.0]

    hits = find_intersections(positions, radii)

    assert [(h.i, h.j) for h in hits] == [(0, 1), (0, 2), (1, 2)]
    assert all(isinstance(h, Intersection) for h in hits)
    assert hits[0].first == pytest.approx((4.0, -3.0))
    assert hits[0].second == pytest.approx((4.0, 3.0))


def test_find_intersections_matches_single_pair_results():
    rng = np.random.default_rng(99)
    positions = rng.uniform(0, 300, (12, 2))
    radii = rng.uniform(20, 80, 12)

    hits = {(h.i, h.j): h for h in find_intersections(positions, radii)}

    for i in range(12):
        for j in range(i + 1, 12):
            expected = intersect_pair(positions[i], radii[i], positions[j], radii[j])
            if expected is None:
                assert (i, j) not in hits
            else:
                assert hits[(i, j)].first == pytest.approx(expected[0])
                assert hits[(i, j)].second == pytest.approx(expected[1])


def test_find_intersections_with_fewer_than_two_circles():
    assert find_intersections(np.empty((0, 2)), np.empty(0)) == []
    assert find_intersections([(1.0, 1.0)], [3.0]) == []


def test_find_intersections_skips_degenerate_pairs():
    positions = [(10.0, 10.0), (10.0, 10.0), (14.0, 10.0)]
    radii = [3.0, 3.0, 3.0]
    hits = find_intersections(positions, radii)
    assert [(h.i, h.j) for h in hits] == [(0, 2), (1, 2)]
    for h in hits:
        assert all(math.isfinite(v) for v in h.first + h.second)


def test_find_intersections_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        find_intersections([(0.0, 0.0), (1.0, 1.0)], [1.0])

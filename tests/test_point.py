import pytest

from griddbscan.point import Point, point_min


def test_dist_symmetric_and_consistent_with_dist_sqr():
    p = Point([1.0, 2.0, -3.0])
    q = Point([4.5, -1.0, 0.25])
    assert p.dist(q) == q.dist(p)
    assert p.dist(q) ** 2 == pytest.approx(p.dist_sqr(q))


def test_dist_to_self_is_zero():
    p = Point([3.5, -7.25])
    assert p.dist(p) == 0
    assert p.dist_sqr(p) == 0


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        Point([1, 2]).dist(Point([1, 2, 3]))


def test_average_is_midpoint():
    p = Point([0.0, 2.0])
    q = Point([1.0, 3.0])
    mid = p.average(q)
    assert mid.dist(p) == pytest.approx(mid.dist(q))
    assert p.average(p) == p


def test_dot_with_self_is_squared_norm():
    p = Point([1.5, 2.5, -0.5])
    origin = Point([0, 0, 0])
    assert p.dot(p) == pytest.approx(p.dist_sqr(origin))


def test_normalize_gives_unit_length():
    p = Point([3.0, 4.0])
    n = p.normalize()
    assert n.dist(Point([0, 0])) == pytest.approx(1.0)
    assert n.dot(p) == pytest.approx(p.dist(Point([0, 0])))


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Point([0, 0]).normalize()


def test_quadrant_extremes():
    center = Point([1.0, 1.0, 1.0])
    assert center.quadrant(center) == 0
    above = Point([2.0, 2.0, 2.0])
    assert above.quadrant(center) == 2 ** 3 - 1


def test_quadrant_single_bit():
    center = Point([0.0, 0.0])
    assert Point([0.0, 5.0]).quadrant(center) == 2
    assert Point([5.0, 0.0]).quadrant(center) == 1


def test_out_of_box():
    center = Point([0.0, 0.0])
    assert not center.out_of_box(center, 0.5)
    assert Point([10.0, 0.0]).out_of_box(center, 0.5)
    assert not Point([0.4, -0.4]).out_of_box(center, 0.5)


def test_min_max_coords():
    p = Point([1.0, 5.0])
    q = Point([2.0, 3.0])
    assert p.min_coords(q) == Point([1.0, 3.0])
    assert p.max_coords(q) == Point([2.0, 5.0])


def test_point_min():
    points = [Point([1.0, 5.0]), Point([2.0, 3.0]), Point([4.0, 4.0])]
    assert point_min(points) == Point([1.0, 3.0])


def test_point_min_empty_raises():
    with pytest.raises(ValueError):
        point_min([])


def test_arithmetic_round_trip():
    p = Point([1.5, -2.0])
    assert (p * 2) / 2 == p
    assert p - p == Point([0.0, 0.0])
    assert len(p) == p.dim == 2
    assert list(p) == [1.5, -2.0]
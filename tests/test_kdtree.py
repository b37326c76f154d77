import random

import pytest

from griddbscan.kdtree import ClosestPair, KdTree
from griddbscan.point import Point


def _random_points(n, dim=2, seed=7):
    rng = random.Random(seed)
    return [Point(rng.uniform(-10, 10) for _ in range(dim)) for _ in range(n)]


def _leaves(node):
    if node.is_leaf():
        yield node
    else:
        yield from _leaves(node.left)
        yield from _leaves(node.right)


def test_single_point_tree_is_leaf():
    tree = KdTree([Point([1.0, 2.0])])
    assert tree.root.is_leaf()
    assert len(tree) == 1
    assert tree.root.node_diag() == 0


def test_leaves_partition_items_and_respect_leaf_size():
    points = _random_points(100)
    tree = KdTree(points)
    assert not tree.root.is_leaf()
    leaves = list(_leaves(tree.root))
    assert all(len(leaf) <= 16 for leaf in leaves)
    collected = [p for leaf in leaves for p in leaf.items]
    assert sorted(collected, key=lambda p: p.coords) == sorted(points, key=lambda p: p.coords)


def test_root_box_contains_all_points():
    points = _random_points(50, dim=3)
    tree = KdTree(points)
    for p in points:
        assert all(lo <= c <= hi for lo, c, hi in zip(tree.root.box_min, p, tree.root.box_max))


def test_children_items_concatenate_to_parent():
    tree = KdTree(_random_points(60), leaf_size=4)
    root = tree.root
    assert root.items == root.left.items + root.right.items


def test_range_zero_radius_finds_only_the_point():
    points = _random_points(40)
    tree = KdTree(points, leaf_size=1)
    for p in points[:10]:
        assert tree.range_neighbor(p, 0.0) == [p]


def test_range_matches_exhaustive_filter():
    points = _random_points(200, seed=3)
    tree = KdTree(range(len(points)), key=lambda i: points[i])
    center = points[0]
    for r in (0.5, 2.0, 6.0):
        found = set(tree.range_neighbor(center, r))
        expected = {i for i, p in enumerate(points) if p.dist(center) <= r}
        assert found == expected


def test_range_dimension_mismatch_raises():
    tree = KdTree([Point([0, 0])])
    with pytest.raises(ValueError):
        tree.range_neighbor([0, 0, 0], 1.0)


def test_empty_tree_raises():
    with pytest.raises(ValueError):
        KdTree([])


def test_mixed_dimensions_raise():
    with pytest.raises(ValueError):
        KdTree([Point([0, 0]), Point([1, 1, 1])])


def test_identical_points_split():
    points = [Point([1.0, 1.0])] * 40
    tree = KdTree(points)
    assert len(tree.root.left) + len(tree.root.right) == len(points)
    assert len(tree.range_neighbor([1.0, 1.0], 0.0)) == len(points)


def test_node_distance_properties():
    tree_a = KdTree([Point([0, 0]), Point([1, 1])])
    tree_b = KdTree([Point([5, 0]), Point([6, 1])])
    a, b = tree_a.root, tree_b.root
    assert a.node_distance(a) == 0
    assert a.node_distance(b) == b.node_distance(a)
    assert a.node_far_distance(b) >= a.node_distance(b)
    assert a.l_max() <= a.node_diag()


def test_closest_pair_between_clusters():
    left = [Point([x / 10, y / 10]) for x in range(11) for y in range(-3, 4)]
    right = [Point([5 + x / 10, y / 10]) for x in range(11) for y in range(-3, 4)]
    a = KdTree(left, leaf_size=2).root
    b = KdTree(right, leaf_size=2).root
    pair = a.closest_pair(b)
    assert {pair.u, pair.v} == {Point([1.0, 0.0]), Point([5.0, 0.0])} or (
        pair.u.dist(pair.v) == pytest.approx(Point([1.0, 0.0]).dist(Point([5.0, 0.0])))
    )
    assert pair.dist == pytest.approx(pair.u.dist(pair.v))
    assert pair.dist == pytest.approx(Point([1.0, 0.0]).dist(Point([5.0, 0.0])))


def test_closest_pair_update_keeps_minimum():
    pair = ClosestPair()
    pair.update("a", "b", 3.0)
    pair.update("c", "d", 5.0)
    assert (pair.u, pair.v, pair.dist) == ("a", "b", 3.0)
    pair.update("e", "f", 1.0)
    assert (pair.u, pair.v) == ("e", "f")


def test_well_separated():
    a = KdTree([Point([0, 0]), Point([1, 1])]).root
    far = KdTree([Point([100, 100]), Point([101, 101])]).root
    assert a.well_separated(far)
    assert not a.well_separated(a)


def test_invalid_leaf_size():
    with pytest.raises(ValueError):
        KdTree([Point([0, 0])], leaf_size=0)
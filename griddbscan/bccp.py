"""Closest core pairs between kd-tree nodes and grid cells."""

from __future__ import annotations

import math
from typing import Any, MutableMapping, Sequence

from griddbscan.grid import Cell
from griddbscan.kdtree import KdNode, KdTree

# Cell pairs with at most this many points in total are compared directly.
_BRUTE_FORCE_LIMIT = 32


def _nearer_first(node: KdNode, parent: KdNode) -> tuple[KdNode, KdNode]:
    if node.node_distance(parent.left) < node.node_distance(parent.right):
        return parent.left, parent.right
    return parent.right, parent.left


def core_closest_distance(node1: KdNode, node2: KdNode,
                          is_core: Sequence[bool], bound: float = math.inf) -> float:
    """Smallest distance between core items of the two nodes, capped at bound.

    Items of the nodes index into ``is_core``. Subtrees whose boxes are
    farther apart than the best distance found so far are skipped.
    """
    if node1.node_distance(node2) > bound:
        return bound

    if node1.is_leaf() and node2.is_leaf():
        for u, u_coord in zip(node1.items, node1.coords):
            if not is_core[u]:
                continue
            for v, v_coord in zip(node2.items, node2.coords):
                if is_core[v]:
                    bound = min(bound, math.dist(u_coord, v_coord))
        return bound

    if node1.is_leaf():
        for child in _nearer_first(node1, node2):
            bound = core_closest_distance(node1, child, is_core, bound)
    elif node2.is_leaf():
        for child in _nearer_first(node2, node1):
            bound = core_closest_distance(node2, child, is_core, bound)
    else:
        pairs = [
            (node2.left, node1.left),
            (node2.right, node1.left),
            (node2.left, node1.right),
            (node2.right, node1.right),
        ]
        pairs.sort(key=lambda pair: pair[0].node_distance(pair[1]))
        for a, b in pairs:
            bound = core_closest_distance(a, b, is_core, bound)
    return bound


def _cell_tree(cell: Cell) -> KdTree:
    points = cell.points()
    start = cell.start
    return KdTree(cell.indices, key=lambda i: points[i - start])


def has_edge(cell1: Cell, cell2: Cell, is_core: Sequence[bool], epsilon: float,
             trees: MutableMapping[int, Any]) -> bool:
    """Whether some core point of cell1 lies within epsilon of a core point of cell2.

    ``is_core`` is indexed by the grid's sorted point positions. Kd-trees
    built for large cells are kept in ``trees`` under the cell's index.
    """
    if cell1.size() + cell2.size() <= _BRUTE_FORCE_LIMIT:
        thresh = epsilon * epsilon
        points2 = list(zip(cell2.indices, cell2.points()))
        for i, pi in zip(cell1.indices, cell1.points()):
            if not is_core[i]:
                continue
            for j, pj in points2:
                if is_core[j] and pi.dist_sqr(pj) <= thresh:
                    return True
        return False

    for cell in (cell1, cell2):
        if trees.get(cell.index) is None:
            trees[cell.index] = _cell_tree(cell)
    r = core_closest_distance(trees[cell1.index].root, trees[cell2.index].root, is_core)
    return r <= epsilon
"""Union-find forests whose roots are the largest index of each set."""

from __future__ import annotations


class _Forest:
    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parents: list[int | None] = [None] * n

    def __len__(self) -> int:
        return len(self._parents)

    def _find_root(self, i: int) -> int:
        parents = self._parents
        root = i
        while parents[root] is not None:
            root = parents[root]
        while (nxt := parents[i]) is not None and nxt < root:
            parents[i] = root
            i = nxt
        return root


class UnionFind(_Forest):
    """Disjoint sets over 0..n-1; linking hangs the smaller root under the larger."""

    def find(self, i: int) -> int:
        """The representative of the set holding i, compressing the path."""
        return self._find_root(i)

    def link(self, u: int, v: int) -> None:
        u, v = self.find(u), self.find(v)
        if u == v:
            return
        if u > v:
            u, v = v, u
        self._parents[u] = v


class EdgeUnionFind(_Forest):
    """Disjoint sets that remember the edge that joined each hooked root."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._hooks: list[tuple[int, int] | None] = [None] * n

    def find(self, i: int) -> int:
        """The representative of the set holding i, compressing the path."""
        return self._find_root(i)

    def link(self, u: int, v: int) -> int | None:
        """Join the sets of u and v; return the new parent, or None if already joined."""
        edge = (u, v)
        u, v = self.find(u), self.find(v)
        if u == v:
            return self._parents[u]
        if u > v:
            u, v = v, u
        self._parents[u] = v
        self._hooks[u] = edge
        return v

    def get_edge(self, idx: int) -> tuple[int, int] | None:
        """The edge that hooked root idx under another, if any."""
        return self._hooks[idx]
"""Minimum-weight cycle breaking for directed and undirected graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple


class Edge(NamedTuple):
    """A weighted edge from u to v."""

    u: int
    v: int
    w: int


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, item: int) -> int:
        """Return the root of the set holding item."""
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: int, b: int) -> None:
        """Merge the sets holding a and b."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return
        if self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        elif self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        else:
            self.parent[root_a] = root_b
            self.rank[root_b] += 1


@dataclass
class Solution:
    """Total weight of the removed edges and the edges themselves."""

    total: int = 0
    removed: list[Edge] = field(default_factory=list)

    def format(self) -> str:
        """Render as the total followed by one 'u v w' line per removed edge."""
        lines = [str(self.total)]
        lines.extend(f"{e.u} {e.v} {e.w}" for e in self.removed)
        return "\n".join(lines) + "\n"


def _prepare(n: int, edges: Iterable[Iterable[int]]) -> list[Edge]:
    if n < 0:
        raise ValueError(f"vertex count must not be negative: {n}")
    prepared = [Edge(*edge) for edge in edges]
    for edge in prepared:
        if not (0 <= edge.u < n and 0 <= edge.v < n):
            raise ValueError(f"edge {edge.u} {edge.v} has a vertex outside 0..{n - 1}")
    prepared.sort(key=lambda e: e.w, reverse=True)
    return prepared


def solve_undirected(n: int, edges: Iterable[Iterable[int]]) -> Solution:
    """Remove the lightest edges that leave a maximum spanning forest."""
    forest = DisjointSet(n)
    solution = Solution()
    for edge in _prepare(n, edges):
        root_u, root_v = forest.find(edge.u), forest.find(edge.v)
        if root_u != root_v:
            forest.union(root_u, root_v)
        else:
            solution.removed.append(edge)
            solution.total += edge.w
    return solution


def _reaches(adjacency: list[list[int]], start: int, target: int) -> bool:
    seen = {start}
    pending = [start]
    while pending:
        node = pending.pop()
        if node == target:
            return True
        for nxt in adjacency[node]:
            if nxt not in seen:
                seen.add(nxt)
                pending.append(nxt)
    return False


def solve_directed(n: int, edges: Iterable[Iterable[int]]) -> Solution:
    """Remove edges so the remaining directed graph has no cycle.

    A maximum spanning forest is kept first; the other edges are put back,
    heaviest first, whenever they are not negative and close no cycle.
    """
    forest = DisjointSet(n)
    adjacency: list[list[int]] = [[] for _ in range(n)]
    candidates: list[Edge] = []
    total = 0
    for edge in _prepare(n, edges):
        if forest.find(edge.u) != forest.find(edge.v):
            forest.union(edge.u, edge.v)
            adjacency[edge.u].append(edge.v)
        else:
            candidates.append(edge)
            total += edge.w

    removed: list[Edge] = []
    for edge in candidates:
        if edge.w < 0 or _reaches(adjacency, edge.v, edge.u):
            removed.append(edge)
        else:
            adjacency[edge.u].append(edge.v)
            total -= edge.w
    return Solution(total, removed)


def break_cycles(n: int, edges: Iterable[Iterable[int]], directed: bool) -> Solution:
    """Solve the cycle-breaking problem for either kind of graph."""
    return solve_directed(n, edges) if directed else solve_undirected(n, edges)
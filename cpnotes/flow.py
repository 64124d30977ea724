"""Maximum flow with Dinic's algorithm, and bipartite matching on top of it."""

from __future__ import annotations

import math
import sys
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(slots=True)
class _Edge:
    to: int
    rev: int
    capacity: int
    flow: int = 0


class Dinic:
    """Flow network on nodes ``0..nodes-1``."""

    def __init__(self, nodes: int) -> None:
        self._graph: list[list[_Edge]] = [[] for _ in range(nodes)]
        self._level: list[int] = []
        self._work: list[int] = []

    def add_edge(self, source: int, target: int, capacity: int) -> None:
        """Add a directed edge with the given capacity."""
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        forward = _Edge(target, len(self._graph[target]), capacity)
        self._graph[source].append(forward)
        backward = _Edge(source, len(self._graph[source]) - 1, 0)
        self._graph[target].append(backward)

    def _bfs(self, source: int, sink: int) -> bool:
        self._level = [-1] * len(self._graph)
        self._level[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for edge in self._graph[u]:
                if self._level[edge.to] < 0 and edge.flow < edge.capacity:
                    self._level[edge.to] = self._level[u] + 1
                    queue.append(edge.to)
        return self._level[sink] >= 0

    def _dfs(self, u: int, pushed: float, sink: int) -> int:
        if u == sink:
            return pushed
        edges = self._graph[u]
        while self._work[u] < len(edges):
            edge = edges[self._work[u]]
            if edge.capacity > edge.flow and self._level[edge.to] == self._level[u] + 1:
                delta = self._dfs(edge.to, min(pushed, edge.capacity - edge.flow), sink)
                if delta > 0:
                    edge.flow += delta
                    self._graph[edge.to][edge.rev].flow -= delta
                    return delta
            self._work[u] += 1
        return 0

    def max_flow(self, source: int, sink: int) -> int:
        """Push as much flow as possible from ``source`` to ``sink`` and return it."""
        if source == sink:
            raise ValueError("source and sink must differ")
        total = 0
        while self._bfs(source, sink):
            self._work = [0] * len(self._graph)
            while delta := self._dfs(source, math.inf, sink):
                total += delta
        return total


def unmatched_count(left: int, right: int, adjacency: Sequence[Iterable[int]]) -> int:
    """Right-side nodes left unmatched by a maximum bipartite matching.

    ``adjacency[i]`` lists the right nodes (``0..right-1``) that left node ``i`` may take.
    """
    if len(adjacency) != left:
        raise ValueError("adjacency must have one entry per left node")
    sink = left + right + 1
    network = Dinic(left + right + 2)
    for i in range(left):
        network.add_edge(0, 1 + i, 1)
    for j in range(right):
        network.add_edge(1 + left + j, sink, 1)
    for i, targets in enumerate(adjacency):
        for j in targets:
            if not 0 <= j < right:
                raise ValueError(f"right node {j} out of range")
            network.add_edge(1 + i, 1 + left + j, 1)
    return right - network.max_flow(0, sink)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a bipartite graph from stdin and print how many right nodes stay unmatched.

    Input: ``n m``, then for each of the ``n`` left nodes a count followed by that
    many right nodes numbered from 1.
    """
    tokens = iter(sys.stdin.read().split())
    left, right = int(next(tokens)), int(next(tokens))
    adjacency = []
    for _ in range(left):
        count = int(next(tokens))
        adjacency.append([int(next(tokens)) - 1 for _ in range(count)])
    print(unmatched_count(left, right, adjacency))
    return 0
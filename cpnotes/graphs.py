"""Graph traversals, shortest paths, strongly connected components and cut structures.

Unweighted graphs map each node to an iterable of neighbours; weighted graphs map
each node to an iterable of ``(neighbour, cost)`` pairs. A list of adjacency lists
is accepted as well, with list positions as node names.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from itertools import count
from typing import Union

Graph = Union[Mapping[Hashable, Iterable], Sequence[Iterable]]


def _items(graph: Graph):
    return graph.items() if isinstance(graph, Mapping) else enumerate(graph)


def _adjacency(graph: Graph) -> dict:
    adj: dict = {}
    for node, neighbours in _items(graph):
        adj.setdefault(node, []).extend(neighbours)
    for neighbours in list(adj.values()):
        for v in neighbours:
            adj.setdefault(v, [])
    return adj


def _weighted_adjacency(graph: Graph) -> dict:
    adj: dict = {}
    for node, edges in _items(graph):
        adj.setdefault(node, []).extend((v, cost) for v, cost in edges)
    for edges in list(adj.values()):
        for v, _ in edges:
            adj.setdefault(v, [])
    return adj


def _undirected(graph: Graph) -> dict:
    adj: dict = {}
    for node, neighbours in _adjacency(graph).items():
        adj.setdefault(node, {})
        for v in neighbours:
            if v == node:
                continue
            adj[node][v] = None
            adj.setdefault(v, {})[node] = None
    return {node: list(neighbours) for node, neighbours in adj.items()}


def bfs(graph: Graph, start: Hashable) -> list:
    """Nodes reachable from ``start`` in breadth-first visiting order."""
    adj = _adjacency(graph)
    visited: dict = {}
    fringe = deque([start])
    while fringe:
        node = fringe.popleft()
        if node not in visited:
            visited[node] = None
            fringe.extend(adj.get(node, ()))
    return list(visited)


def dfs(graph: Graph, start: Hashable) -> list:
    """Nodes reachable from ``start`` in depth-first visiting order (explicit stack)."""
    adj = _adjacency(graph)
    visited: dict = {}
    fringe = [start]
    while fringe:
        node = fringe.pop()
        if node not in visited:
            visited[node] = None
            fringe.extend(adj.get(node, ()))
    return list(visited)


def dijkstra(graph: Graph, source: Hashable) -> dict:
    """Shortest distances from ``source``; ``math.inf`` for unreachable nodes.

    This is the lazy variant: negative edges work as long as there is no
    negative cycle, which would make it loop forever.
    """
    adj = _weighted_adjacency(graph)
    adj.setdefault(source, [])
    dist = {node: math.inf for node in adj}
    tie = count()
    heap = [(0, next(tie), source)]
    while heap:
        d, _, u = heapq.heappop(heap)
        if d >= dist[u]:
            continue
        dist[u] = d
        for v, cost in adj[u]:
            if d + cost < dist[v]:
                heapq.heappush(heap, (d + cost, next(tie), v))
    return dist


def bellman_ford(graph: Graph, source: Hashable) -> dict:
    """Shortest distances from ``source`` in O(VE).

    Unreachable nodes get ``math.inf``; nodes whose distance is lowered by a
    negative cycle get ``-math.inf``.
    """
    adj = _weighted_adjacency(graph)
    adj.setdefault(source, [])
    dist = {node: math.inf for node in adj}
    dist[source] = 0
    edges = [(u, v, cost) for u, out in adj.items() for v, cost in out]

    optimal = False
    for _ in range(len(adj) - 1):
        optimal = True
        for u, v, cost in edges:
            if dist[u] + cost < dist[v]:
                dist[v] = dist[u] + cost
                optimal = False
        if optimal:
            break

    if not optimal:
        for _ in range(len(adj)):
            changed = False
            for u, v, cost in edges:
                if dist[u] + cost < dist[v]:
                    dist[v] = -math.inf
                    changed = True
            if not changed:
                break
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square cost matrix (``math.inf`` for no edge)."""
    n = len(matrix)
    dist = [list(row) for row in matrix]
    if any(len(row) != n for row in dist):
        raise ValueError("matrix must be square")
    for k in range(n):
        row_k = dist[k]
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            row[:] = [min(direct, via + onward) for direct, onward in zip(row, row_k)]
    return dist


def _finish_order(adj: dict) -> list:
    order: list = []
    seen: set = set()
    for start in adj:
        if start in seen:
            continue
        seen.add(start)
        stack = [(start, iter(adj[start]))]
        while stack:
            node, it = stack[-1]
            for v in it:
                if v not in seen:
                    seen.add(v)
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                order.append(node)
    return order


def strongly_connected_components(graph: Graph) -> list[list]:
    """Strongly connected components of a directed graph (Kosaraju)."""
    adj = _adjacency(graph)
    reverse: dict = {node: [] for node in adj}
    for u, neighbours in adj.items():
        for v in neighbours:
            reverse[v].append(u)

    components: list[list] = []
    seen: set = set()
    for root in reversed(_finish_order(adj)):
        if root in seen:
            continue
        component = []
        fringe = [root]
        while fringe:
            node = fringe.pop()
            if node not in seen:
                seen.add(node)
                component.append(node)
                fringe.extend(reverse[node])
        components.append(component)
    return components


def topological_sort(graph: Graph) -> list:
    """Topological order of a DAG; ValueError if the graph has a cycle."""
    adj = _adjacency(graph)
    done: set = set()
    active: set = set()
    order: list = []
    for start in adj:
        if start in done:
            continue
        active.add(start)
        stack = [(start, iter(adj[start]))]
        while stack:
            node, it = stack[-1]
            for v in it:
                if v in active:
                    raise ValueError("graph has a cycle")
                if v not in done:
                    active.add(v)
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                active.discard(node)
                done.add(node)
                order.append(node)
    order.reverse()
    return order


def _cut_structure(graph: Graph) -> tuple[set, list[tuple]]:
    adj = _undirected(graph)
    tin: dict = {}
    low: dict = {}
    parent: dict = {}
    articulation: set = set()
    bridge_list: list[tuple] = []
    timer = count()

    for root in adj:
        if root in tin:
            continue
        tin[root] = low[root] = next(timer)
        parent[root] = None
        root_children = 0
        stack = [(root, iter(adj[root]))]
        while stack:
            node, it = stack[-1]
            descended = False
            for child in it:
                if child not in tin:
                    parent[child] = node
                    if node == root:
                        root_children += 1
                    tin[child] = low[child] = next(timer)
                    stack.append((child, iter(adj[child])))
                    descended = True
                    break
                if child != parent[node]:
                    low[node] = min(low[node], tin[child])
            if descended:
                continue
            stack.pop()
            if stack:
                up = stack[-1][0]
                if up != root and low[node] >= tin[up]:
                    articulation.add(up)
                if low[node] > tin[up]:
                    bridge_list.append((up, node))
                low[up] = min(low[up], low[node])
        if root_children > 1:
            articulation.add(root)
    return articulation, bridge_list


def articulation_points(graph: Graph) -> set:
    """Nodes whose removal disconnects an undirected graph."""
    return _cut_structure(graph)[0]


def bridges(graph: Graph) -> list[tuple]:
    """Edges ``(parent, child)`` whose removal disconnects an undirected graph."""
    return _cut_structure(graph)[1]
"""Breadth-first shortest paths on an unweighted :class:`Graph`."""

from __future__ import annotations

import math
from collections import deque
from typing import Union

from steinerkit.errors import UnreachableTargetError
from steinerkit.graph.store import Graph, Vertex, VertexRef

# Distance reported for vertices that cannot be reached from the source
UNREACHABLE = math.inf

Distance = Union[int, float]


def distances(graph: Graph, source: VertexRef) -> dict[Vertex, Distance]:
    """
    Hop-count distance from *source* to every vertex of *graph*.

    Vertices in other components map to :data:`UNREACHABLE`.
    """
    start = graph.vertex(source)
    dist: dict[Vertex, Distance] = {v: UNREACHABLE for v in graph.vertices}
    dist[start] = 0

    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in u.neighbors:
            if dist[v] == UNREACHABLE:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def path_to(graph: Graph, source: VertexRef, target: VertexRef) -> list[Vertex]:
    """
    One shortest path from *source* to *target*, both endpoints included.

    Raises
    ------
    UnreachableTargetError
        If *target* lies in a different component than *source*.
    """
    start = graph.vertex(source)
    goal = graph.vertex(target)

    prev: dict[Vertex, Vertex] = {}
    visited = {start}
    queue = deque([start])
    while queue and goal not in visited:
        u = queue.popleft()
        for v in u.neighbors:
            if v not in visited:
                visited.add(v)
                prev[v] = u
                queue.append(v)

    if goal not in visited:
        raise UnreachableTargetError(start.label, goal.label)

    path = [goal]
    while path[-1] != start:
        path.append(prev[path[-1]])
    path.reverse()
    return path

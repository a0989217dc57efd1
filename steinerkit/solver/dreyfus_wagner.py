"""
Exact minimum Steiner tree via the Dreyfus–Wagner subset DP.

``dp[mask][v]`` is the fewest edges of a tree connecting the terminals in
*mask* together with vertex *v*. Singletons are seeded from BFS distances,
larger masks merge two complementary sub-masks at the same vertex and are
then relaxed along edges. Time is O(3^n·V + 2^n·(V+E)), memory O(2^n·V):
the terminal count *n* is the binding constraint.
"""

from __future__ import annotations

import heapq
import logging
from typing import Hashable, Iterable, Optional

from steinerkit.config import SolverConfig
from steinerkit.errors import (
    DisconnectedTerminalsError,
    TerminalNotFoundError,
    TooManyTerminalsError,
)
from steinerkit.graph.shortest_path import UNREACHABLE, distances, path_to
from steinerkit.graph.store import Edge, Graph, Vertex
from steinerkit.solver.tree import SteinerTree

logger = logging.getLogger(__name__)

INF = UNREACHABLE

# Parent markers
_UNSET = -1
_DIRECT = 0  # arg = vertex index of the seeding terminal
_MERGE = 1   # arg = submask merged with its complement at the same vertex
_MOVE = 2    # arg = index of the neighbour the value was relaxed from


class SteinerTreeSolver:
    """
    Solves one Steiner tree query against a read-only graph snapshot.

    Tables are allocated per :meth:`solve` call and dropped when it returns,
    so a solver can be reused for several terminal sets.
    """

    def __init__(self, graph: Graph, config: Optional[SolverConfig] = None) -> None:
        self.graph = graph
        self.config = config or SolverConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_steiner_tree(self, terminals: Iterable[Hashable]) -> set[Vertex]:
        return self.solve(terminals).vertices

    def solve(self, terminals: Iterable[Hashable]) -> SteinerTree:
        """
        Compute a minimum Steiner tree for *terminals* (vertex labels).

        Raises
        ------
        TerminalNotFoundError
            If any label is not a vertex of the graph.
        TooManyTerminalsError
            If more than ``config.max_terminals`` distinct terminals are given.
        DisconnectedTerminalsError
            If the terminals do not all lie in one connected component.
        """
        terms = self._resolve_terminals(terminals)
        n = len(terms)

        if n == 0:
            return SteinerTree(terminals=[])
        if n > self.config.max_terminals:
            raise TooManyTerminalsError(n, self.config.max_terminals)
        if n == 1:
            return SteinerTree(terminals=terms, vertices={terms[0]}, hub=terms[0])

        vertices = self.graph.vertices
        V = len(vertices)
        full = (1 << n) - 1
        logger.debug("Solving %d terminals over %d vertices (%d DP cells)", n, V, (full + 1) * V)

        cost: list = [INF] * ((full + 1) * V)
        kind = [_UNSET] * ((full + 1) * V)
        arg = [0] * ((full + 1) * V)
        adjacency = [[self.graph.index_of(u) for u in v.neighbors] for v in vertices]

        self._seed(terms, vertices, cost, kind, arg)
        self._merge(n, V, adjacency, cost, kind, arg)

        hub, best = -1, INF
        base = full * V
        for v in range(V):
            if cost[base + v] < best:
                best = cost[base + v]
                hub = v
        if hub < 0:
            raise DisconnectedTerminalsError(
                "Terminals span more than one connected component: "
                + ", ".join(repr(t.label) for t in terms)
            )

        tree = self._reconstruct(full, hub, terms, vertices, kind, arg)
        tree.cost = int(best)
        logger.info(
            "Steiner tree over %d terminals: %d edges, %d vertices (hub %r)",
            n, tree.cost, len(tree.vertices), tree.hub.label,
        )
        return tree

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve_terminals(self, terminals: Iterable[Hashable]) -> list[Vertex]:
        """Deduplicate labels (first occurrence wins) and resolve them all up front."""
        resolved: list[Vertex] = []
        missing: list[Hashable] = []
        seen = set()
        for label in terminals:
            if isinstance(label, Vertex):
                label = label.label
            if label in seen:
                continue
            seen.add(label)
            vertex = self.graph.get_vertex(label)
            if vertex is None:
                missing.append(label)
            else:
                resolved.append(vertex)
        if missing:
            raise TerminalNotFoundError(missing)
        return resolved

    def _seed(self, terms, vertices, cost, kind, arg) -> None:
        V = len(vertices)
        for i, terminal in enumerate(terms):
            base = (1 << i) * V
            t_index = self.graph.index_of(terminal)
            dist = distances(self.graph, terminal)
            for v, vertex in enumerate(vertices):
                d = dist[vertex]
                if d != UNREACHABLE:
                    cost[base + v] = d
                    kind[base + v] = _DIRECT
                    arg[base + v] = t_index

    def _merge(self, n, V, adjacency, cost, kind, arg) -> None:
        for mask in range(1, 1 << n):
            if mask & (mask - 1) == 0:
                continue  # singletons are seeded

            base = mask * V
            for v in range(V):
                best = cost[base + v]
                sub = (mask - 1) & mask
                while sub:
                    a = cost[sub * V + v]
                    b = cost[(mask ^ sub) * V + v]
                    if a != INF and b != INF and a + b < best:
                        best = a + b
                        kind[base + v] = _MERGE
                        arg[base + v] = sub
                    sub = (sub - 1) & mask
                cost[base + v] = best

            if self.config.relaxation:
                self._relax(base, V, adjacency, cost, kind, arg)

    @staticmethod
    def _relax(base, V, adjacency, cost, kind, arg) -> None:
        """Unit-weight Dijkstra over one DP row: dp[w] = min(dp[w], dp[u] + 1)."""
        heap = [(cost[base + v], v) for v in range(V) if cost[base + v] != INF]
        heapq.heapify(heap)
        while heap:
            d, u = heapq.heappop(heap)
            if d > cost[base + u]:
                continue
            for w in adjacency[u]:
                if d + 1 < cost[base + w]:
                    cost[base + w] = d + 1
                    kind[base + w] = _MOVE
                    arg[base + w] = u
                    heapq.heappush(heap, (d + 1, w))

    def _reconstruct(self, full, hub, terms, vertices, kind, arg) -> SteinerTree:
        V = len(vertices)
        tree = SteinerTree(terminals=terms, hub=vertices[hub])
        used: dict[Edge, None] = {}

        stack = [(full, hub)]
        while stack:
            mask, v = stack.pop()
            if mask == 0:
                continue
            current = vertices[v]
            tree.vertices.add(current)
            slot = mask * V + v

            if kind[slot] == _DIRECT:
                path = path_to(self.graph, vertices[arg[slot]], current)
                tree.vertices.update(path)
                for a, b in zip(path, path[1:]):
                    used[a.edge_to(b)] = None
            elif kind[slot] == _MERGE:
                sub = arg[slot]
                stack.append((mask ^ sub, v))
                stack.append((sub, v))
            elif kind[slot] == _MOVE:
                neighbour = vertices[arg[slot]]
                tree.vertices.add(neighbour)
                used[current.edge_to(neighbour)] = None
                stack.append((mask, arg[slot]))
            else:
                raise RuntimeError(f"No DP state recorded for mask {mask:b} at {current!r}")

        tree.edges = list(used)
        return tree


def solve_steiner_tree(
    graph: Graph,
    terminals: Iterable[Hashable],
    config: Optional[SolverConfig] = None,
) -> SteinerTree:
    """Convenience wrapper around :meth:`SteinerTreeSolver.solve`."""
    return SteinerTreeSolver(graph, config=config).solve(terminals)

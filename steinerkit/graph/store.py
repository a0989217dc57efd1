"""
In-memory undirected graph store.

Vertices are keyed by a unique label and created on demand by
:meth:`Graph.add_edge`. The insertion order of vertices is the stable index
``0..V-1`` used by the solver's DP tables.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Optional, Union

import networkx as nx

from steinerkit.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    InvalidEdgeError,
    VertexNotFoundError,
)

logger = logging.getLogger(__name__)


class Vertex:
    """A graph vertex. Two vertices with the same label are the same entity."""

    __slots__ = ("label", "_adjacency")

    def __init__(self, label: Hashable) -> None:
        self.label = label
        self._adjacency: dict[Vertex, Edge] = {}

    def _connect(self, neighbor: Vertex, edge: Edge) -> None:
        self._adjacency[neighbor] = edge

    @property
    def neighbors(self) -> list[Vertex]:
        return list(self._adjacency)

    def edge_to(self, neighbor: Vertex) -> Optional[Edge]:
        return self._adjacency.get(neighbor)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.label == other.label

    def __hash__(self) -> int:
        return hash(self.label)

    def __repr__(self) -> str:
        return f"Vertex({self.label!r})"


class Edge:
    """
    A named undirected connection.

    ``source`` / ``destination`` only record creation order. Equality and
    hashing use the name plus the *unordered* endpoint pair, so ``A-B`` and
    ``B-A`` with the same name compare equal.
    """

    __slots__ = ("name", "source", "destination")

    def __init__(self, name: str, source: Vertex, destination: Vertex) -> None:
        self.name = name
        self.source = source
        self.destination = destination

    @property
    def endpoints(self) -> frozenset:
        return frozenset((self.source.label, self.destination.label))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        return self.name == other.name and self.endpoints == other.endpoints

    def __hash__(self) -> int:
        return hash((self.name, self.endpoints))

    def __repr__(self) -> str:
        return f"Edge({self.name}: {self.source.label} - {self.destination.label})"


VertexRef = Union[Vertex, Hashable]


class Graph:
    """
    Undirected, unweighted graph keyed by vertex label.

    Usage
    -----
    >>> g = Graph()
    >>> g.add_edge("A", "B", "AB")
    Edge(AB: A - B)
    >>> sorted(v.label for v in g.find_steiner_tree({"A", "B"}))
    ['A', 'B']
    """

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._by_label: dict[Hashable, Vertex] = {}
        self._index: dict[Hashable, int] = {}
        self._edges: list[Edge] = []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_vertex(self, label: Hashable) -> Vertex:
        """Create a vertex; raises :class:`DuplicateVertexError` if it exists."""
        if label in self._by_label:
            raise DuplicateVertexError(label)
        vertex = Vertex(label)
        self._index[label] = len(self._vertices)
        self._vertices.append(vertex)
        self._by_label[label] = vertex
        return vertex

    def add_edge(
        self,
        source: Hashable,
        destination: Hashable,
        name: Optional[str] = None,
    ) -> Edge:
        """
        Connect two vertices, creating either endpoint if it is missing.

        Raises
        ------
        InvalidEdgeError
            If both endpoints are the same vertex.
        DuplicateEdgeError
            If the two vertices are already connected.
        """
        if source == destination:
            raise InvalidEdgeError(f"Self-loop on '{source}' is not allowed")

        src = self._by_label.get(source)
        dst = self._by_label.get(destination)
        if src is not None and dst is not None and src.edge_to(dst) is not None:
            raise DuplicateEdgeError(source, destination)

        if src is None:
            src = self.add_vertex(source)
        if dst is None:
            dst = self.add_vertex(destination)

        edge = Edge(name if name is not None else f"{source}-{destination}", src, dst)
        self._edges.append(edge)
        src._connect(dst, edge)
        dst._connect(src, edge)
        return edge

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_vertex(self, label: Hashable) -> Optional[Vertex]:
        return self._by_label.get(label)

    def vertex(self, ref: VertexRef) -> Vertex:
        """Resolve a label (or a vertex of this graph) to the stored vertex."""
        label = ref.label if isinstance(ref, Vertex) else ref
        vertex = self._by_label.get(label)
        if vertex is None:
            raise VertexNotFoundError(label)
        return vertex

    def index_of(self, ref: VertexRef) -> int:
        label = ref.label if isinstance(ref, Vertex) else ref
        try:
            return self._index[label]
        except KeyError:
            raise VertexNotFoundError(label) from None

    def neighbors(self, ref: VertexRef) -> list[Vertex]:
        return self.vertex(ref).neighbors

    def edge_between(self, a: VertexRef, b: VertexRef) -> Optional[Edge]:
        """Return the edge joining *a* and *b*, or ``None`` if not adjacent."""
        return self.vertex(a).edge_to(self.vertex(b))

    def induced_edges(self, vertices: Iterable[VertexRef]) -> list[Edge]:
        """Edges of the graph whose endpoints both lie in *vertices*."""
        labels = {v.label if isinstance(v, Vertex) else v for v in vertices}
        return [
            e for e in self._edges
            if e.source.label in labels and e.destination.label in labels
        ]

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices)

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        if isinstance(label, Vertex):
            label = label.label
        return label in self._by_label

    def __repr__(self) -> str:
        return f"<Graph vertices={len(self._vertices)} edges={len(self._edges)}>"

    # ------------------------------------------------------------------
    # Solver entry point
    # ------------------------------------------------------------------

    def find_steiner_tree(self, terminals: Iterable[Hashable], config=None) -> set[Vertex]:
        """Vertex set of a minimum Steiner tree spanning *terminals*."""
        from steinerkit.solver.dreyfus_wagner import SteinerTreeSolver

        return SteinerTreeSolver(self, config=config).find_steiner_tree(terminals)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    @classmethod
    def from_instance(cls, instance: dict[str, Any]) -> Graph:
        """
        Build a graph from an instance dict::

            {"nodes": [...], "edges": [{"source": u, "target": v, "name": ...}]}

        Isolated nodes are kept; they are added first, in ``nodes`` order.
        """
        graph = cls()
        for label in instance.get("nodes", []):
            if label not in graph:
                graph.add_vertex(label)
        for edge in instance.get("edges", []):
            graph.add_edge(edge["source"], edge["target"], edge.get("name"))
        logger.debug("Loaded %r from instance dict", graph)
        return graph

    def to_instance(self, terminals: Iterable[Hashable] = ()) -> dict[str, Any]:
        return {
            "nodes": [v.label for v in self._vertices],
            "edges": [
                {"source": e.source.label, "target": e.destination.label, "name": e.name}
                for e in self._edges
            ],
            "terminals": list(terminals),
            "metadata": {"generator": "custom", "size": len(self._vertices), "params": {}},
        }

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(v.label for v in self._vertices)
        for e in self._edges:
            G.add_edge(e.source.label, e.destination.label, name=e.name)
        return G


def create_graph() -> Graph:
    """Return a new, empty :class:`Graph`."""
    return Graph()

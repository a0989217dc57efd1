"""Graph store and BFS shortest paths."""

from steinerkit.graph.shortest_path import UNREACHABLE, distances, path_to
from steinerkit.graph.store import Edge, Graph, Vertex, create_graph

__all__ = [
    "Edge",
    "Graph",
    "Vertex",
    "create_graph",
    "UNREACHABLE",
    "distances",
    "path_to",
]

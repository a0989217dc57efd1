"""Exact minimum Steiner trees on undirected, unweighted graphs."""

from steinerkit.config import SolverConfig
from steinerkit.errors import (
    DisconnectedTerminalsError,
    DuplicateEdgeError,
    DuplicateVertexError,
    SteinerError,
    TerminalNotFoundError,
    TooManyTerminalsError,
    UnreachableTargetError,
)
from steinerkit.graph import Edge, Graph, Vertex, create_graph, distances, path_to
from steinerkit.solver import SteinerTree, SteinerTreeSolver, solve_steiner_tree

__version__ = "0.1.0"

__all__ = [
    "SolverConfig",
    "SteinerError",
    "DuplicateVertexError",
    "DuplicateEdgeError",
    "TerminalNotFoundError",
    "TooManyTerminalsError",
    "DisconnectedTerminalsError",
    "UnreachableTargetError",
    "Edge",
    "Graph",
    "Vertex",
    "create_graph",
    "distances",
    "path_to",
    "SteinerTree",
    "SteinerTreeSolver",
    "solve_steiner_tree",
]

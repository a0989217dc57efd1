"""Exception hierarchy for steinerkit."""

from __future__ import annotations


class SteinerError(Exception):
    """Base class for every error raised by steinerkit."""


# ---------------------------------------------------------------------------
# Graph store
# ---------------------------------------------------------------------------

class GraphError(SteinerError):
    """Invalid operation on the graph store."""


class DuplicateVertexError(GraphError, ValueError):
    def __init__(self, label) -> None:
        self.label = label
        super().__init__(f"Vertex with label '{label}' already exists")


class DuplicateEdgeError(GraphError, ValueError):
    def __init__(self, source, destination) -> None:
        self.source = source
        self.destination = destination
        super().__init__(
            f"An edge between '{source}' and '{destination}' already exists"
        )


class InvalidEdgeError(GraphError, ValueError):
    """Raised for edges the model cannot represent (self-loops)."""


class VertexNotFoundError(GraphError, KeyError):
    def __init__(self, label) -> None:
        self.label = label
        super().__init__(f"Vertex '{label}' not found")

    def __str__(self) -> str:
        # KeyError repr-quotes its argument
        return self.args[0]


# ---------------------------------------------------------------------------
# Shortest paths / solver
# ---------------------------------------------------------------------------

class UnreachableTargetError(SteinerError, ValueError):
    def __init__(self, source, target) -> None:
        self.source = source
        self.target = target
        super().__init__(f"'{target}' is not reachable from '{source}'")


class TerminalNotFoundError(SteinerError, KeyError):
    def __init__(self, labels) -> None:
        self.labels = list(labels)
        names = ", ".join(repr(l) for l in self.labels)
        super().__init__(f"Terminal(s) not found in graph: {names}")

    def __str__(self) -> str:
        return self.args[0]


class TooManyTerminalsError(SteinerError, ValueError):
    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(
            f"{count} terminals requested but the solver is limited to {limit}; "
            "the DP is exponential in the terminal count"
        )


class DisconnectedTerminalsError(SteinerError, ValueError):
    """No connected subgraph contains every terminal."""

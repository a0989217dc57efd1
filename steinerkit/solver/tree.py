"""Result container returned by the Steiner tree solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from steinerkit.graph.store import Edge, Vertex


@dataclass
class SteinerTree:
    """
    A solved Steiner tree.

    ``cost`` is the optimal edge count found by the DP. ``edges`` are the
    edges the reconstruction actually walked; with relaxation enabled they
    always form a tree with exactly ``cost`` edges.
    """

    terminals: list[Vertex]
    vertices: set[Vertex] = field(default_factory=set)
    edges: list[Edge] = field(default_factory=list)
    cost: int = 0
    hub: Optional[Vertex] = None

    @property
    def labels(self) -> set:
        return {v.label for v in self.vertices}

    @property
    def steiner_points(self) -> set[Vertex]:
        """Non-terminal vertices the tree routes through."""
        return self.vertices - set(self.terminals)

    def to_solution(self) -> dict[str, Any]:
        """Solution dict understood by the ``steiner_tree`` problem class."""
        return {
            "solution": {
                "vertices": [v.label for v in self.vertices],
                "edges": [[e.source.label, e.destination.label] for e in self.edges],
            },
            "metadata": {
                "cost": self.cost,
                "hub": self.hub.label if self.hub is not None else None,
                "steiner_points": [v.label for v in self.steiner_points],
            },
        }

    def __len__(self) -> int:
        return len(self.vertices)

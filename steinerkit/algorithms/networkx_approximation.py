"""NetworkX 2-approximation baseline for comparison against the exact solver."""

from __future__ import annotations

import networkx as nx
from networkx.algorithms.approximation import steiner_tree

from steinerkit.algorithms.base import AlgorithmWrapper


class NetworkXApproximation(AlgorithmWrapper):
    """
    Wraps :func:`networkx.algorithms.approximation.steiner_tree`.

    Parameters
    ----------
    method : str, default "mehlhorn"
        ``"mehlhorn"`` or ``"kou"``.
    """

    name = "networkx_approximation"

    def __init__(self, method: str = "mehlhorn") -> None:
        self.method = method
        self.name = f"networkx_{method}"

    def solve(self, instance: dict, timeout: float = 60.0) -> dict:
        G = nx.Graph()
        G.add_nodes_from(instance["nodes"])
        G.add_edges_from((e["source"], e["target"]) for e in instance["edges"])

        terminals = list(dict.fromkeys(instance.get("terminals", [])))
        if len(terminals) < 2:
            return {"solution": {"vertices": terminals, "edges": []}, "metadata": {}}

        tree = steiner_tree(G, terminals, method=self.method)
        return {
            "solution": {
                "vertices": list(tree.nodes()),
                "edges": [[u, v] for u, v in tree.edges()],
            },
            "metadata": {"method": self.method},
        }

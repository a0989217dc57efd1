"""Abstract base class for all instance generators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Optional

import networkx as nx


class BaseGenerator(ABC):
    """
    Base class for Steiner tree instance generators.

    Every generator produces a standardised instance dict::

        {
            "nodes": [0, 1, 2, ...],
            "edges": [
                {"source": 0, "target": 1, "name": "0-1"},
                ...
            ],
            "terminals": [3, 7, 12],
            "metadata": {
                "generator": "erdos_renyi",
                "size": 100,
                "params": {"p": 0.3, "num_terminals": 3},
            }
        }

    Terminals are always drawn from the largest connected component, so
    every generated instance has a solution.
    """

    name: str = "base"

    @abstractmethod
    def generate(self, size: int, **params: Any) -> dict:
        """
        Generate an instance.

        Parameters
        ----------
        size : int
            Number of nodes in the generated graph.
        **params
            Generator-specific parameters plus ``num_terminals`` and ``seed``.

        Returns
        -------
        dict
            An instance dict with keys ``nodes``, ``edges``, ``terminals``,
            ``metadata``.
        """

    # ------------------------------------------------------------------
    # Helpers shared by all generators
    # ------------------------------------------------------------------

    @staticmethod
    def _pick_terminals(G: nx.Graph, count: int, seed: Optional[int]) -> list:
        """Sample *count* terminals from the largest component of *G*."""
        if G.number_of_nodes() == 0:
            return []
        component = max(nx.connected_components(G), key=len)
        rng = random.Random(seed)
        return sorted(rng.sample(sorted(component), min(count, len(component))))

    @classmethod
    def _nx_to_dict(
        cls,
        G,  # noqa: N803  (networkx convention)
        generator_name: str,
        size: int,
        params: dict[str, Any],
        num_terminals: int,
        seed: Optional[int],
    ) -> dict:
        """Convert a ``networkx.Graph`` to the standard instance format."""
        edges = [
            {"source": u, "target": v, "name": f"{u}-{v}"}
            for u, v in G.edges()
        ]
        return {
            "nodes": list(G.nodes()),
            "edges": edges,
            "terminals": cls._pick_terminals(G, num_terminals, seed),
            "metadata": {
                "generator": generator_name,
                "size": size,
                "params": {**params, "num_terminals": num_terminals},
            },
        }

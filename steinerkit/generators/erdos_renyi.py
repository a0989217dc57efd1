"""Erdős-Rényi G(n, p) random graph generator."""

from __future__ import annotations

from typing import Any

import networkx as nx

from steinerkit.generators.base import BaseGenerator


class ErdosRenyiGenerator(BaseGenerator):
    """
    Generates random graphs using the Erdős-Rényi G(n, p) model.

    Each pair of nodes is connected independently with probability *p*.
    Sparse graphs may be disconnected; terminals then come from the
    largest component only.

    Parameters
    ----------
    p : float, default 0.3
        Edge probability.
    num_terminals : int, default 4
        Number of terminals to sample.
    seed : int | None
        Random seed for reproducibility.
    """

    name = "erdos_renyi"

    def generate(self, size: int, **params: Any) -> dict:
        p = params.get("p", 0.3)
        num_terminals = params.get("num_terminals", 4)
        seed = params.get("seed", None)

        G = nx.erdos_renyi_graph(size, p, seed=seed)
        return self._nx_to_dict(G, self.name, size, {"p": p}, num_terminals, seed)

"""Barabási-Albert preferential attachment graph generator."""

from __future__ import annotations

from typing import Any

import networkx as nx

from steinerkit.generators.base import BaseGenerator


class BarabasiAlbertGenerator(BaseGenerator):
    """
    Generates scale-free graphs using the Barabási-Albert model.

    New nodes attach preferentially to high-degree existing nodes, so a few
    hubs make natural Steiner points.

    Parameters
    ----------
    m : int, default 2
        Number of edges to attach from a new node to existing nodes.
    num_terminals : int, default 4
        Number of terminals to sample.
    seed : int | None
        Random seed for reproducibility.
    """

    name = "barabasi_albert"

    def generate(self, size: int, **params: Any) -> dict:
        m = params.get("m", 2)
        num_terminals = params.get("num_terminals", 4)
        seed = params.get("seed", None)

        # m must be < size
        m = min(m, max(1, size - 1))
        G = nx.barabasi_albert_graph(size, m, seed=seed)
        return self._nx_to_dict(G, self.name, size, {"m": m}, num_terminals, seed)

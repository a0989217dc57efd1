"""2-D grid / lattice graph generator."""

from __future__ import annotations

import math
from typing import Any

import networkx as nx

from steinerkit.generators.base import BaseGenerator


class Grid2DGenerator(BaseGenerator):
    """
    Generates 2-D grid (lattice) graphs.

    Grids model wiring and routing layouts, where the rectilinear Steiner
    tree is the classic target.

    The ``size`` parameter is interpreted as the *total* number of nodes.
    The grid dimensions are chosen as close to square as possible:
    ``rows × cols`` where ``rows * cols == size``.

    Parameters
    ----------
    num_terminals : int, default 4
        Number of terminals to sample.
    seed : int | None
        Random seed for reproducibility (only affects terminal choice).
    """

    name = "grid_2d"

    def generate(self, size: int, **params: Any) -> dict:
        num_terminals = params.get("num_terminals", 4)
        seed = params.get("seed", None)

        # Find the most-square factorisation of *size*
        rows = int(math.isqrt(size))
        while rows > 0 and size % rows != 0:
            rows -= 1
        if rows == 0:
            rows = 1
        cols = size // rows

        G = nx.grid_2d_graph(rows, cols)

        # Relabel nodes from (i, j) tuples to plain integers
        mapping = {node: idx for idx, node in enumerate(sorted(G.nodes()))}
        G = nx.relabel_nodes(G, mapping)

        return self._nx_to_dict(
            G, self.name, size, {"rows": rows, "cols": cols}, num_terminals, seed,
        )

"""Exact Dreyfus–Wagner solver exposed as a benchmark algorithm."""

from __future__ import annotations

from typing import Optional

from steinerkit.algorithms.base import AlgorithmWrapper
from steinerkit.config import SolverConfig
from steinerkit.graph.store import Graph
from steinerkit.solver.dreyfus_wagner import SteinerTreeSolver


class DreyfusWagnerAlgorithm(AlgorithmWrapper):
    name = "dreyfus_wagner"

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.config = config or SolverConfig()
        if not self.config.relaxation:
            self.name = "dreyfus_wagner_merge_only"

    def solve(self, instance: dict, timeout: float = 60.0) -> dict:
        graph = Graph.from_instance(instance)
        tree = SteinerTreeSolver(graph, config=self.config).solve(instance.get("terminals", []))
        return tree.to_solution()

"""Exact Steiner tree solver."""

from steinerkit.solver.dreyfus_wagner import SteinerTreeSolver, solve_steiner_tree
from steinerkit.solver.tree import SteinerTree

__all__ = ["SteinerTree", "SteinerTreeSolver", "solve_steiner_tree"]

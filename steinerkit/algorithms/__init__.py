"""Algorithms that can be registered with the benchmark runner."""

from steinerkit.algorithms.base import AlgorithmWrapper
from steinerkit.algorithms.dreyfus_wagner import DreyfusWagnerAlgorithm
from steinerkit.algorithms.networkx_approximation import NetworkXApproximation

__all__ = ["AlgorithmWrapper", "DreyfusWagnerAlgorithm", "NetworkXApproximation"]

"""Tests for the BFS shortest-path engine."""

import pytest

from steinerkit.errors import UnreachableTargetError
from steinerkit.graph.shortest_path import UNREACHABLE, distances, path_to
from steinerkit.graph.store import Graph


@pytest.fixture()
def two_components():
    g = Graph()
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    g.add_edge("X", "Y")
    return g


class TestDistances:
    def test_hop_counts(self, example_graph):
        dist = {v.label: d for v, d in distances(example_graph, "A").items()}
        assert dist == {"A": 0, "B": 1, "F": 1, "C": 2, "E": 2, "D": 3}

    def test_unreachable_sentinel(self, two_components):
        dist = {v.label: d for v, d in distances(two_components, "A").items()}
        assert dist["C"] == 2
        assert dist["X"] == UNREACHABLE
        assert dist["Y"] == UNREACHABLE

    def test_covers_every_vertex(self, two_components):
        assert len(distances(two_components, "X")) == len(two_components)


class TestPathTo:
    def test_shortest_path(self, example_graph):
        path = [v.label for v in path_to(example_graph, "A", "D")]
        assert path[0] == "A"
        assert path[-1] == "D"
        assert len(path) == 4
        for a, b in zip(path, path[1:]):
            assert example_graph.edge_between(a, b) is not None

    def test_path_to_self(self, example_graph):
        assert [v.label for v in path_to(example_graph, "C", "C")] == ["C"]

    def test_unreachable_target(self, two_components):
        with pytest.raises(UnreachableTargetError, match="not reachable"):
            path_to(two_components, "A", "Y")

"""Tests for the steiner_tree problem class and registry."""

import pytest

from steinerkit.problem_classes import get_problem_class, list_problem_classes


# ── Registry ─────────────────────────────────────────────────────────

def test_list_classes():
    names = [c["name"] for c in list_problem_classes()]
    assert names == ["steiner_tree"]


def test_get_unknown():
    with pytest.raises(ValueError, match="Unknown problem class"):
        get_problem_class("nonexistent")


# ── Steiner tree ─────────────────────────────────────────────────────

class TestSteinerTree:
    @pytest.fixture()
    def square(self):
        """A 4-cycle 0-1-2-3 plus vertex 4 adjacent to 0 and 2."""
        return {
            "nodes": [0, 1, 2, 3, 4],
            "edges": [
                {"source": 0, "target": 1},
                {"source": 1, "target": 2},
                {"source": 2, "target": 3},
                {"source": 3, "target": 0},
                {"source": 0, "target": 4},
                {"source": 4, "target": 2},
            ],
            "terminals": [0, 2],
        }

    @pytest.fixture()
    def cls(self):
        return get_problem_class("steiner_tree")

    def test_valid_tree(self, square, cls):
        sol = {"solution": {"vertices": [0, 1, 2], "edges": [[0, 1], [1, 2]]}}
        result = cls.validate_solution(square, sol)
        assert result["feasible"] is True
        assert result["edge_count"] == 2.0

    def test_missing_terminal(self, square, cls):
        sol = {"solution": {"vertices": [0, 1], "edges": [[0, 1]]}}
        result = cls.validate_solution(square, sol)
        assert result["feasible"] is False
        assert "Terminals missing" in result["reason"]

    def test_unknown_edge(self, square, cls):
        sol = {"solution": {"vertices": [0, 2], "edges": [[0, 2]]}}
        result = cls.validate_solution(square, sol)
        assert result["feasible"] is False
        assert "not in instance" in result["reason"]

    def test_disconnected(self, square, cls):
        sol = {"solution": {"vertices": [0, 1, 2], "edges": [[0, 1]]}}
        result = cls.validate_solution(square, sol)
        assert result["feasible"] is False
        assert "not connected" in result["reason"]

    def test_cycle_rejected(self, square, cls):
        sol = {"solution": {
            "vertices": [0, 1, 2, 3],
            "edges": [[0, 1], [1, 2], [2, 3], [3, 0]],
        }}
        result = cls.validate_solution(square, sol)
        assert result["feasible"] is False
        assert "cycle" in result["reason"]

    def test_vertices_only(self, square, cls):
        sol = {"solution": {"vertices": [0, 4, 2]}}
        result = cls.validate_solution(square, sol)
        assert result["feasible"] is True
        assert cls.compute_objective(square, sol) == 2.0

    def test_objective_counts_edges(self, square, cls):
        sol = {"solution": {"vertices": [0, 1, 2], "edges": [[0, 1], [1, 2]]}}
        assert cls.compute_objective(square, sol) == 2.0

    def test_reversed_duplicate_edge_counted_once(self, square, cls):
        sol = {"solution": {"vertices": [0, 1], "edges": [[0, 1], [1, 0]]}}
        square["terminals"] = [0, 1]
        result = cls.validate_solution(square, sol)
        assert result["feasible"] is True
        assert result["edge_count"] == 1.0
        assert cls.compute_objective(square, sol) == 1.0

"""Tests for JSON and SteinLib instance loaders."""

import json

import pytest

from steinerkit.graph.store import Graph
from steinerkit.solver.dreyfus_wagner import SteinerTreeSolver
from steinerkit.utils.instance_loader import load_instances, save_instances
from steinerkit.utils.steinlib import load_stp, parse_stp


STP_TEXT = """33D32945 STP File, STP Format Version 1.0

SECTION Comment
Name    "tiny"
END

SECTION Graph
Nodes 5
Edges 5
E 1 2 1
E 2 3 1
E 3 4 1
E 4 5 1
E 2 5 1
END

SECTION Terminals
Terminals 3
T 1
T 3
T 5
END

EOF
"""


@pytest.fixture
def single_instance(tmp_path):
    """Create a valid single-instance JSON file."""
    data = {
        "nodes": ["A", "B", "C"],
        "edges": [
            {"source": "A", "target": "B", "name": "AB"},
            {"source": "B", "target": "C", "name": "BC"},
        ],
        "terminals": ["A", "C"],
    }
    path = tmp_path / "single.json"
    path.write_text(json.dumps(data))
    return str(path)


@pytest.fixture
def batch_instances(tmp_path):
    """Create a valid batch JSON file with multiple instances."""
    data = [
        {
            "nodes": [0, 1, 2],
            "edges": [{"source": 0, "target": 1}],
        },
        {
            "nodes": [0, 1, 2, 3],
            "edges": [{"source": 0, "target": 1}, {"source": 2, "target": 3}],
            "terminals": [2, 3],
        },
    ]
    path = tmp_path / "batch.json"
    path.write_text(json.dumps(data))
    return str(path)


class TestInstanceLoader:
    def test_load_single(self, single_instance):
        instances = load_instances(single_instance)
        assert len(instances) == 1
        assert instances[0]["nodes"] == ["A", "B", "C"]
        assert instances[0]["terminals"] == ["A", "C"]
        assert instances[0]["instance_name"] == "custom_0"

    def test_load_batch(self, batch_instances):
        instances = load_instances(batch_instances)
        assert len(instances) == 2
        assert instances[0]["terminals"] == []
        assert instances[1]["terminals"] == [2, 3]

    def test_metadata_injected(self, single_instance):
        meta = load_instances(single_instance)[0]["metadata"]
        assert meta["generator"] == "custom"
        assert meta["size"] == 3

    def test_loaded_instance_solves(self, single_instance):
        inst = load_instances(single_instance)[0]
        tree = SteinerTreeSolver(Graph.from_instance(inst)).solve(inst["terminals"])
        assert tree.labels == {"A", "B", "C"}

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_instances("/nonexistent/file.json")

    def test_missing_nodes(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"edges": []}))
        with pytest.raises(ValueError, match="missing required 'nodes'"):
            load_instances(str(path))

    def test_missing_edges(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"nodes": [0, 1]}))
        with pytest.raises(ValueError, match="missing required 'edges'"):
            load_instances(str(path))

    def test_unknown_terminal(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"nodes": [0, 1], "edges": [], "terminals": [7]}))
        with pytest.raises(ValueError, match="terminals that are not nodes"):
            load_instances(str(path))

    def test_invalid_type(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('"just a string"')
        with pytest.raises(ValueError, match="Expected a JSON object or array"):
            load_instances(str(path))

    def test_save_then_load(self, tmp_path, example_graph):
        path = tmp_path / "out" / "graph.json"
        save_instances([example_graph.to_instance(terminals=["A", "F"])], str(path))
        inst = load_instances(str(path))[0]
        assert Graph.from_instance(inst).edge_between("A", "F").name == "AF_Connection"


class TestSteinLib:
    def test_parse(self):
        inst = parse_stp(STP_TEXT, name="tiny")
        assert inst["nodes"] == [0, 1, 2, 3, 4]
        assert len(inst["edges"]) == 5
        assert inst["terminals"] == [0, 2, 4]
        assert inst["metadata"]["generator"] == "steinlib"
        assert inst["metadata"]["params"]["weighted_source"] is False

    def test_solve_parsed(self):
        inst = parse_stp(STP_TEXT)
        tree = SteinerTreeSolver(Graph.from_instance(inst)).solve(inst["terminals"])
        # 1-2-3 and 2-5 in file numbering
        assert tree.cost == 3
        assert tree.labels == {0, 1, 2, 4}

    def test_weights_dropped(self, caplog):
        text = STP_TEXT.replace("E 2 5 1", "E 2 5 7")
        with caplog.at_level("WARNING"):
            inst = parse_stp(text)
        assert inst["metadata"]["params"]["weighted_source"] is True
        assert "edge weights ignored" in caplog.text

    def test_arcs_read_as_edges(self, caplog):
        text = STP_TEXT.replace("E 1 2 1", "A 1 2 1").replace("E 2 3 1", "A 3 2 1")
        with caplog.at_level("WARNING"):
            inst = parse_stp(text)
        assert len(inst["edges"]) == 5
        assert inst["metadata"]["params"]["directed_source"] is True
        assert "arc directions ignored" in caplog.text

    def test_undirected_source_flag(self):
        assert parse_stp(STP_TEXT)["metadata"]["params"]["directed_source"] is False

    def test_bad_header(self):
        with pytest.raises(ValueError, match="Not a SteinLib file"):
            parse_stp("SECTION Graph\nEND\n")

    def test_malformed_edge(self):
        with pytest.raises(ValueError, match="Malformed line"):
            parse_stp(STP_TEXT.replace("E 3 4 1", "E 3 x 1"))

    def test_load_file(self, tmp_path):
        path = tmp_path / "tiny.stp"
        path.write_text(STP_TEXT)
        assert load_stp(str(path))["instance_name"] == "tiny"

    def test_load_missing(self):
        with pytest.raises(FileNotFoundError):
            load_stp("/nonexistent/file.stp")

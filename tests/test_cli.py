"""Tests for the command line interface and configuration."""

import json

import pytest

from steinerkit.cli import main, parse_args, solver_config
from steinerkit.config import SolverConfig


class TestSolverConfig:
    def test_defaults(self):
        config = SolverConfig()
        assert config.max_terminals == 16
        assert config.relaxation is True

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("STEINERKIT_MAX_TERMINALS", "5")
        monkeypatch.setenv("STEINERKIT_RELAXATION", "false")
        config = SolverConfig.from_env()
        assert config.max_terminals == 5
        assert config.relaxation is False

    def test_rejects_zero_terminals_limit(self):
        with pytest.raises(ValueError):
            SolverConfig(max_terminals=0)

    def test_cli_overrides(self, monkeypatch):
        monkeypatch.delenv("STEINERKIT_MAX_TERMINALS", raising=False)
        monkeypatch.delenv("STEINERKIT_RELAXATION", raising=False)
        config = solver_config(parse_args(["--max-terminals", "3", "--merge-only", "demo"]))
        assert config.max_terminals == 3
        assert config.relaxation is False


class TestCommands:
    def test_demo(self, capsys):
        assert main(["demo"]) == 0
        out = capsys.readouterr().out
        assert "['A', 'B', 'F']" in out
        assert "AB_Connection" in out
        assert "AF_Connection" in out

    def test_generate_then_solve(self, tmp_path, capsys):
        path = tmp_path / "inst.json"
        assert main(["generate", "--generator", "grid_2d", "--size", "16",
                     "--num-terminals", "3", "--seed", "1", "--output", str(path)]) == 0
        assert path.exists()

        assert main(["solve", "--instance", str(path), "--json"]) == 0
        out = capsys.readouterr().out
        solution = json.loads(out[out.index("{"):])
        assert len(solution["solution"]["edges"]) == solution["metadata"]["cost"]

    def test_solve_with_terminal_override(self, tmp_path, capsys, example_graph):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps(example_graph.to_instance()))
        assert main(["solve", "--instance", str(path), "--terminals", "C", "E"]) == 0
        assert "2 edges, 3 vertices" in capsys.readouterr().out

    def test_integer_terminals_from_cli(self, tmp_path, capsys):
        path = tmp_path / "path.json"
        path.write_text(json.dumps({
            "nodes": [0, 1, 2],
            "edges": [{"source": 0, "target": 1}, {"source": 1, "target": 2}],
        }))
        assert main(["solve", "--instance", str(path), "--terminals", "0", "2"]) == 0
        assert "2 edges" in capsys.readouterr().out

    def test_unknown_terminal_exit_code(self, tmp_path, capsys, example_graph):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps(example_graph.to_instance()))
        assert main(["solve", "--instance", str(path), "--terminals", "A", "Z"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_missing_file_exit_code(self, capsys):
        assert main(["solve", "--stp", "/nonexistent/file.stp"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_empty_instance_file_exit_code(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text("[]")
        assert main(["solve", "--instance", str(path)]) == 1
        assert "No instances" in capsys.readouterr().err

    def test_bench_writes_csv(self, tmp_path, capsys):
        out = tmp_path / "results.csv"
        assert main(["bench", "--generator", "grid_2d", "--sizes", "9",
                     "--num-terminals", "3", "--count", "1", "--output", str(out)]) == 0
        assert out.exists()
        assert "dreyfus_wagner" in capsys.readouterr().out

"""Minimum Steiner Tree problem class."""

from __future__ import annotations

import networkx as nx


class ProblemClass:
    name = "steiner_tree"
    objective = "minimize"
    description = (
        "Find the fewest edges of an undirected graph that connect every terminal"
    )

    keywords = [
        "steiner tree", "terminal connection", "network design",
        "join path", "net routing", "connect required nodes",
    ]

    @staticmethod
    def validate_solution(instance: dict, solution: dict) -> dict:
        """
        Check that a solution is a tree of the instance spanning all terminals.

        A Steiner tree solution is::

            {"solution": {"vertices": [...], "edges": [[u, v], ...]}}

        When ``edges`` is omitted the subgraph induced by ``vertices`` is
        checked for connectivity instead, and no acyclicity is required.
        """
        body = solution.get("solution", {})
        vertices = set(body.get("vertices", []))
        terminals = set(instance.get("terminals", []))

        missing = terminals - vertices
        if missing:
            return {
                "feasible": False,
                "reason": f"Terminals missing from solution: {sorted(missing, key=str)}",
                "edge_count": 0,
            }

        G = nx.Graph()
        G.add_nodes_from(instance.get("nodes", []))
        G.add_edges_from((e["source"], e["target"]) for e in instance.get("edges", []))

        unknown = vertices - set(G.nodes)
        if unknown:
            return {
                "feasible": False,
                "reason": f"Vertices not in instance: {sorted(unknown, key=str)}",
                "edge_count": 0,
            }

        if "edges" in body:
            tree = nx.Graph()
            tree.add_nodes_from(vertices)
            for u, v in body["edges"]:
                if not G.has_edge(u, v):
                    return {
                        "feasible": False,
                        "reason": f"Edge ({u}, {v}) not in instance",
                        "edge_count": 0,
                    }
                if u not in vertices or v not in vertices:
                    return {
                        "feasible": False,
                        "reason": f"Edge ({u}, {v}) leaves the vertex set",
                        "edge_count": 0,
                    }
                tree.add_edge(u, v)
        else:
            tree = G.subgraph(vertices)

        if vertices and not nx.is_connected(tree):
            return {
                "feasible": False,
                "reason": "Solution subgraph is not connected",
                "edge_count": tree.number_of_edges(),
            }
        if "edges" in body and vertices and not nx.is_tree(tree):
            return {
                "feasible": False,
                "reason": "Solution edges contain a cycle",
                "edge_count": tree.number_of_edges(),
            }

        return {
            "feasible": True,
            "edge_count": ProblemClass.compute_objective(instance, solution),
        }

    @staticmethod
    def compute_objective(instance: dict, solution: dict) -> float:
        """Return the number of distinct tree edges (lower is better)."""
        body = solution.get("solution", {})
        if "edges" in body:
            return float(len({frozenset(e) for e in body["edges"]}))
        return float(max(len(body.get("vertices", [])) - 1, 0))

    @staticmethod
    def available_generators() -> list[str]:
        return ["erdos_renyi", "barabasi_albert", "grid_2d"]

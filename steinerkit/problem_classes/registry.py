"""Registry of problem classes the benchmark runner can validate against."""

from __future__ import annotations

from typing import Any

from steinerkit.problem_classes import steiner_tree

# name → ProblemClass
PROBLEM_REGISTRY: dict[str, Any] = {
    steiner_tree.ProblemClass.name: steiner_tree.ProblemClass,
}


def list_problem_classes() -> list[dict[str, Any]]:
    """Return a list of dicts summarising every registered problem class."""
    return [
        {
            "name": cls.name,
            "objective": cls.objective,
            "description": cls.description,
            "keywords": cls.keywords,
            "generators": cls.available_generators(),
        }
        for cls in PROBLEM_REGISTRY.values()
    ]


def get_problem_class(name: str) -> Any:
    """Look up a ``ProblemClass`` by name."""
    if name not in PROBLEM_REGISTRY:
        available = ", ".join(sorted(PROBLEM_REGISTRY))
        raise ValueError(f"Unknown problem class '{name}'. Available: {available}")
    return PROBLEM_REGISTRY[name]

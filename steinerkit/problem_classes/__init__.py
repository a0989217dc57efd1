"""Problem class registry."""

from steinerkit.problem_classes.registry import (
    get_problem_class,
    list_problem_classes,
)

__all__ = ["get_problem_class", "list_problem_classes"]

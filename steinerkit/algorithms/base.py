"""Abstract base class for algorithm wrappers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AlgorithmWrapper(ABC):
    """
    Base class that every benchmarked Steiner tree algorithm implements.

    Subclass this, set ``name``, and implement :meth:`solve`.

    Example
    -------
    >>> class AllNodes(AlgorithmWrapper):
    ...     name = "all_nodes"
    ...     def solve(self, instance, timeout=60.0):
    ...         return {"solution": {"vertices": list(instance["nodes"])}, "metadata": {}}
    """

    name: str = "unnamed"

    @abstractmethod
    def solve(self, instance: dict, timeout: float = 60.0) -> dict:
        """
        Solve the given instance.

        Parameters
        ----------
        instance : dict
            An instance dict (``nodes``, ``edges``, ``terminals``, ``metadata``).
        timeout : float
            Maximum wall-clock seconds allowed.

        Returns
        -------
        dict
            Must contain at least:

            - ``"solution"`` : ``{"vertices": [...], "edges": [[u, v], ...]}``
            - ``"metadata"`` : optional extra info (cost, hub, etc.)
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"

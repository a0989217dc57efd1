"""
SteinLib ``.stp`` support.

SteinLib (http://steinlib.zib.de) is the standard Steiner tree benchmark
library. Only the parts the unweighted model needs are read::

    SECTION Graph
    Nodes 5
    Edges 4
    E 1 2 3          (1-indexed, third column is the weight)
    END

    SECTION Terminals
    Terminals 2
    T 1
    T 5
    END

Edge weights and arc directions (``A`` lines) are dropped; a warning is
logged when either occurs.
"""

from __future__ import annotations

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def parse_stp(text: str, name: str = "stp") -> dict[str, Any]:
    """
    Parse SteinLib text into the standard instance dict (0-indexed nodes).

    Raises
    ------
    ValueError
        If the file does not start with the STP magic line or an edge or
        terminal line is malformed.
    """
    lines = [l.strip() for l in text.splitlines()]
    if not lines or not lines[0].upper().startswith("33D32945"):
        raise ValueError("Not a SteinLib file: missing '33D32945 STP File' header")

    n_nodes = 0
    edges: list[dict[str, Any]] = []
    seen: set[frozenset] = set()
    terminals: list[int] = []
    weighted = False
    directed = False
    section = None

    for lineno, line in enumerate(lines[1:], start=2):
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        keyword = parts[0].upper()

        if keyword == "SECTION":
            section = parts[1].upper() if len(parts) > 1 else None
            continue
        if keyword in ("END", "EOF"):
            section = None
            continue

        try:
            if section == "GRAPH":
                if keyword == "NODES":
                    n_nodes = int(parts[1])
                elif keyword in ("E", "A"):
                    u, v = int(parts[1]) - 1, int(parts[2]) - 1
                    if keyword == "A":
                        directed = True
                    if len(parts) > 3 and float(parts[3]) != 1.0:
                        weighted = True
                    key = frozenset((u, v))
                    if u == v or key in seen:
                        continue
                    seen.add(key)
                    edges.append({"source": u, "target": v, "name": f"e{len(edges) + 1}"})
            elif section == "TERMINALS" and keyword == "T":
                terminals.append(int(parts[1]) - 1)
        except (IndexError, ValueError) as exc:
            raise ValueError(f"Malformed line {lineno}: {line!r}") from exc

    if weighted:
        logger.warning("%s: edge weights ignored, solving the unit-weight instance", name)
    if directed:
        logger.warning("%s: arc directions ignored, solving the undirected instance", name)

    max_seen = max([max(e["source"], e["target"]) for e in edges] + terminals, default=-1)
    nodes = list(range(max(n_nodes, max_seen + 1)))

    return {
        "nodes": nodes,
        "edges": edges,
        "terminals": terminals,
        "instance_name": name,
        "metadata": {
            "generator": "steinlib",
            "size": len(nodes),
            "params": {"format": "stp", "weighted_source": weighted, "directed_source": directed},
        },
    }


def load_stp(path: str) -> dict[str, Any]:
    """Read and parse a ``.stp`` file."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"STP file not found: {path}")
    with open(path, encoding="utf-8") as f:
        text = f.read()
    return parse_stp(text, name=os.path.splitext(os.path.basename(path))[0])

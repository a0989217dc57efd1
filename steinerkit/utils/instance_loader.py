"""
Load and save Steiner tree instances as JSON.

Supports single-instance and batch (list of instances) JSON files.
Each instance must have at minimum ``nodes`` and ``edges`` keys;
``terminals`` defaults to an empty list.
"""

from __future__ import annotations

import json
import os
from typing import Any


def load_instances(path: str) -> list[dict[str, Any]]:
    """
    Load instances from a JSON file.

    The file may contain either:
    - A single instance dict (with ``nodes`` and ``edges``)
    - A list of instance dicts

    Parameters
    ----------
    path : str
        Path to the JSON file.

    Returns
    -------
    list[dict]
        List of validated instance dicts.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist.
    ValueError
        If the JSON structure is invalid.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Instance file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        instances = [data]
    elif isinstance(data, list):
        instances = data
    else:
        raise ValueError(
            f"Expected a JSON object or array, got {type(data).__name__}"
        )

    return [_validate(i, inst) for i, inst in enumerate(instances)]


def _validate(i: int, inst: Any) -> dict[str, Any]:
    if not isinstance(inst, dict):
        raise ValueError(f"Instance {i} is not a dict: {type(inst).__name__}")

    for key in ("nodes", "edges"):
        if key not in inst:
            raise ValueError(
                f"Instance {i} missing required '{key}' key. "
                f"Expected format: {{\"nodes\": [...], \"edges\": [...], \"terminals\": [...]}}"
            )

    for j, edge in enumerate(inst["edges"]):
        if not isinstance(edge, dict) or "source" not in edge or "target" not in edge:
            raise ValueError(f"Instance {i} edge {j} needs 'source' and 'target'")

    known = set(inst["nodes"]) | {e["source"] for e in inst["edges"]} | {e["target"] for e in inst["edges"]}
    inst.setdefault("terminals", [])
    unknown = [t for t in inst["terminals"] if t not in known]
    if unknown:
        raise ValueError(f"Instance {i} has terminals that are not nodes: {unknown}")

    if "metadata" not in inst:
        inst["metadata"] = {
            "generator": "custom",
            "size": len(inst["nodes"]),
            "params": {},
        }

    if "instance_name" not in inst:
        inst["instance_name"] = f"custom_{i}"

    return inst


def save_instances(instances: list[dict[str, Any]], path: str) -> None:
    """Write *instances* to *path* as a JSON array."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(instances, f, indent=2)

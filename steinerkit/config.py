"""Pydantic models defining the configuration and result contracts of steinerkit."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class RunStatus(str, Enum):
    SUCCESS = "success"
    TIMEOUT = "timeout"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Solver configuration
# ---------------------------------------------------------------------------

_TRUTHY = {"1", "true", "yes", "on"}


class SolverConfig(BaseModel):
    """Knobs for :class:`~steinerkit.solver.dreyfus_wagner.SteinerTreeSolver`."""
    model_config = ConfigDict(frozen=True)

    max_terminals: int = Field(
        default=16,
        ge=1,
        description="Upper bound on terminals; time grows as 3^n",
    )
    relaxation: bool = Field(
        default=True,
        description="Propagate merged values along edges after each merge step",
    )

    @classmethod
    def from_env(cls, prefix: str = "STEINERKIT_") -> SolverConfig:
        """Build a config from ``STEINERKIT_MAX_TERMINALS`` / ``STEINERKIT_RELAXATION``."""
        values: dict[str, Any] = {}
        max_terminals = os.environ.get(f"{prefix}MAX_TERMINALS")
        if max_terminals:
            values["max_terminals"] = int(max_terminals)
        relaxation = os.environ.get(f"{prefix}RELAXATION")
        if relaxation:
            values["relaxation"] = relaxation.strip().lower() in _TRUTHY
        return cls(**values)


# ---------------------------------------------------------------------------
# Benchmark configuration models
# ---------------------------------------------------------------------------

class GeneratorConfig(BaseModel):
    """Configuration for a single instance generator."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., description="Generator type, e.g. 'erdos_renyi'")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra generator params (e.g. {'p': 0.3})",
        validation_alias=AliasChoices("params", "parameters"),
    )
    sizes: list[int] = Field(..., description="Graph sizes to generate")
    num_terminals: int = Field(default=4, ge=1, description="Terminals per instance")
    count_per_size: int = Field(default=3, ge=1, description="Instances per size")


class InstanceConfig(BaseModel):
    """Specifies which instances to generate."""
    generators: list[GeneratorConfig] = Field(default_factory=list)
    custom_instances: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Instance dicts loaded from JSON or STP files",
    )


class ExecutionConfig(BaseModel):
    """Resource limits for benchmark runs."""
    timeout_seconds: float = Field(default=60.0, gt=0)
    runs_per_config: int = Field(default=1, ge=1)


class BenchmarkConfig(BaseModel):
    """Top-level configuration of a benchmark run."""
    problem_class: str = "steiner_tree"
    instance_config: InstanceConfig
    execution_config: ExecutionConfig = Field(default_factory=ExecutionConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)


# ---------------------------------------------------------------------------
# Result record
# ---------------------------------------------------------------------------

class BenchmarkResult(BaseModel):
    """A single benchmark measurement (one algorithm × one instance × one run)."""
    algorithm_name: str
    instance_name: str
    instance_generator: str
    problem_size: int
    num_terminals: int = 0
    objective_value: Optional[float] = None
    wall_time_seconds: float = 0.0
    peak_memory_mb: float = 0.0
    status: RunStatus = RunStatus.SUCCESS
    run_index: int = 0
    feasible: bool = True
    error_message: str = ""

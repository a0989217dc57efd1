"""
Benchmark execution engine.

Generates instances, runs Steiner tree algorithms, collects metrics,
validates solutions, and produces a pandas DataFrame of results.
"""

from __future__ import annotations

import logging
import multiprocessing
import time
import tracemalloc
from typing import Any, Callable, Optional

import pandas as pd
from tqdm import tqdm

from steinerkit.config import (
    BenchmarkConfig,
    BenchmarkResult,
    RunStatus,
)
from steinerkit.generators import get_generator
from steinerkit.problem_classes import get_problem_class

logger = logging.getLogger(__name__)

# Seconds a parallel worker may run past its own timeout before it is killed
HARD_TIMEOUT_GRACE = 5.0


# ---------------------------------------------------------------------------
# Helper that runs inside a worker process
# ---------------------------------------------------------------------------

def _run_one(
    algorithm_wrapper,
    instance: dict,
    timeout: float,
) -> dict:
    """Run a single (algorithm × instance) and return raw measurements."""
    tracemalloc.start()
    t0 = time.perf_counter()
    try:
        result = algorithm_wrapper.solve(instance, timeout=timeout)
        status, error = RunStatus.SUCCESS, ""
    except Exception as exc:  # noqa: BLE001  recorded as an error row
        logger.debug("%s failed on %s", algorithm_wrapper.name,
                     instance.get("instance_name"), exc_info=True)
        result = None
        status, error = RunStatus.ERROR, f"{type(exc).__name__}: {exc}"
    finally:
        wall_time = time.perf_counter() - t0
        _, peak_mem = tracemalloc.get_traced_memory()
        tracemalloc.stop()

    return {
        "solution": result,
        "wall_time": wall_time,
        "peak_memory_mb": peak_mem / (1024 * 1024),
        "status": status,
        "error": error,
    }


def _run_in_child(conn, algorithm_wrapper, instance: dict, timeout: float) -> None:
    try:
        conn.send(_run_one(algorithm_wrapper, instance, timeout))
    finally:
        conn.close()


def _failed_run(status: RunStatus, wall_time: float, error: str) -> dict:
    return {
        "solution": None,
        "wall_time": wall_time,
        "peak_memory_mb": 0.0,
        "status": status,
        "error": error,
    }


class BenchmarkRunner:
    """
    Runs every registered algorithm over every instance of a config.

    Usage
    -----
    >>> runner = BenchmarkRunner(config)
    >>> runner.register_algorithm(DreyfusWagnerAlgorithm())
    >>> df = runner.run()
    """

    def __init__(self, config: BenchmarkConfig) -> None:
        self.config = config
        self.algorithms: list[Any] = []
        self._instances: list[dict] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register_algorithm(self, algorithm) -> None:
        """Add an :class:`AlgorithmWrapper` instance to the benchmark."""
        self.algorithms.append(algorithm)

    def generate_instances(self) -> list[dict]:
        """
        Build all instances according to the config.

        Returns a list of dicts, each augmented with an ``instance_name``
        key for later identification. Seeds are derived from the instance
        position so repeated calls produce the same instances.
        """
        instances: list[dict] = []

        for gen_cfg in self.config.instance_config.generators:
            gen = get_generator(gen_cfg.type)()
            base_seed = gen_cfg.params.get("seed", 0)
            for size in gen_cfg.sizes:
                for i in range(gen_cfg.count_per_size):
                    params = {
                        **gen_cfg.params,
                        "num_terminals": gen_cfg.num_terminals,
                        "seed": base_seed + i,
                    }
                    inst = gen.generate(size, **params)
                    inst["instance_name"] = f"{gen_cfg.type}_n{size}_t{gen_cfg.num_terminals}_{i}"
                    instances.append(inst)

        for idx, inst in enumerate(self.config.instance_config.custom_instances):
            if "instance_name" not in inst:
                inst["instance_name"] = f"custom_{idx}"
            instances.append(inst)

        self._instances = instances
        logger.info("Generated %d instances", len(instances))
        return instances

    def run(
        self,
        parallel: bool = False,
        progress: bool = True,
        progress_fn: Optional[Callable[[str, int, int], None]] = None,
    ) -> pd.DataFrame:
        """
        Execute the full benchmark and return a results DataFrame.

        Parameters
        ----------
        parallel : bool
            If True, run each (algorithm × instance × run) in a separate
            process with a hard timeout. Defaults to False (sequential).
        progress : bool
            Show a tqdm progress bar.
        progress_fn : callable | None
            Called as ``progress_fn(algorithm_name, completed, total)``
            after every run.
        """
        if not self.algorithms:
            raise RuntimeError("No algorithms registered. Call register_algorithm() first.")

        if not self._instances:
            self.generate_instances()

        problem_cls = get_problem_class(self.config.problem_class)
        timeout = self.config.execution_config.timeout_seconds
        runs = self.config.execution_config.runs_per_config

        records: list[BenchmarkResult] = []
        runs_per_algo = len(self._instances) * runs
        total = len(self.algorithms) * runs_per_algo

        with tqdm(total=total, desc="Running Benchmark", unit="run", disable=not progress) as pbar:
            for algo in self.algorithms:
                algo_completed = 0
                for inst in self._instances:
                    for run_idx in range(runs):
                        records.append(self._measure(algo, inst, run_idx, timeout, parallel, problem_cls))
                        algo_completed += 1
                        pbar.update(1)
                        if progress_fn:
                            progress_fn(algo.name, algo_completed, runs_per_algo)

        df = pd.DataFrame([r.model_dump(mode="json") for r in records])
        logger.info("Benchmark complete: %d results collected", len(df))
        return df

    @staticmethod
    def summarize(df: pd.DataFrame) -> pd.DataFrame:
        """Mean objective / runtime and feasibility rate per algorithm."""
        ok = df[df["status"] == RunStatus.SUCCESS.value]
        return ok.groupby("algorithm_name").agg(
            mean_objective=("objective_value", "mean"),
            mean_wall_time=("wall_time_seconds", "mean"),
            feasible_rate=("feasible", "mean"),
            runs=("run_index", "count"),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _measure(self, algo, inst: dict, run_idx: int, timeout: float, parallel: bool,
                 problem_cls) -> BenchmarkResult:
        metadata = inst.get("metadata", {})

        if parallel:
            raw = self._run_parallel(algo, inst, timeout)
        else:
            raw = _run_one(algo, inst, timeout)

        objective_value = None
        feasible = False
        if raw["status"] == RunStatus.SUCCESS and raw["solution"] is not None:
            val = problem_cls.validate_solution(inst, raw["solution"])
            feasible = val.get("feasible", False)
            if feasible:
                objective_value = problem_cls.compute_objective(inst, raw["solution"])
            else:
                logger.warning("%s produced an infeasible solution on %s: %s",
                               algo.name, inst.get("instance_name"), val.get("reason"))
        elif raw["status"] == RunStatus.SUCCESS:
            raw["status"] = RunStatus.ERROR
            raw["error"] = "Algorithm returned None"

        return BenchmarkResult(
            algorithm_name=algo.name,
            instance_name=inst.get("instance_name", "unknown"),
            instance_generator=metadata.get("generator", "custom"),
            problem_size=metadata.get("size", len(inst.get("nodes", []))),
            num_terminals=len(inst.get("terminals", [])),
            objective_value=objective_value,
            wall_time_seconds=round(raw["wall_time"], 6),
            peak_memory_mb=round(raw["peak_memory_mb"], 3),
            status=raw["status"],
            run_index=run_idx,
            feasible=feasible,
            error_message=raw.get("error", ""),
        )

    @staticmethod
    def _run_parallel(algo, inst: dict, timeout: float) -> dict:
        """
        Run in a subprocess with hard timeout enforcement.

        The worker gets ``timeout + HARD_TIMEOUT_GRACE`` seconds to report
        back; after that it is terminated and a TIMEOUT row is returned.
        """
        receiver, sender = multiprocessing.Pipe(duplex=False)
        proc = multiprocessing.Process(
            target=_run_in_child,
            args=(sender, algo, inst, timeout),
            daemon=True,
        )
        proc.start()
        sender.close()
        try:
            if receiver.poll(timeout + HARD_TIMEOUT_GRACE):
                return receiver.recv()
            logger.warning("%s exceeded %.1fs on %s, terminating worker",
                           algo.name, timeout, inst.get("instance_name"))
            return _failed_run(RunStatus.TIMEOUT, timeout, f"Hard timeout after {timeout}s")
        except EOFError:
            proc.join()
            return _failed_run(RunStatus.ERROR, 0.0, f"Worker exited with code {proc.exitcode}")
        finally:
            if proc.is_alive():
                proc.terminate()
            proc.join()
            receiver.close()

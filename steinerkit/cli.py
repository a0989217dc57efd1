"""
Command line interface for steinerkit.

Usage
-----
    steinerkit demo
    steinerkit solve --instance graph.json --terminals A B F
    steinerkit solve --stp b01.stp
    steinerkit generate --generator grid_2d --size 36 --num-terminals 4 --output inst.json
    steinerkit bench --generator erdos_renyi --sizes 20 40 --num-terminals 4 --output results.csv

Settings can also be placed in a ``.env`` file
(``STEINERKIT_MAX_TERMINALS``, ``STEINERKIT_RELAXATION``, ``STEINERKIT_LOG_LEVEL``).
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from steinerkit.algorithms import DreyfusWagnerAlgorithm, NetworkXApproximation
from steinerkit.config import (
    BenchmarkConfig,
    ExecutionConfig,
    GeneratorConfig,
    InstanceConfig,
    SolverConfig,
)
from steinerkit.engine.runner import BenchmarkRunner
from steinerkit.errors import SteinerError
from steinerkit.generators import get_generator, list_generators
from steinerkit.graph.store import Graph
from steinerkit.solver.dreyfus_wagner import SteinerTreeSolver
from steinerkit.utils.instance_loader import load_instances, save_instances
from steinerkit.utils.steinlib import load_stp

logger = logging.getLogger(__name__)

# The worked example: A-B, A-F, B-C, C-D, B-E, E-D, E-F with terminals {A, B, F}
DEMO_EDGES = [
    ("A", "B", "AB_Connection"),
    ("A", "F", "AF_Connection"),
    ("B", "C", "BC_Connection"),
    ("C", "D", "CD_Connection"),
    ("B", "E", "BE_Connection"),
    ("E", "D", "ED_Connection"),
    ("E", "F", "EF_Connection"),
]
DEMO_TERMINALS = ["A", "B", "F"]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Exact minimum Steiner trees")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--max-terminals",
        type=int,
        help="Refuse queries with more terminals (default from STEINERKIT_MAX_TERMINALS or 16)",
    )
    parser.add_argument(
        "--merge-only",
        action="store_true",
        help="Disable the relaxation pass (merge-only DP, may be suboptimal)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Solve the built-in A..F example graph")

    solve_parser = subparsers.add_parser("solve", help="Solve a JSON or SteinLib instance")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--instance", type=Path, help="JSON instance file (first instance is used)")
    source.add_argument("--stp", type=Path, help="SteinLib .stp file")
    solve_parser.add_argument("--terminals", nargs="+", help="Override the instance's terminals")
    solve_parser.add_argument("--json", action="store_true", help="Print the solution as JSON")

    gen_parser = subparsers.add_parser("generate", help="Write a random instance to JSON")
    gen_parser.add_argument("--generator", choices=list_generators(), default="erdos_renyi")
    gen_parser.add_argument("--size", type=int, required=True, help="Number of nodes")
    gen_parser.add_argument("--num-terminals", type=int, default=4)
    gen_parser.add_argument("--seed", type=int, default=None)
    gen_parser.add_argument("--output", type=Path, required=True)

    bench_parser = subparsers.add_parser("bench", help="Benchmark exact solver against baselines")
    bench_parser.add_argument("--generator", choices=list_generators(), default="erdos_renyi")
    bench_parser.add_argument("--sizes", type=int, nargs="+", default=[20, 40])
    bench_parser.add_argument("--num-terminals", type=int, default=4)
    bench_parser.add_argument("--count", type=int, default=3, help="Instances per size")
    bench_parser.add_argument("--runs", type=int, default=1, help="Runs per instance")
    bench_parser.add_argument("--timeout", type=float, default=60.0)
    bench_parser.add_argument("--parallel", action="store_true", help="Run each solve in a subprocess")
    bench_parser.add_argument("--output", type=Path, help="Optional CSV path for the raw results")

    return parser.parse_args(argv)


def solver_config(args: argparse.Namespace) -> SolverConfig:
    config = SolverConfig.from_env()
    updates = {}
    if args.max_terminals is not None:
        updates["max_terminals"] = args.max_terminals
    if args.merge_only:
        updates["relaxation"] = False
    return config.model_copy(update=updates) if updates else config


def cmd_demo(config: SolverConfig) -> None:
    graph = Graph()
    for src, dst, name in DEMO_EDGES:
        graph.add_edge(src, dst, name)

    tree = SteinerTreeSolver(graph, config=config).solve(DEMO_TERMINALS)
    print(f"Vertices in the Steiner tree: {sorted(tree.labels)}")
    print(f"Edges in the Steiner tree ({tree.cost}):")
    for edge in sorted(tree.edges, key=lambda e: e.name):
        print(f"  {edge.name}")


def cmd_solve(
    config: SolverConfig,
    instance_path: Optional[Path],
    stp_path: Optional[Path],
    terminals: Optional[list[str]],
    as_json: bool,
) -> None:
    if stp_path is not None:
        instance = load_stp(str(stp_path))
    else:
        instances = load_instances(str(instance_path))
        if not instances:
            raise ValueError(f"No instances in {instance_path}")
        instance = instances[0]

    graph = Graph.from_instance(instance)
    if terminals:
        # CLI arguments are strings; match them to integer labels where needed
        terminals = [_coerce_label(graph, t) for t in terminals]
    else:
        terminals = instance.get("terminals", [])

    tree = SteinerTreeSolver(graph, config=config).solve(terminals)

    if as_json:
        print(json.dumps(tree.to_solution(), indent=2, default=str))
        return

    print(f"Instance: {instance.get('instance_name', 'custom')} ({graph!r})")
    print(f"Terminals: {[t.label for t in tree.terminals]}")
    print(f"Minimum Steiner tree: {tree.cost} edges, {len(tree.vertices)} vertices")
    print(f"Steiner points: {sorted((v.label for v in tree.steiner_points), key=str)}")
    for edge in tree.edges:
        print(f"  {edge.name}: {edge.source.label} - {edge.destination.label}")


def _coerce_label(graph: Graph, label: str):
    if label in graph:
        return label
    try:
        as_int = int(label)
    except ValueError:
        return label
    return as_int if as_int in graph else label


def cmd_generate(generator: str, size: int, num_terminals: int, seed: Optional[int], output: Path) -> None:
    instance = get_generator(generator)().generate(size, num_terminals=num_terminals, seed=seed)
    instance["instance_name"] = f"{generator}_n{size}_t{num_terminals}"
    save_instances([instance], str(output))
    print(f"Instance saved to {output} ({len(instance['nodes'])} nodes, "
          f"{len(instance['edges'])} edges, terminals {instance['terminals']})")


def cmd_bench(config: SolverConfig, args: argparse.Namespace) -> None:
    bench_config = BenchmarkConfig(
        instance_config=InstanceConfig(
            generators=[
                GeneratorConfig(
                    type=args.generator,
                    sizes=args.sizes,
                    num_terminals=args.num_terminals,
                    count_per_size=args.count,
                ),
            ],
        ),
        execution_config=ExecutionConfig(timeout_seconds=args.timeout, runs_per_config=args.runs),
        solver=config,
    )

    runner = BenchmarkRunner(bench_config)
    runner.register_algorithm(DreyfusWagnerAlgorithm(bench_config.solver))
    runner.register_algorithm(NetworkXApproximation("mehlhorn"))
    runner.register_algorithm(NetworkXApproximation("kou"))
    df = runner.run(parallel=args.parallel)

    print(BenchmarkRunner.summarize(df).to_string())
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.output, index=False)
        print(f"Results saved to {args.output}")


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else os.environ.get("STEINERKIT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="%(levelname)s | %(message)s")

    try:
        config = solver_config(args)
        if args.command == "demo":
            cmd_demo(config)
        elif args.command == "solve":
            cmd_solve(config, args.instance, args.stp, args.terminals, args.json)
        elif args.command == "generate":
            cmd_generate(args.generator, args.size, args.num_terminals, args.seed, args.output)
        elif args.command == "bench":
            cmd_bench(config, args)
        else:
            raise ValueError(f"Unknown command: {args.command}")
    except (SteinerError, FileNotFoundError, ValueError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import math
import pathlib
import sys
from typing import Iterable

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from AnnealTSP import AnnealingSchedule, AnnealTSP, MalformedMatrixError, read_distance_matrix


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find a short Hamiltonian cycle in a comma-separated distance matrix by simulated annealing."
    )
    parser.add_argument("matrix", type=pathlib.Path, help="Text file with one comma-separated row per line ('inf' = no edge).")
    parser.add_argument(
        "--initial-temperature",
        type=float,
        default=1000.0,
        help="Starting temperature (default: 1000).",
    )
    parser.add_argument(
        "--cooling-rate",
        type=float,
        default=0.995,
        help="Multiplicative cooling factor applied after each temperature level (default: 0.995).",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=1000,
        help="Neighbor moves tried per temperature level (default: 1000).",
    )
    parser.add_argument("--chains", type=int, default=1, help="Independent annealing runs; the best is reported.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs.")
    parser.add_argument(
        "--time-limit",
        type=float,
        default=None,
        help="Per-chain wall clock budget in seconds (default: unlimited).",
    )
    parser.add_argument("--json", action="store_true", help="Emit the result as a JSON record.")
    parser.add_argument("--verbose", action="store_true", help="Log solver progress to stderr.")
    return parser.parse_args(raw_args)


def format_route(path: list[int]) -> str:
    return " -> ".join(str(v) for v in path)


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not args.matrix.exists():
        raise SystemExit(f"Matrix file not found: {args.matrix}")

    try:
        matrix = read_distance_matrix(args.matrix)
    except MalformedMatrixError as exc:
        print(f"Malformed matrix in {args.matrix}: {exc}", file=sys.stderr)
        return 2

    try:
        schedule = AnnealingSchedule(
            initial_temperature=args.initial_temperature,
            cooling_rate=args.cooling_rate,
            iterations_per_temperature=args.iterations,
        )
    except ValueError as exc:
        print(f"Invalid schedule: {exc}", file=sys.stderr)
        return 2
    if args.chains < 1:
        print(f"Invalid --chains: must be at least 1, got {args.chains}", file=sys.stderr)
        return 2

    result = AnnealTSP(schedule=schedule).solve(
        {"distance_matrix": matrix},
        chains=args.chains,
        seed=args.seed,
        time_limit=args.time_limit,
    )

    if args.json:
        record = {
            "path": result.path,
            # JSON has no infinity; a route on forbidden edges has no finite length.
            "cost": result.cost if math.isfinite(result.cost) else None,
            "status": result.status,
            "elapsed": result.elapsed,
            "num_cities": int(matrix.shape[0]),
            "chains": args.chains,
            "seed": args.seed,
        }
        print(json.dumps(record, allow_nan=False))
    else:
        print(f"Shortest route: {format_route(result.path)}")
        print(f"Route length: {result.cost}")
        if result.status != "complete":
            print(f"Run ended early ({result.status}); reporting best route found.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

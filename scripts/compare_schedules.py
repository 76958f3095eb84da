#!/usr/bin/env python3
from __future__ import annotations

import argparse
import pathlib
import sys
from typing import Iterable, List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from AnnealTSP import AnnealingSchedule, DistanceMatrix, SimulatedAnnealingSolver, read_distance_matrix


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare annealing cooling rates on one distance matrix.")
    parser.add_argument("matrix", type=pathlib.Path, help="Comma-separated distance matrix file.")
    parser.add_argument(
        "--cooling-rates",
        nargs="+",
        type=float,
        default=[0.9, 0.95, 0.99, 0.995],
        help="Cooling rates to compare.",
    )
    parser.add_argument("--initial-temperature", type=float, default=1000.0)
    parser.add_argument("--iterations", type=int, default=1000, help="Moves per temperature level.")
    parser.add_argument("--repeats", type=int, default=5, help="Seeded runs per cooling rate.")
    parser.add_argument("--seed", type=int, default=42, help="Base seed; run k uses seed + k.")
    parser.add_argument(
        "--figure",
        type=pathlib.Path,
        default=None,
        help="Optional destination for a convergence plot (PNG).",
    )
    return parser.parse_args(raw_args)


def run_grid(
    distances: DistanceMatrix,
    cooling_rates: List[float],
    initial_temperature: float,
    iterations: int,
    repeats: int,
    seed: int,
) -> List[dict]:
    records: List[dict] = []
    for rate in cooling_rates:
        schedule = AnnealingSchedule(
            initial_temperature=initial_temperature,
            cooling_rate=rate,
            iterations_per_temperature=iterations,
        )
        for repeat in range(repeats):
            solver = SimulatedAnnealingSolver(schedule=schedule, seed=seed + repeat)
            result = solver.solve(distances, record_history=True)
            print(f"cooling_rate={rate} run {repeat + 1}/{repeats}: cost={result.cost} elapsed={result.elapsed:.3f}s")
            for step, best in enumerate(result.metadata["history"], start=1):
                records.append(
                    {
                        "cooling_rate": rate,
                        "repeat": repeat,
                        "step": step,
                        "best_cost": best,
                        "final_cost": result.cost,
                        "elapsed": result.elapsed,
                    }
                )
    return records


def build_dataframe(records: List[dict]) -> pd.DataFrame:
    df = pd.DataFrame(records)
    for col in ["cooling_rate", "step", "best_cost", "final_cost", "elapsed"]:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def summarise(df: pd.DataFrame) -> pd.DataFrame:
    finals = df.drop_duplicates(subset=["cooling_rate", "repeat"])
    return (
        finals.groupby("cooling_rate")
        .agg(
            best_cost=("final_cost", "min"),
            avg_cost=("final_cost", "mean"),
            avg_elapsed=("elapsed", "mean"),
            runs=("final_cost", "count"),
        )
        .reset_index()
    )


def print_summary(summary: pd.DataFrame) -> None:
    for _, row in summary.iterrows():
        print(
            f"cooling_rate={row['cooling_rate']}: runs={int(row['runs'])} best={row['best_cost']:.2f} "
            f"avg={row['avg_cost']:.2f} avg_elapsed={row['avg_elapsed']:.3f}s"
        )


def render(df: pd.DataFrame, output: pathlib.Path) -> None:
    sns.set_theme(style="whitegrid")
    fig, ax = plt.subplots(figsize=(10, 6))
    sns.lineplot(
        data=df,
        x="step",
        y="best_cost",
        hue="cooling_rate",
        estimator="mean",
        errorbar="sd",
        err_style="band",
        ax=ax,
    )
    ax.set_title("Best Route Length per Temperature Step (mean ± 1σ)")
    ax.set_xlabel("Temperature Step")
    ax.set_ylabel("Best Route Length")
    fig.tight_layout()

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=200)
    plt.close(fig)
    print(f"Saved figure to {output}")


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    if not args.matrix.exists():
        raise SystemExit(f"Matrix file not found: {args.matrix}")
    distances = DistanceMatrix(read_distance_matrix(args.matrix))
    records = run_grid(
        distances,
        args.cooling_rates,
        args.initial_temperature,
        args.iterations,
        args.repeats,
        args.seed,
    )
    if not records:
        raise SystemExit("No runs recorded; check the cooling rates and initial temperature.")
    df = build_dataframe(records)
    print_summary(summarise(df))
    if args.figure is not None:
        render(df, args.figure)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

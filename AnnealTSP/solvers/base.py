from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Type

import numpy as np

from AnnealTSP.distance import DistanceMatrix
from AnnealTSP.utils.taxonomy import AlgorithmFamily


@dataclass
class AlgorithmResult:
    """Container capturing the outcome of running a TSP solver."""

    name: str
    path: List[int]
    cost: float
    elapsed: float
    status: str
    metadata: Dict[str, Any] = field(default_factory=dict)


class TimeLimitExpired(Exception):
    """Raised when an algorithm exceeds the allotted wall clock budget."""


class InvalidOperationError(ValueError):
    """Raised when an operation has no meaningful result for its input (e.g. swapping in a 1-vertex route)."""


def current_time() -> float:
    return time.perf_counter()


def remaining_budget(start_time: float, time_limit: float) -> float:
    return time_limit - (current_time() - start_time)


def enforce_time_budget(start_time: float, time_limit: float | None) -> None:
    if time_limit is None:
        return
    if remaining_budget(start_time, time_limit) <= 0:
        raise TimeLimitExpired("Time budget exhausted")


def as_distance_matrix(graph: DistanceMatrix | np.ndarray | Sequence[Sequence[float]]) -> DistanceMatrix:
    if isinstance(graph, DistanceMatrix):
        return graph
    return DistanceMatrix(graph)


def route_length(distances: DistanceMatrix, route: Sequence[int]) -> float:
    """Compute tour cost (including return leg).

    Any ``inf`` edge on the cycle makes the total ``inf``.
    """
    if not route:
        raise InvalidOperationError("Cannot measure an empty route.")
    length = 0.0
    for i in range(len(route) - 1):
        length += distances.distance(route[i], route[i + 1])
    length += distances.distance(route[-1], route[0])
    return length


@dataclass(frozen=True)
class SolverSpec:
    """Metadata describing a solver implementation."""

    name: str
    cls: Type["BaseSolver"]
    family: AlgorithmFamily


class BaseSolver:
    """Common interface for AnnealTSP solvers."""

    name: str
    family: AlgorithmFamily

    def solve(self, graph: DistanceMatrix | np.ndarray, time_limit: float | None = None) -> AlgorithmResult:  # noqa: D401
        """Solve a TSP instance represented as a distance matrix."""
        raise NotImplementedError


__all__ = [
    "AlgorithmResult",
    "AlgorithmFamily",
    "BaseSolver",
    "InvalidOperationError",
    "SolverSpec",
    "TimeLimitExpired",
    "as_distance_matrix",
    "current_time",
    "enforce_time_budget",
    "remaining_budget",
    "route_length",
]

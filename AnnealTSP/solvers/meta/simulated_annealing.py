from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from AnnealTSP.distance import DistanceMatrix
from AnnealTSP.solvers.base import (
    AlgorithmResult,
    BaseSolver,
    InvalidOperationError,
    TimeLimitExpired,
    as_distance_matrix,
    current_time,
    enforce_time_budget,
    route_length,
)
from AnnealTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnealingSchedule:
    """Geometric cooling schedule: ``temperature *= cooling_rate`` after every inner loop."""

    initial_temperature: float = 1000.0
    cooling_rate: float = 0.995
    iterations_per_temperature: int = 1000
    final_temperature: float = 1.0

    def __post_init__(self) -> None:
        if not self.initial_temperature > 0:
            raise ValueError(f"initial_temperature must be positive, got {self.initial_temperature}")
        if not 0 < self.cooling_rate < 1:
            raise ValueError(f"cooling_rate must lie in (0, 1), got {self.cooling_rate}")
        if self.iterations_per_temperature < 1:
            raise ValueError(f"iterations_per_temperature must be at least 1, got {self.iterations_per_temperature}")
        if not self.final_temperature > 0:
            raise ValueError(f"final_temperature must be positive, got {self.final_temperature}")

    def temperature_steps(self) -> int:
        """Number of outer steps before the temperature reaches the floor."""
        steps = 0
        temperature = self.initial_temperature
        while temperature > self.final_temperature:
            temperature *= self.cooling_rate
            steps += 1
        return steps


def neighbor(route: Sequence[int], rng: np.random.Generator) -> list[int]:
    """Return a copy of ``route`` with two distinct positions swapped."""
    size = len(route)
    if size < 2:
        raise InvalidOperationError(f"Cannot swap positions in a route of {size} vertices.")
    candidate = list(route)
    i = int(rng.integers(size))
    j = int(rng.integers(size))
    while i == j:
        j = int(rng.integers(size))
    candidate[i], candidate[j] = candidate[j], candidate[i]
    return candidate


def acceptance_probability(current_cost: float, candidate_cost: float, temperature: float) -> float:
    """Metropolis criterion; improving moves are always taken."""
    if not temperature > 0:
        raise ValueError(f"temperature must be positive, got {temperature}")
    if candidate_cost < current_cost:
        return 1.0
    return math.exp((current_cost - candidate_cost) / temperature)


class SimulatedAnnealingSolver(BaseSolver):
    name = "simulated_annealing"
    family = AlgorithmFamily.METAHEURISTIC

    def __init__(
        self,
        schedule: AnnealingSchedule | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.schedule = schedule or AnnealingSchedule()
        self.seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def solve(
        self,
        graph: DistanceMatrix | np.ndarray,
        time_limit: float | None = None,
        record_history: bool = False,
    ) -> AlgorithmResult:
        distances = as_distance_matrix(graph)
        start_time = current_time()
        n = distances.vertex_count()
        if n == 0:
            raise InvalidOperationError("Cannot anneal over a graph with no vertices.")

        schedule = self.schedule
        rng = self.rng

        current_route = list(range(n))
        current_cost = route_length(distances, current_route)
        best_route = list(current_route)
        best_cost = current_cost

        metadata: dict = {"initial_temperature": schedule.initial_temperature}
        if self.seed is not None:
            metadata["seed"] = self.seed

        if n == 1:
            # No pair of positions to swap; the identity route is the only cycle.
            metadata.update({"iterations": 0, "accepted": 0, "improved": 0, "temperature_steps": 0})
            return AlgorithmResult(
                name=self.name,
                path=best_route,
                cost=best_cost,
                elapsed=current_time() - start_time,
                status="complete",
                metadata=metadata,
            )

        logger.debug(
            "Annealing %d vertices from T=%s (rate=%s, %d iterations per step)",
            n,
            schedule.initial_temperature,
            schedule.cooling_rate,
            schedule.iterations_per_temperature,
        )

        temperature = schedule.initial_temperature
        iterations = 0
        accepted = 0
        improved = 0
        steps = 0
        history: list[float] = []
        status = "complete"

        try:
            while temperature > schedule.final_temperature:
                for _ in range(schedule.iterations_per_temperature):
                    enforce_time_budget(start_time, time_limit)
                    candidate = neighbor(current_route, rng)
                    candidate_cost = route_length(distances, candidate)

                    if acceptance_probability(current_cost, candidate_cost, temperature) > rng.random():
                        current_route = candidate
                        current_cost = candidate_cost
                        accepted += 1

                    # Compared after acceptance: only a just-accepted candidate can beat the incumbent.
                    if current_cost < best_cost:
                        best_route = list(current_route)
                        best_cost = current_cost
                        improved += 1
                    iterations += 1

                temperature *= schedule.cooling_rate
                steps += 1
                if record_history:
                    history.append(best_cost)
        except TimeLimitExpired:
            status = "timeout"
            logger.warning("Annealing stopped by time limit after %d iterations (best=%s)", iterations, best_cost)

        elapsed = current_time() - start_time
        metadata.update(
            {
                "iterations": iterations,
                "accepted": accepted,
                "improved": improved,
                "temperature_steps": steps,
                "final_temperature": temperature,
            }
        )
        if record_history:
            metadata["history"] = history
        logger.info(
            "Annealing finished: cost=%s after %d steps / %d iterations in %.3fs",
            best_cost,
            steps,
            iterations,
            elapsed,
        )
        return AlgorithmResult(
            name=self.name,
            path=best_route,
            cost=best_cost,
            elapsed=elapsed,
            status=status,
            metadata=metadata,
        )


__all__ = ["AnnealingSchedule", "SimulatedAnnealingSolver", "acceptance_probability", "neighbor"]

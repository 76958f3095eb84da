from __future__ import annotations

import logging
import time
from typing import Any, Dict

import numpy as np

from AnnealTSP.distance import DistanceMatrix
from AnnealTSP.solvers import AlgorithmResult, AnnealingSchedule, get_solver

logger = logging.getLogger(__name__)


class AnnealTSP:
    """End-to-end pipeline: problem data -> distance matrix -> independent annealing chains."""

    def __init__(self, schedule: AnnealingSchedule | None = None, solver_name: str = "simulated_annealing"):
        self.schedule = schedule or AnnealingSchedule()
        self.solver_name = solver_name

    def solve(
        self,
        problem_data: Dict[str, Any],
        chains: int = 1,
        seed: int | None = None,
        time_limit: float | None = None,
    ) -> AlgorithmResult:
        if chains < 1:
            raise ValueError(f"chains must be at least 1, got {chains}")
        start_time = time.perf_counter()
        distances = DistanceMatrix(self._to_distance_matrix(problem_data))

        # One child stream per chain so runs never share generator state.
        streams = np.random.SeedSequence(seed).spawn(chains)
        best: AlgorithmResult | None = None
        chain_costs: list[float] = []
        for index, stream in enumerate(streams):
            solver = get_solver(self.solver_name, schedule=self.schedule, rng=np.random.default_rng(stream))
            result = solver.solve(distances, time_limit=time_limit)
            chain_costs.append(result.cost)
            logger.info("Chain %d/%d finished with cost %s", index + 1, chains, result.cost)
            if best is None or result.cost < best.cost:
                best = result

        metadata = dict(best.metadata)
        metadata.update(
            {
                "chains": chains,
                "chain_costs": chain_costs,
                "wallclock_total": time.perf_counter() - start_time,
            }
        )
        if seed is not None:
            metadata["seed"] = seed
        return AlgorithmResult(
            name=best.name,
            path=best.path,
            cost=best.cost,
            elapsed=best.elapsed,
            status=best.status,
            metadata=metadata,
        )

    def _to_distance_matrix(self, problem_data: Dict[str, Any]) -> np.ndarray:
        if "distance_matrix" in problem_data and problem_data["distance_matrix"] is not None:
            return np.asarray(problem_data["distance_matrix"], dtype=float)
        if "coordinates" not in problem_data or problem_data["coordinates"] is None:
            raise ValueError("Problem data must contain either 'distance_matrix' or 'coordinates'.")

        coords = np.asarray(problem_data["coordinates"], dtype=float)
        metric = (problem_data.get("metric") or "euclidean").lower()
        diff = coords[:, None, :] - coords[None, :, :]
        if metric == "manhattan":
            return np.abs(diff).sum(axis=-1)
        return np.linalg.norm(diff, axis=-1)


__all__ = ["AnnealTSP"]

from __future__ import annotations

from AnnealTSP.solvers.base import AlgorithmResult, BaseSolver, SolverSpec, route_length
from AnnealTSP.solvers.meta import AnnealingSchedule, SimulatedAnnealingSolver
from AnnealTSP.utils.taxonomy import AlgorithmFamily

SOLVER_SPECS: dict[str, SolverSpec] = {
    SimulatedAnnealingSolver.name: SolverSpec(
        name=SimulatedAnnealingSolver.name,
        cls=SimulatedAnnealingSolver,
        family=SimulatedAnnealingSolver.family,
    ),
}

SOLVER_REGISTRY: dict[str, type[BaseSolver]] = {name: spec.cls for name, spec in SOLVER_SPECS.items()}


def get_solver(name: str, **kwargs) -> BaseSolver:
    solver_cls = SOLVER_REGISTRY.get(name)
    if solver_cls is None:
        raise KeyError(f"Unknown solver: {name}")
    return solver_cls(**kwargs)


__all__ = [
    "AlgorithmResult",
    "AnnealingSchedule",
    "BaseSolver",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "AlgorithmFamily",
    "get_solver",
    "route_length",
    "SimulatedAnnealingSolver",
]

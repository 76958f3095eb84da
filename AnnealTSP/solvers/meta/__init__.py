from AnnealTSP.solvers.meta.simulated_annealing import (
    AnnealingSchedule,
    SimulatedAnnealingSolver,
    acceptance_probability,
    neighbor,
)

__all__ = [
    "AnnealingSchedule",
    "SimulatedAnnealingSolver",
    "acceptance_probability",
    "neighbor",
]

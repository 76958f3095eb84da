from AnnealTSP.core import AnnealTSP
from AnnealTSP.distance import DistanceMatrix, VertexIndexError
from AnnealTSP.io import MalformedMatrixError, parse_distance_matrix, read_distance_matrix
from AnnealTSP.solvers import (
    AlgorithmResult,
    AnnealingSchedule,
    BaseSolver,
    SOLVER_REGISTRY,
    SOLVER_SPECS,
    SimulatedAnnealingSolver,
    get_solver,
    route_length,
)
from AnnealTSP.solvers.base import InvalidOperationError, TimeLimitExpired
from AnnealTSP.solvers.meta import acceptance_probability, neighbor
from AnnealTSP.utils.taxonomy import AlgorithmFamily

__all__ = [
    "AnnealTSP",
    "AlgorithmResult",
    "AlgorithmFamily",
    "AnnealingSchedule",
    "BaseSolver",
    "DistanceMatrix",
    "InvalidOperationError",
    "MalformedMatrixError",
    "SimulatedAnnealingSolver",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "TimeLimitExpired",
    "VertexIndexError",
    "acceptance_probability",
    "get_solver",
    "neighbor",
    "parse_distance_matrix",
    "read_distance_matrix",
    "route_length",
]

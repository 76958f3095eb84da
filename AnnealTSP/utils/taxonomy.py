from __future__ import annotations

from enum import Enum


class AlgorithmFamily(str, Enum):
    METAHEURISTIC = "metaheuristic"


__all__ = ["AlgorithmFamily"]

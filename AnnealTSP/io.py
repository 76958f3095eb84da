"""
Readers for comma-separated distance matrices.

Each non-blank line is one row; ``inf`` marks an edge that must never be used.
"""

from __future__ import annotations

import math
import pathlib
from typing import Iterable

import numpy as np


class MalformedMatrixError(ValueError):
    """Raised when a matrix file cannot be turned into a square table of edge weights."""


def _parse_weight(token: str, row_number: int) -> float:
    value = token.strip()
    if value.lower() == "inf":
        return math.inf
    try:
        weight = float(value)
    except ValueError:
        raise MalformedMatrixError(f"Row {row_number}: '{value}' is not a number.") from None
    if math.isnan(weight) or weight < 0:
        raise MalformedMatrixError(f"Row {row_number}: edge weight {value} must be non-negative.")
    return weight


def parse_distance_matrix(lines: Iterable[str]) -> np.ndarray:
    rows = [line.strip() for line in lines if line.strip()]
    size = len(rows)
    if size == 0:
        raise MalformedMatrixError("Matrix contains no rows.")

    matrix = np.empty((size, size), dtype=float)
    for i, line in enumerate(rows):
        values = line.split(",")
        if len(values) != size:
            raise MalformedMatrixError(
                f"Row {i + 1} has {len(values)} columns but the matrix has {size} rows."
            )
        for j, token in enumerate(values):
            matrix[i, j] = _parse_weight(token, i + 1)
    return matrix


def read_distance_matrix(path: pathlib.Path | str) -> np.ndarray:
    path = pathlib.Path(path)
    with path.open("r", encoding="utf-8") as fh:
        return parse_distance_matrix(fh)


__all__ = ["MalformedMatrixError", "parse_distance_matrix", "read_distance_matrix"]

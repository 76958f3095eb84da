from __future__ import annotations

from typing import Any

import numpy as np


class VertexIndexError(IndexError):
    """Raised when a distance lookup addresses a vertex outside the matrix."""

    def __init__(self, source: int, target: int, vertex_count: int):
        super().__init__(f"Vertex indices ({source}, {target}) out of range for {vertex_count} vertices.")
        self.source = source
        self.target = target
        self.vertex_count = vertex_count


class DistanceMatrix:
    """Read-only, bounds-checked view over a square matrix of edge weights.

    ``inf`` entries mark edges that must never be used; they are returned
    verbatim, as are diagonal entries.
    """

    def __init__(self, matrix: Any):
        weights = np.array(matrix, dtype=float)
        if weights.size == 0:
            weights = weights.reshape(0, 0)
        if weights.ndim != 2:
            raise ValueError(f"Distance matrix must be two-dimensional, got shape {weights.shape}.")
        weights.flags.writeable = False
        self._weights = weights
        self._rows = weights.shape[0]
        self._cols = weights.shape[1]
        # Plain nested lists keep the per-edge lookup off the numpy scalar path.
        self._lookup: list[list[float]] = weights.tolist()

    def distance(self, source: int, target: int) -> float:
        if source < 0 or source >= self._rows or target < 0 or target >= self._cols:
            raise VertexIndexError(source, target, self._rows)
        return self._lookup[source][target]

    def vertex_count(self) -> int:
        return self._rows

    def as_array(self) -> np.ndarray:
        return self._weights


__all__ = ["DistanceMatrix", "VertexIndexError"]

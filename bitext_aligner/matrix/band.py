"""Band matrix storing only cells near the diagonal

For long documents the optimal path stays close to the line joining (0, 0)
with the opposite corner, so only a band of 2 * band_radius + 1 cells per
row is kept in memory.
"""

import math
from typing import Any, Optional, Tuple

import numpy as np

from ..errors import ConfigurationError, PositionOutsideBandError
from .base import Matrix, MatrixFactory


class BandMatrix(Matrix):
    def __init__(self, width: int, height: int, band_radius: int):
        super().__init__(width, height)
        if band_radius < 1:
            raise ConfigurationError(
                f"Band radius must be >= 1, got {band_radius}", "band_radius"
            )
        self.band_radius = band_radius
        # A radius wider than the matrix stores nothing extra
        self._storage_radius = min(band_radius, width)
        self._ratio = width / height
        self._data = np.full(
            (height, 2 * self._storage_radius + 1), None, dtype=object
        )

    def diagonal_x(self, y: int) -> int:
        """x position of the scaled diagonal in row y (rounded half up)."""
        return int(math.floor(y * self._ratio + 0.5))

    def row_range(self, y: int) -> Tuple[int, int]:
        diagonal = self.diagonal_x(y)
        return (
            max(0, diagonal - self.band_radius),
            min(self.width - 1, diagonal + self.band_radius),
        )

    @property
    def covers_matrix(self) -> bool:
        """Whether every cell of the full matrix lies within the band."""
        return self.band_radius >= self.width - 1

    def _column(self, x: int, y: int) -> int:
        return x - self.diagonal_x(y) + self._storage_radius

    def get(self, x: int, y: int) -> Optional[Any]:
        if not self.element_exists(x, y):
            return None
        return self._data[y, self._column(x, y)]

    def set(self, x: int, y: int, value: Any):
        if not self.element_exists(x, y):
            raise PositionOutsideBandError(x, y, self.band_radius)
        self._data[y, self._column(x, y)] = value

    def __repr__(self):
        return (
            f"BandMatrix({self.width}x{self.height}, "
            f"band_radius={self.band_radius})"
        )


class BandMatrixFactory(MatrixFactory):
    def __init__(self, band_radius: int):
        if band_radius < 1:
            raise ConfigurationError(
                f"Band radius must be >= 1, got {band_radius}", "band_radius"
            )
        self.band_radius = band_radius

    def create_matrix(self, width: int, height: int) -> BandMatrix:
        return BandMatrix(width, height, self.band_radius)

"""Dense matrix storing every cell."""

from typing import Any, Optional, Tuple

import numpy as np

from .base import Matrix, MatrixFactory


class FullMatrix(Matrix):
    """Stores all width x height cells, memory grows with the product."""

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self._data = np.full((height, width), None, dtype=object)

    def row_range(self, y: int) -> Tuple[int, int]:
        return 0, self.width - 1

    def get(self, x: int, y: int) -> Optional[Any]:
        if not self.element_exists(x, y):
            return None
        return self._data[y, x]

    def set(self, x: int, y: int, value: Any):
        if not self.element_exists(x, y):
            raise IndexError(
                f"Position ({x}, {y}) outside of {self.width}x{self.height} matrix"
            )
        self._data[y, x] = value

    def __repr__(self):
        return f"FullMatrix({self.width}x{self.height})"


class FullMatrixFactory(MatrixFactory):
    def create_matrix(self, width: int, height: int) -> FullMatrix:
        return FullMatrix(width, height)

from .base import Matrix, MatrixFactory, MatrixIterator
from .full import FullMatrix, FullMatrixFactory
from .band import BandMatrix, BandMatrixFactory

__all__ = [
    "Matrix",
    "MatrixFactory",
    "MatrixIterator",
    "FullMatrix",
    "FullMatrixFactory",
    "BandMatrix",
    "BandMatrixFactory",
]

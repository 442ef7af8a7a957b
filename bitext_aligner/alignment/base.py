"""Base align algorithm interface

Defines the unified interface for all alignment algorithms.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..calculator.base import Calculator
from ..core.alignment import Alignment
from ..core.category import BEST_CATEGORY_MAP, CategoryMap
from ..matrix import FullMatrixFactory, Matrix, MatrixFactory
from ..utils import Deadline


class AlignAlgorithm(ABC):
    """Align algorithm base class

    All alignment algorithms inherit from this class and implement align().
    """

    def __init__(self, **config):
        """Initialize algorithm

        Args:
            **config: Algorithm-related configuration parameters
        """
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def align(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> List[Alignment]:
        """Perform alignment

        Args:
            source_segments: Source language segments
            target_segments: Target language segments

        Returns:
            List of alignments covering all input segments in order

        Raises:
            ReconstructionError: Search space too narrow to reach the end
        """
        raise NotImplementedError


class HmmAlignAlgorithm(AlignAlgorithm):
    """Dynamic programming over an alignment matrix.

    Cell (x, y) means x source and y target segments were consumed; moving
    along category (dx, dy) aligns source[x:x+dx] with target[y:y+dy].
    """

    def __init__(
        self,
        calculator: Calculator,
        category_map: CategoryMap = BEST_CATEGORY_MAP,
        matrix_factory: MatrixFactory = None,
        deadline: Optional[Deadline] = None,
        **config,
    ):
        super().__init__(**config)
        self.calculator = calculator
        self.category_map = category_map
        self.matrix_factory = matrix_factory or FullMatrixFactory()
        self.deadline = deadline

    def _create_matrix(self, source_segments, target_segments) -> Matrix:
        return self.matrix_factory.create_matrix(
            len(source_segments) + 1, len(target_segments) + 1
        )

    def _positions(self, matrix: Matrix, reverse: bool = False):
        """Valid matrix positions, checking the deadline once per row."""
        iterator = matrix.iterator()
        if reverse:
            iterator.after_last()
            step, has_more = iterator.previous, iterator.has_previous
        else:
            iterator.before_first()
            step, has_more = iterator.next, iterator.has_next
        row = None
        while has_more():
            x, y = step()
            if y != row:
                row = y
                if self.deadline is not None:
                    self.deadline.check()
            yield x, y

    def _transition_score(
        self, source_segments, target_segments, x, y, next_x, next_y, category_score
    ) -> float:
        """Prior plus calculator score of aligning source[x:next_x] with target[y:next_y]."""
        return category_score + self.calculator.score(
            source_segments[x:next_x], target_segments[y:next_y]
        )


class AlgorithmFactory(ABC):
    """Creates align algorithms working on matrices from given factory."""

    @abstractmethod
    def create_algorithm(
        self,
        calculator: Calculator,
        category_map: CategoryMap = BEST_CATEGORY_MAP,
        matrix_factory: MatrixFactory = None,
        deadline: Optional[Deadline] = None,
    ) -> AlignAlgorithm:
        raise NotImplementedError

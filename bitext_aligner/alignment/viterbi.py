"""
Viterbi algorithm: single best alignment path.

Every cell remembers the category of the best incoming transition, that
transition's own score and the cumulative score of the whole best path.
The result is read backwards from the corner where all segments are
consumed.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.alignment import Alignment, Category
from ..errors import ReconstructionError
from .base import AlgorithmFactory, HmmAlignAlgorithm


@dataclass(frozen=True)
class ViterbiData:
    """Cell payload"""

    category: Optional[Category]
    score: float
    total_score: float

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.total_score)


START_DATA = ViterbiData(None, 0.0, 0.0)
UNREACHABLE_DATA = ViterbiData(None, math.inf, math.inf)


class ViterbiAlgorithm(HmmAlignAlgorithm):
    def align(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> List[Alignment]:
        source_segments = tuple(source_segments)
        target_segments = tuple(target_segments)
        matrix = self._create_matrix(source_segments, target_segments)
        self.logger.debug(
            f"Viterbi on {matrix!r}: {len(source_segments)} source, "
            f"{len(target_segments)} target segments"
        )

        for x, y in self._positions(matrix):
            matrix.set(x, y, self._compute_data(matrix, source_segments, target_segments, x, y))

        return self._backtrace(matrix, source_segments, target_segments)

    def _compute_data(self, matrix, source_segments, target_segments, x, y) -> ViterbiData:
        if x == 0 and y == 0:
            return START_DATA

        best = UNREACHABLE_DATA
        for category, category_score in self.category_map:
            prev_x = x - category.source_count
            prev_y = y - category.target_count
            if prev_x < 0 or prev_y < 0:
                continue
            prev = matrix.get(prev_x, prev_y)
            if prev is None or not prev.reachable:
                continue
            score = self._transition_score(
                source_segments, target_segments, prev_x, prev_y, x, y, category_score
            )
            total_score = prev.total_score + score
            # Strict comparison: first minimal category in map order wins
            if total_score < best.total_score:
                best = ViterbiData(category, score, total_score)
        return best

    def _backtrace(self, matrix, source_segments, target_segments) -> List[Alignment]:
        alignments = []
        x, y = matrix.corner
        while x > 0 or y > 0:
            data = matrix.get(x, y)
            if data is None or data.category is None:
                raise ReconstructionError(x, y)
            prev_x = x - data.category.source_count
            prev_y = y - data.category.target_count
            alignments.append(
                Alignment(
                    source_segments[prev_x:x], target_segments[prev_y:y], data.score
                )
            )
            x, y = prev_x, prev_y
        alignments.reverse()
        return alignments


class ViterbiAlgorithmFactory(AlgorithmFactory):
    def create_algorithm(
        self, calculator, category_map=None, matrix_factory=None, deadline=None
    ) -> ViterbiAlgorithm:
        kwargs = {"matrix_factory": matrix_factory, "deadline": deadline}
        if category_map is not None:
            kwargs["category_map"] = category_map
        return ViterbiAlgorithm(calculator, **kwargs)

"""
Forward-Backward algorithm: alignment by posterior transition probability.

The forward pass computes, for every cell, the score of all paths from the
start to the cell; the backward pass the score of all paths from the cell
to the end. Scores of alternative paths are combined with log-sum-exp.
The result is built greedily from the start, always taking the transition
with the highest posterior probability. Each emitted alignment carries the
score of that posterior.
"""

import math
from typing import Dict, List, Sequence, Tuple

from ..core.alignment import Alignment
from ..matrix import Matrix
from ..utils import score_sum
from .base import AlgorithmFactory, HmmAlignAlgorithm


class ForwardBackwardAlgorithm(HmmAlignAlgorithm):
    def align(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> List[Alignment]:
        source_segments = tuple(source_segments)
        target_segments = tuple(target_segments)
        # Transition scores are shared by both passes and the reconstruction
        self._cache: Dict[Tuple[int, int, int, int], float] = {}
        try:
            forward = self._forward(source_segments, target_segments)
            total_score = forward.get(*forward.corner)
            if total_score is None or math.isinf(total_score):
                self.logger.debug("No path reaches the end of the matrix")
                return []
            backward = self._backward(source_segments, target_segments)
            return self._reconstruct(
                forward, backward, total_score, source_segments, target_segments
            )
        finally:
            self._cache = {}

    def _transition(self, source_segments, target_segments, x, y, next_x, next_y, category_score):
        key = (x, y, next_x, next_y)
        score = self._cache.get(key)
        if score is None:
            score = self._transition_score(
                source_segments, target_segments, x, y, next_x, next_y, category_score
            )
            self._cache[key] = score
        return score

    def _forward(self, source_segments, target_segments) -> Matrix:
        matrix = self._create_matrix(source_segments, target_segments)
        for x, y in self._positions(matrix):
            if x == 0 and y == 0:
                matrix.set(x, y, 0.0)
                continue
            scores = []
            for category, category_score in self.category_map:
                prev_x = x - category.source_count
                prev_y = y - category.target_count
                if prev_x < 0 or prev_y < 0:
                    continue
                prev = matrix.get(prev_x, prev_y)
                if prev is None or math.isinf(prev):
                    continue
                scores.append(
                    prev
                    + self._transition(
                        source_segments, target_segments,
                        prev_x, prev_y, x, y, category_score,
                    )
                )
            matrix.set(x, y, score_sum(scores))
        return matrix

    def _backward(self, source_segments, target_segments) -> Matrix:
        matrix = self._create_matrix(source_segments, target_segments)
        corner = matrix.corner
        for x, y in self._positions(matrix, reverse=True):
            if (x, y) == corner:
                matrix.set(x, y, 0.0)
                continue
            scores = []
            for category, category_score in self.category_map:
                next_x = x + category.source_count
                next_y = y + category.target_count
                following = matrix.get(next_x, next_y)
                if following is None or math.isinf(following):
                    continue
                scores.append(
                    following
                    + self._transition(
                        source_segments, target_segments,
                        x, y, next_x, next_y, category_score,
                    )
                )
            matrix.set(x, y, score_sum(scores))
        return matrix

    def _reconstruct(
        self, forward, backward, total_score, source_segments, target_segments
    ) -> List[Alignment]:
        alignments = []
        x, y = 0, 0
        corner = forward.corner
        while (x, y) != corner:
            forward_score = forward.get(x, y)
            best = None
            for category, category_score in self.category_map:
                next_x = x + category.source_count
                next_y = y + category.target_count
                backward_score = backward.get(next_x, next_y)
                if backward_score is None or math.isinf(backward_score):
                    continue
                score = (
                    forward_score
                    + self._transition(
                        source_segments, target_segments,
                        x, y, next_x, next_y, category_score,
                    )
                    + backward_score
                    - total_score
                )
                if best is None or score < best[0]:
                    best = (score, next_x, next_y)
            if best is None:
                # Partial result; callers detect it by counting segments
                self.logger.debug(f"Reconstruction stopped at ({x}, {y})")
                break
            score, next_x, next_y = best
            alignments.append(
                Alignment(
                    source_segments[x:next_x],
                    target_segments[y:next_y],
                    max(0.0, score),
                )
            )
            x, y = next_x, next_y
        return alignments


class ForwardBackwardAlgorithmFactory(AlgorithmFactory):
    def create_algorithm(
        self, calculator, category_map=None, matrix_factory=None, deadline=None
    ) -> ForwardBackwardAlgorithm:
        kwargs = {"matrix_factory": matrix_factory, "deadline": deadline}
        if category_map is not None:
            kwargs["category_map"] = category_map
        return ForwardBackwardAlgorithm(calculator, **kwargs)

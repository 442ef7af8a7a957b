"""Calculators combining other calculators."""

import math
from typing import Iterable, Sequence

from ..core.alignment import Alignment
from ..errors import ConfigurationError
from .base import Calculator


class CompositeCalculator(Calculator):
    """Sum of component scores, i.e. product of their probabilities."""

    def __init__(self, calculators: Iterable[Calculator]):
        self.calculators = list(calculators)
        if not self.calculators:
            raise ConfigurationError("Composite calculator needs at least one calculator")

    def score(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> float:
        total = 0.0
        for calculator in self.calculators:
            total += calculator.score(source_segments, target_segments)
            if math.isinf(total):
                break
        return total


class MinimumCalculator(Calculator):
    """Lowest score among component calculators."""

    def __init__(self, calculators: Iterable[Calculator]):
        self.calculators = list(calculators)
        if not self.calculators:
            raise ConfigurationError("Minimum calculator needs at least one calculator")

    def score(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> float:
        best = math.inf
        for calculator in self.calculators:
            best = min(best, calculator.score(source_segments, target_segments))
            if best == 0.0:
                break
        return best


class GatedMinimumCalculator(Calculator):
    """Consults main calculator only when test calculator is not confident.

    If the test score is at most threshold it is returned directly,
    otherwise the minimum of test and main score.
    """

    def __init__(self, test: Calculator, main: Calculator, threshold: float = 0.0):
        if threshold < 0:
            raise ConfigurationError(
                f"Threshold must be >= 0, got {threshold}", "threshold"
            )
        self.test = test
        self.main = main
        self.threshold = threshold

    def score(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> float:
        test_score = self.test.score(source_segments, target_segments)
        if test_score <= self.threshold:
            return test_score
        return min(test_score, self.main.score(source_segments, target_segments))


class OracleCalculator(Calculator):
    """Knows the right answer: 0 for alignments in reference list, infinity otherwise."""

    def __init__(self, reference_alignments: Iterable[Alignment]):
        self._known = {
            (alignment.source_segments, alignment.target_segments)
            for alignment in reference_alignments
        }

    def score(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> float:
        key = (tuple(source_segments), tuple(target_segments))
        return 0.0 if key in self._known else math.inf

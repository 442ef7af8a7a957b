"""
Length based calculators.

Both calculators look only at segment lengths measured by a Counter.
Segments of zero length are ignored, as if they were not there.
"""

import math
from abc import abstractmethod
from typing import List, Sequence

from ..core.alignment import Alignment
from ..model.length import LengthModel, train_length_model
from ..utils import poisson_distribution, to_score
from .base import Calculator
from .counter import Counter

# Smallest positive double, keeps -ln finite
MINIMUM_PROBABILITY = math.ulp(0.0)


class LengthCalculator(Calculator):
    def __init__(self, counter: Counter):
        self.counter = counter

    def score(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> float:
        return self.length_score(
            self.length_list(source_segments), self.length_list(target_segments)
        )

    def length_list(self, segments: Sequence[str]) -> List[int]:
        lengths = (self.counter.length(segment) for segment in segments)
        return [length for length in lengths if length > 0]

    @abstractmethod
    def length_score(
        self, source_lengths: Sequence[int], target_lengths: Sequence[int]
    ) -> float:
        raise NotImplementedError


class NormalDistributionCalculator(LengthCalculator):
    """Gale and Church length model.

    Assumes target length / source length is normally distributed with
    mean PARAMETER_C and variance PARAMETER_S_SQUARE, constants measured by
    Gale and Church on English, French and German.
    """

    PARAMETER_C = 1.0
    PARAMETER_S_SQUARE = 6.8

    def length_score(
        self, source_lengths: Sequence[int], target_lengths: Sequence[int]
    ) -> float:
        source_length = sum(source_lengths)
        target_length = sum(target_lengths)
        if source_length == 0 and target_length == 0:
            return 0.0

        mean = (source_length + target_length / self.PARAMETER_C) / 2.0
        z = abs(self.PARAMETER_C * source_length - target_length) / math.sqrt(
            self.PARAMETER_S_SQUARE * mean
        )
        probability = 2.0 * (1.0 - cumulative_normal_distribution(z))
        # Polynomial approximation slightly exceeds 1 near z = 0
        probability = min(max(probability, MINIMUM_PROBABILITY), 1.0)
        return -math.log(probability)


def cumulative_normal_distribution(z: float) -> float:
    """Abramowitz and Stegun polynomial approximation of the normal CDF, z >= 0."""
    t = 1.0 / (1.0 + 0.2316419 * z)
    return 1.0 - 0.3989423 * math.exp(-z * z / 2.0) * (
        (((1.330274429 * t - 1.821255978) * t + 1.781477937) * t - 0.356563782) * t
        + 0.319381530
    ) * t


class PoissonDistributionCalculator(LengthCalculator):
    """Length model trained on a reference corpus.

    Source length is scored by the source length histogram, target total
    length by a Poisson distribution whose mean is the source total length
    scaled by the corpus mean length ratio.
    """

    def __init__(self, counter: Counter, alignments: Sequence[Alignment]):
        super().__init__(counter)
        source_lengths = []
        target_lengths = []
        for alignment in alignments:
            source_lengths.extend(self.length_list(alignment.source_segments))
            target_lengths.extend(self.length_list(alignment.target_segments))

        self.source_length_model = train_length_model(source_lengths)
        self.target_length_model = train_length_model(target_lengths)
        source_mean = self.source_length_model.mean_length
        self.mean_length_ratio = (
            self.target_length_model.mean_length / source_mean if source_mean > 0 else 0.0
        )

    def length_score(
        self, source_lengths: Sequence[int], target_lengths: Sequence[int]
    ) -> float:
        if not source_lengths and not target_lengths:
            return 0.0
        if not source_lengths:
            return self._language_score(target_lengths, self.target_length_model)

        score = self._language_score(source_lengths, self.source_length_model)
        if target_lengths:
            mean = sum(source_lengths) * self.mean_length_ratio
            score += poisson_distribution(mean, sum(target_lengths))
        return score

    @staticmethod
    def _language_score(lengths: Sequence[int], model: LengthModel) -> float:
        return sum(to_score(model.probability(length)) for length in lengths)

"""Frequency histogram turned into a discrete probability distribution."""

from typing import Iterable

import numpy as np

from ..errors import ConfigurationError


class HistogramModel:
    """Probability of non-negative integer values observed in training.

    Values never observed get the singleton probability 1 / total, the
    probability of a value seen exactly once. A model trained on no data
    assigns probability 0 everywhere.
    """

    def __init__(self, counts: np.ndarray):
        self._counts = np.asarray(counts, dtype=np.int64)
        self.total = int(self._counts.sum())
        if self.total > 0:
            self._probabilities = self._counts / self.total
            self.singleton_probability = 1.0 / self.total
        else:
            self._probabilities = np.zeros(len(self._counts))
            self.singleton_probability = 0.0

    @classmethod
    def from_values(cls, values: Iterable[int]):
        data = np.fromiter(values, dtype=np.int64)
        if data.size and data.min() < 0:
            raise ConfigurationError("Histogram values must be non-negative")
        return cls(np.bincount(data))

    def probability(self, value: int) -> float:
        if 0 <= value < len(self._probabilities):
            probability = self._probabilities[value]
            if probability > 0.0:
                return float(probability)
        return self.singleton_probability

    def count(self, value: int) -> int:
        if 0 <= value < len(self._counts):
            return int(self._counts[value])
        return 0

    @property
    def mean(self) -> float:
        if self.total == 0:
            return 0.0
        return float(np.dot(np.arange(len(self._counts)), self._counts) / self.total)

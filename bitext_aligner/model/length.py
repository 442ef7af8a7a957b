"""Segment length model."""

from typing import Iterable

from .histogram import HistogramModel


class LengthModel(HistogramModel):
    """Distribution of segment lengths."""

    @property
    def mean_length(self) -> float:
        return self.mean

    def __repr__(self):
        return f"LengthModel(observations={self.total}, mean={self.mean_length:.2f})"


def train_length_model(lengths: Iterable[int]) -> LengthModel:
    return LengthModel.from_values(lengths)

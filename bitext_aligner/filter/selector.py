"""Selectors: filters keeping a subset of the input alignments."""

import math
from typing import List, Sequence, Set, Tuple

from ..core.alignment import Alignment
from ..errors import ConfigurationError
from ..utils import to_score
from .base import Filter


class OneToOneSelector(Filter):
    """Keeps only 1-1 alignments."""

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        return [alignment for alignment in alignments if alignment.is_one_to_one]


class FractionSelector(Filter):
    """Keeps the given fraction of the most probable alignments.

    Alignments with equal score are kept or dropped together, so slightly
    more than the fraction may be returned. Order is preserved.
    """

    def __init__(self, fraction: float):
        if not 0.0 <= fraction <= 1.0:
            raise ConfigurationError(
                f"Fraction must be between 0 and 1, got {fraction}", "fraction"
            )
        self.fraction = fraction

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        first_filtered = self.fraction * len(alignments) - 0.5
        if first_filtered < 0:
            return []
        scores = sorted(alignment.effective_score for alignment in alignments)
        threshold = scores[math.floor(first_filtered)]
        return [a for a in alignments if a.effective_score <= threshold]


class ProbabilitySelector(Filter):
    """Keeps alignments with probability at least the threshold."""

    def __init__(self, probability_threshold: float):
        if not 0.0 <= probability_threshold <= 1.0:
            raise ConfigurationError(
                f"Probability threshold must be between 0 and 1, "
                f"got {probability_threshold}",
                "probability_threshold",
            )
        self.score_threshold = to_score(probability_threshold)

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        return [a for a in alignments if a.effective_score <= self.score_threshold]


def _positions(alignments: Sequence[Alignment]) -> List[Tuple[int, int, int, int]]:
    """(source start, target start, source count, target count) of each alignment."""
    positions = []
    source_position = 0
    target_position = 0
    for alignment in alignments:
        source_count = len(alignment.source_segments)
        target_count = len(alignment.target_segments)
        positions.append((source_position, target_position, source_count, target_count))
        source_position += source_count
        target_position += target_count
    return positions


class IntersectionSelector(Filter):
    """Keeps alignments that also appear, at the same position, in reference."""

    def __init__(self, reference_alignments: Sequence[Alignment]):
        self._reference: Set[Tuple[int, int, int, int]] = set(
            _positions(reference_alignments)
        )

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        return [
            alignment
            for alignment, position in zip(alignments, _positions(alignments))
            if position in self._reference
        ]


class DifferenceSelector(Filter):
    """Keeps alignments that do not appear, at the same position, in reference."""

    def __init__(self, reference_alignments: Sequence[Alignment]):
        self._reference: Set[Tuple[int, int, int, int]] = set(
            _positions(reference_alignments)
        )

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        return [
            alignment
            for alignment, position in zip(alignments, _positions(alignments))
            if position not in self._reference
        ]

"""Alignment data structure

An alignment pairs a run of source segments with a run of target segments
and carries a score (-ln probability, lower is better).
"""

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, NamedTuple, Tuple

from ..errors import ConfigurationError


class Category(NamedTuple):
    """Shape of an alignment: number of source and target segments."""

    source_count: int
    target_count: int

    def __str__(self):
        return f"({self.source_count}-{self.target_count})"


@dataclass(frozen=True)
class Alignment:
    """Alignment result data structure

    Pinned alignments were verified by a human and pass through every filter
    unchanged; their score carries no meaning.
    """

    source_segments: Tuple[str, ...] = field(default_factory=tuple)
    target_segments: Tuple[str, ...] = field(default_factory=tuple)
    score: float = 0.0
    pinned: bool = False

    def __post_init__(self):
        object.__setattr__(self, "source_segments", tuple(self.source_segments))
        object.__setattr__(self, "target_segments", tuple(self.target_segments))
        if math.isnan(self.score):
            raise ConfigurationError("Alignment score must not be NaN", "score")

    def __repr__(self):
        score = "pinned" if self.pinned else f"{self.score:.3f}"
        return (
            f"Alignment(src={list(self.source_segments)}, "
            f"tgt={list(self.target_segments)}, score={score})"
        )

    @property
    def category(self) -> Category:
        return Category(len(self.source_segments), len(self.target_segments))

    @property
    def is_one_to_one(self) -> bool:
        """Whether it is 1:1 alignment"""
        return len(self.source_segments) == 1 and len(self.target_segments) == 1

    @property
    def operation_type(self) -> str:
        """Alignment operation type, e.g. "2:1" """
        return f"{len(self.source_segments)}:{len(self.target_segments)}"

    @property
    def effective_score(self) -> float:
        """Score used for ordering; pinned alignments sort before everything."""
        return -math.inf if self.pinned else self.score

    def with_score(self, score: float) -> "Alignment":
        return replace(self, score=score, pinned=False)

    def with_segments(
        self, source_segments: Iterable[str], target_segments: Iterable[str]
    ) -> "Alignment":
        return replace(
            self,
            source_segments=tuple(source_segments),
            target_segments=tuple(target_segments),
        )


def pinned_alignment(source_segments: Iterable[str], target_segments: Iterable[str]) -> Alignment:
    """Create a human-verified alignment."""
    return Alignment(tuple(source_segments), tuple(target_segments), 0.0, pinned=True)


def segment_counts(alignments: Iterable[Alignment]) -> Tuple[int, int]:
    """Total number of source and target segments in alignment list."""
    source_total = 0
    target_total = 0
    for alignment in alignments:
        source_total += len(alignment.source_segments)
        target_total += len(alignment.target_segments)
    return source_total, target_total

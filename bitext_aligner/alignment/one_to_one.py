"""Trivial algorithm aligning segments one to one in order."""

from typing import List, Sequence

from ..core.alignment import Alignment
from ..errors import AlignmentImpossibleError
from .base import AlignAlgorithm


class OneToOneAlgorithm(AlignAlgorithm):
    """Pairs the i-th source segment with the i-th target segment.

    Leftover segments of the longer side become 1-0 or 0-1 alignments
    unless strict is set, in which case unequal counts are an error.
    """

    def __init__(self, strict: bool = False, **config):
        super().__init__(**config)
        self.strict = strict

    def align(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> List[Alignment]:
        if self.strict and len(source_segments) != len(target_segments):
            raise AlignmentImpossibleError(
                "Source and target segment counts differ: "
                f"{len(source_segments)} vs {len(target_segments)}"
            )

        alignments = []
        for i in range(max(len(source_segments), len(target_segments))):
            alignments.append(
                Alignment(source_segments[i : i + 1], target_segments[i : i + 1])
            )
        return alignments

"""Filters producing new alignments from segments of the input."""

from typing import List, Sequence

from ..alignment.base import AlignAlgorithm
from ..core.alignment import Alignment, segment_counts
from ..errors import AlignmentImpossibleError
from .base import Filter


class Aligner(Filter):
    """Aligns segments of every input alignment with given algorithm.

    Pinned alignments are copied unchanged.
    """

    def __init__(self, algorithm: AlignAlgorithm):
        self.algorithm = algorithm

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        result = []
        for alignment in alignments:
            if alignment.pinned:
                result.append(alignment)
            else:
                result.extend(
                    self.algorithm.align(
                        alignment.source_segments, alignment.target_segments
                    )
                )
        return result


class UnifyAligner(Filter):
    """Reproduces the shape of a reference alignment on input segments.

    Useful after an alignment was computed on damaged segments (tokenized,
    lower-cased, rare words removed): the original segments are regrouped
    exactly like the reference, and reference scores are copied.
    """

    def __init__(self, reference_alignments: Sequence[Alignment]):
        self.reference_alignments = list(reference_alignments)

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        source_segments = []
        target_segments = []
        for alignment in alignments:
            source_segments.extend(alignment.source_segments)
            target_segments.extend(alignment.target_segments)

        if segment_counts(self.reference_alignments) != (
            len(source_segments),
            len(target_segments),
        ):
            raise AlignmentImpossibleError(
                "Segment counts in input and reference alignment lists are not equal"
            )

        result = []
        source_position = 0
        target_position = 0
        for reference in self.reference_alignments:
            source_end = source_position + len(reference.source_segments)
            target_end = target_position + len(reference.target_segments)
            result.append(
                Alignment(
                    source_segments[source_position:source_end],
                    target_segments[target_position:target_end],
                    reference.score,
                    reference.pinned,
                )
            )
            source_position, target_position = source_end, target_end
        return result

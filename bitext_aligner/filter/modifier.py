"""Modifier filter: changes segments of each alignment."""

from typing import List, Sequence

from ..core.alignment import Alignment
from ..core.cleaner import (
    LowercaseCleanAlgorithm,
    SeparatorMergeAlgorithm,
    TrimCleanAlgorithm,
)
from ..core.modify import ModifyAlgorithm, NullModifyAlgorithm
from ..core.splitter import (
    ParagraphSplitAlgorithm,
    SentenceSplitAlgorithm,
    WordSplitAlgorithm,
)
from .base import Filter


class Modifier(Filter):
    """Applies separate algorithms to source and target segments.

    Pinned alignments are copied unchanged.
    """

    def __init__(
        self,
        source_algorithm: ModifyAlgorithm,
        target_algorithm: ModifyAlgorithm = None,
    ):
        self.source_algorithm = source_algorithm
        self.target_algorithm = target_algorithm or source_algorithm

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        result = []
        for alignment in alignments:
            if alignment.pinned:
                result.append(alignment)
                continue
            result.append(
                alignment.with_segments(
                    self.source_algorithm.modify(alignment.source_segments),
                    self.target_algorithm.modify(alignment.target_segments),
                )
            )
        return result


MODIFY_ALGORITHMS = {
    "null": NullModifyAlgorithm,
    "sentence": SentenceSplitAlgorithm,
    "paragraph": ParagraphSplitAlgorithm,
    "word": WordSplitAlgorithm,
    "merge": SeparatorMergeAlgorithm,
    "trim": TrimCleanAlgorithm,
    "lowercase": LowercaseCleanAlgorithm,
}

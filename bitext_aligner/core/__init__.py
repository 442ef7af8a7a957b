from .alignment import Alignment, Category, pinned_alignment, segment_counts
from .category import BEST_CATEGORY_MAP, MOORE_CATEGORY_MAP, CATEGORY_MAPS, CategoryMap

__all__ = [
    "Alignment",
    "Category",
    "pinned_alignment",
    "segment_counts",
    "CategoryMap",
    "BEST_CATEGORY_MAP",
    "MOORE_CATEGORY_MAP",
    "CATEGORY_MAPS",
]

from .modify import ModifyAlgorithm, NullModifyAlgorithm
from .splitter import (
    SplitAlgorithm,
    SentenceSplitAlgorithm,
    ParagraphSplitAlgorithm,
    WordSplitAlgorithm,
    FilterNonWordsSplitAlgorithmDecorator,
)
from .cleaner import (
    MergeAlgorithm,
    SeparatorMergeAlgorithm,
    CleanAlgorithm,
    TrimCleanAlgorithm,
    LowercaseCleanAlgorithm,
    UnifyRareWordsCleanAlgorithm,
)

__all__ += [
    "ModifyAlgorithm",
    "NullModifyAlgorithm",
    "SplitAlgorithm",
    "SentenceSplitAlgorithm",
    "ParagraphSplitAlgorithm",
    "WordSplitAlgorithm",
    "FilterNonWordsSplitAlgorithmDecorator",
    "MergeAlgorithm",
    "SeparatorMergeAlgorithm",
    "CleanAlgorithm",
    "TrimCleanAlgorithm",
    "LowercaseCleanAlgorithm",
    "UnifyRareWordsCleanAlgorithm",
]

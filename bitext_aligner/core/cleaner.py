"""Clean and merge algorithms."""

from abc import abstractmethod
from typing import List, Optional, Sequence

from .modify import ModifyAlgorithm
from .splitter import SplitAlgorithm, WordSplitAlgorithm


class MergeAlgorithm(ModifyAlgorithm):
    """Merges all segments into one."""

    @abstractmethod
    def merge(self, segments: Sequence[str]) -> str:
        raise NotImplementedError

    def modify(self, segments: Sequence[str]) -> List[str]:
        if not segments:
            return []
        return [self.merge(segments)]


class SeparatorMergeAlgorithm(MergeAlgorithm):
    def __init__(self, separator: str = ""):
        self.separator = separator

    def merge(self, segments: Sequence[str]) -> str:
        return self.separator.join(segments)


class CleanAlgorithm(ModifyAlgorithm):
    """Cleans each segment separately; a segment cleaned to None is dropped."""

    @abstractmethod
    def clean(self, segment: str) -> Optional[str]:
        raise NotImplementedError

    def modify(self, segments: Sequence[str]) -> List[str]:
        result = []
        for segment in segments:
            cleaned = self.clean(segment)
            if cleaned is not None:
                result.append(cleaned)
        return result


class TrimCleanAlgorithm(CleanAlgorithm):
    """Strips surrounding whitespace and drops segments left empty."""

    def clean(self, segment: str) -> Optional[str]:
        stripped = segment.strip()
        return stripped or None


class LowercaseCleanAlgorithm(CleanAlgorithm):
    def clean(self, segment: str) -> Optional[str]:
        return segment.lower()


class UnifyRareWordsCleanAlgorithm(CleanAlgorithm):
    """Replaces words missing from vocabulary with a placeholder word.

    The result has words separated by single spaces.
    """

    DEFAULT_OTHER_WORD = "{OTHER}"

    def __init__(
        self,
        vocabulary,
        split_algorithm: SplitAlgorithm = None,
        other_word: str = DEFAULT_OTHER_WORD,
    ):
        self.vocabulary = vocabulary
        self.split_algorithm = split_algorithm or WordSplitAlgorithm()
        self.other_word = other_word

    def clean(self, segment: str) -> Optional[str]:
        words = self.split_algorithm.split(segment)
        return " ".join(
            word if self.vocabulary.contains_word(word) else self.other_word
            for word in words
        )

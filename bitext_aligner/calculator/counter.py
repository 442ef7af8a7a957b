"""Segment length counters."""

from abc import ABC, abstractmethod

from ..core.splitter import SplitAlgorithm
from ..model.vocabulary import DEFAULT_TOKENIZE_ALGORITHM


class Counter(ABC):
    @abstractmethod
    def length(self, segment: str) -> int:
        raise NotImplementedError


class CharCounter(Counter):
    """Length in characters."""

    def length(self, segment: str) -> int:
        return len(segment)


class SplitCounter(Counter):
    """Length in words produced by split algorithm (punctuation ignored by default)."""

    def __init__(self, split_algorithm: SplitAlgorithm = None):
        self.split_algorithm = split_algorithm or DEFAULT_TOKENIZE_ALGORITHM

    def length(self, segment: str) -> int:
        return len(self.split_algorithm.split(segment))


COUNTERS = {"char": CharCounter, "word": SplitCounter}

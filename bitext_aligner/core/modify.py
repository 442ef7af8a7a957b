"""Segment list transformations applied by the Modifier filter."""

from abc import ABC, abstractmethod
from typing import List, Sequence


class ModifyAlgorithm(ABC):
    """Transforms a list of segments into another list of segments."""

    @abstractmethod
    def modify(self, segments: Sequence[str]) -> List[str]:
        raise NotImplementedError


class NullModifyAlgorithm(ModifyAlgorithm):
    """Returns segments unchanged."""

    def modify(self, segments: Sequence[str]) -> List[str]:
        return list(segments)

"""Calculator interface

A calculator scores how likely a run of target segments is the translation
of a run of source segments. Scores are -ln probability: 0 means certain,
infinity means impossible.
"""

from abc import ABC, abstractmethod
from typing import Sequence


class Calculator(ABC):
    @abstractmethod
    def score(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> float:
        """Score of the segment pair, >= 0."""
        raise NotImplementedError

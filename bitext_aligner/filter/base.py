"""Filter interface and generic filter combinators

A filter receives an alignment list and returns a new one; input lists and
alignments are never modified.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence

from ..core.alignment import Alignment


class Filter(ABC):
    @abstractmethod
    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        raise NotImplementedError


class CompositeFilter(Filter):
    """Applies filters one after another."""

    def __init__(self, filters: Iterable[Filter]):
        self.filters = list(filters)

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        result = list(alignments)
        for filter_ in self.filters:
            result = filter_.apply(result)
        return result


class IgnorePinnedFilterDecorator(Filter):
    """Shields pinned alignments from wrapped filter.

    Every run of consecutive unpinned alignments is filtered separately;
    pinned alignments stay where they are.
    """

    def __init__(self, filter_: Filter):
        self.filter = filter_

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        result = []
        run = []
        for alignment in alignments:
            if alignment.pinned:
                if run:
                    result.extend(self.filter.apply(run))
                    run = []
                result.append(alignment)
            else:
                run.append(alignment)
        if run:
            result.extend(self.filter.apply(run))
        return result

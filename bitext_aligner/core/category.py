"""Category priors

Scores (-ln probability) of alignment shapes measured experimentally on
test corpora. Only listed categories are reachable by the search algorithms.
"""

import math
from typing import Iterator, Sequence, Tuple

import numpy as np

from ..errors import ConfigurationError
from ..utils import to_score
from .alignment import Category


class CategoryMap:
    """Fixed table of category prior scores.

    Lookup goes through a small 2-D array indexed by segment counts; shapes
    not listed score infinity. Iteration order follows construction order
    and decides ties in the search algorithms.
    """

    def __init__(self, probabilities: Sequence[Tuple[Category, float]]):
        if not probabilities:
            raise ConfigurationError("Category map must not be empty")

        entries = []
        for category, probability in probabilities:
            category = Category(*category)
            if category.source_count < 0 or category.target_count < 0:
                raise ConfigurationError(f"Invalid category {category}")
            if category == (0, 0):
                raise ConfigurationError("Category (0-0) can never be a transition")
            if not 0.0 < probability <= 1.0:
                raise ConfigurationError(
                    f"Probability of category {category} must be in (0, 1], "
                    f"got {probability}"
                )
            entries.append((category, to_score(probability)))

        max_source = max(c.source_count for c, _ in entries)
        max_target = max(c.target_count for c, _ in entries)
        self._table = np.full((max_source + 1, max_target + 1), np.inf)
        for category, score in entries:
            self._table[category.source_count, category.target_count] = score
        self._entries = tuple(entries)

    def score(self, category: Category) -> float:
        source_count, target_count = category
        if (
            0 <= source_count < self._table.shape[0]
            and 0 <= target_count < self._table.shape[1]
        ):
            return float(self._table[source_count, target_count])
        return math.inf

    @property
    def categories(self) -> Tuple[Category, ...]:
        return tuple(category for category, _ in self._entries)

    def __iter__(self) -> Iterator[Tuple[Category, float]]:
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __contains__(self, category) -> bool:
        return math.isfinite(self.score(Category(*category)))

    def __repr__(self):
        items = ", ".join(f"{c}: {s:.3f}" for c, s in self._entries)
        return f"CategoryMap({items})"


# Generic priors, work well for most length based alignments
BEST_CATEGORY_MAP = CategoryMap(
    [
        (Category(1, 1), 0.9),
        (Category(1, 0), 0.005),
        (Category(0, 1), 0.005),
        (Category(2, 1), 0.045),
        (Category(1, 2), 0.045),
    ]
)

# Priors from Moore's paper, more peaked toward 1-1
MOORE_CATEGORY_MAP = CategoryMap(
    [
        (Category(1, 1), 0.94),
        (Category(1, 0), 0.01),
        (Category(0, 1), 0.01),
        (Category(2, 1), 0.02),
        (Category(1, 2), 0.02),
    ]
)

CATEGORY_MAPS = {"best": BEST_CATEGORY_MAP, "moore": MOORE_CATEGORY_MAP}

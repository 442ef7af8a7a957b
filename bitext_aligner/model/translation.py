"""
Lexical translation model and its EM trainer.

The model gives P(target word | source word). Training follows IBM Model 1
with one extra rule: a source word whose share of a target word falls below
1 / (number of source words including NULL) hands that share to the NULL
word, which keeps the tables small on noisy pairs.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from ..errors import ConfigurationError
from .vocabulary import NULL_WID

logger = logging.getLogger(__name__)

DEFAULT_TRAIN_ITERATION_COUNT = 4


class SourceData:
    """Translation distribution of one source word, sorted by probability."""

    def __init__(self, translations: Mapping[int, float]):
        self._probabilities = dict(translations)
        self.translations: Tuple[Tuple[int, float], ...] = tuple(
            sorted(self._probabilities.items(), key=lambda item: (-item[1], item[0]))
        )

    def probability(self, target_wid: int) -> float:
        return self._probabilities.get(target_wid, 0.0)

    def best(self, count: int = 1) -> Tuple[Tuple[int, float], ...]:
        return self.translations[:count]

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        return iter(self.translations)

    def __len__(self):
        return len(self.translations)


EMPTY_SOURCE_DATA = SourceData({})


class TranslationModel:
    """Trained, read-only translation table."""

    def __init__(self, table: Mapping[int, Mapping[int, float]]):
        self._data: Dict[int, SourceData] = {
            source_wid: SourceData(translations)
            for source_wid, translations in table.items()
        }

    def get(self, source_wid: int) -> SourceData:
        """Distribution of source word, empty for words never observed."""
        return self._data.get(source_wid, EMPTY_SOURCE_DATA)

    def probability(self, source_wid: int, target_wid: int) -> float:
        return self.get(source_wid).probability(target_wid)

    @property
    def source_wids(self) -> List[int]:
        return sorted(self._data)

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return f"TranslationModel(source_words={len(self._data)})"


class _UniformSourceData:
    def probability(self, target_wid: int) -> float:
        return 1.0


class InitialTranslationModel:
    """Starting point of training: every word pair has probability 1."""

    _DATA = _UniformSourceData()

    def get(self, source_wid: int) -> _UniformSourceData:
        return self._DATA

    def probability(self, source_wid: int, target_wid: int) -> float:
        return 1.0


def train_translation_model(
    source_wid_lists: Sequence[Sequence[int]],
    target_wid_lists: Sequence[Sequence[int]],
    iteration_count: int = DEFAULT_TRAIN_ITERATION_COUNT,
) -> TranslationModel:
    """Train translation model on sentence aligned corpus.

    Args:
        source_wid_lists: Source sentences as word id lists
        target_wid_lists: Target sentences, parallel to source_wid_lists
        iteration_count: Number of EM iterations

    Returns:
        Trained TranslationModel

    Raises:
        ConfigurationError: Empty corpus, mismatched sides or iteration_count < 1
    """
    if iteration_count < 1:
        raise ConfigurationError(
            f"Iteration count must be >= 1, got {iteration_count}",
            "train_iteration_count",
        )
    if len(source_wid_lists) != len(target_wid_lists):
        raise ConfigurationError(
            "Source and target training corpora have different sizes: "
            f"{len(source_wid_lists)} vs {len(target_wid_lists)}"
        )
    if not source_wid_lists:
        raise ConfigurationError("Cannot train translation model on empty corpus")

    model = InitialTranslationModel()
    for iteration in range(iteration_count):
        model = _perform_iteration(model, source_wid_lists, target_wid_lists)
        logger.debug(
            f"Translation model iteration {iteration + 1}/{iteration_count}: "
            f"{len(model)} source words"
        )
    return model


def _perform_iteration(model, source_wid_lists, target_wid_lists) -> TranslationModel:
    """One expectation and maximization step."""
    counts: Dict[int, Dict[int, float]] = defaultdict(lambda: defaultdict(float))

    for source_wids, target_wids in zip(source_wid_lists, target_wid_lists):
        source_with_null = list(source_wids) + [NULL_WID]
        min_share = 1.0 / len(source_with_null)
        source_data = [model.get(wid) for wid in source_with_null]

        for target_wid in target_wids:
            probabilities = [data.probability(target_wid) for data in source_data]
            total = sum(probabilities)
            if total <= 0.0:
                continue
            for source_wid, probability in zip(source_with_null, probabilities):
                share = probability / total
                if share < min_share:
                    source_wid = NULL_WID
                counts[source_wid][target_wid] += share

    table = {}
    for source_wid, translations in counts.items():
        total = sum(translations.values())
        table[source_wid] = {
            target_wid: count / total for target_wid, count in translations.items()
        }
    return TranslationModel(table)

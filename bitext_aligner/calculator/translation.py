"""Translation model based calculator."""

import logging
import math
from typing import Sequence

from ..core.alignment import Alignment
from ..core.splitter import SplitAlgorithm
from ..errors import ConfigurationError
from ..model.language import LanguageModel, train_language_model
from ..model.translation import (
    DEFAULT_TRAIN_ITERATION_COUNT,
    TranslationModel,
    train_translation_model,
)
from ..model.vocabulary import (
    DEFAULT_TOKENIZE_ALGORITHM,
    NULL_WID,
    Vocabulary,
    tokenize,
    tokenize_and_build_vocabulary,
)
from ..utils import to_score
from .base import Calculator

logger = logging.getLogger(__name__)


class TranslationCalculator(Calculator):
    """Probability that target segments translate source segments.

    Score = language score of the source words + for every target word
    ln(n) - ln(sum over the n source words and NULL of
    P(target word | source word)), the sum floored at 1e-38.
    When source is empty only the target language score counts.
    """

    MINIMUM_TRANSLATION_PROBABILITY = 1e-38

    def __init__(
        self,
        source_vocabulary: Vocabulary,
        target_vocabulary: Vocabulary,
        source_language_model: LanguageModel,
        target_language_model: LanguageModel,
        translation_model: TranslationModel,
        split_algorithm: SplitAlgorithm = None,
    ):
        self.source_vocabulary = source_vocabulary
        self.target_vocabulary = target_vocabulary
        self.source_language_model = source_language_model
        self.target_language_model = target_language_model
        self.translation_model = translation_model
        self.split_algorithm = split_algorithm or DEFAULT_TOKENIZE_ALGORITHM

    @classmethod
    def train(
        cls,
        alignments: Sequence[Alignment],
        iteration_count: int = DEFAULT_TRAIN_ITERATION_COUNT,
        split_algorithm: SplitAlgorithm = None,
    ) -> "TranslationCalculator":
        """Build vocabularies and train all models on reference alignments.

        Raises:
            ConfigurationError: alignments are empty or contain no words
        """
        if not alignments:
            raise ConfigurationError("Reference corpus cannot be empty")
        split_algorithm = split_algorithm or DEFAULT_TOKENIZE_ALGORITHM

        source_vocabulary = Vocabulary()
        target_vocabulary = Vocabulary()
        source_wid_lists, target_wid_lists = tokenize_and_build_vocabulary(
            split_algorithm, alignments, source_vocabulary, target_vocabulary
        )
        logger.debug(
            f"Training translation models on {len(alignments)} alignments, "
            f"vocabulary {source_vocabulary.real_word_count} / "
            f"{target_vocabulary.real_word_count} words"
        )

        return cls(
            source_vocabulary,
            target_vocabulary,
            train_language_model(source_wid_lists),
            train_language_model(target_wid_lists),
            train_translation_model(source_wid_lists, target_wid_lists, iteration_count),
            split_algorithm,
        )

    def score(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> float:
        source_wids = tokenize(self.split_algorithm, source_segments, self.source_vocabulary)
        target_wids = tokenize(self.split_algorithm, target_segments, self.target_vocabulary)

        if not source_wids and not target_wids:
            return 0.0
        if not source_wids:
            return self._language_score(target_wids, self.target_language_model)

        score = self._language_score(source_wids, self.source_language_model)
        if target_wids:
            score += self._translation_score(source_wids + [NULL_WID], target_wids)
        return score

    @staticmethod
    def _language_score(wids, language_model: LanguageModel) -> float:
        return sum(to_score(language_model.word_probability(wid)) for wid in wids)

    def _translation_score(self, source_wids, target_wids) -> float:
        source_data = [self.translation_model.get(wid) for wid in source_wids]
        # Averaging over source words costs ln(n) per target word
        score = math.log(len(source_wids)) * len(target_wids)
        for target_wid in target_wids:
            probability = sum(data.probability(target_wid) for data in source_data)
            probability = max(probability, self.MINIMUM_TRANSLATION_PROBABILITY)
            score -= math.log(probability)
        return score

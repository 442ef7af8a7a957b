"""
Macros: fixed alignment recipes composed of filters, algorithms and calculators.
"""

import logging
from typing import List, Sequence

from ..alignment import (
    ALGORITHM_FACTORIES,
    AdaptiveBandAlgorithm,
    ForwardBackwardAlgorithmFactory,
    ViterbiAlgorithmFactory,
)
from ..calculator import (
    CharCounter,
    CompositeCalculator,
    NormalDistributionCalculator,
    PoissonDistributionCalculator,
    SplitCounter,
    TranslationCalculator,
)
from ..config import merge_config
from ..core.alignment import Alignment
from ..core.category import BEST_CATEGORY_MAP, MOORE_CATEGORY_MAP
from ..core.cleaner import UnifyRareWordsCleanAlgorithm
from ..core.splitter import WordSplitAlgorithm
from ..model.vocabulary import (
    DEFAULT_TOKENIZE_ALGORITHM,
    Vocabulary,
    create_truncated_vocabulary,
    tokenize_and_build_vocabulary,
)
from .aligner import Aligner, UnifyAligner
from .base import CompositeFilter, Filter
from .modifier import Modifier
from .selector import FractionSelector, OneToOneSelector


class Macro(Filter):
    """Base class of alignment recipes, holds merged configuration."""

    def __init__(self, **config):
        self.config = merge_config(**config)
        self.logger = logging.getLogger(self.__class__.__name__)

    def _adaptive_aligner(self, factory, calculator, category_map=BEST_CATEGORY_MAP):
        algorithm = AdaptiveBandAlgorithm(factory, calculator, category_map, **self.config)
        return Aligner(algorithm)


class GaleAndChurchMacro(Macro):
    """Gale and Church: character lengths, normal distribution, Viterbi."""

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        calculator = NormalDistributionCalculator(CharCounter())
        return self._adaptive_aligner(ViterbiAlgorithmFactory(), calculator).apply(
            alignments
        )


class PoissonMacro(Macro):
    """Like Gale and Church but counts words and uses a Poisson distribution
    trained on the input; usually gives better results.
    """

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        calculator = PoissonDistributionCalculator(SplitCounter(), alignments)
        return self._adaptive_aligner(
            ForwardBackwardAlgorithmFactory(), calculator
        ).apply(alignments)


class MooreMacro(Macro):
    """
    Moore's algorithm.

    Steps:
    1. Replace rare words with a placeholder
    2. Align by length, select the most probable one-to-one alignments
    3. Train translation and language models on the selection
    4. Align again using the models
    5. Restore original segments using the alignment shape
    """

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        alignments = list(alignments)
        self.logger.info("\n" + "=" * 70)
        self.logger.info("Moore alignment")
        self.logger.info("=" * 70)

        unified = self._unify_rare_words(alignments)

        self.logger.info("Length alignment...")
        length_alignments = self._length_align(unified)
        self.logger.info(f"  {len(length_alignments)} alignments")

        best_alignments = self._select_best_alignments(length_alignments)
        self.logger.info(f"  {len(best_alignments)} selected for training")

        if not best_alignments or not _has_words(best_alignments):
            self.logger.warning(
                "Content alignment is impossible because no usable best "
                "alignments were selected from length alignment. "
                "Returning result of length alignment only."
            )
            return UnifyAligner(length_alignments).apply(alignments)

        self.logger.info("Content alignment...")
        content_alignments = self._content_align(unified, best_alignments)
        self.logger.info(f"  {len(content_alignments)} alignments")

        return UnifyAligner(content_alignments).apply(alignments)

    def _unify_rare_words(self, alignments: List[Alignment]) -> List[Alignment]:
        split_algorithm = WordSplitAlgorithm()
        source_vocabulary = Vocabulary()
        target_vocabulary = Vocabulary()
        source_wid_lists, target_wid_lists = tokenize_and_build_vocabulary(
            split_algorithm, alignments, source_vocabulary, target_vocabulary
        )
        truncated_source = create_truncated_vocabulary(source_wid_lists, source_vocabulary)
        truncated_target = create_truncated_vocabulary(target_wid_lists, target_vocabulary)
        self.logger.debug(
            f"Vocabulary truncated to {truncated_source.real_word_count} source / "
            f"{truncated_target.real_word_count} target words"
        )
        modifier = Modifier(
            UnifyRareWordsCleanAlgorithm(truncated_source, split_algorithm),
            UnifyRareWordsCleanAlgorithm(truncated_target, split_algorithm),
        )
        return modifier.apply(alignments)

    def _length_align(self, alignments: List[Alignment]) -> List[Alignment]:
        calculator = PoissonDistributionCalculator(SplitCounter(), alignments)
        factory = ALGORITHM_FACTORIES[self.config["length_algorithm"]]()
        return self._adaptive_aligner(factory, calculator, BEST_CATEGORY_MAP).apply(
            alignments
        )

    def _select_best_alignments(self, alignments: List[Alignment]) -> List[Alignment]:
        selector = CompositeFilter(
            [OneToOneSelector(), FractionSelector(self.config["select_fraction"])]
        )
        return selector.apply(alignments)

    def _content_align(
        self, alignments: List[Alignment], best_alignments: List[Alignment]
    ) -> List[Alignment]:
        calculator = CompositeCalculator(
            [
                PoissonDistributionCalculator(SplitCounter(), alignments),
                TranslationCalculator.train(
                    best_alignments, self.config["train_iteration_count"]
                ),
            ]
        )
        factory = ALGORITHM_FACTORIES[self.config["content_algorithm"]]()
        return self._adaptive_aligner(factory, calculator, MOORE_CATEGORY_MAP).apply(
            alignments
        )


class TranslationMacro(Macro):
    """Realigns the whole input with a translation model trained on the input.

    The input must already be aligned; its alignments are the training data.
    """

    def _calculator(self, alignments):
        return TranslationCalculator.train(
            alignments, self.config["train_iteration_count"]
        )

    def apply(self, alignments: Sequence[Alignment]) -> List[Alignment]:
        alignments = list(alignments)
        if not alignments:
            return []
        calculator = self._calculator(alignments)
        factory = ALGORITHM_FACTORIES[self.config["content_algorithm"]]()
        return self._adaptive_aligner(factory, calculator).apply(_merge_all(alignments))


class PoissonTranslationMacro(TranslationMacro):
    """Translation macro with Poisson length score added."""

    def _calculator(self, alignments):
        return CompositeCalculator(
            [
                PoissonDistributionCalculator(SplitCounter(), alignments),
                super()._calculator(alignments),
            ]
        )


def _merge_all(alignments: Sequence[Alignment]) -> List[Alignment]:
    """One alignment holding every segment, pinned alignments kept in place."""
    result = []
    source_segments = []
    target_segments = []
    for alignment in alignments:
        if alignment.pinned:
            if source_segments or target_segments:
                result.append(Alignment(source_segments, target_segments))
                source_segments, target_segments = [], []
            result.append(alignment)
        else:
            source_segments.extend(alignment.source_segments)
            target_segments.extend(alignment.target_segments)
    if source_segments or target_segments:
        result.append(Alignment(source_segments, target_segments))
    return result


def _has_words(alignments: Sequence[Alignment]) -> bool:
    """Whether both sides contain at least one word to train on."""
    source = any(
        DEFAULT_TOKENIZE_ALGORITHM.modify(a.source_segments) for a in alignments
    )
    target = any(
        DEFAULT_TOKENIZE_ALGORITHM.modify(a.target_segments) for a in alignments
    )
    return source and target


MACROS = {
    "galechurch": GaleAndChurchMacro,
    "poisson": PoissonMacro,
    "moore": MooreMacro,
    "translation": TranslationMacro,
    "poisson-translation": PoissonTranslationMacro,
}

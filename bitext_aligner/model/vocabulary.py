"""Word vocabulary and tokenization helpers."""

from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.alignment import Alignment
from ..core.splitter import (
    FilterNonWordsSplitAlgorithmDecorator,
    SplitAlgorithm,
    WordSplitAlgorithm,
)

NULL_WORD = "{NULL}"
UNKNOWN_WORD = "{UNKNOWN}"
NULL_WID = 0
UNKNOWN_WID = 1

# Words seen less often are treated as rare
MIN_WORD_COUNT = 2

DEFAULT_TOKENIZE_ALGORITHM = FilterNonWordsSplitAlgorithmDecorator(WordSplitAlgorithm())


class Vocabulary:
    """Append-only mapping between words and integer identifiers.

    Ids 0 and 1 are reserved for the NULL word (target words translated
    from nothing) and the UNKNOWN word (anything not in the vocabulary).
    """

    def __init__(self, words: Iterable[str] = ()):
        self._words: List[str] = [NULL_WORD, UNKNOWN_WORD]
        self._wids = {NULL_WORD: NULL_WID, UNKNOWN_WORD: UNKNOWN_WID}
        self.put_word_list(words)

    def put_word(self, word: str) -> int:
        wid = self._wids.get(word)
        if wid is None:
            wid = len(self._words)
            self._words.append(word)
            self._wids[word] = wid
        return wid

    def put_word_list(self, words: Iterable[str]) -> List[int]:
        return [self.put_word(word) for word in words]

    def get_wid(self, word: str) -> int:
        return self._wids.get(word, UNKNOWN_WID)

    def get_wid_list(self, words: Iterable[str]) -> List[int]:
        return [self.get_wid(word) for word in words]

    def get_word(self, wid: int) -> Optional[str]:
        if 0 <= wid < len(self._words):
            return self._words[wid]
        return None

    def contains_word(self, word: str) -> bool:
        return word in self._wids

    @property
    def word_count(self) -> int:
        """Number of words including the reserved ones."""
        return len(self._words)

    @property
    def real_word_count(self) -> int:
        return len(self._words) - 2

    def __len__(self):
        return len(self._words)

    def __contains__(self, word) -> bool:
        return self.contains_word(word)

    def __repr__(self):
        return f"Vocabulary(words={self.real_word_count})"


def tokenize(
    split_algorithm: SplitAlgorithm, segments: Sequence[str], vocabulary: Vocabulary
) -> List[int]:
    """Split segments into words and look up their ids (unknown words map to UNKNOWN_WID)."""
    return vocabulary.get_wid_list(split_algorithm.modify(segments))


def tokenize_and_build_vocabulary(
    split_algorithm: SplitAlgorithm,
    alignments: Sequence[Alignment],
    source_vocabulary: Vocabulary,
    target_vocabulary: Vocabulary,
) -> Tuple[List[List[int]], List[List[int]]]:
    """Tokenize every alignment, adding new words to the vocabularies.

    Returns:
        (source_wid_lists, target_wid_lists), one word id list per alignment
    """
    source_wid_lists = []
    target_wid_lists = []
    for alignment in alignments:
        source_words = split_algorithm.modify(alignment.source_segments)
        target_words = split_algorithm.modify(alignment.target_segments)
        source_wid_lists.append(source_vocabulary.put_word_list(source_words))
        target_wid_lists.append(target_vocabulary.put_word_list(target_words))
    return source_wid_lists, target_wid_lists


def create_truncated_vocabulary(
    wid_lists: Iterable[Sequence[int]],
    vocabulary: Vocabulary,
    min_count: int = MIN_WORD_COUNT,
) -> Vocabulary:
    """New vocabulary with only words occurring at least min_count times."""
    counts = Counter(wid for wid_list in wid_lists for wid in wid_list)
    frequent = [
        vocabulary.get_word(wid)
        for wid, count in sorted(counts.items())
        if count >= min_count and wid not in (NULL_WID, UNKNOWN_WID)
    ]
    return Vocabulary(frequent)

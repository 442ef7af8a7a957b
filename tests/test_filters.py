"""Tests for modify algorithms, modifier, aligner and selector filters"""

import pytest

from bitext_aligner.alignment import OneToOneAlgorithm, ViterbiAlgorithm
from bitext_aligner.core import (
    Alignment,
    FilterNonWordsSplitAlgorithmDecorator,
    LowercaseCleanAlgorithm,
    NullModifyAlgorithm,
    ParagraphSplitAlgorithm,
    SentenceSplitAlgorithm,
    SeparatorMergeAlgorithm,
    TrimCleanAlgorithm,
    UnifyRareWordsCleanAlgorithm,
    WordSplitAlgorithm,
    pinned_alignment,
)
from bitext_aligner.errors import AlignmentImpossibleError, ConfigurationError
from bitext_aligner.filter import (
    Aligner,
    CompositeFilter,
    DifferenceSelector,
    FractionSelector,
    IgnorePinnedFilterDecorator,
    IntersectionSelector,
    Modifier,
    OneToOneSelector,
    ProbabilitySelector,
    UnifyAligner,
)
from bitext_aligner.model import Vocabulary


def scored(*scores):
    return [Alignment([f"s{i}"], [f"t{i}"], score) for i, score in enumerate(scores)]


# Split algorithms
def test_sentence_split():
    text = "Hello world. This is Ala! ok? Yes.\nNext line"
    assert SentenceSplitAlgorithm().split(text) == [
        "Hello world.",
        " This is Ala! ok?",
        " Yes.\n",
        "Next line",
    ]


def test_sentence_split_keeps_every_character():
    text = "First one.  Second one?\r\nThird!\n\nFourth"
    assert "".join(SentenceSplitAlgorithm().split(text)) == text


def test_sentence_split_does_not_split_before_lowercase():
    assert SentenceSplitAlgorithm().split("Mr. smith came. He left.") == [
        "Mr. smith came.",
        " He left.",
    ]


def test_paragraph_split():
    text = "First paragraph\nstill first.\n\n  \nSecond paragraph.\n"
    assert ParagraphSplitAlgorithm().split(text) == [
        "First paragraph\nstill first.",
        "Second paragraph.\n",
    ]


def test_word_split():
    assert WordSplitAlgorithm().split("Hello, world!  It's 2024.") == [
        "Hello", ",", "world", "!", "It", "'", "s", "2024", ".",
    ]


def test_filter_non_words():
    splitter = FilterNonWordsSplitAlgorithmDecorator(WordSplitAlgorithm())
    assert splitter.split("Hello, World! 42") == ["hello", "world", "42"]


def test_word_split_keeps_placeholder_whole():
    assert WordSplitAlgorithm().split("a{OTHER}. {x}") == [
        "a", "{OTHER}", ".", "{", "x", "}",
    ]


def test_placeholder_differs_from_word():
    splitter = FilterNonWordsSplitAlgorithmDecorator(WordSplitAlgorithm())
    assert splitter.split("{OTHER} other {Other}") == ["{other}", "other", "other"]


def test_split_algorithm_concatenates_segments():
    assert WordSplitAlgorithm().modify(["a b", "c"]) == ["a", "b", "c"]


# Clean and merge algorithms
def test_merge_algorithm():
    assert SeparatorMergeAlgorithm(" ").modify(["a", "b"]) == ["a b"]
    assert SeparatorMergeAlgorithm().modify(["a", "b"]) == ["ab"]
    assert SeparatorMergeAlgorithm().modify([]) == []


def test_trim_drops_empty_segments():
    assert TrimCleanAlgorithm().modify(["  a ", "   ", "\nb"]) == ["a", "b"]


def test_lowercase_and_null():
    assert LowercaseCleanAlgorithm().modify(["ABC"]) == ["abc"]
    assert NullModifyAlgorithm().modify(["x", "y"]) == ["x", "y"]


def test_unify_rare_words():
    vocabulary = Vocabulary(["the", "house", "."])
    cleaner = UnifyRareWordsCleanAlgorithm(vocabulary)
    assert cleaner.modify(["The house is red."]) == ["{OTHER} house {OTHER} {OTHER} ."]


# Modifier
def test_modifier_uses_separate_algorithms():
    alignments = [Alignment(["A b. C d."], ["X y. Z w."])]
    result = Modifier(SentenceSplitAlgorithm(), NullModifyAlgorithm()).apply(alignments)

    assert result[0].source_segments == ("A b.", " C d.")
    assert result[0].target_segments == ("X y. Z w.",)
    assert alignments[0].source_segments == ("A b. C d.",)


def test_modifier_skips_pinned():
    pinned = pinned_alignment(["  keep  "], ["  me "])
    result = Modifier(TrimCleanAlgorithm()).apply([pinned, Alignment([" a "], [" b "])])

    assert result[0] is pinned
    assert result[1].source_segments == ("a",)


# Aligner
def test_aligner_aligns_each_alignment(normal_calculator):
    alignments = [Alignment(["aaaa", "bbbb"], ["cccc", "dddd"]), Alignment(["e"], ["f"])]
    result = Aligner(ViterbiAlgorithm(normal_calculator)).apply(alignments)

    assert [a.operation_type for a in result] == ["1:1", "1:1", "1:1"]


def test_aligner_keeps_pinned_alignments():
    pinned = pinned_alignment(["a", "b"], ["c"])
    result = Aligner(OneToOneAlgorithm()).apply([pinned, Alignment(["d"], ["e"])])

    assert result[0] is pinned
    assert result[1] == Alignment(["d"], ["e"])


def test_unify_aligner_copies_shape_and_scores():
    reference = [
        Alignment(["a", "b"], ["c"], 1.5),
        pinned_alignment(["d"], ["e", "f"]),
    ]
    original = [Alignment(["A", "B", "D"], ["C", "E", "F"])]
    result = UnifyAligner(reference).apply(original)

    assert result[0] == Alignment(["A", "B"], ["C"], 1.5)
    assert result[1].pinned
    assert result[1].target_segments == ("E", "F")


def test_unify_aligner_rejects_different_counts():
    with pytest.raises(AlignmentImpossibleError):
        UnifyAligner([Alignment(["a"], ["b"])]).apply([Alignment(["a", "x"], ["b"])])


# Selectors
def test_one_to_one_selector():
    alignments = [Alignment(["a"], ["b"]), Alignment(["c", "d"], ["e"])]
    assert OneToOneSelector().apply(alignments) == alignments[:1]


def test_fraction_selector_keeps_best_in_order():
    alignments = scored(3.0, 1.0, 4.0, 2.0)
    result = FractionSelector(0.5).apply(alignments)
    assert [a.score for a in result] == [1.0, 2.0]


def test_fraction_selector_bounds():
    alignments = scored(3.0, 1.0, 4.0, 2.0)
    assert FractionSelector(0.0).apply(alignments) == []
    assert FractionSelector(1.0).apply(alignments) == alignments
    assert FractionSelector(1.0).apply([]) == []


def test_fraction_selector_is_monotonic():
    alignments = scored(5.0, 0.2, 3.3, 1.1, 0.7, 2.9, 4.4)
    sizes = [len(FractionSelector(f / 10).apply(alignments)) for f in range(11)]
    assert sizes == sorted(sizes)


def test_fraction_selector_prefers_pinned():
    alignments = [Alignment(["a"], ["b"], 0.1), pinned_alignment(["c"], ["d"])]
    assert FractionSelector(0.5).apply(alignments) == alignments[1:]


def test_probability_selector():
    alignments = scored(0.1, 2.0)
    assert ProbabilitySelector(0.5).apply(alignments) == alignments[:1]
    assert ProbabilitySelector(0.0).apply(alignments) == alignments


@pytest.mark.parametrize("selector_class", [FractionSelector, ProbabilitySelector])
def test_selectors_reject_out_of_range(selector_class):
    with pytest.raises(ConfigurationError):
        selector_class(1.5)
    with pytest.raises(ConfigurationError):
        selector_class(-0.1)


def test_intersection_and_difference_selectors():
    reference = [Alignment(["a"], ["x"]), Alignment(["b", "c"], ["y"])]
    alignments = [
        Alignment(["a"], ["x"]),
        Alignment(["b"], ["y"]),
        Alignment(["c"], []),
    ]
    assert IntersectionSelector(reference).apply(alignments) == alignments[:1]
    assert DifferenceSelector(reference).apply(alignments) == alignments[1:]


# Combinators
def test_composite_filter_applies_in_order():
    pipeline = CompositeFilter(
        [Modifier(SentenceSplitAlgorithm()), Modifier(TrimCleanAlgorithm())]
    )
    result = pipeline.apply([Alignment(["One. Two."], ["Eins. Zwei."])])
    assert result[0].source_segments == ("One.", "Two.")


def test_ignore_pinned_filters_runs_separately():
    alignments = [
        Alignment(["a"], ["b"]),
        Alignment(["c"], []),
        pinned_alignment(["d"], ["e"]),
        Alignment(["f", "g"], ["h"]),
    ]
    result = IgnorePinnedFilterDecorator(OneToOneSelector()).apply(alignments)
    assert result == [alignments[0], alignments[2]]

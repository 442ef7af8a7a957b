"""Tests for vocabulary, histogram, language and translation models"""

import pytest

from bitext_aligner.errors import ConfigurationError
from bitext_aligner.model import (
    NULL_WID,
    UNKNOWN_WID,
    HistogramModel,
    Vocabulary,
    create_truncated_vocabulary,
    train_language_model,
    train_length_model,
    train_translation_model,
)


# Vocabulary
def test_vocabulary_reserved_ids():
    vocabulary = Vocabulary()
    assert vocabulary.get_word(NULL_WID) == "{NULL}"
    assert vocabulary.get_word(UNKNOWN_WID) == "{UNKNOWN}"
    assert vocabulary.real_word_count == 0


def test_vocabulary_put_and_get():
    vocabulary = Vocabulary()
    first = vocabulary.put_word("house")
    assert vocabulary.put_word("house") == first
    assert vocabulary.get_wid("house") == first
    assert vocabulary.get_wid("garden") == UNKNOWN_WID
    assert "house" in vocabulary
    assert vocabulary.get_word(999) is None
    assert vocabulary.word_count == 3


def test_truncated_vocabulary_keeps_frequent_words():
    vocabulary = Vocabulary()
    wid_lists = [
        vocabulary.put_word_list(["a", "b", "a"]),
        vocabulary.put_word_list(["c", "b"]),
    ]
    truncated = create_truncated_vocabulary(wid_lists, vocabulary, min_count=2)

    assert truncated.contains_word("a")
    assert truncated.contains_word("b")
    assert not truncated.contains_word("c")


# Histogram
def test_histogram_probabilities():
    model = HistogramModel.from_values([1, 2, 2, 3])

    assert model.probability(2) == pytest.approx(0.5)
    assert model.probability(1) == pytest.approx(0.25)
    assert model.count(2) == 2
    assert model.mean == pytest.approx(2.0)


def test_histogram_unseen_value_gets_singleton_probability():
    model = HistogramModel.from_values([1, 2, 2, 3])
    assert model.probability(0) == pytest.approx(0.25)
    assert model.probability(100) == pytest.approx(0.25)


def test_empty_length_model():
    model = train_length_model([])
    assert model.probability(3) == 0.0
    assert model.mean_length == 0.0


def test_histogram_rejects_negative_values():
    with pytest.raises(ConfigurationError):
        HistogramModel.from_values([1, -1])


# Language model
def test_language_model():
    model = train_language_model([[2, 3], [2]])
    assert model.word_probability(2) == pytest.approx(2 / 3)
    assert model.word_probability(7) == pytest.approx(1 / 3)


def test_language_model_without_words():
    with pytest.raises(ConfigurationError):
        train_language_model([[], []])


# Translation model
A, B, C, D, E, F = 2, 3, 4, 5, 6, 7


def test_translation_model_learns_consistent_pair():
    """Word present on both sides of every pair becomes a likely translation"""
    model = train_translation_model(
        [[A], [A, C], [A, D]], [[B], [B, E], [B, F]], iteration_count=4
    )
    assert model.probability(A, B) > 0.9
    assert model.get(A).best()[0][0] == B


def test_translation_distributions_sum_to_one():
    model = train_translation_model(
        [[A], [A, C], [A, D]], [[B], [B, E], [B, F]], iteration_count=3
    )
    for source_wid in model.source_wids:
        total = sum(probability for _, probability in model.get(source_wid))
        assert total == pytest.approx(1.0)


def test_translation_model_unknown_source_word():
    model = train_translation_model([[A]], [[B]], iteration_count=1)
    assert model.probability(99, B) == 0.0
    assert len(model.get(99)) == 0


@pytest.mark.parametrize(
    "source, target, iterations",
    [
        ([], [], 4),
        ([[A]], [[B], [C]], 4),
        ([[A]], [[B]], 0),
    ],
)
def test_translation_training_rejects_bad_input(source, target, iterations):
    with pytest.raises(ConfigurationError):
        train_translation_model(source, target, iterations)


def test_translation_small_share_moves_to_null():
    """Shares below 1 / (source words + NULL) are credited to NULL"""
    model = train_translation_model([[A], [A, C]], [[B], [B, E]], iteration_count=2)

    # C keeps 7/27 of B in the second pair and A keeps 4/15 of E, both below 1/3
    assert model.probability(A, B) == pytest.approx(1.0)
    assert model.probability(A, E) == 0.0
    assert model.probability(C, E) == pytest.approx(1.0)
    assert model.probability(C, B) == 0.0
    assert model.probability(NULL_WID, B) == pytest.approx(305 / 449)
    assert model.probability(NULL_WID, E) == pytest.approx(144 / 449)

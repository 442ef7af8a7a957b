"""Pytest configuration and fixtures

Shared corpora and calculators used across test modules.
"""

import math
import random

import pytest

from bitext_aligner.calculator import (
    CharCounter,
    NormalDistributionCalculator,
    PoissonDistributionCalculator,
    SplitCounter,
)
from bitext_aligner.calculator.base import Calculator
from bitext_aligner.core import Alignment


SOURCE_SENTENCES = [
    "The old house stood at the end of the road.",
    "Nobody had lived there for many years.",
    "Children from the village said the house was haunted.",
    "One summer a young painter bought the house.",
    "He repaired the roof and painted the walls white.",
    "In the evenings he sat in the garden and watched the sun.",
    "The children came to look at his paintings.",
    "Soon they were no longer afraid of the house.",
    "The painter taught them to draw the road and the trees.",
    "Years later the house became a small school of painting.",
]

TARGET_SENTENCES = [
    "Das alte Haus stand am Ende der Strasse.",
    "Niemand hatte dort seit vielen Jahren gelebt.",
    "Die Kinder aus dem Dorf sagten, das Haus sei verwunschen.",
    "Eines Sommers kaufte ein junger Maler das Haus.",
    "Er reparierte das Dach und strich die Wände weiss.",
    "Am Abend sass er im Garten und sah die Sonne.",
    "Die Kinder kamen, um seine Bilder anzusehen.",
    "Bald hatten sie keine Angst mehr vor dem Haus.",
    "Der Maler lehrte sie, die Strasse und die Bäume zu zeichnen.",
    "Jahre später wurde das Haus eine kleine Malschule.",
]


class RecordingCalculator(Calculator):
    """Returns a fixed score and remembers every call."""

    def __init__(self, value: float):
        self.value = value
        self.calls = []

    def score(self, source_segments, target_segments):
        self.calls.append((tuple(source_segments), tuple(target_segments)))
        return self.value


class ImpossibleCalculator(Calculator):
    def score(self, source_segments, target_segments):
        return math.inf


@pytest.fixture(scope="session")
def source_sentences():
    return list(SOURCE_SENTENCES)


@pytest.fixture(scope="session")
def target_sentences():
    return list(TARGET_SENTENCES)


@pytest.fixture
def parallel_alignments(source_sentences, target_sentences):
    """Correct one to one alignment of the sample texts"""
    return [Alignment([s], [t]) for s, t in zip(source_sentences, target_sentences)]


@pytest.fixture
def unaligned(source_sentences, target_sentences):
    """Sample texts as one alignment waiting to be aligned"""
    return [Alignment(source_sentences, target_sentences)]


@pytest.fixture
def normal_calculator():
    return NormalDistributionCalculator(CharCounter())


@pytest.fixture
def poisson_calculator(unaligned):
    return PoissonDistributionCalculator(SplitCounter(), unaligned)


@pytest.fixture
def recording_calculator():
    return RecordingCalculator(1.0)


@pytest.fixture
def impossible_calculator():
    return ImpossibleCalculator()


@pytest.fixture(scope="session")
def random_documents():
    """Pairs of random segment lists with uneven lengths"""
    rng = random.Random(1234)
    words = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta"]

    def sentence():
        return " ".join(rng.choice(words) for _ in range(rng.randint(1, 12))) + "."

    documents = []
    for source_count, target_count in [(1, 1), (3, 2), (6, 9), (12, 10), (25, 31)]:
        documents.append(
            (
                [sentence() for _ in range(source_count)],
                [sentence() for _ in range(target_count)],
            )
        )
    return documents

"""Unigram language model over word ids."""

from typing import Iterable, Sequence

from ..errors import ConfigurationError
from .histogram import HistogramModel


class LanguageModel(HistogramModel):
    """Probability of a single word id."""

    def word_probability(self, wid: int) -> float:
        return self.probability(wid)

    def __repr__(self):
        return f"LanguageModel(observations={self.total})"


def train_language_model(wid_lists: Iterable[Sequence[int]]) -> LanguageModel:
    """Train unigram model from tokenized sentences.

    Raises:
        ConfigurationError: the sentences contain no words at all
    """
    model = LanguageModel.from_values(wid for wid_list in wid_lists for wid in wid_list)
    if model.total == 0:
        raise ConfigurationError("Cannot train language model without any words")
    return model

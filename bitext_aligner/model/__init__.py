from .vocabulary import (
    Vocabulary,
    NULL_WID,
    UNKNOWN_WID,
    NULL_WORD,
    UNKNOWN_WORD,
    DEFAULT_TOKENIZE_ALGORITHM,
    tokenize,
    tokenize_and_build_vocabulary,
    create_truncated_vocabulary,
)
from .histogram import HistogramModel
from .length import LengthModel, train_length_model
from .language import LanguageModel, train_language_model
from .translation import (
    TranslationModel,
    InitialTranslationModel,
    SourceData,
    DEFAULT_TRAIN_ITERATION_COUNT,
    train_translation_model,
)

__all__ = [
    "Vocabulary",
    "NULL_WID",
    "UNKNOWN_WID",
    "NULL_WORD",
    "UNKNOWN_WORD",
    "DEFAULT_TOKENIZE_ALGORITHM",
    "tokenize",
    "tokenize_and_build_vocabulary",
    "create_truncated_vocabulary",
    "HistogramModel",
    "LengthModel",
    "train_length_model",
    "LanguageModel",
    "train_language_model",
    "TranslationModel",
    "InitialTranslationModel",
    "SourceData",
    "DEFAULT_TRAIN_ITERATION_COUNT",
    "train_translation_model",
]

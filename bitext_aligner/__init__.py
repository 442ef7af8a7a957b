"""
Bitext Aligner: statistical alignment of parallel bilingual texts.
"""

import logging

from .api import BitextAligner, align_texts, build_pipeline
from .config import DEFAULT_CONFIG
from .core import (
    Alignment,
    Category,
    CategoryMap,
    BEST_CATEGORY_MAP,
    MOORE_CATEGORY_MAP,
    pinned_alignment,
)
from .corpus import AlParser, BilingualCorpus, PlaintextParser
from .errors import (
    AlignerError,
    ConfigurationError,
    ReconstructionError,
    PositionOutsideBandError,
    AlignmentImpossibleError,
    BandExhaustedError,
    AlignmentTimeoutError,
    FormatError,
)
from .output import AlFormatter, InfoFormatter, OutputFormatter, PlaintextFormatter

# Subpackages
from . import alignment, calculator, core, filter, matrix, model

from .alignment import (
    AlignAlgorithm,
    AdaptiveBandAlgorithm,
    ForwardBackwardAlgorithm,
    ViterbiAlgorithm,
)
from .filter import (
    Aligner,
    Filter,
    GaleAndChurchMacro,
    MooreMacro,
    PoissonMacro,
    PoissonTranslationMacro,
    TranslationMacro,
    UnifyAligner,
)

__version__ = "1.0.0"
__all__ = [
    "BitextAligner",
    "align_texts",
    "build_pipeline",
    "DEFAULT_CONFIG",
    "Alignment",
    "Category",
    "CategoryMap",
    "BEST_CATEGORY_MAP",
    "MOORE_CATEGORY_MAP",
    "pinned_alignment",
    "AlParser",
    "BilingualCorpus",
    "PlaintextParser",
    "AlignerError",
    "ConfigurationError",
    "ReconstructionError",
    "PositionOutsideBandError",
    "AlignmentImpossibleError",
    "BandExhaustedError",
    "AlignmentTimeoutError",
    "FormatError",
    "AlFormatter",
    "InfoFormatter",
    "OutputFormatter",
    "PlaintextFormatter",
    "AlignAlgorithm",
    "AdaptiveBandAlgorithm",
    "ForwardBackwardAlgorithm",
    "ViterbiAlgorithm",
    "Aligner",
    "Filter",
    "GaleAndChurchMacro",
    "MooreMacro",
    "PoissonMacro",
    "PoissonTranslationMacro",
    "TranslationMacro",
    "UnifyAligner",
    "alignment",
    "calculator",
    "core",
    "filter",
    "matrix",
    "model",
]

# Configure default logging format to be minimal
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))
_logger = logging.getLogger("bitext_aligner")
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)

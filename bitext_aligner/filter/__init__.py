from .base import Filter, CompositeFilter, IgnorePinnedFilterDecorator
from .aligner import Aligner, UnifyAligner
from .selector import (
    OneToOneSelector,
    FractionSelector,
    ProbabilitySelector,
    IntersectionSelector,
    DifferenceSelector,
)
from .modifier import Modifier, MODIFY_ALGORITHMS
from .macro import (
    Macro,
    GaleAndChurchMacro,
    PoissonMacro,
    MooreMacro,
    TranslationMacro,
    PoissonTranslationMacro,
    MACROS,
)

__all__ = [
    "Filter",
    "CompositeFilter",
    "IgnorePinnedFilterDecorator",
    "Aligner",
    "UnifyAligner",
    "OneToOneSelector",
    "FractionSelector",
    "ProbabilitySelector",
    "IntersectionSelector",
    "DifferenceSelector",
    "Modifier",
    "MODIFY_ALGORITHMS",
    "Macro",
    "GaleAndChurchMacro",
    "PoissonMacro",
    "MooreMacro",
    "TranslationMacro",
    "PoissonTranslationMacro",
    "MACROS",
]

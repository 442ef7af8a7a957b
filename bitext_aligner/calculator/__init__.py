from .base import Calculator
from .counter import Counter, CharCounter, SplitCounter, COUNTERS
from .length import (
    LengthCalculator,
    NormalDistributionCalculator,
    PoissonDistributionCalculator,
    cumulative_normal_distribution,
)
from .translation import TranslationCalculator
from .meta import (
    CompositeCalculator,
    MinimumCalculator,
    GatedMinimumCalculator,
    OracleCalculator,
)

__all__ = [
    "Calculator",
    "Counter",
    "CharCounter",
    "SplitCounter",
    "COUNTERS",
    "LengthCalculator",
    "NormalDistributionCalculator",
    "PoissonDistributionCalculator",
    "cumulative_normal_distribution",
    "TranslationCalculator",
    "CompositeCalculator",
    "MinimumCalculator",
    "GatedMinimumCalculator",
    "OracleCalculator",
]

"""
Alignment algorithms
"""

from .base import AlignAlgorithm, AlgorithmFactory, HmmAlignAlgorithm
from .viterbi import ViterbiAlgorithm, ViterbiAlgorithmFactory, ViterbiData
from .forward_backward import ForwardBackwardAlgorithm, ForwardBackwardAlgorithmFactory
from .one_to_one import OneToOneAlgorithm
from .adaptive import AdaptiveBandAlgorithm, max_deviation

ALGORITHM_FACTORIES = {
    "viterbi": ViterbiAlgorithmFactory,
    "fb": ForwardBackwardAlgorithmFactory,
}

__all__ = [
    "AlignAlgorithm",
    "AlgorithmFactory",
    "HmmAlignAlgorithm",
    "ViterbiAlgorithm",
    "ViterbiAlgorithmFactory",
    "ViterbiData",
    "ForwardBackwardAlgorithm",
    "ForwardBackwardAlgorithmFactory",
    "OneToOneAlgorithm",
    "AdaptiveBandAlgorithm",
    "max_deviation",
    "ALGORITHM_FACTORIES",
]

"""
Utility functions for the bitext aligner.
"""

import math
import time
from typing import Iterable, Optional

import numpy as np

from .errors import AlignmentTimeoutError, ConfigurationError


def to_score(probability: float) -> float:
    """Convert probability to score (-ln probability). Zero maps to infinity."""
    if probability <= 0.0:
        return math.inf
    return -math.log(probability)


def to_probability(score: float) -> float:
    """Convert score back to probability."""
    return math.exp(-score)


def score_sum(scores: Iterable[float]) -> float:
    """Score of the sum of probabilities represented by given scores.

    Equivalent to -ln(sum(exp(-s))) computed with log-sum-exp, so very
    small probabilities do not underflow. Empty input is impossible (inf).
    """
    values = np.fromiter(scores, dtype=np.float64)
    if values.size == 0:
        return math.inf
    return float(-np.logaddexp.reduce(-values))


def log_factorial(n: int) -> float:
    """ln(n!) by summation, stays finite for large n."""
    if n < 0:
        raise ConfigurationError(f"Factorial argument must be >= 0, got {n}", "n")
    result = 0.0
    for i in range(2, n + 1):
        result += math.log(i)
    return result


def poisson_distribution(mean: float, x: int) -> float:
    """Score of observing x events in a Poisson distribution with given mean."""
    if mean <= 0.0:
        # Degenerate distribution: only zero is possible
        return 0.0 if x == 0 else math.inf
    return mean - x * math.log(mean) + log_factorial(x)


class Deadline:
    """Wall-clock limit checked inside long running loops."""

    def __init__(self, seconds: float):
        if seconds <= 0:
            raise ConfigurationError(
                f"Timeout must be positive, got {seconds}", "timeout_seconds"
            )
        self.seconds = seconds
        self.expires_at = time.monotonic() + seconds

    @classmethod
    def from_config(cls, config: dict) -> Optional["Deadline"]:
        seconds = config.get("timeout_seconds")
        if seconds is None:
            return None
        return cls(seconds)

    def remaining(self) -> float:
        return max(0.0, self.expires_at - time.monotonic())

    def expired(self) -> bool:
        return time.monotonic() >= self.expires_at

    def check(self):
        """Raise AlignmentTimeoutError when the deadline has passed."""
        if self.expired():
            raise AlignmentTimeoutError(self.seconds)


def build_config_from_args(args) -> dict:
    """Build aligner config dict from argparse Namespace.

    Only options the user actually supplied are kept, so defaults from
    DEFAULT_CONFIG are not overridden.
    """
    config = {
        "initial_band_radius": getattr(args, "band_radius", None),
        "band_increment_ratio": getattr(args, "band_increment", None),
        "min_band_margin": getattr(args, "band_margin", None),
        "max_band_iterations": getattr(args, "max_band_iterations", None),
        "train_iteration_count": getattr(args, "iterations", None),
        "select_fraction": getattr(args, "fraction", None),
        "timeout_seconds": getattr(args, "timeout", None),
    }

    # Remove None values to avoid overriding defaults
    return {k: v for k, v in config.items() if v is not None}

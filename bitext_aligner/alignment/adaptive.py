"""
Adaptive band search.

Runs a matrix based algorithm on a band matrix, widening the band until
the path found keeps a safe margin from the band edge. A correct alignment
usually stays close to the diagonal, so a narrow band is enough for most
documents and memory grows with the band width instead of the product of
the document lengths.
"""

from typing import List, Sequence

from ..calculator.base import Calculator
from ..core.alignment import Alignment, segment_counts
from ..core.category import BEST_CATEGORY_MAP, CategoryMap
from ..errors import (
    AlignmentImpossibleError,
    BandExhaustedError,
    ConfigurationError,
    ReconstructionError,
)
from ..matrix import BandMatrixFactory
from ..utils import Deadline
from .base import AlgorithmFactory, AlignAlgorithm


class AdaptiveBandAlgorithm(AlignAlgorithm):
    """
    Wraps an algorithm factory and retries with a wider band.

    Configuration parameters:
    - initial_band_radius: radius of the first attempt
    - band_increment_ratio: multiplier applied to radius before every attempt
    - min_band_margin: required distance between path and band edge
    - max_band_iterations: attempts before giving up with BandExhaustedError
    - timeout_seconds: optional deadline for the whole search
    """

    INITIAL_BAND_RADIUS = 20
    BAND_INCREMENT_RATIO = 1.5
    MIN_BAND_MARGIN = 5
    MAX_BAND_ITERATIONS = 32

    def __init__(
        self,
        algorithm_factory: AlgorithmFactory,
        calculator: Calculator,
        category_map: CategoryMap = BEST_CATEGORY_MAP,
        **config,
    ):
        super().__init__(**config)
        self.algorithm_factory = algorithm_factory
        self.calculator = calculator
        self.category_map = category_map

        self.initial_band_radius = config.get(
            "initial_band_radius", self.INITIAL_BAND_RADIUS
        )
        self.band_increment_ratio = config.get(
            "band_increment_ratio", self.BAND_INCREMENT_RATIO
        )
        self.min_band_margin = config.get("min_band_margin", self.MIN_BAND_MARGIN)
        self.max_band_iterations = config.get(
            "max_band_iterations", self.MAX_BAND_ITERATIONS
        )
        self.timeout_seconds = config.get("timeout_seconds")

        if self.initial_band_radius < 1:
            raise ConfigurationError(
                "initial_band_radius must be >= 1", "initial_band_radius"
            )
        if self.band_increment_ratio <= 1.0:
            raise ConfigurationError(
                "band_increment_ratio must be > 1", "band_increment_ratio"
            )
        if self.min_band_margin < 0:
            raise ConfigurationError("min_band_margin must be >= 0", "min_band_margin")
        if self.max_band_iterations < 1:
            raise ConfigurationError(
                "max_band_iterations must be >= 1", "max_band_iterations"
            )

    def align(
        self, source_segments: Sequence[str], target_segments: Sequence[str]
    ) -> List[Alignment]:
        source_segments = tuple(source_segments)
        target_segments = tuple(target_segments)
        source_count = len(source_segments)
        target_count = len(target_segments)
        deadline = Deadline(self.timeout_seconds) if self.timeout_seconds else None

        band_radius = self.initial_band_radius / self.band_increment_ratio
        for iteration in range(1, self.max_band_iterations + 1):
            if deadline is not None:
                deadline.check()
            band_radius *= self.band_increment_ratio
            matrix_radius = max(1, int(band_radius))
            # Once the band spans every column widening changes nothing
            covers_matrix = matrix_radius >= source_count

            algorithm = self.algorithm_factory.create_algorithm(
                self.calculator,
                self.category_map,
                BandMatrixFactory(matrix_radius),
                deadline,
            )
            try:
                alignments = algorithm.align(source_segments, target_segments)
            except ReconstructionError as e:
                self.logger.debug(f"Band radius {band_radius:.1f} too narrow: {e}")
                if covers_matrix:
                    raise AlignmentImpossibleError(
                        "No alignment path exists for given segments"
                    ) from e
                continue

            if segment_counts(alignments) != (source_count, target_count):
                self.logger.debug(
                    f"Band radius {band_radius:.1f} produced incomplete alignment"
                )
                if covers_matrix:
                    raise AlignmentImpossibleError(
                        "No complete alignment path exists for given segments"
                    )
                continue

            deviation = max_deviation(alignments, source_count, target_count)
            self.logger.debug(
                f"Iteration {iteration}: band radius {band_radius:.1f}, "
                f"max deviation {deviation}"
            )
            if deviation + self.min_band_margin <= band_radius or covers_matrix:
                return alignments

        raise BandExhaustedError(self.max_band_iterations, band_radius)


def max_deviation(
    alignments: Sequence[Alignment], source_count: int, target_count: int
) -> int:
    """Largest distance in target segments between path and straight diagonal."""
    if source_count == 0:
        return 0
    ratio = target_count / source_count
    source_position = 0
    target_position = 0
    deviation = 0
    for alignment in alignments:
        source_position += len(alignment.source_segments)
        target_position += len(alignment.target_segments)
        expected = int(source_position * ratio)
        deviation = max(deviation, abs(target_position - expected))
    return deviation

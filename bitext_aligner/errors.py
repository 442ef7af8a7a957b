"""Exception hierarchy shared by all alignment components."""


class AlignerError(Exception):
    """Base class for every error raised by bitext_aligner."""


class ConfigurationError(AlignerError, ValueError):
    """Invalid parameter, empty training corpus or unusable vocabulary."""

    def __init__(self, message: str, parameter: str = None):
        self.parameter = parameter
        super().__init__(message)


class ReconstructionError(AlignerError):
    """Backtrace reached a matrix cell that was never computed.

    Usually means the band was too narrow for the optimal path.
    """

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(f"Cannot reconstruct alignment, cell ({x}, {y}) is missing")


class PositionOutsideBandError(AlignerError, IndexError):
    """Attempt to store a value outside of a band matrix."""

    def __init__(self, x: int, y: int, band_radius: int):
        self.x = x
        self.y = y
        self.band_radius = band_radius
        super().__init__(
            f"Position ({x}, {y}) lies outside of band with radius {band_radius}"
        )


class AlignmentImpossibleError(AlignerError):
    """No complete alignment path exists for the given input."""


class BandExhaustedError(AlignmentImpossibleError):
    """Adaptive band search gave up after too many widening attempts."""

    def __init__(self, iterations: int, band_radius: float):
        self.iterations = iterations
        self.band_radius = band_radius
        super().__init__(
            f"Band search did not converge after {iterations} iterations "
            f"(last radius {band_radius:.1f})"
        )


class AlignmentTimeoutError(AlignerError):
    """Deadline expired while aligning."""

    def __init__(self, seconds: float):
        self.seconds = seconds
        super().__init__(f"Alignment exceeded time limit of {seconds:.2f}s")


class FormatError(AlignerError):
    """Input document cannot be parsed."""

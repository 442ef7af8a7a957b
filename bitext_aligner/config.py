"""Default configuration and validation for aligners and macros."""

from typing import Any, Dict

from .errors import ConfigurationError

DEFAULT_CONFIG: Dict[str, Any] = {
    # Adaptive band search
    "initial_band_radius": 20,
    "band_increment_ratio": 1.5,
    "min_band_margin": 5,
    "max_band_iterations": 32,
    # Translation model training
    "train_iteration_count": 4,
    # Moore macro: fraction of one-to-one alignments used for training
    "select_fraction": 0.85,
    # None disables the deadline
    "timeout_seconds": None,
    # Algorithms used by the two Moore phases ("viterbi" or "fb")
    "length_algorithm": "viterbi",
    "content_algorithm": "fb",
}

ALGORITHM_NAMES = ("viterbi", "fb")


def merge_config(**config) -> Dict[str, Any]:
    """Overlay user config on DEFAULT_CONFIG and validate the result."""
    merged = {**DEFAULT_CONFIG, **config}
    validate_config(merged)
    return merged


def validate_config(config: Dict[str, Any]):
    """Raise ConfigurationError for out-of-range values."""
    unknown = set(config) - set(DEFAULT_CONFIG)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}"
        )

    if config["initial_band_radius"] < 1:
        raise ConfigurationError(
            "initial_band_radius must be >= 1", "initial_band_radius"
        )
    if config["band_increment_ratio"] <= 1.0:
        raise ConfigurationError(
            "band_increment_ratio must be > 1", "band_increment_ratio"
        )
    if config["min_band_margin"] < 0:
        raise ConfigurationError("min_band_margin must be >= 0", "min_band_margin")
    if config["max_band_iterations"] < 1:
        raise ConfigurationError(
            "max_band_iterations must be >= 1", "max_band_iterations"
        )
    if config["train_iteration_count"] < 1:
        raise ConfigurationError(
            "train_iteration_count must be >= 1", "train_iteration_count"
        )
    if not 0.0 <= config["select_fraction"] <= 1.0:
        raise ConfigurationError(
            "select_fraction must be between 0 and 1", "select_fraction"
        )
    timeout = config["timeout_seconds"]
    if timeout is not None and timeout <= 0:
        raise ConfigurationError("timeout_seconds must be positive", "timeout_seconds")
    for key in ("length_algorithm", "content_algorithm"):
        if config[key] not in ALGORITHM_NAMES:
            raise ConfigurationError(
                f"{key} must be one of {ALGORITHM_NAMES}, got {config[key]!r}", key
            )

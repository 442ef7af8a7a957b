from .formatter import AlFormatter, PlaintextFormatter, InfoFormatter, OutputFormatter

__all__ = [
    "AlFormatter",
    "PlaintextFormatter",
    "InfoFormatter",
    "OutputFormatter",
]

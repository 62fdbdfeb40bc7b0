"""Log reading and run logging."""

from .log_reader import (
    VOTE_PATTERN,
    iter_lines,
    extract_label,
    normalize_label,
    iter_labels,
)
from .logger import Logger

__all__ = [
    "VOTE_PATTERN",
    "iter_lines",
    "extract_label",
    "normalize_label",
    "iter_labels",
    "Logger",
]

"""Fixed-window moving averages with interchangeable naive and sliding-window methods."""

from __future__ import annotations

from window_average.averages import (
    METHODS,
    MovingAverageMethod,
    get_method,
    moving_average_cumsum,
    moving_average_naive,
    moving_average_optimized,
    output_length,
    validate_window,
)
from window_average.compare import ComparisonResult, compare_methods, default_atol

__all__ = [
    "METHODS",
    "MovingAverageMethod",
    "get_method",
    "moving_average_cumsum",
    "moving_average_naive",
    "moving_average_optimized",
    "output_length",
    "validate_window",
    "ComparisonResult",
    "compare_methods",
    "default_atol",
]

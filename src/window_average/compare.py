"""Cross-check moving-average methods against each other.

The naive and sliding-window methods accumulate rounding error
differently, so agreement is judged with a tolerance rather than exact
equality. The absolute part of the tolerance scales with the magnitude of
the input, so windows whose mean is close to zero are not held to
bit-exact agreement. NaN positions must line up for two outputs to count
as equivalent; the naive method only poisons windows containing a NaN
while the running sum stays NaN once one enters, so inputs with NaN
usually compare as not equivalent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

import numpy as np

from window_average.averages import get_method, validate_window

DEFAULT_RTOL = 1e-9


@dataclass(frozen=True)
class ComparisonResult:
    """Result container for a method comparison."""

    window: int
    methods: Tuple[str, ...]
    n_inputs: int
    n_outputs: int
    max_abs_diff: float
    atol: float
    equivalent: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Non-finite ``max_abs_diff`` becomes ``None`` so the output stays
        strict JSON.
        """
        return {
            "window": self.window,
            "methods": list(self.methods),
            "n_inputs": self.n_inputs,
            "n_outputs": self.n_outputs,
            "max_abs_diff": self.max_abs_diff if math.isfinite(self.max_abs_diff) else None,
            "atol": self.atol,
            "equivalent": self.equivalent,
        }


def default_atol(data: Sequence[float], rtol: float = DEFAULT_RTOL) -> float:
    """Absolute tolerance floor: ``rtol * max(1, max|finite data|)``."""
    values = np.asarray(data, dtype=float)
    finite = values[np.isfinite(values)]
    scale = float(np.max(np.abs(finite))) if finite.size else 0.0
    return rtol * max(1.0, scale)


def compare_methods(
    data: Sequence[float],
    window: int,
    methods: Sequence[str] = ("naive", "optimized"),
    *,
    rtol: float = DEFAULT_RTOL,
    atol: float | None = None,
) -> ComparisonResult:
    """Run several methods on the same input and check they agree.

    Parameters
    ----------
    data : Sequence[float]
        Input values.
    window : int
        Window size, must be > 0.
    methods : Sequence[str], optional
        Registry names of the methods to compare. The first one is the
        reference. Default ("naive", "optimized").
    rtol : float, optional
        Relative tolerance passed to ``np.allclose``. Default 1e-9.
    atol : float | None, optional
        Absolute tolerance. ``None`` (default) uses :func:`default_atol`.

    Returns
    -------
    ComparisonResult
        ``max_abs_diff`` is the largest finite difference to the reference,
        ``nan`` if no finite pair exists.

    Raises
    ------
    ValueError
        If fewer than two methods are given, window <= 0 or atol < 0.
    KeyError
        If a method name is unknown.
    """
    window = validate_window(window)
    methods = tuple(methods)
    if len(methods) < 2:
        raise ValueError(f"need at least two methods to compare, got {len(methods)}")
    if atol is None:
        atol = default_atol(data, rtol)
    elif atol < 0:
        raise ValueError(f"atol must be >= 0, got {atol}")

    outputs = [np.asarray(get_method(name)(data, window), dtype=float) for name in methods]
    reference = outputs[0]

    equivalent = True
    diffs = []
    for other in outputs[1:]:
        if other.shape != reference.shape:
            equivalent = False
            continue
        if not np.allclose(other, reference, rtol=rtol, atol=atol, equal_nan=True):
            equivalent = False
        finite = np.isfinite(other) & np.isfinite(reference)
        if finite.any():
            diffs.append(float(np.max(np.abs(other[finite] - reference[finite]))))

    return ComparisonResult(
        window=window,
        methods=methods,
        n_inputs=len(data),
        n_outputs=int(reference.size),
        max_abs_diff=max(diffs) if diffs else float("nan"),
        atol=float(atol),
        equivalent=equivalent,
    )

"""Timing harness for the moving-average methods."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, Iterable, Sequence

import numpy as np
import pandas as pd

from window_average.averages import METHODS, get_method, validate_window


@dataclass(frozen=True)
class BenchmarkResult:
    """Wall-clock timings for one method on one input."""

    method: str
    n: int
    window: int
    repeats: int
    best_sec: float
    mean_sec: float

    def to_dict(self) -> Dict[str, float | int | str]:
        return {
            "method": self.method,
            "n": self.n,
            "window": self.window,
            "repeats": self.repeats,
            "best_sec": self.best_sec,
            "mean_sec": self.mean_sec,
        }


def time_method(
    method_name: str,
    data: Sequence[float],
    window: int,
    repeats: int = 5,
) -> BenchmarkResult:
    """Time ``repeats`` runs of a registered method on ``data``."""
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")
    window = validate_window(window)
    func = get_method(method_name)

    timings = []
    for _ in range(repeats):
        start = time.perf_counter()
        func(data, window)
        timings.append(time.perf_counter() - start)

    return BenchmarkResult(
        method=method_name,
        n=len(data),
        window=window,
        repeats=repeats,
        best_sec=float(min(timings)),
        mean_sec=float(np.mean(timings)),
    )


def run_benchmark(
    sizes: Iterable[int],
    window: int,
    methods: Sequence[str] | None = None,
    repeats: int = 3,
    seed: int = 42,
) -> pd.DataFrame:
    """Benchmark each method over random inputs of the given sizes.

    Parameters
    ----------
    sizes : Iterable[int]
        Input lengths to try. Lengths below ``window`` are skipped.
    window : int
        Window size.
    methods : Sequence[str] | None, optional
        Registry names. Default: every registered method.
    repeats : int, optional
        Runs per (size, method). Default 3.
    seed : int, optional
        Seed for the random input. Default 42.

    Returns
    -------
    pd.DataFrame
        One row per (size, method) with the ``BenchmarkResult`` fields.
    """
    window = validate_window(window)
    names = list(methods) if methods is not None else list(METHODS)
    rng = np.random.default_rng(seed)

    rows = []
    for n in sizes:
        if n < window:
            print(f"[warn] skip n={n}: shorter than window={window}")
            continue
        data = rng.normal(100.0, 5.0, n).tolist()
        for name in names:
            result = time_method(name, data, window, repeats=repeats)
            rows.append(result.to_dict())
            print(f"[bench] {name:<9} n={n} best={result.best_sec:.6f}s")

    columns = ["method", "n", "window", "repeats", "best_sec", "mean_sec"]
    return pd.DataFrame(rows, columns=columns)

"""固定ウィンドウの単純移動平均 (SMA) を計算する。

Three interchangeable methods share one contract:

- ``moving_average_naive``: recomputes every window sum, O(n * k).
- ``moving_average_optimized``: slides a running sum, O(n).
- ``moving_average_cumsum``: numpy prefix sums, O(n).

Output element ``i`` is the mean of ``data[i : i + k]`` and the output has
``max(0, n - k + 1)`` elements. The naive and optimized methods agree within
floating-point tolerance, not bit-exactly. The cumsum error scales with the
prefix-sum magnitude instead (see ``moving_average_cumsum``).
"""

from __future__ import annotations

import numbers
from typing import Callable, Dict, Sequence

import numpy as np

MovingAverageMethod = Callable[[Sequence[float], int], list[float]]


def validate_window(window: int) -> int:
    """ウィンドウサイズを検証して int で返す。

    Raises:
        TypeError: 整数でない場合 (bool も不可)。
        ValueError: window <= 0 の場合。
    """
    if isinstance(window, bool) or not isinstance(window, numbers.Integral):
        raise TypeError(f"window must be an integer, got {type(window).__name__}")
    window = int(window)
    if window <= 0:
        raise ValueError(f"window must be > 0, got {window}")
    return window


def output_length(n: int, window: int) -> int:
    """Number of full windows in a sequence of length ``n``."""
    window = validate_window(window)
    return max(0, n - window + 1)


def _as_floats(data: Sequence[float]) -> list[float]:
    return [float(v) for v in data]


def moving_average_naive(data: Sequence[float], window: int) -> list[float]:
    """Moving average that re-sums each window from scratch.

    Args:
        data: 数値のシーケンス。
        window: ウィンドウサイズ (> 0)。

    Returns:
        長さ max(0, len(data) - window + 1) の移動平均のリスト。
        len(data) < window の場合は空リスト。
    """
    k = validate_window(window)
    values = _as_floats(data)

    out: list[float] = []
    for i in range(k - 1, len(values)):
        total = 0.0
        # 終端 i から k 個さかのぼって合計
        for j in range(k):
            total += values[i - j]
        out.append(total / k)
    return out


def moving_average_optimized(data: Sequence[float], window: int) -> list[float]:
    """Moving average with an incrementally updated window sum.

    The first window is summed once. Each later step adds the incoming
    element and subtracts the outgoing one, so a NaN stays in the running
    sum for every window after it enters.
    """
    k = validate_window(window)
    values = _as_floats(data)
    n = len(values)
    if n < k:
        return []

    total = 0.0
    for i in range(k):
        total += values[i]
    out: list[float] = [total / k]

    for i in range(k, n):
        total = total - values[i - k] + values[i]
        out.append(total / k)
    return out


def moving_average_cumsum(data: Sequence[float], window: int) -> list[float]:
    """累積和を用いて O(n) で SMA を計算する (numpy ベクトル化版)。

    Window sums are differences of prefix sums, so their absolute error
    grows with the magnitude of the running total, not of the window. Small
    values after a large prefix can be lost entirely; use the naive or
    optimized method when that matters. ``window == 1`` returns the input
    values unchanged.
    """
    k = validate_window(window)
    values = _as_floats(data)
    if k == 1:
        return values
    if len(values) < k:
        return []

    arr = np.asarray(values, dtype=np.float64)

    cumsum = np.concatenate(([0.0], np.cumsum(arr)))
    sums = cumsum[k:] - cumsum[:-k]
    return (sums / k).tolist()


METHODS: Dict[str, MovingAverageMethod] = {
    "naive": moving_average_naive,
    "optimized": moving_average_optimized,
    "cumsum": moving_average_cumsum,
}


def get_method(name: str) -> MovingAverageMethod:
    """Look up a moving-average method by its registry name."""
    try:
        return METHODS[name]
    except KeyError:
        available = ", ".join(METHODS)
        raise KeyError(f"unknown method '{name}' (available: {available})") from None

"""Fixed-point rendering of value series to an explicit output stream."""

from __future__ import annotations

from typing import Iterable, TextIO


def format_values(values: Iterable[float], precision: int = 2) -> str:
    """Render values as ``[ 10.00 12.00 ]`` with ``precision`` decimals."""
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    body = "".join(f"{float(v):.{precision}f} " for v in values)
    return f"[ {body}]"


def write_series(
    title: str,
    values: Iterable[float],
    stream: TextIO,
    precision: int = 2,
) -> None:
    stream.write(f"{title}\n")
    stream.write(format_values(values, precision) + "\n\n")

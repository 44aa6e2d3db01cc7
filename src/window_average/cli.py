"""Moving-average demo: run the methods side by side and print the results.

Usage:
    window-average
    window-average --window 4 --methods naive optimized cumsum
    window-average --data-file data/prices.csv --column close --out artifacts/ma.json
    window-average --benchmark-sizes 1000 10000 --window 50
"""

from __future__ import annotations

import argparse
import json
import math
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence, TextIO

from window_average.averages import get_method, validate_window
from window_average.benchmark import run_benchmark
from window_average.compare import compare_methods
from window_average.config import DemoConfig, load_demo_config
from window_average.formatting import write_series
from window_average.io import load_series

METHOD_LABELS = {
    "naive": "Naive (O(n*k)) method",
    "optimized": "Optimized (O(n)) 'Sliding Window' method",
    "cumsum": "Cumulative-sum (O(n)) method",
}


def resolve_data(config: DemoConfig) -> List[float]:
    if config.data_file is not None:
        return load_series(config.data_file, config.column)
    return [float(v) for v in config.data]


def run_demo(config: DemoConfig, stream: TextIO) -> Dict[str, Any]:
    """Write the side-by-side report for ``config`` to ``stream``.

    Returns a JSON-serialisable summary with each method's output and the
    comparison verdict.
    """
    data = resolve_data(config)
    k = validate_window(config.window)
    precision = config.precision

    duplicates = sorted({m for m in config.methods if config.methods.count(m) > 1})
    if duplicates:
        raise ValueError(f"duplicate method names: {', '.join(duplicates)}")

    # 全メソッドを先に解決し、未知の名前は計算前にエラーにする
    funcs = [(name, get_method(name)) for name in config.methods]

    stream.write(f"--- Moving Average Calculation (Window Size = {k}) ---\n\n")
    write_series("Original Data:", data, stream, precision)

    results: Dict[str, List[float]] = {}
    for name, func in funcs:
        label = METHOD_LABELS.get(name, f"'{name}' method")
        stream.write(f"Calculating with {label}...\n")
        results[name] = func(data, k)
        write_series(f"{name.capitalize()} Result:", results[name], stream, precision)

    summary: Dict[str, Any] = {"window": k, "n_inputs": len(data), "results": results}

    if len(funcs) >= 2:
        comparison = compare_methods(
            data, k, config.methods, rtol=config.rtol, atol=config.atol
        )
        summary["comparison"] = comparison.to_dict()
        if comparison.equivalent:
            subject = "Both methods" if len(funcs) == 2 else "All methods"
            stream.write(f"Comparison complete. {subject} yield the same result.\n")
        else:
            stream.write(
                "Comparison complete. Methods disagree "
                f"(max_abs_diff={comparison.max_abs_diff:.3e}).\n"
            )
    return summary


def _json_safe(obj: Any) -> Any:
    """Replace non-finite floats with None so the summary is strict JSON."""
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if isinstance(obj, dict):
        return {key: _json_safe(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_json_safe(value) for value in obj]
    return obj


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Compare moving-average methods on a series.")
    ap.add_argument("--config", type=str, default=None, help="YAML with a 'moving_average' section")
    ap.add_argument("--data-file", type=str, default=None, help="CSV/parquet input")
    ap.add_argument("--column", type=str, default=None)
    ap.add_argument("--window", type=int, default=None)
    ap.add_argument("--precision", type=int, default=None)
    ap.add_argument("--methods", nargs="+", default=None)
    ap.add_argument("--atol", type=float, default=None, help="absolute tolerance for the comparison")
    ap.add_argument("--out", type=str, default=None, help="write JSON summary here")
    ap.add_argument("--benchmark-sizes", type=int, nargs="+", default=None)
    ap.add_argument("--repeats", type=int, default=3)
    return ap


def _apply_overrides(config: DemoConfig, args: argparse.Namespace) -> DemoConfig:
    if args.data_file is not None:
        config.data_file = args.data_file
    if args.column is not None:
        config.column = args.column
    if args.window is not None:
        config.window = args.window
    if args.precision is not None:
        config.precision = args.precision
    if args.methods is not None:
        config.methods = tuple(args.methods)
    if args.atol is not None:
        config.atol = args.atol
    return config


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_demo_config(args.config) if args.config else DemoConfig()
        config = _apply_overrides(config, args)
        if args.config:
            print(f"[info] config: {args.config}")
        if config.data_file is not None:
            print(f"[info] data file: {config.data_file}")

        summary = run_demo(config, sys.stdout)

        if args.benchmark_sizes:
            print(f"[info] benchmark: sizes={args.benchmark_sizes} repeats={args.repeats}")
            bench = run_benchmark(
                args.benchmark_sizes, config.window, config.methods, repeats=args.repeats
            )
            summary["benchmark"] = bench.to_dict(orient="records")
    except (ValueError, KeyError, TypeError, FileNotFoundError) as e:
        print(f"[error] {e}")
        return 2

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w") as f:
            json.dump(_json_safe(summary), f, indent=2, allow_nan=False)
        print(f"[ok] saved summary -> {out_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

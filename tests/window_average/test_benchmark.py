"""Tests for the timing harness."""

from __future__ import annotations

import pandas as pd
import pytest

from window_average.benchmark import BenchmarkResult, run_benchmark, time_method


class TestTimeMethod:

    def test_basic(self):
        result = time_method("optimized", [1.0] * 100, 10, repeats=3)

        assert isinstance(result, BenchmarkResult)
        assert result.method == "optimized"
        assert result.n == 100
        assert result.window == 10
        assert result.repeats == 3
        assert 0.0 <= result.best_sec <= result.mean_sec

    def test_invalid_repeats(self):
        with pytest.raises(ValueError, match="repeats must be >= 1"):
            time_method("naive", [1.0, 2.0], 1, repeats=0)

    def test_unknown_method(self):
        with pytest.raises(KeyError):
            time_method("fft", [1.0, 2.0], 1)

    def test_to_dict_keys(self):
        d = time_method("naive", [1.0, 2.0, 3.0], 2, repeats=1).to_dict()
        assert list(d) == ["method", "n", "window", "repeats", "best_sec", "mean_sec"]


class TestRunBenchmark:

    def test_rows_per_size_and_method(self, capsys):
        df = run_benchmark([50, 100], 5, ["naive", "optimized"], repeats=1)

        assert isinstance(df, pd.DataFrame)
        assert len(df) == 4
        assert df["method"].tolist() == ["naive", "optimized", "naive", "optimized"]
        assert df["n"].tolist() == [50, 50, 100, 100]
        assert (df["window"] == 5).all()
        assert "[bench]" in capsys.readouterr().out

    def test_default_methods(self):
        df = run_benchmark([20], 3, repeats=1)
        assert set(df["method"]) == {"naive", "optimized", "cumsum"}

    def test_skips_sizes_below_window(self, capsys):
        df = run_benchmark([2, 30], 5, ["optimized"], repeats=1)

        assert df["n"].tolist() == [30]
        assert "[warn] skip n=2" in capsys.readouterr().out

    def test_all_sizes_skipped(self):
        df = run_benchmark([1], 5, repeats=1)
        assert df.empty
        assert list(df.columns) == ["method", "n", "window", "repeats", "best_sec", "mean_sec"]

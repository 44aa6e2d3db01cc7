"""Shared pytest setup for the window_average tests.

`src/` is prepended to ``sys.path`` so the suite also runs from a plain
checkout without ``pip install -e .``.
"""

import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def sample_data() -> list[float]:
    """元のデモで使っていたサンプル系列。"""
    return [10.0, 12.0, 11.0, 13.0, 15.0, 14.0, 16.0, 18.0, 17.0]

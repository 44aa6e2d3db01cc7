"""Loading input series from tabular files."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

READERS = {
    ".csv": pd.read_csv,
    ".parquet": pd.read_parquet,
}


def load_table(path: str | Path) -> pd.DataFrame:
    """Read a CSV or parquet file into a DataFrame, chosen by file suffix.

    Raises:
        ValueError: 対応していない拡張子の場合。
        FileNotFoundError: ファイルが存在しない場合 (pandas から送出)。
    """
    path = Path(path)
    reader = READERS.get(path.suffix.lower())
    if reader is None:
        supported = ", ".join(READERS)
        raise ValueError(
            f"cannot read series from '{path.name}': "
            f"unsupported extension '{path.suffix}' (supported: {supported})"
        )
    return reader(path)


def load_series(path: str | Path, column: str | None = None) -> list[float]:
    """Read one numeric column of a CSV/parquet file as floats.

    With ``column=None`` the first numeric column is used. Missing cells
    are kept as NaN.
    """
    df = load_table(path)
    if column is None:
        numeric = df.select_dtypes(include="number").columns.tolist()
        if not numeric:
            raise ValueError(f"no numeric column in {path}")
        column = numeric[0]
    elif column not in df.columns:
        raise KeyError(f"column '{column}' not found in {path}")

    return df[column].astype(float).tolist()

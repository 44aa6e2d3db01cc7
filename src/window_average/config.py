"""Demo configuration: dataclass defaults plus an optional YAML override."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

# 元のデモで使っていたサンプル系列
SAMPLE_DATA: tuple[float, ...] = (10.0, 12.0, 11.0, 13.0, 15.0, 14.0, 16.0, 18.0, 17.0)

CONFIG_SECTION = "moving_average"


@dataclass
class DemoConfig:
    """Settings for one demo run.

    ``data_file`` takes precedence over ``data`` when set. ``atol=None``
    lets the comparison scale its absolute tolerance to the data.
    """

    data: tuple[float, ...] = SAMPLE_DATA
    window: int = 3
    precision: int = 2
    methods: tuple[str, ...] = ("naive", "optimized")
    rtol: float = 1e-9
    atol: float | None = None
    data_file: str | None = None
    column: str | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "DemoConfig":
        """Mapping (e.g., YAML section) から DemoConfig を生成する。"""
        data = mapping.get("data", SAMPLE_DATA)
        methods = mapping.get("methods", ("naive", "optimized"))
        if isinstance(methods, str):
            methods = (methods,)
        data_file = mapping.get("data_file")
        column = mapping.get("column")
        atol = mapping.get("atol")

        return cls(
            data=tuple(float(v) for v in data),
            window=int(mapping.get("window", 3)),
            precision=int(mapping.get("precision", 2)),
            methods=tuple(str(m) for m in methods),
            rtol=float(mapping.get("rtol", 1e-9)),
            atol=float(atol) if atol is not None else None,
            data_file=str(data_file) if data_file is not None else None,
            column=str(column) if column is not None else None,
        )


def load_demo_config(config_path: str | Path) -> DemoConfig:
    """設定 YAML を読み込み :class:`DemoConfig` を生成する。"""
    path = Path(config_path).resolve()
    with path.open("r", encoding="utf-8") as fh:
        full_cfg: Mapping[str, Any] = yaml.safe_load(fh) or {}

    section = full_cfg.get(CONFIG_SECTION, {}) or {}
    return DemoConfig.from_mapping(section)

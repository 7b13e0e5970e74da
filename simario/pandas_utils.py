from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any, cast

import pandas as pd


def is_missing_scalar(value: object) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(cast("Any", value)))
    except (TypeError, ValueError):
        return False


def clean_text(raw: object) -> str:
    """Return ``raw`` as stripped text, with missing values as ``""``."""
    if raw is None:
        return ""
    if isinstance(raw, float) and math.isnan(raw):
        return ""
    if is_missing_scalar(raw):
        return ""
    if isinstance(raw, str):
        return raw.strip()
    return str(raw).strip()


def ensure_frame(table: object) -> pd.DataFrame:
    if isinstance(table, pd.DataFrame):
        return table
    if isinstance(table, Mapping):
        return pd.DataFrame(cast("Mapping[str, Any]", table))
    if isinstance(table, Iterable) and not isinstance(table, (str, bytes)):
        return pd.DataFrame(list(cast("Iterable[Any]", table)))
    raise TypeError(f"expected a table of rows, got {type(table).__name__}")


def find_column(df: pd.DataFrame, options: list[str]) -> str | None:
    """Find a column by trying various name options (case-insensitive)."""
    for opt in options:
        if opt in df.columns:
            return opt
        for col in df.columns:
            if str(col).strip().lower() == opt.lower():
                return col
    return None

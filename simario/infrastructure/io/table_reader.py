"""Reader for the descriptions and codings source tables.

Dictionary sources are maintained as spreadsheets, so both CSV and Excel
files are accepted. Every cell is read as text and blank cells stay empty
strings, so a blank ``Varname`` row is recognisable as such.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

from ...constants import Defaults, FileTypes
from .exceptions import (
    DataParseError,
    DataSourceNotFoundError,
    UnsupportedFileTypeError,
)

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(slots=True)
class TableReadOptions:
    normalize_headers: bool = True
    encoding: str = Defaults.ENCODING
    sheet_name: str | int = 0
    dtype: Any = str


class TableReader:
    pass

    def __init__(self, options: TableReadOptions | None = None) -> None:
        super().__init__()
        self.options = options or TableReadOptions()

    def read(self, path: Path) -> pd.DataFrame:
        options = self.options
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        suffix = path.suffix.lower()
        if suffix not in FileTypes.CSV and suffix not in FileTypes.EXCEL:
            raise UnsupportedFileTypeError(
                f"Unsupported table file type '{path.suffix}': {path}"
            )
        try:
            if suffix in FileTypes.CSV:
                df = pd.read_csv(
                    path,
                    dtype=options.dtype,
                    keep_default_na=False,
                    encoding=options.encoding,
                )
            else:
                df = pd.read_excel(
                    path,
                    sheet_name=options.sheet_name,
                    engine="openpyxl" if suffix == ".xlsx" else "xlrd",
                    dtype=options.dtype,
                    keep_default_na=False,
                )
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse {path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"Table file is empty: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        except Exception as e:
            raise DataParseError(f"Unexpected error reading {path}: {e}") from e
        if df.shape[1] == 0:
            raise DataParseError(f"Table file has no columns: {path}")
        if options.normalize_headers:
            df = self._normalize_headers(df)
        return df

    def _normalize_headers(self, df: pd.DataFrame) -> pd.DataFrame:
        df.columns = [str(col).strip() for col in df.columns]
        return df

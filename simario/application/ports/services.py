from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_table_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None: ...

    def log_dictionary_loaded(
        self, *, descriptions_count: int, codings_count: int
    ) -> None: ...


@runtime_checkable
class CodingExpressionEvaluatorPort(Protocol):
    pass

    def evaluate(self, expr: str) -> list[tuple[str, object]]: ...


@runtime_checkable
class TableReaderPort(Protocol):
    pass

    def read(self, path: Path) -> pd.DataFrame: ...

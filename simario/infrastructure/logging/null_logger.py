from __future__ import annotations

from typing_extensions import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_table_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        return None

    @override
    def log_dictionary_loaded(
        self, *, descriptions_count: int, codings_count: int
    ) -> None:
        return None

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source: str = ""
    varname: str = ""


def _empty_stats() -> dict[str, int]:
    return {
        "tables_loaded": 0,
        "descriptions_loaded": 0,
        "codings_loaded": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_table_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        self._stats["tables_loaded"] += 1
        self.set_context(source=filename)
        msg = f"Loaded {row_count:,} rows from {filename}"
        if column_count is not None and self.verbosity >= LogLevel.DEBUG:
            msg += f" ({column_count} columns)"
        self.verbose(msg)

    @override
    def log_dictionary_loaded(
        self, *, descriptions_count: int, codings_count: int
    ) -> None:
        self._stats["descriptions_loaded"] += descriptions_count
        self._stats["codings_loaded"] += codings_count
        self.verbose(
            f"Dictionary: {descriptions_count} descriptions, {codings_count} codings"
        )

    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Dictionary Statistics:[/dim]")
            self.console.print(
                f"[dim]  Tables loaded: {self._stats['tables_loaded']}[/dim]"
            )
            self.console.print(
                f"[dim]  Descriptions: {self._stats['descriptions_loaded']:,}[/dim]"
            )
            self.console.print(
                f"[dim]  Codings: {self._stats['codings_loaded']:,}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.source:
            parts.append(self._context.source)
        if self._context.varname:
            parts.append(self._context.varname)
        return escape(f"[{':'.join(parts)}] ") if parts else ""

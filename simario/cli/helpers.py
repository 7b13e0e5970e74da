"""Helper functions for CLI operations.

Shared options and dictionary loading for the ``simario`` commands.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import click
from rich.console import Console

from ..config import ConfigLoader
from ..domain.exceptions import DictionaryError
from ..infrastructure.expressions.coding_expression import CodingExpressionError
from ..infrastructure.io.exceptions import DataSourceError
from ..infrastructure.logging.console_logger import ConsoleLogger
from ..infrastructure.repositories.dictionary_repository import DictionaryRepository

if TYPE_CHECKING:
    from ..domain.services.dictionary import Dictionary

console = Console()

F = TypeVar("F", bound=Callable[..., Any])


def dictionary_options(command: F) -> F:
    """Add the options that locate the dictionary files to ``command``."""
    options = [
        click.option(
            "--descriptions",
            "descriptions_file",
            type=click.Path(path_type=Path),
            help="Descriptions table (CSV or Excel). Overrides the config file.",
        ),
        click.option(
            "--codings",
            "codings_file",
            type=click.Path(path_type=Path),
            help="Codings table (CSV or Excel). Overrides the config file.",
        ),
        click.option(
            "--config",
            "config_file",
            type=click.Path(path_type=Path),
            help="Path to simario.toml.",
        ),
        click.option("-v", "--verbose", "verbosity", count=True),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def load_dictionary_from_options(
    descriptions_file: Path | None,
    codings_file: Path | None,
    config_file: Path | None,
    verbosity: int,
) -> Dictionary:
    """Load the dictionary named by the CLI options.

    Raises:
        click.ClickException: the files cannot be read or evaluated.
    """
    config = ConfigLoader.load(config_file)
    if descriptions_file is not None:
        config = replace(config, descriptions_file=descriptions_file)
    if codings_file is not None:
        config = replace(config, codings_file=codings_file)
    logger = ConsoleLogger(console, verbosity)
    repository = DictionaryRepository(config=config, logger=logger)
    try:
        dictionary = repository.load()
    except (DataSourceError, DictionaryError, CodingExpressionError) as e:
        raise click.ClickException(str(e)) from e
    logger.log_final_stats()
    return dictionary

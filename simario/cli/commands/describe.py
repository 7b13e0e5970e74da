from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from ...domain.exceptions import UnknownVariableError
from ..helpers import console, dictionary_options, load_dictionary_from_options


@click.command()
@click.argument("varnames", nargs=-1, required=True)
@dictionary_options
def describe_command(
    varnames: tuple[str, ...],
    descriptions_file: Path | None,
    codings_file: Path | None,
    config_file: Path | None,
    verbosity: int,
) -> None:
    """Show the description and category labels of VARNAMES."""
    dictionary = load_dictionary_from_options(
        descriptions_file, codings_file, config_file, verbosity
    )
    table = Table(title="Data Dictionary")
    table.add_column("Variable", style="cyan")
    table.add_column("Description")
    table.add_column("Categories")
    labels = dictionary.coding_labels_for(varnames)
    for varname in varnames:
        try:
            description = dictionary.describe(varname)
        except UnknownVariableError as e:
            raise click.ClickException(str(e)) from e
        categories = labels[varname]
        table.add_row(varname, description, ", ".join(categories or ()))
    console.print(table)

from __future__ import annotations

from pathlib import Path
from typing import cast

import click
from rich.table import Table

from ...domain.exceptions import MalformedFlattenedCodeError
from ..helpers import console, dictionary_options, load_dictionary_from_options


@click.command()
@click.argument("varname")
@click.argument("codes", nargs=-1, required=True)
@click.option(
    "--group-by",
    "grpby_tag",
    help="Grouping variable; CODES are then flattened codes like '2 1'.",
)
@dictionary_options
def codes_command(
    varname: str,
    codes: tuple[str, ...],
    grpby_tag: str | None,
    descriptions_file: Path | None,
    codings_file: Path | None,
    config_file: Path | None,
    verbosity: int,
) -> None:
    """Show the category labels of CODES of VARNAME."""
    dictionary = load_dictionary_from_options(
        descriptions_file, codings_file, config_file, verbosity
    )
    try:
        labels = cast(
            "list[object]",
            dictionary.match_flattened_codes(list(codes), varname, grpby_tag),
        )
    except MalformedFlattenedCodeError as e:
        raise click.BadParameter(str(e), param_hint="CODES") from e
    table = Table(title=f"Categories of {varname}")
    table.add_column("Code", style="cyan")
    table.add_column("Label")
    for code, label in zip(codes, labels, strict=True):
        table.add_row(code, "[dim]no label[/dim]" if label is None else str(label))
    console.print(table)

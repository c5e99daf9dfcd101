"""Main CLI application entry point.

Defines the Typer application: ``srdfilter <inputDir> <outputDir>``.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from srdfilter import __version__
from srdfilter.cli.display import create_report_table, print_report_summary
from srdfilter.filtering.tree import TreeFilter, TreeFilterError
from srdfilter.utils.formatting import (
    configure_logging,
    console,
    err_console,
    print_error,
    print_success,
)

USAGE = "srdfilter <inputDir> <outputDir>"

app = typer.Typer(
    name="srdfilter",
    help="Strip Unearthed Arcana, playtest and homebrew content from a JSON data tree.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"srdfilter version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    input_dir: Annotated[
        Path | None,
        typer.Argument(
            help="Directory tree to read.",
            show_default=False,
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Argument(
            help="Directory to write the filtered mirror to (created if absent).",
            show_default=False,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging and list every entry.",
        ),
    ] = False,
) -> None:
    """Write a copy of INPUT_DIR to OUTPUT_DIR without excluded content.

    Files and directories whose names match a block pattern are skipped,
    JSON files lose every object whose [bold]source[/bold] matches a block
    pattern, and all other files are copied unchanged.
    """
    if input_dir is None or output_dir is None:
        err_console.print(f"Usage: {USAGE}", markup=False)
        raise typer.Exit(code=1)

    configure_logging(verbose)

    try:
        report = TreeFilter().run(input_dir, output_dir)
    except TreeFilterError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if verbose:
        console.print(create_report_table(report))
    print_report_summary(report)
    print_success(f"Filtering complete. Output: {escape(str(output_dir))}")


if __name__ == "__main__":
    app()

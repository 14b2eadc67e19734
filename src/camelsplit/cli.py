import json
import logging

from pathlib import Path
from rich.console import Console
from typing import Optional

import typer

from camelsplit import __version__
from camelsplit.config import load_split_config
from camelsplit.tokenizer import split as split_value

app = typer.Typer(
    help="camelsplit - split CamelCase identifiers into words",
    no_args_is_help=True,
)

console = Console()


@app.command()
def split(
    values: list[str] = typer.Argument(..., help="Strings to split"),
    no_split: list[str] = typer.Option(
        [],
        "--no-split",
        "-n",
        help="A word that must never be split (repeatable)",
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Directory holding the .camelsplit file (defaults to the current directory)",
    ),
):
    """Split CamelCase strings into words.

    Args:
        values: The strings to split
        no_split: Extra words to keep together, on top of the configured ones

    Examples:
        camelsplit split PDFLoader
        camelsplit split UsesTls2Now -n Tls2
    """
    try:
        config = load_split_config(config_dir)
        words = config.no_split_words + list(no_split)

        if len(values) == 1:
            output = split_value(values[0], words)
        else:
            output = {value: split_value(value, words) for value in values}
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    typer.echo(json.dumps(output, indent=2))


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"camelsplit version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

"""Command line interface for PDF tools."""

from importlib.metadata import PackageNotFoundError, version as metadata_version
from typing import Annotated, Optional

import typer

from pdftools_cli.console.console import Console
from pdftools_cli.commands.pdf import app as pdf_command


# Create typer app
app = typer.Typer(
    name='pdftools',
    help='Split, inspect, compress and trim PDF files.',
    no_args_is_help=True,
    add_completion=False,
    pretty_exceptions_enable=False,
)

# Create Flexoki-themed console
console = Console()


def version_callback(value: bool):
    if value:
        try:
            pdftools_version = metadata_version('pdftools')
        except PackageNotFoundError:
            pdftools_version = 'Development version'

        console.info(f'PDF tools version: {pdftools_version}')
        raise typer.Exit()


@app.callback()
def callback(
    version: Annotated[
        Optional[bool],
        typer.Option(
            '--version',
            callback=version_callback,
            is_eager=True,
            help='Show PDF tools version',
        ),
    ] = None,
):
    """Define the common command options"""


app.add_typer(pdf_command)


def main():
    """Entry point for the CLI."""
    app()

"""Main CLI entry point for formwright"""

import typer

from formwright.__version__ import __version__
from formwright.cli.commands import show as show_module
from formwright.cli.commands import validate as validate_module

app = typer.Typer(
    name="formwright",
    help="formwright - field metadata and template resolution for conversational forms",
    add_completion=False,
)

# Register commands
app.command(name="validate")(validate_module.validate)
app.command(name="show")(show_module.show)


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"formwright version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """formwright - field metadata and template resolution for conversational forms"""
    pass


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()

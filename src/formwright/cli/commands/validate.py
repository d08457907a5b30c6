"""Validate command: load, build and resolve a configuration."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from formwright.catalog import FormCatalog
from formwright.config.loader import ConfigLoader
from formwright.core.errors import FormwrightError
from formwright.observability.logging import setup_logging

console = Console()


def validate(
    config: Path = typer.Argument(..., help="Path to a YAML file or directory", exists=True),
) -> None:
    """Resolve every template of every form and report problems."""
    try:
        loaded = ConfigLoader.load(config)
        setup_logging(loaded.settings.log_level)
        catalog = FormCatalog.from_config(loaded)
    except FormwrightError as e:
        console.print(f"[red]Invalid config:[/] {escape(str(e))}")
        raise typer.Exit(1)

    for name in catalog.names:
        form = catalog.form(name)
        console.print(f"[green]✓[/] {name}: {len(form.schema.fields)} field(s)")
    console.print(f"{len(catalog)} form(s) resolved from {config}")

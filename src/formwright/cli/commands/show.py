"""Show command: print the resolved template of a field."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from formwright.catalog import FormCatalog
from formwright.config.loader import ConfigLoader
from formwright.core.constants import TemplateUsage
from formwright.core.errors import FormwrightError
from formwright.observability.logging import setup_logging

console = Console()


def show(
    config: Path = typer.Argument(..., help="Path to a YAML file or directory", exists=True),
    form: str = typer.Argument(..., help="Form name"),
    field: str | None = typer.Argument(None, help="Field name (omit for the form itself)"),
    usage: TemplateUsage = typer.Option(TemplateUsage.PROMPT, "--usage", "-u"),
) -> None:
    """Print resolved options, patterns and terms for one usage."""
    try:
        loaded = ConfigLoader.load(config)
        setup_logging(loaded.settings.log_level)
        resolved = FormCatalog.from_config(loaded).form(form)
        template = resolved.template(field, usage)
        request = resolved.prepare(field, usage)
    except FormwrightError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)

    title = f"{form}.{field}" if field else form
    table = Table(title=f"{title} ({usage.value})")
    table.add_column("Option")
    table.add_column("Value")
    for name, value in template.options.model_dump(mode="json").items():
        table.add_row(name, repr(value))
    console.print(table)

    console.print("[bold]Patterns[/]")
    for pattern in template.all_patterns():
        console.print(f"  {pattern}", markup=False)
    if request.terms:
        console.print("[bold]Terms[/]")
        for term in request.terms:
            console.print(f"  {term}", markup=False)

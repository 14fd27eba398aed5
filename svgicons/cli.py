#!/usr/bin/env python3
"""svgicons - inspect icon sets and render icons from the command line."""

import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.table import Table

from svgicons.builder import build_factory
from svgicons.components import ComponentCatalog
from svgicons.config.types import RegistryConfig
from svgicons.exceptions import ConfigurationError, SvgNotFound
from svgicons.factory import IconFactory
from svgicons.resources import get_user_config_path

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer() if sys.stdout.isatty()
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

app = typer.Typer(
    name="svgicons",
    help="Resolve namespaced icon names to SVG markup",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()

CONFIG_OPTION_HELP = "Path to icons.yaml (default: $SVGICONS_CONFIG or ~/.svgicons/icons.yaml)"


def error(text: str) -> str:
    return f"[red]{text}[/red]"


def success(text: str) -> str:
    return f"[green]{text}[/green]"


def _load_factory(config_path: Optional[Path]) -> IconFactory:
    """Load config and build the registry, exiting with an error on bad config."""
    path = config_path or get_user_config_path()
    try:
        return build_factory(RegistryConfig.from_yaml(path))
    except ConfigurationError as e:
        console.print(error(f"Invalid configuration in {path}: {e}"))
        raise typer.Exit(code=1)


def _parse_attributes(pairs: list[str]) -> dict[str, str]:
    attributes = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            console.print(error(f"Invalid attribute '{pair}', expected key=value"))
            raise typer.Exit(code=1)
        attributes[key] = value
    return attributes


@app.command("sets")
def sets_cmd(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """Show registered icon sets."""
    factory = _load_factory(config)
    registered = factory.all()
    if not registered:
        console.print("[dim]No icon sets configured.[/dim]")
        return

    table = Table(title="Icon sets")
    table.add_column("Name", style="cyan")
    table.add_column("Prefix", style="green")
    table.add_column("Source")
    table.add_column("Class", style="dim")
    for name, options in registered.items():
        if options.get("path") is not None:
            source = f"path:{options['path']}"
        else:
            source = f"disk:{options['disk']}"
        table.add_row(name, options["prefix"], source, options.get("class") or "")
    console.print(table)


@app.command("list")
def list_cmd(
    set_name: Optional[str] = typer.Argument(None, help="Only list icons from this set"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """List discovered icons as qualified names."""
    factory = _load_factory(config)
    registered = factory.all()
    if set_name is not None and set_name not in registered:
        console.print(error(f"Unknown icon set: {set_name}"))
        raise typer.Exit(code=1)

    catalog = ComponentCatalog()
    try:
        factory.register_components(catalog)
    except ConfigurationError as e:
        console.print(error(str(e)))
        raise typer.Exit(code=1)

    components = catalog.components
    if set_name is not None:
        components = catalog.for_prefix(registered[set_name]["prefix"])

    for component in components:
        console.print(component.tag, highlight=False)
    console.print(f"[dim]{len(components)} icon(s)[/dim]")


@app.command("show")
def show_cmd(
    name: str = typer.Argument(..., help="Qualified icon name, e.g. ui-arrow"),
    css_class: str = typer.Option("", "--class", help="Extra CSS classes"),
    attr: list[str] = typer.Option([], "--attr", "-a", help="Extra attribute as key=value (repeatable)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """Render an icon as inline SVG."""
    factory = _load_factory(config)
    attributes = _parse_attributes(attr)
    try:
        icon = factory.svg(name, css_class, attributes)
    except (SvgNotFound, ConfigurationError) as e:
        console.print(error(str(e)))
        raise typer.Exit(code=1)
    # Plain write: rich markup would eat the SVG tags
    typer.echo(icon.to_html())


@app.command("init")
def init_cmd(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default icons.yaml."""
    path = config or get_user_config_path()
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists (use --force to overwrite)[/yellow]")
        raise typer.Exit(code=1)
    RegistryConfig.write_defaults(path)
    console.print(success(f"Wrote {path}"))


def main() -> None:
    app()


if __name__ == "__main__":
    main()

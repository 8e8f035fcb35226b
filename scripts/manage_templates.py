#!/usr/bin/env python3
"""
Command-line interface for inspecting the template catalog.

The catalog (vellum/contexts/templating/templates/templates.yaml, or
VELLUM_TEMPLATES_PATH) defines every layout template: archetype, regions,
content map and design tokens.

Commands:
    list - List templates in registration order
    show - Show one template's regions, content map and tokens
    lint - Check templates for authoring mistakes
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vellum.contexts.templating import TemplateConfigError, TemplateRegistry, lint_template
from vellum.contexts.templating.logger import setup_templating_logger
from vellum.utils.logger import console_level_from_flags, resolve_console_level

load_dotenv()
LOGS_PATH = Path(os.getenv("VELLUM_LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Inspect and lint the template catalog",
    invoke_without_command=True,
)

CatalogOpt = Annotated[
    Optional[Path],
    typer.Option("--catalog", "-c", help="Catalog YAML (default: VELLUM_TEMPLATES_PATH)"),
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Echo debug messages to the console")]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_registry(catalog: Optional[Path], verbose: bool = False) -> TemplateRegistry:
    try:
        console_level = resolve_console_level(console_level_from_flags(verbose))
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    registry = TemplateRegistry(catalog)
    log_dir = LOGS_PATH / f"templates_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    setup_templating_logger(log_dir, catalog_path=registry.catalog_path, console_level=console_level)

    try:
        registry.template_ids  # loads the catalog
    except (FileNotFoundError, TemplateConfigError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return registry


@app.command("list")
def list_command(catalog: CatalogOpt = None, verbose: VerboseOpt = False):
    """
    List templates in registration order (the first one is the fallback).

    Examples:\n

        $ manage_templates.py list
    """
    registry = _load_registry(catalog, verbose)

    typer.secho(f"\nTemplates ({len(registry)}):", fg=typer.colors.BLUE, bold=True)
    for template_id in registry.template_ids:
        config = registry.get_config(template_id)
        marker = " (default)" if template_id == registry.default_template_id else ""
        typer.echo(
            f"  {template_id:<14} {config.layout:<14} {len(config.structure)} region(s)  "
            f"{config.label}{marker}"
        )
    typer.echo("")


@app.command("show")
def show_command(
    template_id: Annotated[str, typer.Argument(help="Template id (e.g., 'modern')")],
    catalog: CatalogOpt = None,
    verbose: VerboseOpt = False,
):
    """
    Show one template's regions, content map and tokens.

    Examples:\n

        $ manage_templates.py show professional
    """
    registry = _load_registry(catalog, verbose)

    if template_id not in registry:
        typer.secho(
            f"Error: Unknown template '{template_id}'. Available: {', '.join(registry.template_ids)}\n",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    config = registry.get_config(template_id)
    typer.secho(f"\n{config.label} ({config.id})", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  Layout: {config.layout}")

    typer.echo("\n  Regions:")
    for region in config.structure:
        width = f" width={region.width_fraction:g}" if region.width_fraction is not None else ""
        typer.echo(f"    {region.id:<10} slot={region.slot:<7} flow={region.direction}{width}")
        keys = config.allowed_keys(region.id)
        typer.echo(f"      keys: {', '.join(keys) if keys else '(none)'}")

    fonts = config.tokens.fonts
    colors = config.tokens.colors
    typer.echo("\n  Tokens:")
    typer.echo(f"    font:   {fonts.base_family or '-'} / {fonts.heading_family or '-'} @ {fonts.base_size or '-'}")
    typer.echo(f"    accent: {colors.accent or '-'}")
    typer.echo("")


@app.command("lint")
def lint_command(
    template_id: Annotated[
        Optional[str], typer.Argument(help="Template id (default: all templates)")
    ] = None,
    catalog: CatalogOpt = None,
    verbose: VerboseOpt = False,
):
    """
    Check templates for authoring mistakes. Exits 1 when issues are found.

    Examples:\n

        $ manage_templates.py lint              # Lint every template

        $ manage_templates.py lint modern       # Lint one template
    """
    registry = _load_registry(catalog, verbose)
    template_ids = [template_id] if template_id else registry.template_ids

    issue_count = 0
    for current_id in template_ids:
        if current_id not in registry:
            typer.secho(f"Error: Unknown template '{current_id}'\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

        report = lint_template(registry.get_config(current_id))
        if report.is_clean:
            typer.secho(f"✓ {current_id}", fg=typer.colors.GREEN)
            continue

        issue_count += len(report.issues)
        typer.secho(f"✗ {current_id}", fg=typer.colors.YELLOW, bold=True)
        for issue in report.issues:
            typer.echo(f"    - {issue}")

    typer.echo("")
    raise typer.Exit(code=1 if issue_count else 0)


if __name__ == "__main__":
    app()

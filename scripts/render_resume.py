#!/usr/bin/env python3
"""
Resume Rendering CLI

Lays out a resume document with a template and writes the result.

Commands:
    tree     - Dump the page tree as YAML
    markdown - Render the page tree as Markdown
    html     - Render the page tree as a print-ready HTML page

Examples:\n

    render_resume.py tree tests/fixtures/sample_resume.yaml                 # Default template

    render_resume.py html tests/fixtures/sample_resume.yaml -t modern       # Choose a template

    render_resume.py markdown resume.json -o outs/resume.md                 # Explicit output path

    render_resume.py html resume.yaml -v                                    # Debug output on the console
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from vellum.contexts.composition import DocumentLoadError, ResumeDocument, render_page_tree
from vellum.contexts.composition.logger import setup_composition_logger
from vellum.contexts.composition.page_tree import PageTree
from vellum.contexts.rendering import RenderError, initialize_renderer, render_markdown
from vellum.contexts.rendering.logger import setup_rendering_logger
from vellum.utils.logger import console_level_from_flags, resolve_console_level
from vellum.utils.text_processing import sanitize_filename

load_dotenv()
LOGS_PATH = Path(os.getenv("VELLUM_LOGS_PATH", "outs/logs"))
OUTPUT_PATH = Path(os.getenv("VELLUM_OUTPUT_PATH", "outs/rendered"))


app = typer.Typer(
    help="Lay out resume documents with a template and render the page tree",
    add_completion=False,
    invoke_without_command=True,
)

DocumentArg = Annotated[Path, typer.Argument(help="Resume document (YAML or JSON)")]
TemplateOpt = Annotated[
    Optional[str],
    typer.Option("--template", "-t", help="Template id (default: document setting, then catalog default)"),
]
OutputOpt = Annotated[
    Optional[Path],
    typer.Option("--output", "-o", help="Output file (default: VELLUM_OUTPUT_PATH/<title>.<ext>)"),
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Echo debug messages to the console")]
QuietOpt = Annotated[bool, typer.Option("--quiet", "-q", help="Echo only warnings and errors")]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _layout(
    document_path: Path,
    template_id: Optional[str],
    output_format: str,
    verbose: bool = False,
    quiet: bool = False,
    to_stdout: bool = False,
):
    """Load the document and build its page tree, exiting on load errors."""
    try:
        console_level = resolve_console_level(console_level_from_flags(verbose, quiet))
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    if output_format == "tree":
        setup_composition_logger(
            LOGS_PATH / f"compose_{timestamp}",
            template_id=template_id,
            console_level=console_level,
            # keep stdout clean for the YAML dump
            console=sys.stderr if to_stdout else None,
        )
    else:
        setup_rendering_logger(
            LOGS_PATH / f"render_{timestamp}", output_format=output_format, console_level=console_level
        )

    try:
        document = ResumeDocument.load(document_path)
    except DocumentLoadError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    tree = render_page_tree(document, template_id)
    return document, tree


def _output_path(output: Optional[Path], document: ResumeDocument, extension: str) -> Path:
    if output is not None:
        return output
    name = document.title or document.personal_info.full_name
    return OUTPUT_PATH / f"{sanitize_filename(name)}.{extension}"


def _write(path: Path, content: str, tree: PageTree) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    typer.secho(f"✓ Rendered with template '{tree.template_id}'", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {path}")


@app.command("tree")
def tree_command(
    document_path: DocumentArg,
    template_id: TemplateOpt = None,
    output: OutputOpt = None,
    verbose: VerboseOpt = False,
    quiet: QuietOpt = False,
):
    """
    Dump the page tree as YAML.

    Examples:\n

        $ render_resume.py tree resume.yaml                  # Print to stdout

        $ render_resume.py tree resume.yaml -o tree.yaml     # Write to file
    """
    _, tree = _layout(document_path, template_id, "tree", verbose, quiet, to_stdout=output is None)
    content = OmegaConf.to_yaml(OmegaConf.create(tree.to_dict()))

    if output is None:
        typer.echo(content)
        return
    _write(output, content, tree)


@app.command("markdown")
def markdown_command(
    document_path: DocumentArg,
    template_id: TemplateOpt = None,
    output: OutputOpt = None,
    verbose: VerboseOpt = False,
    quiet: QuietOpt = False,
):
    """
    Render the page tree as Markdown.

    Examples:\n

        $ render_resume.py markdown resume.yaml -t minimal
    """
    document, tree = _layout(document_path, template_id, "markdown", verbose, quiet)
    _write(_output_path(output, document, "md"), render_markdown(tree), tree)


@app.command("html")
def html_command(
    document_path: DocumentArg,
    template_id: TemplateOpt = None,
    output: OutputOpt = None,
    verbose: VerboseOpt = False,
    quiet: QuietOpt = False,
):
    """
    Render the page tree as a print-ready HTML page (A4, fonts embedded).

    Examples:\n

        $ render_resume.py html resume.yaml -t photo -o outs/resume.html
    """
    document, tree = _layout(document_path, template_id, "html", verbose, quiet)
    renderer = initialize_renderer()

    try:
        html = renderer.render(tree, title=document.title or "Resume")
    except RenderError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _write(_output_path(output, document, "html"), html, tree)


if __name__ == "__main__":
    app()

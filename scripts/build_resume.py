#!/usr/bin/env python3
"""
Resume Build CLI

Renders resume documents to HTML and PDF through a layout.

Commands:
    build  - Render a document to index.html and resume.pdf
    render - Render a document to HTML only (stdout or file)
    layout - Show the parsed structure of a theme or layout file
    themes - List built-in themes and templates

Examples:\n

    build_resume.py build resume.yaml                        # Build into dist/

    build_resume.py build resume.yaml --theme jake -t jake   # Built-in theme and template

    build_resume.py render resume.yaml --layout my.resume    # HTML to stdout

    build_resume.py layout --theme jake                      # Inspect a theme
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from srg.contexts.document import InvalidDocumentError, load_document
from srg.contexts.layout import (
    DEFAULT_THEME,
    Layout,
    LayoutReadError,
    ThemeRegistry,
    UnknownThemeError,
    default_layout,
    describe_layout,
    load_layout_file,
    load_theme,
)
from srg.contexts.rendering import (
    LayoutToHTMLConverter,
    TemplateRegistry,
    UnknownTemplateError,
    build_resume,
)
from srg.contexts.rendering.registries import DEFAULT_TEMPLATE

app = typer.Typer(
    help="Render resume documents to HTML and PDF through a declarative layout",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _fail(error: Exception) -> None:
    typer.secho(f"Error: {error}\n", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _resolve_layout(theme: Optional[str], layout_file: Optional[Path]) -> Layout:
    """Layout from a file, else a built-in theme, else the default theme."""
    if layout_file is not None:
        return load_layout_file(layout_file)
    if theme is not None:
        return load_theme(theme)
    return default_layout()


ThemeOption = Annotated[
    Optional[str],
    typer.Option("--theme", help="Built-in layout theme (e.g., minimal, jake, compact)"),
]
LayoutOption = Annotated[
    Optional[Path],
    typer.Option("--layout", "-l", help="Layout file (overrides --theme)"),
]
TemplateOption = Annotated[
    str,
    typer.Option("--template", "-t", help="Template name (document shell and style)"),
]


@app.command("build")
def build_command(
    document_path: Annotated[Path, typer.Argument(help="Resume document (YAML or JSON)")],
    out: Annotated[Path, typer.Option("--out", "-o", help="Output directory")] = Path("dist"),
    template: TemplateOption = DEFAULT_TEMPLATE,
    theme: ThemeOption = None,
    layout_file: LayoutOption = None,
    no_pdf: Annotated[
        bool, typer.Option("--no-pdf", help="Write index.html only, skip PDF export")
    ] = False,
):
    """
    Build index.html and resume.pdf for a resume document.

    Examples:\n

        $ build_resume.py build resume.yaml

        $ build_resume.py build resume.yaml --out site --no-pdf
    """
    try:
        document = load_document(document_path)
        layout = _resolve_layout(theme, layout_file)
        result = build_resume(
            document, out, template=template, layout=layout, export_pdf=not no_pdf
        )
    except (
        FileNotFoundError,
        InvalidDocumentError,
        LayoutReadError,
        UnknownThemeError,
        UnknownTemplateError,
    ) as e:
        _fail(e)

    typer.echo("")
    if result.success:
        typer.secho("✓ Resume built successfully", fg=typer.colors.GREEN, bold=True)
    else:
        typer.secho("✗ Build failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  {result.error}", fg=typer.colors.RED)

    typer.echo(f"  HTML: {result.html_path}")
    if result.pdf_path:
        typer.echo(f"  PDF:  {result.pdf_path}")
    typer.echo(f"  Log:  {result.log_dir / 'render.log'}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("render")
def render_command(
    document_path: Annotated[Path, typer.Argument(help="Resume document (YAML or JSON)")],
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Write HTML here instead of stdout")
    ] = None,
    template: TemplateOption = DEFAULT_TEMPLATE,
    theme: ThemeOption = None,
    layout_file: LayoutOption = None,
):
    """Render a resume document to HTML without exporting a PDF."""
    try:
        document = load_document(document_path)
        layout = _resolve_layout(theme, layout_file)
        html = LayoutToHTMLConverter(template=template).generate_document(document, layout)
    except (
        FileNotFoundError,
        InvalidDocumentError,
        LayoutReadError,
        UnknownThemeError,
        UnknownTemplateError,
    ) as e:
        _fail(e)

    if output is None:
        typer.echo(html, nl=False)
    else:
        output.write_text(html, encoding="utf-8")
        typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN)


@app.command("layout")
def layout_command(theme: ThemeOption = None, layout_file: LayoutOption = None):
    """
    Show how a layout is parsed: sections, containers and fields.

    Examples:\n

        $ build_resume.py layout --theme jake

        $ build_resume.py layout --layout my.resume
    """
    try:
        layout = _resolve_layout(theme, layout_file)
    except (LayoutReadError, UnknownThemeError) as e:
        _fail(e)

    for depth, description in describe_layout(layout):
        if depth == 0:
            typer.secho(description, fg=typer.colors.BLUE, bold=True)
        else:
            typer.echo(f"{'  ' * depth}{description}")


@app.command("themes")
def themes_command():
    """List built-in layout themes and templates."""
    typer.secho("Themes:", bold=True)
    for name in ThemeRegistry().available_themes():
        marker = " (default)" if name == DEFAULT_THEME else ""
        typer.echo(f"  {name}{marker}")
    typer.secho("Templates:", bold=True)
    for name in TemplateRegistry().available_templates():
        marker = " (default)" if name == DEFAULT_TEMPLATE else ""
        typer.echo(f"  {name}{marker}")


if __name__ == "__main__":
    app()

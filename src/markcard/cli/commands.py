"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from markcard.config import Settings, load_config
from markcard.core.pipeline import run_build, run_parse, run_render


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _resolve(path: str) -> Path:
    return (Path.cwd() / path).resolve()


def _report(json_path: Path, doc) -> None:
    typer.echo(f"Wrote {json_path} ({len(doc.cards)} cards)")
    if not doc.cards:
        typer.echo("Warning: no cards found; check for content between 'c-a-r-d' headings.", err=True)


def _parse(in_path: Path, json_path: Path, settings: Settings) -> None:
    """Run the parse step and report the card count."""
    if not in_path.is_file():
        _fail(f"Input file not found: {in_path}")
    try:
        doc = run_parse(in_path, json_path, settings.parser_config, settings.json_indent)
    except RuntimeError as e:
        _fail("Parse failed", e)
    _report(json_path, doc)


def _render(json_path: Path, html_path: Path, settings: Settings) -> None:
    """Run the render step."""
    if not json_path.is_file():
        _fail(f"JSON file not found: {json_path}")
    try:
        run_render(json_path, html_path, settings.page_title)
    except RuntimeError as e:
        _fail("Render failed", e)


def parse_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to parse")],
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Output JSON file")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Parse a markdown file into cards JSON."""
    settings = _settings(overrides={"json_out": out, "parser_config": parser})
    in_path, json_path = _resolve(path), _resolve(settings.json_out)
    typer.echo(f"Parsing {in_path} -> {json_path}")
    _parse(in_path, json_path, settings)


def render_cmd(
    json_file: Annotated[str, typer.Argument(help="Cards JSON file to render")],
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Output HTML file")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Preview page title")] = None,
    ):
    """Render cards JSON to an HTML preview."""
    settings = _settings(overrides={"html_out": out, "page_title": title})
    json_path, html_path = _resolve(json_file), _resolve(settings.html_out)
    typer.echo(f"Rendering {json_path} -> {html_path}")
    _render(json_path, html_path, settings)
    typer.echo(f"Wrote HTML to {html_path}")


def build_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to build")],
    json_out: Annotated[Optional[str], typer.Option("--json", "-j", help="Output JSON file")] = None,
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Output HTML file")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Preview page title")] = None,
    ):
    """Parse a markdown file and render HTML (one step)."""
    settings = _settings(overrides={
        "json_out": json_out, "html_out": out,
        "parser_config": parser, "page_title": title,
    })
    in_path = _resolve(path)
    json_path, html_path = _resolve(settings.json_out), _resolve(settings.html_out)
    typer.echo(f"Building: {in_path} -> {json_path} -> {html_path}")
    if not in_path.is_file():
        _fail(f"Input file not found: {in_path}")

    try:
        doc, html_path = run_build(
            in_path, json_path, html_path,
            settings.parser_config, settings.page_title, settings.json_indent,
        )
    except RuntimeError as e:
        _fail("Build failed", e)
    _report(json_path, doc)
    typer.echo(f"Wrote HTML to {html_path}")
    typer.echo("Build complete.")

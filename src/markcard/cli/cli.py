"""CLI entrypoint: Typer app definition and command registration"""

import typer

from markcard.cli.commands import build_cmd, parse_cmd, render_cmd


app = typer.Typer(name="markcard", no_args_is_help=True, help="Parse Markdown into card JSON and render HTML")

app.command(name="parse")(parse_cmd)
app.command(name="render")(render_cmd)
app.command(name="build")(build_cmd)

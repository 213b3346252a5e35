"""CLI entrypoint: Typer app definition and command registration"""

import typer

from doccheck.cli.commands import check_cmd, extract_cmd


app = typer.Typer(name="doccheck", no_args_is_help=True, help="Markdown code-block consistency checker")

app.command(name="check")(check_cmd)
app.command(name="extract")(extract_cmd)

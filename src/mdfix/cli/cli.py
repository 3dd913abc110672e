"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdfix.cli.commands import fix_cmd, version_cmd


app = typer.Typer(name="mdfix", no_args_is_help=True, help="Markdown structure formatter")

app.command(name="fix")(fix_cmd)
app.command(name="version")(version_cmd)

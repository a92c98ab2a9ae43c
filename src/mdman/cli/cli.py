"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdman.cli.commands import convert_cmd, render_cmd


app = typer.Typer(name="mdman", no_args_is_help=True, help="Render mdbook chapters as man pages")

app.command(name="render")(render_cmd)
app.command(name="convert")(convert_cmd)


def main() -> None:
    """mdbook renderer entry point: mdbook runs the command with the render context on stdin."""
    typer.run(render_cmd)

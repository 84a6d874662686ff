"""
Main CLI entry point.
"""

import typer

from glitch_sync import __version__
from glitch_sync.cli import run


def version_callback(value: bool):
    """Callback to display version and exit."""
    if value:
        typer.echo(f"glitch-sync version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="glitch-sync",
    help="Import the current GitHub repository into a Glitch project",
    add_completion=False,
)

# Register subcommands
app.add_typer(run.app, name="run")


@app.callback(invoke_without_command=True)
def entrypoint(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        help="Show version and exit.",
    ),
):
    """
    glitch-sync - import the current GitHub repository into a Glitch project.

    Run 'glitch-sync run --help' for the available inputs.
    """
    if ctx.invoked_subcommand is None:
        if not version:
            typer.echo(ctx.get_help())
            raise typer.Exit()


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()

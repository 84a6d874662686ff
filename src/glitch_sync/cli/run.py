"""
glitch-sync run - Trigger one Glitch import.

Inputs default to the INPUT_* environment variables set by the CI host;
options given here take precedence, and an optional YAML file fills in
whatever is still missing.
"""

import asyncio
from pathlib import Path

import typer

from glitch_sync.config.inputs import AUTH_TOKEN, PATH, PROJECT_ID, REPO
from glitch_sync.config.loader import collect_inputs, load_inputs_file
from glitch_sync.core.context import ActionContext
from glitch_sync.core.runner import report
from glitch_sync.core.runner import run as run_sync
from glitch_sync.core.types import ValidationFailure
from glitch_sync.exceptions import ConfigurationError
from glitch_sync.utils.api import GlitchClient
from glitch_sync.utils.logging import CONSOLE_TYPES, setup_logging


app = typer.Typer(name="run", help="Import the repository into a Glitch project", invoke_without_command=True)


@app.callback()
def run(
    ctx: typer.Context,
    project_id: str | None = typer.Option(None, "--project-id", help="Glitch project ID"),
    auth_token: str | None = typer.Option(None, "--auth-token", help="Glitch authorization token"),
    path: str | None = typer.Option(None, "--path", help="Sub-directory of the repository to import"),
    repo: str | None = typer.Option(None, "--repo", help="Repository as owner/name (default: GITHUB_REPOSITORY)"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="YAML file with input values"),
    log_format: str = typer.Option("actions", "--log-format", help=f"Console output: {' or '.join(CONSOLE_TYPES)}"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write logs to this file"),
    timeout: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds (default: none)"),
) -> None:
    """
    Import the repository into a Glitch project.

    Exits with status 1 when the import fails.
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        setup_logging(log_file=log_file, console_type=log_format)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2) from e

    overrides = {PROJECT_ID: project_id, AUTH_TOKEN: auth_token, PATH: path, REPO: repo}
    try:
        file_inputs = load_inputs_file(config_file) if config_file else None
    except ConfigurationError as e:
        outcome = ValidationFailure(e.message)
        report(outcome)
        raise typer.Exit(outcome.exit_code) from e

    inputs = collect_inputs(file_inputs=file_inputs, overrides=overrides)
    outcome = asyncio.run(run_sync(inputs, ActionContext.from_env(), GlitchClient(timeout=timeout)))
    raise typer.Exit(outcome.exit_code)

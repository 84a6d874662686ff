"""
Sync runner: one import attempt per invocation.

The runner reads its inputs, asks Glitch to import the repository and emits
exactly one terminal log line. It never raises: every failure becomes an
outcome that ``report`` turns into an error line, and the caller maps the
outcome to an exit status.
"""

import json
from collections.abc import Mapping
from urllib.parse import urlencode

from glitch_sync.config.loader import load_run_config
from glitch_sync.core.context import ActionContext
from glitch_sync.core.types import (
    ImportOutcome,
    ImportRequest,
    RemoteFailure,
    RunConfig,
    Success,
    UnexpectedFailure,
    ValidationFailure,
)
from glitch_sync.exceptions import ConfigurationError
from glitch_sync.utils.api import GLITCH_API_URL, GlitchClient
from glitch_sync.utils.logging import get_logger, masked_secret

logger = get_logger("glitch_sync.core.runner")

IMPORT_URL = f"{GLITCH_API_URL}/project/githubImport"

SYNC_STARTED = "Syncing repo to Glitch 📡"
SYNC_SUCCEEDED = "Glitch project successfully updated! 🎉"


def build_import_request(config: RunConfig) -> ImportRequest:
    """Build the POST request for ``config``; ``path`` is only sent when set."""
    query = {"projectId": config.project_id, "repo": config.repo}
    if config.path:
        query["path"] = config.path
    return ImportRequest(
        url=f"{IMPORT_URL}?{urlencode(query)}",
        headers={"authorization": config.auth_token},
    )


def parse_failure_message(status_text: str, body: str) -> str:
    """
    Best human-readable explanation for a failed import.

    Glitch occasionally answers with JSON carrying a ``stderr`` field from
    the import script; prefer that over the status text when present.
    """
    try:
        payload = json.loads(body)
    except ValueError:
        return status_text
    if isinstance(payload, dict):
        stderr = payload.get("stderr")
        if stderr:
            return stderr if isinstance(stderr, str) else json.dumps(stderr)
    return status_text


async def sync_project(config: RunConfig, client: GlitchClient) -> ImportOutcome:
    """Send the import request and classify the response."""
    request = build_import_request(config)
    logger.debug(f"full URL: {request.url}")
    logger.info(SYNC_STARTED)

    response = await client.send(request)
    if response.ok:
        return Success()

    logger.debug(f"Raw {response.status} error response from Glitch: {response.text}")
    return RemoteFailure(
        status=response.status,
        status_text=response.reason,
        raw_body=response.text,
        message=parse_failure_message(response.reason, response.text),
    )


def report(outcome: ImportOutcome) -> None:
    """Emit the terminal log line for ``outcome``."""
    if isinstance(outcome, Success):
        logger.info(SYNC_SUCCEEDED)
    elif isinstance(outcome, RemoteFailure):
        logger.error(f"Error syncing to Glitch: {outcome.message}")
    elif isinstance(outcome, (ValidationFailure, UnexpectedFailure)):
        logger.error(f"Error running workflow: {outcome.message}")
    else:
        raise TypeError(f"Unknown outcome: {outcome!r}")


async def run(
    inputs: Mapping[str, str] | None = None,
    context: ActionContext | None = None,
    client: GlitchClient | None = None,
) -> ImportOutcome:
    """
    Run one sync and report the result.

    Args:
        inputs: Environment-style mapping holding the ``INPUT_*`` values
                (default: the process environment)
        context: Ambient CI context (default: built from the process environment)
        client: Client to send the request with (default: a new GlitchClient)

    Returns:
        The outcome, already reported through the logger
    """
    try:
        config = load_run_config(inputs, context)
    except ConfigurationError as e:
        outcome: ImportOutcome = ValidationFailure(e.message)
        report(outcome)
        return outcome

    with masked_secret(config.auth_token):
        try:
            async with client or GlitchClient() as session_client:
                outcome = await sync_project(config, session_client)
        except Exception as e:
            logger.debug(f"Raw error: {e!r}")
            outcome = UnexpectedFailure(e)
        report(outcome)
    return outcome

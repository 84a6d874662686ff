"""
Action input lookup.

The CI host passes each action input as an environment variable named
``INPUT_<NAME>``: spaces become underscores and the name is upper-cased,
hyphens are kept (``project-id`` -> ``INPUT_PROJECT-ID``).
"""

import os
from collections.abc import Mapping

from glitch_sync.exceptions import InputRequiredError

PROJECT_ID = "project-id"
AUTH_TOKEN = "auth-token"
PATH = "path"
REPO = "repo"

KNOWN_INPUTS = (PROJECT_ID, AUTH_TOKEN, PATH, REPO)


def input_variable(name: str) -> str:
    """Environment variable carrying the input ``name``."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, required: bool = False, inputs: Mapping[str, str] | None = None) -> str:
    """
    Get the value of an input, trimmed of surrounding whitespace.

    Args:
        name: Input name as declared by the action (e.g. "project-id")
        required: Raise when the value is missing or blank
        inputs: Mapping to read from (default: the process environment)

    Returns:
        The trimmed value, or an empty string for a missing optional input

    Raises:
        InputRequiredError: If ``required`` and no value was supplied
    """
    if inputs is None:
        inputs = os.environ
    value = (inputs.get(input_variable(name)) or "").strip()
    if required and not value:
        raise InputRequiredError(name)
    return value

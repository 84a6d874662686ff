"""
GitHub Actions workflow commands.

Command format::

    ::name::message

Examples::

    ::debug::This is the debug message
    ::error::This is the error message

Informational output is written as a plain line and is not escaped.
"""

import json
from typing import Any

COMMANDS = ("debug", "warning", "error")


def to_command_value(value: Any) -> str:
    """Render a value as the string placed after a command marker."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def escape_data(value: Any) -> str:
    """Escape characters the runner would otherwise treat as line breaks."""
    return to_command_value(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_command(command: str, message: Any) -> str:
    """
    Build a single workflow command line (without the trailing newline).

    Args:
        command: One of "debug", "warning" or "error"
        message: Message to place after the marker

    Returns:
        The formatted command, e.g. "::error::boom"
    """
    if command not in COMMANDS:
        raise ValueError(f"Unsupported workflow command: {command}")
    return f"::{command}::{escape_data(message)}"

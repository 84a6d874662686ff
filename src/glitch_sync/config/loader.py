"""
Input collection and run configuration.

Inputs come from three layers, first non-empty value wins:

1. explicit overrides (CLI options)
2. the process environment (``INPUT_*`` variables set by the CI host)
3. an optional YAML file mapping input names to values
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from glitch_sync.config.inputs import AUTH_TOKEN, KNOWN_INPUTS, PATH, PROJECT_ID, REPO, get_input, input_variable
from glitch_sync.config.resolver import resolve_config
from glitch_sync.core.context import REPOSITORY_VARIABLE, ActionContext
from glitch_sync.core.types import RunConfig
from glitch_sync.exceptions import ConfigurationError, RepositoryNotDetectedError


def load_inputs_file(path: Path, environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """
    Load action inputs from a YAML file.

    The file is a flat mapping of input names to scalar values, e.g.::

        project-id: 0a1b2c3d-...
        auth-token: ${GLITCH_AUTH_TOKEN}
        path: site

    Args:
        path: YAML file to read
        environ: Variables for ``${VAR}`` substitution (default: the process environment)

    Returns:
        Values keyed by their ``INPUT_*`` variable name

    Raises:
        ConfigurationError: If the file is missing, malformed or has unknown keys
    """
    if not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}", details={"path": str(path)})

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            if mark is not None:
                raise ConfigurationError(
                    f"Error parsing {path.name} at line {mark.line + 1}, column {mark.column + 1}:\n"
                    f"  {e}\n"
                    f"  Suggestion: Check YAML syntax, ensure proper indentation and quotes",
                    details={"path": str(path)},
                ) from e
            raise ConfigurationError(f"Error parsing {path.name}: {e}", details={"path": str(path)}) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping of input names to values, got {type(data).__name__}",
            details={"path": str(path)},
        )

    unknown = sorted(str(key) for key in data if key not in KNOWN_INPUTS)
    if unknown:
        raise ConfigurationError(
            f"Unknown input(s) in {path.name}: {', '.join(unknown)}\n"
            f"  Suggestion: Supported inputs are {', '.join(KNOWN_INPUTS)}",
            details={"path": str(path), "unknown": unknown},
        )

    resolved = resolve_config(data, environ)
    return {input_variable(name): _to_input_value(name, value) for name, value in resolved.items()}


def _to_input_value(name: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ConfigurationError(f"Input '{name}' must be a scalar value", details={"input": name})
    return str(value)


def collect_inputs(
    environ: Mapping[str, str] | None = None,
    file_inputs: Mapping[str, str] | None = None,
    overrides: Mapping[str, str | None] | None = None,
) -> dict[str, str]:
    """
    Merge the input layers into one environment-style mapping.

    Args:
        environ: Process environment (default: os.environ)
        file_inputs: Values loaded with load_inputs_file
        overrides: Input name -> value, e.g. from CLI options; None means unset

    Returns:
        Mapping with every variable of ``environ`` plus the resolved inputs
    """
    if environ is None:
        environ = os.environ
    merged = dict(environ)

    for variable, value in (file_inputs or {}).items():
        if not (merged.get(variable) or "").strip():
            merged[variable] = value

    for name, value in (overrides or {}).items():
        if value is not None and value.strip():
            merged[input_variable(name)] = value

    return merged


def load_run_config(inputs: Mapping[str, str] | None = None, context: ActionContext | None = None) -> RunConfig:
    """
    Read and validate the inputs of one run.

    Args:
        inputs: Environment-style mapping (default: the process environment)
        context: Ambient CI context (default: built from the process environment)

    Returns:
        RunConfig

    Raises:
        InputRequiredError: If project-id or auth-token is missing
        RepositoryNotDetectedError: If neither the repo input nor the context names a repository
    """
    if context is None:
        context = ActionContext.from_env()

    project_id = get_input(PROJECT_ID, required=True, inputs=inputs)
    auth_token = get_input(AUTH_TOKEN, required=True, inputs=inputs)
    path = get_input(PATH, inputs=inputs)
    repo = get_input(REPO, inputs=inputs) or (context.current_repository or "").strip()
    if not repo:
        raise RepositoryNotDetectedError(REPOSITORY_VARIABLE)

    return RunConfig(project_id=project_id, auth_token=auth_token, repo=repo, path=path)

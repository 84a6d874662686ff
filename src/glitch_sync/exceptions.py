"""
glitch-sync exception hierarchy.

All domain-specific exceptions inherit from GlitchSyncError. The runner
treats ConfigurationError (and its subclasses) as validation failures that
happen before any request is sent; everything else that escapes the sync
is reported as an unexpected workflow error.

Hierarchy::

    GlitchSyncError
    ├── ConfigurationError            - input collection, config files
    │   ├── InputRequiredError        - required input missing or blank
    │   └── RepositoryNotDetectedError - no repo input and no GITHUB_REPOSITORY
    └── ImportRequestError            - request to Glitch timed out
"""

from __future__ import annotations


class GlitchSyncError(Exception):
    """Base exception for all glitch-sync errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Configuration -----------------------------------------------------------


class ConfigurationError(GlitchSyncError):
    """Raised when inputs or a config file cannot be loaded or validated."""


class InputRequiredError(ConfigurationError):
    """Raised when a required input is not supplied."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Input required and not supplied: {name}", details={"input": name})
        self.input_name = name


class RepositoryNotDetectedError(ConfigurationError):
    """Raised when no repository can be resolved from inputs or the environment."""

    def __init__(self, variable: str = "GITHUB_REPOSITORY") -> None:
        super().__init__(
            f"Unable to detect `{variable}` environment variable. Are you running this in a GitHub Action?",
            details={"variable": variable},
        )
        self.variable = variable


# --- Import request ----------------------------------------------------------


class ImportRequestError(GlitchSyncError):
    """Raised when the import request to Glitch does not complete in time."""

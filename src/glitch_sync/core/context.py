"""
Execution context supplied by the CI host.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

# https://docs.github.com/en/actions/learn-github-actions/variables#default-environment-variables
REPOSITORY_VARIABLE = "GITHUB_REPOSITORY"


@dataclass(frozen=True)
class ActionContext:
    """Ambient values describing the repository being built."""

    current_repository: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ActionContext:
        """Build a context from ``environ`` (default: the process environment)."""
        if environ is None:
            environ = os.environ
        return cls(current_repository=environ.get(REPOSITORY_VARIABLE) or None)

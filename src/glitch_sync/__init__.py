"""
glitch-sync - import the current GitHub repository into a Glitch project.
"""

__version__ = "1.2.0"

from glitch_sync.config import get_input, load_run_config
from glitch_sync.core import ActionContext, ImportOutcome, RunConfig
from glitch_sync.core.runner import run
from glitch_sync.exceptions import (
    ConfigurationError,
    GlitchSyncError,
    ImportRequestError,
    InputRequiredError,
    RepositoryNotDetectedError,
)
from glitch_sync.utils.api import GlitchClient
from glitch_sync.utils.logging import get_logger, setup_logging

__all__ = [
    # Execution
    "run",
    "GlitchClient",
    "ActionContext",
    "RunConfig",
    "ImportOutcome",
    # Config
    "get_input",
    "load_run_config",
    # Logging
    "setup_logging",
    "get_logger",
    # Exceptions
    "GlitchSyncError",
    "ConfigurationError",
    "InputRequiredError",
    "RepositoryNotDetectedError",
    "ImportRequestError",
]

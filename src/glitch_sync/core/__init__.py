"""
Core sync types and execution context.
"""

from glitch_sync.core.context import ActionContext
from glitch_sync.core.types import (
    ImportOutcome,
    ImportRequest,
    ImportResponse,
    RemoteFailure,
    RunConfig,
    Success,
    UnexpectedFailure,
    ValidationFailure,
)

__all__ = [
    "ActionContext",
    "ImportOutcome",
    "ImportRequest",
    "ImportResponse",
    "RemoteFailure",
    "RunConfig",
    "Success",
    "UnexpectedFailure",
    "ValidationFailure",
]

"""
Type definitions for a single sync run.

Everything here lives for one invocation only.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RunConfig:
    """Resolved inputs for one sync run."""

    project_id: str
    auth_token: str = field(repr=False)
    repo: str
    path: str = ""


@dataclass(frozen=True)
class ImportRequest:
    """Outbound request to the Glitch import endpoint."""

    url: str
    headers: dict[str, str] = field(repr=False)
    method: str = "POST"


@dataclass(frozen=True)
class ImportResponse:
    """Status line and body text of a Glitch response."""

    status: int
    reason: str
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299


# --- Outcomes ----------------------------------------------------------------


@dataclass(frozen=True)
class Success:
    """The import endpoint accepted the request."""

    ok = True
    exit_code = 0


@dataclass(frozen=True)
class ValidationFailure:
    """Inputs were missing or invalid; no request was sent."""

    message: str

    ok = False
    exit_code = 1


@dataclass(frozen=True)
class RemoteFailure:
    """Glitch answered with a non-2xx status."""

    status: int
    status_text: str
    raw_body: str
    message: str

    ok = False
    exit_code = 1


@dataclass(frozen=True)
class UnexpectedFailure:
    """Anything else that went wrong, e.g. a transport error."""

    error: BaseException

    ok = False
    exit_code = 1

    @property
    def message(self) -> str:
        return str(self.error) or type(self.error).__name__


ImportOutcome = Success | ValidationFailure | RemoteFailure | UnexpectedFailure

"""
Shared fixtures for glitch-sync tests.
"""

import io
import os
import re

import pytest

from glitch_sync.core.context import ActionContext
from glitch_sync.utils.logging import setup_logging

GLITCH_URL = re.compile(r"^https://api\.glitch\.com/project/githubImport\?.*$")

AUTH_TOKEN = "test-auth"
PROJECT_ID = "test-project-id"
REPO = "owner/repo"
# optional param
PATH = "test-path"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop CI variables that would leak in when the suite itself runs in CI."""
    for name in list(os.environ):
        if name.startswith("INPUT_") or name == "GITHUB_REPOSITORY":
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def output():
    """Route workflow command output into a buffer."""
    stream = io.StringIO()
    setup_logging(stream=stream)
    return stream


@pytest.fixture
def context():
    return ActionContext(current_repository=REPO)


@pytest.fixture
def inputs():
    return {"INPUT_PROJECT-ID": PROJECT_ID, "INPUT_AUTH-TOKEN": AUTH_TOKEN}


def sent_requests(mocked):
    """Flatten aioresponses' recorded calls into (method, url, kwargs) tuples."""
    return [(method, url, call.kwargs) for (method, url), calls in mocked.requests.items() for call in calls]

"""Global fixtures and pytest configuration.

- Blocks every outgoing HTTP request made through requests.post
- Removes service environment variables so the host environment never leaks
  into a test
- Provides check results and a buffered output behavior
"""

import os
from unittest.mock import patch

import pytest

from update_reporter.notifications import (
    BufferedOutput,
    OutdatedPackage,
    OutputBehavior,
    Style,
    UpdateCheckResult,
    Verbosity,
)

SERVICE_ENV_PREFIXES = ("EMAIL_", "GITLAB_", "MATTERMOST_", "SLACK_", "TEAMS_")


@pytest.fixture(autouse=True)
def block_real_webhook_requests():
    """Prevent any outgoing HTTP requests via requests.post during tests."""
    with patch("requests.post") as mock_post:
        mock_post.return_value.status_code = 200
        mock_post.return_value.text = "MOCKED"
        yield mock_post


@pytest.fixture(autouse=True)
def isolate_service_env(monkeypatch):
    """Remove every service variable from the environment."""
    for name in list(os.environ):
        if name.startswith(SERVICE_ENV_PREFIXES):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def buffer():
    return BufferedOutput()


@pytest.fixture
def behavior(buffer):
    return OutputBehavior(Style.NORMAL, Verbosity.NORMAL, buffer)


@pytest.fixture
def empty_result():
    return UpdateCheckResult([])


@pytest.fixture
def result_factory():
    """Factory building a result with one package per (name, insecure) pair."""

    def _factory(*packages):
        return UpdateCheckResult(
            OutdatedPackage(name, "1.0.0", "1.0.5", insecure)
            for name, insecure in packages
        )

    return _factory


@pytest.fixture
def outdated_result(result_factory):
    return result_factory(("foo/foo", False))


@pytest.fixture
def insecure_result(result_factory):
    return result_factory(("foo/foo", True))

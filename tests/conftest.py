"""Shared pytest configuration and fixtures for llm-dispatch tests."""

import pytest

from llm_dispatch.core.models import IdeSettings
from tests.fixtures.collaborators import FakeFileReader, LogRecorder

# Import HTTP mocking fixtures from fixtures module
pytest_plugins = ["tests.fixtures.mock_http"]

LLMD_ENV_VARS = (
    "LOG_LEVEL",
    "REQUEST_TIMEOUT",
    "LLMD_LOG_PROMPTS",
    "LLMD_USER_TOKEN",
    "LLMD_REMOTE_CONFIG_SERVER_URL",
)


@pytest.fixture(autouse=True)
def clean_llmd_environment(monkeypatch):
    """Keep developer shell settings out of the tests."""
    for name in LLMD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_log():
    return LogRecorder()


@pytest.fixture
def read_file():
    return FakeFileReader({"rules.md": "Always answer in English."})


@pytest.fixture
def ide_settings():
    return IdeSettings(
        user_token="session-token",
        remote_config_server_url="https://config.example.com/workspace/settings",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast, no external deps)")

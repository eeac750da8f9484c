"""Pytest configuration and shared fixtures for massdriver-sdk tests."""

import pytest

from massdriver.testing import MockAPI, make_client


@pytest.fixture(autouse=True)
def clear_env(monkeypatch, tmp_path):
    """Auto-cleanup: Clear Massdriver environment variables before each test.

    Also points HOME at an empty directory so a developer's real profile
    file never leaks into credential resolution.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("MASSDRIVER_"):
            monkeypatch.delenv(key, raising=False)

    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    yield


@pytest.fixture
def mock_api():
    return MockAPI()


@pytest.fixture
def client(mock_api):
    with make_client(mock_api) as client:
        yield client

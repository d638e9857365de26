import os

import pytest
import requests
from typer.testing import CliRunner
from unittest.mock import MagicMock

from quotafetch.infrastructure.cli.display import ConsoleDisplay
from quotafetch.infrastructure.config import settings
from quotafetch.infrastructure.http.static_getter import StaticRESTGetter


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def mock_session():
    """A requests.Session whose get() is controlled by the test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def static_getter():
    return StaticRESTGetter({
        "https://api.test/summoner/42": b'{"id": "42", "name": "Faker"}',
        "https://api.test/champions": [{"id": 1}, {"id": 2}],
        "https://api.test/broken": b"not-json",
    })


@pytest.fixture
def mock_console_display(mocker):
    """Mocks the ConsoleDisplay where main.py instantiates it."""
    mock = mocker.MagicMock(spec=ConsoleDisplay)
    mocker.patch('quotafetch.main.ConsoleDisplay', return_value=mock)
    return mock


@pytest.fixture
def patched_transport(mocker, static_getter):
    """Makes main.py build its getter stack on top of the static getter."""
    mocker.patch('quotafetch.main.SimpleRESTGetter', return_value=static_getter)
    return static_getter


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keeps user config files and QUOTAFETCH_* variables out of the tests."""
    for name in list(os.environ):
        if name.startswith(settings.ENV_PREFIX):
            monkeypatch.delenv(name)
    settings.clear_test_config()
    yield
    settings.clear_test_config()
    settings.reset_configuration()

import pytest

from quotafetch.infrastructure.config import settings
from quotafetch.infrastructure.config.settings import (
    env_var_name,
    get_config,
    get_http_timeout,
    get_rate_limit,
    get_rate_window,
    load_configuration,
    reset_configuration,
    set_config_for_testing,
)


@pytest.fixture
def config_files(tmp_path, monkeypatch):
    """A YAML config and a .env file in an isolated working directory."""
    monkeypatch.chdir(tmp_path)
    yaml_file = tmp_path / "config.yaml"
    yaml_file.write_text(
        "rate_limit:\n"
        "  limit: 20\n"
        "  window: 1.0\n"
        "http.timeout: 3\n"
        "logging:\n"
        "  level: debug\n"
    )
    env_file = tmp_path / ".env"
    env_file.write_text("QUOTAFETCH_RATE_LIMIT_WINDOW=2.5\n")
    # register the variable with monkeypatch so load_dotenv's write is undone
    monkeypatch.setenv("QUOTAFETCH_RATE_LIMIT_WINDOW", "unused")
    monkeypatch.delenv("QUOTAFETCH_RATE_LIMIT_WINDOW")
    reset_configuration()
    return yaml_file, env_file


def test_env_var_name():
    assert env_var_name("rate_limit.window") == "QUOTAFETCH_RATE_LIMIT_WINDOW"


def test_defaults_without_any_configuration():
    reset_configuration()
    assert get_rate_limit() == settings.DEFAULT_RATE_LIMIT
    assert get_rate_window() == settings.DEFAULT_RATE_WINDOW_SECONDS
    assert get_http_timeout() == settings.DEFAULT_HTTP_TIMEOUT_SECONDS
    assert get_config("missing.key", "fallback") == "fallback"


def test_yaml_values_nested_and_flat(config_files):
    yaml_file, _ = config_files
    load_configuration(config_file=yaml_file, env_file=yaml_file.parent / "absent.env")

    assert get_rate_limit() == 20
    assert get_http_timeout() == 3.0
    assert get_config("logging.level") == "debug"


def test_dotenv_overrides_yaml(config_files):
    yaml_file, env_file = config_files
    load_configuration(config_file=yaml_file, env_file=env_file)

    assert get_rate_window() == 2.5


def test_environment_overrides_yaml_and_dotenv(config_files, monkeypatch):
    yaml_file, env_file = config_files
    monkeypatch.setenv("QUOTAFETCH_RATE_LIMIT_WINDOW", "9.5")
    monkeypatch.setenv("QUOTAFETCH_RATE_LIMIT_LIMIT", "3")
    load_configuration(config_file=yaml_file, env_file=env_file)

    assert get_rate_window() == 9.5
    assert get_rate_limit() == 3


@pytest.mark.parametrize("raw, expected", [("true", True), ("False", False), ("12", 12), ("0.5", 0.5), ("abc", "abc")])
def test_environment_values_are_coerced(monkeypatch, raw, expected):
    monkeypatch.setenv("QUOTAFETCH_SOME_KEY", raw)
    assert get_config("some.key") == expected


def test_test_config_has_highest_priority(monkeypatch):
    monkeypatch.setenv("QUOTAFETCH_HTTP_TIMEOUT", "30")
    set_config_for_testing({"http.timeout": 1.5})
    assert get_http_timeout() == 1.5


def test_invalid_yaml_is_ignored(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    broken = tmp_path / "config.yaml"
    broken.write_text("rate_limit: [unclosed\n")
    reset_configuration()

    load_configuration(config_file=broken, env_file=tmp_path / "absent.env")

    assert get_rate_limit() == settings.DEFAULT_RATE_LIMIT

import logging

import pytest

from .config import LOG_LEVEL_ENV
from .config import Config
from .config import find_pyproject
from .config import load_config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


def write_pyproject(path, table: str):
    config_file = path / "pyproject.toml"
    config_file.write_text(
        f"""
        [project]
        name = "test-project"
        version = "0.1.0"

        {table}
        """
    )
    return config_file


def test_defaults_without_pyproject(tmp_path):
    assert load_config(tmp_path) == Config(log_level=logging.WARNING)


def test_loads_log_level_from_pyproject(tmp_path):
    write_pyproject(tmp_path, '[tool.resumable]\nlog_level = "debug"')
    assert load_config(tmp_path).log_level == logging.DEBUG


def test_finds_pyproject_in_parent_directories(tmp_path):
    config_file = write_pyproject(tmp_path, '[tool.resumable]\nlog_level = "INFO"')
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_pyproject(nested) == config_file
    assert load_config(nested).log_level == logging.INFO


def test_pyproject_without_table_uses_defaults(tmp_path):
    write_pyproject(tmp_path, "")
    assert load_config(tmp_path) == Config()


def test_environment_overrides_pyproject(tmp_path, monkeypatch):
    write_pyproject(tmp_path, '[tool.resumable]\nlog_level = "INFO"')
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    assert load_config(tmp_path).log_level == logging.ERROR


def test_invalid_environment_level(tmp_path, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "loud")
    with pytest.raises(ValueError, match=LOG_LEVEL_ENV):
        load_config(tmp_path)


def test_invalid_pyproject_level(tmp_path):
    write_pyproject(tmp_path, '[tool.resumable]\nlog_level = "loud"')
    with pytest.raises(ValueError, match="tool.resumable"):
        load_config(tmp_path)

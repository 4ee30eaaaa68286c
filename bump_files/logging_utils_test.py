import logging

import pytest
from rich.logging import RichHandler

from bump_files.bump_files import write_versions
from bump_files.logging_utils import configure_logging
from bump_files.settings import BumpSettings


@pytest.fixture()
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_configure_logging_uses_settings_level(root_logger):
    handler = configure_logging(settings=BumpSettings(log_level="DEBUG"))
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.DEBUG
    assert root_logger.level == logging.DEBUG
    assert handler in root_logger.handlers


def test_configure_logging_explicit_level(root_logger, monkeypatch):
    monkeypatch.setenv("BUMP_FILES_LOG_LEVEL", "ERROR")
    handler = configure_logging("WARNING")
    assert handler.level == logging.WARNING


def test_bump_is_logged(contents, caplog):
    caplog.set_level(logging.INFO, logger="bump_files")
    write_versions(contents, "2.0.0")
    assert "bumping ./go.mod from 1 to 2.0.0" in caplog.text
    assert "bumping ./version.go from 1.4.2 to 2.0.0" in caplog.text


def test_unchanged_file_is_logged_at_debug(contents, caplog):
    caplog.set_level(logging.DEBUG, logger="bump_files")
    write_versions(contents, "1.5.0")
    unchanged = [
        record for record in caplog.records if "unchanged" in record.getMessage()
    ]
    assert {record.levelno for record in unchanged} == {logging.DEBUG}
    assert "./go.mod unchanged for version 1.5.0" in caplog.text


def test_configure_logging_explicit_level_ignores_env(root_logger, monkeypatch):
    monkeypatch.setenv("BUMP_FILES_LOG_LEVEL", "not-a-level")
    handler = configure_logging("INFO")
    assert handler.level == logging.INFO

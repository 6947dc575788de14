"""Unit tests for logger setup."""

import logging
from pathlib import Path

import pytest

from omdb_client.settings import settings
from omdb_client.utils.logger import (
    _LOGGERS_CACHE,
    _create_console_handler,
    _create_file_handler,
    _get_log_file_path,
    setup_logger,
)


class TestSetupLogger:
    @staticmethod
    def test_returns_logger() -> None:
        logger = setup_logger("test.logger.unique1")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.logger.unique1"

    @staticmethod
    def test_console_only_by_default() -> None:
        logger = setup_logger("test.logger.unique2")
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], logging.FileHandler)

    @staticmethod
    def test_level_set() -> None:
        logger = setup_logger("test.logger.unique3", level=logging.DEBUG)
        assert logger.level == logging.DEBUG

    @staticmethod
    def test_level_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings.logging, "level", "ERROR")
        logger = setup_logger("test.logger.unique4")
        assert logger.level == logging.ERROR

    @staticmethod
    def test_file_handler_with_log_dir(tmp_path: Path) -> None:
        logger = setup_logger("test.logger.unique5", log_dir=tmp_path)
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        for handler in file_handlers:
            handler.close()

    @staticmethod
    def test_cache_returns_same_instance() -> None:
        logger1 = setup_logger("test.logger.cached")
        logger2 = setup_logger("test.logger.cached")
        assert logger1 is logger2
        assert "test.logger.cached" in _LOGGERS_CACHE

    @staticmethod
    def test_propagate_disabled() -> None:
        logger = setup_logger("test.logger.unique6")
        assert logger.propagate is False


class TestHandlers:
    @staticmethod
    def test_console_handler() -> None:
        formatter = logging.Formatter("%(message)s")
        handler = _create_console_handler(formatter, logging.WARNING)
        assert isinstance(handler, logging.StreamHandler)
        assert handler.level == logging.WARNING
        assert handler.formatter is formatter

    @staticmethod
    def test_file_handler(tmp_path: Path) -> None:
        formatter = logging.Formatter("%(message)s")
        handler = _create_file_handler("omdb_client", formatter, logging.INFO, tmp_path)
        assert isinstance(handler, logging.FileHandler)
        handler.close()


class TestGetLogFilePath:
    @staticmethod
    def test_safe_name(tmp_path: Path) -> None:
        path = _get_log_file_path("omdb_client.client", tmp_path / "logs")
        assert path.parent == tmp_path / "logs"
        assert path.parent.exists()
        assert path.name.startswith("omdb_client_client_")
        assert path.suffix == ".log"

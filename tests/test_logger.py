import logging
from logging.handlers import RotatingFileHandler

import pytest

from config import AppConfig
from utils.logger import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_applies_level(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    root = configure_logging(AppConfig())
    assert root.level == logging.WARNING
    assert (tmp_path / "data").is_dir()
    assert not any(isinstance(h, RotatingFileHandler) for h in root.handlers)


def test_configure_logging_writes_rotating_file(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_TO_FILE", "true")

    root = configure_logging(AppConfig())
    assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)

    logging.getLogger("core.habits").info("habit added")
    for handler in root.handlers:
        handler.flush()
    log_file = tmp_path / "logs" / "habits_development.log"
    assert "[INFO] core.habits: habit added" in log_file.read_text(encoding="utf-8")

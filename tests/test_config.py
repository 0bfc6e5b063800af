import pytest

from config import AppConfig, LogLevel


def test_defaults(monkeypatch):
    for name in ("TIMEZONE", "DATA_DIR", "LOG_LEVEL", "LOG_TO_FILE", "PERSIST_ENABLED"):
        monkeypatch.delenv(name, raising=False)

    app_config = AppConfig()
    assert app_config.tracker.timezone == "UTC"
    assert app_config.storage.path.name == "habits.json"
    assert app_config.storage.persist_enabled is True
    assert app_config.log_level is LogLevel.INFO
    assert "file" not in app_config.get_logging_config()["handlers"]


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TIMEZONE", "Europe/Moscow")
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_TO_FILE", "true")
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    app_config = AppConfig()
    assert app_config.tracker.timezone == "Europe/Moscow"
    assert app_config.storage.path == tmp_path / "habits.json"
    logging_config = app_config.get_logging_config()
    assert logging_config["handlers"]["file"]["class"] == "logging.handlers.RotatingFileHandler"
    assert logging_config["loggers"][""]["level"] == "DEBUG"


def test_invalid_values_are_reported_together(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Mars/Olympus")
    monkeypatch.setenv("DEFAULT_TIME_PREFERENCE", "noon")

    with pytest.raises(ValueError) as excinfo:
        AppConfig()
    assert "TIMEZONE" in str(excinfo.value)
    assert "DEFAULT_TIME_PREFERENCE" in str(excinfo.value)

"""
Tests for settings and logging setup.
"""

import logging

from gestioncommande.utils.config import Settings, get_settings
from gestioncommande.utils.logger import get_logger, setup_logging


def test_settings_defaults(monkeypatch):
    for name in ("ENVIRONMENT", "TESTING", "DEBUG", "POOL_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.ENVIRONMENT == "development"
    assert settings.TESTING is False
    assert settings.POOL_SIZE == 5
    assert settings.POOL_RECYCLE == 1800
    assert settings.LOG_LEVEL == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("TESTING", "true")
    monkeypatch.setenv("POOL_SIZE", "12")

    settings = Settings(_env_file=None)

    assert settings.TESTING is True
    assert settings.POOL_SIZE == 12


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_setup_logging_writes_errors_to_file(test_settings):
    root_logger = logging.getLogger()
    previous_handlers = root_logger.handlers[:]
    previous_level = root_logger.level
    try:
        logger = setup_logging(test_settings)
        logger.error("disk full")
        for handler in root_logger.handlers:
            handler.flush()

        error_log = f"{test_settings.LOG_DIR}/error.log"
        with open(error_log) as f:
            assert "disk full" in f.read()
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in previous_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(previous_level)


def test_get_logger():
    logger = get_logger("gestioncommande.tests", level=logging.DEBUG)

    assert logger.name == "gestioncommande.tests"
    assert logger.level == logging.DEBUG


def test_settings_read_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("POOL_SIZE", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("POOL_SIZE=7\nENVIRONMENT=production\nFEATURE_FLAG=on\n")

    settings = Settings(_env_file=str(env_file))

    assert settings.POOL_SIZE == 7
    assert settings.ENVIRONMENT == "production"

import logging

import pytest

from barnmonitor.logging_config import (
    LOG_FILE_ENV,
    LOG_LEVEL_ENV,
    PACKAGE_LOGGER,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.WARNING, logging.WARNING),
        ("debug", logging.DEBUG),
        (" Error ", logging.ERROR),
        ("nonsense", logging.INFO),
        ("", logging.INFO),
        (None, logging.INFO),
    ],
)
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_configures_package_logger_only():
    root_handlers = list(logging.getLogger().handlers)

    logger = setup_logging(logging.DEBUG, log_file="")

    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logging.getLogger().handlers == root_handlers


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "barnmonitor.log"
    setup_logging(logging.INFO, log_file=str(log_file))
    logger = setup_logging(logging.INFO, log_file=str(log_file))

    assert len(logger.handlers) == 2
    logging.getLogger("barnmonitor.model.heatmap").info("zones built")
    for handler in logger.handlers:
        handler.flush()
    assert "zones built" in log_file.read_text(encoding="utf-8")


def test_environment_supplies_defaults(monkeypatch, tmp_path):
    log_file = tmp_path / "env.log"
    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    monkeypatch.setenv(LOG_FILE_ENV, str(log_file))

    logger = setup_logging()

    assert logger.level == logging.WARNING
    assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)

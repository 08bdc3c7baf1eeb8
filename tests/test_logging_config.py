from __future__ import annotations

import logging

import pytest

from logitlab import config
from logitlab.logging_config import setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("logitlab")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield
    for handler in logger.handlers:
        handler.close()
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def test_level_by_name_and_file(tmp_path, restore_logger):
    log_file = tmp_path / "lab.log"
    logger = setup_logging("debug", str(log_file))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger("logitlab.model.state").debug("hello from the state")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from the state" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_does_not_duplicate_handlers(restore_logger):
    setup_logging(logging.INFO)
    logger = setup_logging(logging.WARNING)
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_unknown_level_name_falls_back_to_info(restore_logger):
    assert setup_logging("chatty").level == logging.INFO


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("LOGITLAB_TEST_INT", "17")
    assert config._env_int("LOGITLAB_TEST_INT") == 17
    monkeypatch.setenv("LOGITLAB_TEST_INT", "seventeen")
    assert config._env_int("LOGITLAB_TEST_INT") is None

    monkeypatch.setenv("LOGITLAB_TEST_LEVEL", "warning")
    assert config._env_log_level("LOGITLAB_TEST_LEVEL", logging.INFO) == logging.WARNING
    monkeypatch.delenv("LOGITLAB_TEST_LEVEL")
    assert config._env_log_level("LOGITLAB_TEST_LEVEL", logging.INFO) == logging.INFO

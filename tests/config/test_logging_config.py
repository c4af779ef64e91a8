"""Tests for setup_logging."""
import logging
from unittest.mock import patch

import pytest

from rinha.config.logging_config import EVALUATOR_LOGGER, setup_logging
from rinha.config.settings import EvaluatorSettings


@pytest.fixture(autouse=True)
def restore_evaluator_logger_level():
    """setup_logging adjusts the evaluator logger; keep other tests unaffected."""
    evaluator_logger = logging.getLogger(EVALUATOR_LOGGER)
    previous = evaluator_logger.level
    yield
    evaluator_logger.setLevel(previous)


@pytest.fixture
def basic_config():
    with patch("rinha.config.logging_config.logging.basicConfig") as mock_basic_config:
        yield mock_basic_config


def test_defaults_log_warnings_to_stderr(basic_config):
    assert setup_logging() == logging.WARNING
    kwargs = basic_config.call_args.kwargs
    assert kwargs["level"] == logging.WARNING
    assert "stream" in kwargs
    assert "filename" not in kwargs


def test_level_comes_from_settings(basic_config):
    setup_logging(EvaluatorSettings(log_level="ERROR"))
    assert basic_config.call_args.kwargs["level"] == logging.ERROR
    assert logging.getLogger(EVALUATOR_LOGGER).level == logging.ERROR


def test_file_handler_creates_directory(basic_config, tmp_path):
    log_file = tmp_path / "logs" / "rinha.log"
    setup_logging(EvaluatorSettings(log_level="INFO"), log_file=str(log_file))
    assert (tmp_path / "logs").is_dir()
    assert basic_config.call_args.kwargs["filename"] == str(log_file)


def test_debug_without_tracing_caps_evaluator_at_info(basic_config):
    setup_logging(EvaluatorSettings(log_level="DEBUG"))
    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
    evaluator_logger = logging.getLogger(EVALUATOR_LOGGER)
    assert evaluator_logger.level == logging.INFO
    assert not logging.getLogger("rinha.evaluator.environment").isEnabledFor(logging.DEBUG)
    assert logging.getLogger("rinha.evaluator.evaluator").isEnabledFor(logging.INFO)


def test_tracing_enables_evaluator_debug(basic_config):
    setup_logging(EvaluatorSettings(log_level="WARNING", trace_evaluation=True))
    assert logging.getLogger("rinha.evaluator.operators").isEnabledFor(logging.DEBUG)

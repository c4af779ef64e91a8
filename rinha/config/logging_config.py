"""
Logging setup for hosts embedding the interpreter.

The library only creates module loggers; nothing here runs on import.
"""
import logging
import os
import sys
from typing import Optional

from .settings import EvaluatorSettings

EVALUATOR_LOGGER = "rinha.evaluator"


def setup_logging(settings: Optional[EvaluatorSettings] = None, log_file: Optional[str] = None) -> int:
    """
    Configures the root logger from EvaluatorSettings.

    The evaluator logs every dispatch, binding and operator application at
    DEBUG. That tracing is capped at INFO unless settings.trace_evaluation is
    set, so DEBUG can be used for loading and configuration without it.

    Args:
        settings: Source of log_level and trace_evaluation. Defaults are used when None.
        log_file: Optional path to a log file, created with its directory. Logs go to stderr otherwise.

    Returns:
        The numeric level applied to the root logger.
    """
    settings = settings or EvaluatorSettings()
    level = getattr(logging, settings.log_level)

    handler_args = {}
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler_args['filename'] = log_file
    else:
        # stdout belongs to Print output.
        handler_args['stream'] = sys.stderr

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        **handler_args,
    )

    evaluator_logger = logging.getLogger(EVALUATOR_LOGGER)
    if settings.trace_evaluation:
        evaluator_logger.setLevel(logging.DEBUG)
    else:
        evaluator_logger.setLevel(max(level, logging.INFO))

    logging.getLogger(__name__).info(
        f"Logging initialized at {settings.log_level} (evaluation tracing {'on' if settings.trace_evaluation else 'off'})"
    )
    return level

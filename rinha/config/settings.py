"""
Evaluator configuration.

Settings are plain pydantic models so they validate the same way whether they
come from code or from the process environment.
"""
import logging
import os
from typing import Literal, Optional

from pydantic import BaseModel, Field, PositiveInt

logger = logging.getLogger(__name__)

OverflowPolicy = Literal["error", "wrap"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Each language call costs about six interpreter frames, so the stock limit of
# 1000 stops self-recursive programs at roughly 160 levels.
DEFAULT_RECURSION_LIMIT = 10000


class EvaluatorSettings(BaseModel):
    """Knobs for a single evaluator instance and the logging around it."""
    log_level: LogLevel = Field("WARNING", description="Root logging level applied by setup_logging.")
    trace_evaluation: bool = Field(
        False,
        description="Let per-node debug tracing from rinha.evaluator through; otherwise it is capped at INFO.",
    )
    recursion_limit: Optional[PositiveInt] = Field(
        DEFAULT_RECURSION_LIMIT,
        description=(
            "Interpreter recursion limit raised to at least this value for the duration of a run. "
            "About six frames are used per language call. None keeps the interpreter's current limit."
        ),
    )
    integer_overflow: OverflowPolicy = Field(
        "error",
        description="'error' raises ArithmeticOverflowError; 'wrap' uses 32-bit two's-complement wrap-around.",
    )

    @classmethod
    def from_env(cls) -> "EvaluatorSettings":
        """
        Builds settings from RINHA_* environment variables.
        Unset variables fall back to the defaults; invalid ones raise ValidationError.
        """
        values = {}
        log_level = os.environ.get("RINHA_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.upper()
        trace = os.environ.get("RINHA_TRACE_EVALUATION")
        if trace:
            values["trace_evaluation"] = trace
        recursion_limit = os.environ.get("RINHA_RECURSION_LIMIT")
        if recursion_limit:
            values["recursion_limit"] = recursion_limit
        overflow = os.environ.get("RINHA_INTEGER_OVERFLOW")
        if overflow:
            values["integer_overflow"] = overflow.lower()
        settings = cls(**values)
        logger.debug(f"Loaded evaluator settings from environment: {settings.model_dump()}")
        return settings

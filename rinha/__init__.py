"""
Tree-walking interpreter for the rinha expression language.

Typical use::

    from rinha import run_json
    value = run_json(json_text)
"""
from typing import Optional

from rinha.ast_loader.ast_loader import AstLoader
from rinha.config.settings import EvaluatorSettings
from rinha.evaluator.evaluator import Evaluator, OutputSink, run
from rinha.evaluator.values import Value

__version__ = "0.1.0"


def run_json(
    json_text: str,
    output: Optional[OutputSink] = None,
    settings: Optional[EvaluatorSettings] = None
) -> Value:
    """Loads a JSON program and runs it. Raises ProgramLoadError or EvaluationError."""
    program = AstLoader().load_string(json_text)
    return run(program, output=output, settings=settings)


__all__ = ["AstLoader", "Evaluator", "EvaluatorSettings", "run", "run_json"]

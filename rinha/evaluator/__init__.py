"""Evaluation engine: environments, values, operators and the tree-walking evaluator."""

from .closure import Closure
from .environment import Environment
from .evaluator import Evaluator, run
from .values import render_value

__all__ = [
    "Closure",
    "Environment",
    "Evaluator",
    "render_value",
    "run",
]

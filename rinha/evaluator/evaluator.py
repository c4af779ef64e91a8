"""
Tree-walking evaluator.

Maps an AST node plus an Environment to a runtime value. Dispatch is by the
node's 'kind'; literals, data constructors and variable references are handled
here, scoping forms are delegated to SpecialFormProcessor and binary operators
to OperatorProcessor.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Callable, Dict, Optional

from rinha.config.settings import EvaluatorSettings
from rinha.system.ast_nodes import (
    BinaryNode, FirstNode, PrintNode, Program, SecondNode, TupleNode, VarNode,
)
from rinha.system.errors import EvaluationError, TypeMismatchError, UnboundVariableError
from .environment import Environment
from .operators import OperatorProcessor
from .special_forms import SpecialFormProcessor
from .values import Value, is_tuple, render_value, type_name

logger = logging.getLogger(__name__)

OutputSink = Callable[[str], None]


def stdout_sink(text: str) -> None:
    """Default output sink: one line per printed value."""
    sys.stdout.write(text + "\n")


@contextmanager
def recursion_limit(limit: Optional[int]):
    """Temporarily raises the interpreter recursion limit to at least 'limit'."""
    previous = sys.getrecursionlimit()
    if limit is not None and limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Evaluator:
    """
    Evaluates programs and individual AST nodes.

    The only state kept across evaluate() calls is configuration: the output
    sink and the processors. Environments are passed explicitly.
    """

    def __init__(
        self,
        output: Optional[OutputSink] = None,
        settings: Optional[EvaluatorSettings] = None
    ):
        """
        Initializes the evaluator.

        Args:
            output: Synchronous callable receiving the rendered text of each
                    'Print'. Defaults to writing a line to stdout.
            settings: Evaluator settings; defaults to EvaluatorSettings().
        """
        self.output: OutputSink = output if output is not None else stdout_sink
        self.settings = settings if settings is not None else EvaluatorSettings()

        self.special_form_processor = SpecialFormProcessor(self)
        self.operator_processor = OperatorProcessor(self.settings.integer_overflow)

        self.NODE_HANDLERS: Dict[str, Callable[[Any, Environment], Value]] = {
            "Int": self._eval_literal,
            "Str": self._eval_literal,
            "Bool": self._eval_literal,
            "Print": self._eval_print,
            "Binary": self._eval_binary,
            "Tuple": self._eval_tuple,
            "First": self._eval_first,
            "Second": self._eval_second,
            "Var": self._eval_var,
            "If": self.special_form_processor.handle_if,
            "Let": self.special_form_processor.handle_let,
            "Function": self.special_form_processor.handle_function,
            "Call": self.special_form_processor.handle_call,
        }
        logger.debug(f"Evaluator initialized with settings: {self.settings.model_dump()}")

    def run(self, program: Program) -> Value:
        """
        Evaluates a whole program in a fresh, empty root environment.

        Returns:
            The value of the program's root expression.

        Raises:
            EvaluationError: The first language-level failure; evaluation stops there.
            RecursionError: The program recursed deeper than the interpreter stack allows.
        """
        logger.info(f"Running program '{program.name}'")
        try:
            with recursion_limit(self.settings.recursion_limit):
                result = self.evaluate(program.expression, Environment())
        except EvaluationError as e:
            logger.error(f"Program '{program.name}' failed with {e.kind}: {e}")
            raise
        except RecursionError:
            logger.error(f"Program '{program.name}' exhausted the call stack")
            raise
        logger.info(f"Finished program '{program.name}'. Result type: {type_name(result)}")
        return result

    def evaluate(self, node: Any, env: Environment) -> Value:
        """
        Evaluates one AST node in the given environment.
        """
        handler = self.NODE_HANDLERS.get(node.kind)
        if handler is None:
            # The loader only produces known kinds; anything else is a caller bug.
            raise TypeError(f"Unknown AST node kind: {node.kind!r}")
        return handler(node, env)

    # --- Node handlers ---

    def _eval_literal(self, node: Any, env: Environment) -> Value:
        return node.value

    def _eval_print(self, node: PrintNode, env: Environment) -> Value:
        value = self.evaluate(node.value, env)
        self.output(render_value(value))
        return value

    def _eval_binary(self, node: BinaryNode, env: Environment) -> Value:
        lhs = self.evaluate(node.lhs, env)
        rhs = self.evaluate(node.rhs, env)
        return self.operator_processor.apply(node.op, lhs, rhs, node.describe())

    def _eval_tuple(self, node: TupleNode, env: Environment) -> Value:
        first = self.evaluate(node.first, env)
        second = self.evaluate(node.second, env)
        return (first, second)

    def _eval_first(self, node: FirstNode, env: Environment) -> Value:
        return self._project(node, env, 0)

    def _eval_second(self, node: SecondNode, env: Environment) -> Value:
        return self._project(node, env, 1)

    def _project(self, node: Any, env: Environment, index: int) -> Value:
        value = self.evaluate(node.value, env)
        if not is_tuple(value):
            raise TypeMismatchError(
                f"'{node.kind}' expects a Tuple, got {type_name(value)}",
                node.describe(),
            )
        return value[index]

    def _eval_var(self, node: VarNode, env: Environment) -> Value:
        try:
            return env.lookup(node.text)
        except NameError as e:
            raise UnboundVariableError(f"Unbound variable '{node.text}'", node.describe()) from e


def run(
    program: Program,
    output: Optional[OutputSink] = None,
    settings: Optional[EvaluatorSettings] = None
) -> Value:
    """Runs a program with a one-off Evaluator. See Evaluator.run."""
    return Evaluator(output=output, settings=settings).run(program)

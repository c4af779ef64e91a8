"""
Processor for the node kinds that control scoping and evaluation order:
'If', 'Let', 'Function' and 'Call'.
"""
import logging
from typing import Any, TYPE_CHECKING

from rinha.system.ast_nodes import CallNode, FunctionNode, IfNode, LetNode
from rinha.system.errors import ArityMismatchError, TypeMismatchError
from .closure import Closure
from .environment import Environment
from .values import is_bool, type_name

if TYPE_CHECKING:
    from .evaluator import Evaluator # Forward reference for type hinting

logger = logging.getLogger(__name__)

class SpecialFormProcessor:
    """
    Handles the special forms for the Evaluator.
    Each method owns the environment handling of its form and decides which
    children are evaluated, in which order and in which frame.
    """
    def __init__(self, evaluator_instance: 'Evaluator'):
        """
        Initializes the SpecialFormProcessor.

        Args:
            evaluator_instance: The Evaluator used for recursive evaluation of children.
        """
        self.evaluator = evaluator_instance
        logger.debug("SpecialFormProcessor initialized.")

    def handle_if(self, node: IfNode, env: Environment) -> Any:
        """Evaluates the condition, then exactly one branch."""
        condition = self.evaluator.evaluate(node.condition, env)
        if not is_bool(condition):
            raise TypeMismatchError(
                f"'If' condition must be Bool, got {type_name(condition)}",
                node.describe(),
            )
        chosen = node.then if condition else node.otherwise
        logger.debug(f"  'If' chose {'then' if condition else 'otherwise'} branch")
        return self.evaluator.evaluate(chosen, env)

    def handle_let(self, node: LetNode, env: Environment) -> Any:
        """
        Evaluates the value in the current frame, where the name is not yet
        visible, then the body in a new frame binding the name.
        """
        name = node.name.text
        value = self.evaluator.evaluate(node.value, env)
        let_env = env.bind(name, value)
        return self.evaluator.evaluate(node.next, let_env)

    def handle_function(self, node: FunctionNode, env: Environment) -> Closure:
        """Captures the current frame; the body is not evaluated until called."""
        return Closure([param.text for param in node.parameters], node.value, env)

    def handle_call(self, node: CallNode, env: Environment) -> Any:
        """
        Evaluates the callee, checks it is a closure of matching arity, evaluates
        the arguments left to right in the caller's frame, and runs the body in a
        call frame extending the closure's definition frame.
        """
        callee = self.evaluator.evaluate(node.callee, env)
        if not isinstance(callee, Closure):
            raise TypeMismatchError(
                f"Cannot call a value of type {type_name(callee)}",
                node.describe(),
            )

        if callee.arity != len(node.arguments):
            raise ArityMismatchError(
                f"Arity mismatch: closure expects {callee.arity} arguments, got {len(node.arguments)}",
                node.describe(),
                error_details=f"parameters: ({', '.join(callee.parameters)})",
            )

        arguments = [self.evaluator.evaluate(arg, env) for arg in node.arguments]

        call_env = callee.definition_env.extend(dict(zip(callee.parameters, arguments)))
        logger.debug(f"  Calling {callee!r} in call frame id={id(call_env)} (depth {call_env.depth()})")
        return self.evaluator.evaluate(callee.body, call_env)

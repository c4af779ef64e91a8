"""
Defines the Closure class for function values created by 'Function' nodes.
"""
import logging
from typing import Any, List

from .environment import Environment

logger = logging.getLogger(__name__)

class Closure:
    def __init__(self, parameters: List[str], body: Any, definition_env: Environment):
        """
        Represents a lexically-scoped function value.

        Args:
            parameters: The formal parameter names, in call order.
            body: The AST node evaluated when the closure is called.
            definition_env: The Environment active where the function literal was
                            evaluated. It becomes the parent of every call frame.
        """
        self.parameters: List[str] = list(parameters)
        self.body: Any = body
        self.definition_env: Environment = definition_env

        logger.debug(f"Closure created: params=({', '.join(self.parameters)}), def_env_id={id(self.definition_env)}")

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def __repr__(self):
        return f"<Closure params=({', '.join(self.parameters)}) def_env_id={id(self.definition_env)}>"

"""
Lexical environment for program evaluation.

Frames are persistent: a frame's bindings are fixed when it is created and
every extension ('let', function calls) produces a new child frame. Closures
hold a reference to the frame active at their definition, so they keep seeing
exactly the bindings that were visible there, no matter how the surrounding
scope is extended afterwards.

The evaluator only needs lookup, bind and extend. get and get_local_bindings
are inspection helpers for hosts and tests.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

class Environment:
    """
    One frame of a lexical scope chain: local bindings plus an optional parent.
    """

    def __init__(
        self,
        bindings: Optional[Dict[str, Any]] = None,
        parent: Optional['Environment'] = None
    ):
        """
        Initializes a new Environment.

        Args:
            bindings: Optional initial bindings for this frame. The mapping is
                      copied, so later changes to the caller's dict are not seen.
            parent: An optional parent frame. None makes this a root frame.
        """
        self._bindings: Dict[str, Any] = dict(bindings) if bindings else {}
        self._parent: Optional['Environment'] = parent

    @property
    def parent(self) -> Optional['Environment']:
        return self._parent

    def lookup(self, name: str) -> Any:
        """
        Looks up a variable name in this frame and its ancestors.

        Args:
            name: The variable name to look up.

        Returns:
            The value bound by the nearest enclosing frame.

        Raises:
            NameError: If no frame in the chain binds the name.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env._bindings:
                return env._bindings[name]
            env = env._parent
        logger.debug(f"'{name}' not found in env chain starting from {id(self)}")
        raise NameError(f"Unbound variable: Name '{name}' is not defined.")

    def get(self, name: str) -> Optional[Any]:
        """Like lookup, but returns None instead of raising when the name is unbound."""
        try:
            return self.lookup(name)
        except NameError:
            return None

    def bind(self, name: str, value: Any) -> 'Environment':
        """
        Returns a child frame binding a single name over this one.
        The receiver is left untouched.
        """
        logger.debug(f"Binding '{name}' over env {id(self)}")
        return Environment(bindings={name: value}, parent=self)

    def extend(self, bindings: Dict[str, Any]) -> 'Environment':
        """
        Creates a new child environment containing the given bindings,
        with the current environment as its parent. Used for function call frames.

        Args:
            bindings: Names and evaluated values for the child's local scope.

        Returns:
            The new child Environment.
        """
        logger.debug(f"Extending env {id(self)} with bindings: {list(bindings.keys())}")
        return Environment(bindings=bindings, parent=self)

    def depth(self) -> int:
        """Number of frames in the chain, this one included."""
        count = 0
        env: Optional[Environment] = self
        while env is not None:
            count += 1
            env = env._parent
        return count

    def get_local_bindings(self) -> Dict[str, Any]:
        """Returns a copy of the bindings defined directly in this frame."""
        return self._bindings.copy()

    def __repr__(self) -> str:
        parent_id = id(self._parent) if self._parent else None
        return f"<Environment id={id(self)} parent={parent_id} bindings={list(self._bindings.keys())}>"

"""
Runtime values and their textual rendering.

Values use native Python types: int, str, bool, a 2-tuple for language
tuples, and Closure for functions. Type tests use exact types because bool
is a subclass of int in Python but a distinct type in the language.
"""
from typing import Any, Tuple, Union

from .closure import Closure

Value = Union[int, str, bool, Tuple[Any, Any], Closure]

CLOSURE_PLACEHOLDER = "<#closure>"


def is_int(value: Any) -> bool:
    return type(value) is int


def is_str(value: Any) -> bool:
    return type(value) is str


def is_bool(value: Any) -> bool:
    return type(value) is bool


def is_tuple(value: Any) -> bool:
    return type(value) is tuple and len(value) == 2


def type_name(value: Any) -> str:
    """Language-level name of a value's type, for error messages."""
    if is_bool(value):
        return "Bool"
    if is_int(value):
        return "Int"
    if is_str(value):
        return "Str"
    if is_tuple(value):
        return "Tuple"
    if isinstance(value, Closure):
        return "Closure"
    return type(value).__name__


def render_value(value: Value) -> str:
    """Renders a value the way 'print' shows it."""
    if is_bool(value):
        return "true" if value else "false"
    if is_int(value) or is_str(value):
        return str(value)
    if is_tuple(value):
        first, second = value
        return f"({render_value(first)}, {render_value(second)})"
    if isinstance(value, Closure):
        return CLOSURE_PLACEHOLDER
    raise TypeError(f"Not a runtime value: {value!r}")

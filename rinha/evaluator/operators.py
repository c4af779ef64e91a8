"""
Processor for binary operators.

Operands arrive already evaluated (both sides, left to right); each applier
only checks operand types and computes the result. Integer results are kept
in the 32-bit signed range according to the configured overflow policy.
"""
import logging
import operator
from typing import Any, Callable, Dict

from rinha.system.ast_nodes import BinaryOperator, INT32_MAX, INT32_MIN
from rinha.system.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    TypeMismatchError,
)
from .values import Value, is_bool, is_int, is_str, render_value, type_name

logger = logging.getLogger(__name__)

_COMPARISONS: Dict[BinaryOperator, Callable[[Any, Any], bool]] = {
    BinaryOperator.EQ: operator.eq,
    BinaryOperator.NEQ: operator.ne,
    BinaryOperator.LT: operator.lt,
    BinaryOperator.GT: operator.gt,
    BinaryOperator.LTE: operator.le,
    BinaryOperator.GTE: operator.ge,
}


def wrap_int32(value: int) -> int:
    """Two's-complement wrap-around of an arbitrary int into 32 bits."""
    return ((value - INT32_MIN) % 2 ** 32) + INT32_MIN


def truncating_divmod(lhs: int, rhs: int):
    """
    Quotient rounded toward zero and the matching remainder, which takes the
    sign of the dividend. Python's // and % floor instead.
    """
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        quotient = -quotient
    return quotient, lhs - rhs * quotient


class OperatorProcessor:
    """
    Applies binary operators for the Evaluator.
    Each apply_* method implements one operator family over evaluated operands.
    """
    def __init__(self, integer_overflow: str = "error"):
        """
        Args:
            integer_overflow: 'error' raises ArithmeticOverflowError on results outside
                              the 32-bit range; 'wrap' wraps them around.
        """
        self.integer_overflow = integer_overflow
        self.APPLIERS: Dict[BinaryOperator, Callable[[BinaryOperator, Value, Value, str], Value]] = {
            BinaryOperator.ADD: self.apply_add,
            BinaryOperator.SUB: self.apply_arithmetic,
            BinaryOperator.MUL: self.apply_arithmetic,
            BinaryOperator.DIV: self.apply_division,
            BinaryOperator.REM: self.apply_division,
            BinaryOperator.EQ: self.apply_comparison,
            BinaryOperator.NEQ: self.apply_comparison,
            BinaryOperator.LT: self.apply_comparison,
            BinaryOperator.GT: self.apply_comparison,
            BinaryOperator.LTE: self.apply_comparison,
            BinaryOperator.GTE: self.apply_comparison,
            BinaryOperator.AND: self.apply_logical,
            BinaryOperator.OR: self.apply_logical,
        }
        logger.debug(f"OperatorProcessor initialized (integer_overflow={integer_overflow}).")

    def apply(self, op: BinaryOperator, lhs: Value, rhs: Value, expression: str = "") -> Value:
        """
        Applies 'op' to two evaluated operands.

        Args:
            op: The operator tag from the Binary node.
            lhs: Evaluated left operand.
            rhs: Evaluated right operand.
            expression: Label of the Binary node, used in error messages.

        Raises:
            TypeMismatchError, DivisionByZeroError, ArithmeticOverflowError
        """
        result = self.APPLIERS[op](op, lhs, rhs, expression)
        logger.debug(f"  {op.value}: {lhs!r}, {rhs!r} -> {result!r}")
        return result

    def apply_add(self, op: BinaryOperator, lhs: Value, rhs: Value, expression: str) -> Value:
        """Int + Int adds; every other combination concatenates the rendered operands."""
        if is_int(lhs) and is_int(rhs):
            return self._check_int(lhs + rhs, op, expression)
        return render_value(lhs) + render_value(rhs)

    def apply_arithmetic(self, op: BinaryOperator, lhs: Value, rhs: Value, expression: str) -> int:
        self._require_ints(op, lhs, rhs, expression)
        result = lhs - rhs if op is BinaryOperator.SUB else lhs * rhs
        return self._check_int(result, op, expression)

    def apply_division(self, op: BinaryOperator, lhs: Value, rhs: Value, expression: str) -> int:
        self._require_ints(op, lhs, rhs, expression)
        if rhs == 0:
            raise DivisionByZeroError(f"'{op.value}' by zero", expression, error_details=f"dividend: {lhs}")
        quotient, remainder = truncating_divmod(lhs, rhs)
        if op is BinaryOperator.DIV:
            return self._check_int(quotient, op, expression)
        return remainder

    def apply_comparison(self, op: BinaryOperator, lhs: Value, rhs: Value, expression: str) -> bool:
        """Eq/Neq/Lt/Gt/Lte/Gte over two operands of the same Int, Str or Bool type."""
        same_type = (
            (is_int(lhs) and is_int(rhs))
            or (is_str(lhs) and is_str(rhs))
            or (is_bool(lhs) and is_bool(rhs))
        )
        if not same_type:
            raise self._mismatch(op, lhs, rhs, expression, "operands of the same Int, Str or Bool type")
        return _COMPARISONS[op](lhs, rhs)

    def apply_logical(self, op: BinaryOperator, lhs: Value, rhs: Value, expression: str) -> bool:
        # Both operands are already evaluated: no short-circuit.
        if not (is_bool(lhs) and is_bool(rhs)):
            raise self._mismatch(op, lhs, rhs, expression, "Bool operands")
        if op is BinaryOperator.AND:
            return lhs and rhs
        return lhs or rhs

    # --- helpers ---

    def _require_ints(self, op: BinaryOperator, lhs: Value, rhs: Value, expression: str) -> None:
        if not (is_int(lhs) and is_int(rhs)):
            raise self._mismatch(op, lhs, rhs, expression, "Int operands")

    def _check_int(self, result: int, op: BinaryOperator, expression: str) -> int:
        if INT32_MIN <= result <= INT32_MAX:
            return result
        if self.integer_overflow == "wrap":
            return wrap_int32(result)
        raise ArithmeticOverflowError(
            f"'{op.value}' overflowed the 32-bit integer range",
            expression,
            error_details=f"result: {result}",
        )

    @staticmethod
    def _mismatch(op: BinaryOperator, lhs: Value, rhs: Value, expression: str, expected: str) -> TypeMismatchError:
        return TypeMismatchError(
            f"'{op.value}' expects {expected}, got {type_name(lhs)} and {type_name(rhs)}",
            expression,
        )

"""
System-wide custom error types.
"""

class ProgramLoadError(ValueError):
    """
    Custom exception raised when a JSON program cannot be turned into an AST
    (invalid JSON, missing fields, unknown node kinds, out-of-range literals).
    Inherits from ValueError for general compatibility but provides specific context.
    """
    def __init__(self, message: str, source: str = "", error_details: str = ""):
        """
        Initializes the ProgramLoadError.

        Args:
            message: A high-level error message.
            source: A short excerpt of the input that failed to load.
            error_details: Specific details from the underlying validator, if available.
        """
        full_message = message
        if source:
            full_message += f"\nInput: '{source}'"
        if error_details:
            full_message += f"\nDetails: {error_details}"
        super().__init__(full_message)
        self.source = source
        self.error_details = error_details


class EvaluationError(Exception):
    """
    Base exception raised during the evaluation phase of a program.
    Every language-level failure (type mismatches, unbound variables, bad arity,
    arithmetic faults) is a subclass; the first one raised aborts the run.
    """
    kind = "EvaluationError"

    def __init__(self, message: str, expression: str = "", error_details: str = ""):
        """
        Initializes the EvaluationError.

        Args:
            message: A high-level error message describing the evaluation failure.
            expression: Label of the AST node being evaluated when the error occurred.
            error_details: Specific details about the error (e.g. operand types).
        """
        full_message = f"{message}"
        if expression:
            full_message += f"\nExpression: '{expression}'"
        if error_details:
            full_message += f"\nDetails: {error_details}"
        super().__init__(full_message)
        self.message = message
        self.expression = expression
        self.error_details = error_details


class TypeMismatchError(EvaluationError):
    """Operand, callee or condition has the wrong runtime type."""
    kind = "TypeMismatch"


class UnboundVariableError(EvaluationError):
    """A variable reference did not resolve in any enclosing frame."""
    kind = "UnboundVariable"


class ArityMismatchError(EvaluationError):
    """A closure was called with the wrong number of arguments."""
    kind = "ArityMismatch"


class DivisionByZeroError(EvaluationError):
    kind = "DivisionByZero"


class ArithmeticOverflowError(EvaluationError):
    """Integer result does not fit in 32 signed bits."""
    kind = "ArithmeticOverflow"

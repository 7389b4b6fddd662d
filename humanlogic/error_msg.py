"""
Human Logic error types
"""

from typing import List, Optional, Tuple

# (what, where) pairs describing how an error was reached
Context = List[Tuple[str, str]]


class HumanLogicError(Exception):
    """Base exception for the humanlogic package with context trace support"""

    def __init__(self, msg: str, context: Optional[Context] = None):
        self.msg = msg
        self.context = context or []
        super().__init__(self.format_message())

    def format_message(self) -> str:
        if not self.context:
            return self.msg

        trace_str = ""
        for what, where in self.context:
            trace_str += f"\n{what} at {where}"

        return f"{self.msg}{trace_str}"


class InvalidArgumentTypeError(HumanLogicError, TypeError):
    """Raised when an operator receives a missing or mismatched argument"""

    def __init__(self, operation: str, *values: object):
        type_names = ", ".join(type(value).__name__ for value in values)
        super().__init__(f"Invalid argument type for {operation}: ({type_names})")
        self.operation = operation


class ExpressionSyntaxError(HumanLogicError, ValueError):
    """Raised when expression text cannot be parsed"""

    def __init__(self, msg: str, line: Optional[int] = None, column: Optional[int] = None):
        context = [] if line is None else [("input", f"line {line}, column {column}")]
        super().__init__(msg, context)
        self.line = line
        self.column = column


class EvaluationError(HumanLogicError):
    """Raised when a well-formed expression cannot be evaluated"""


def fail(msg: str) -> None:
    """Raise a HumanLogicError with a message"""
    raise HumanLogicError(msg, [])

"""Error kinds raised by the calculator core.

Every error is recoverable: the session catches it, reports one line and carries on.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Category of a failed line, reported back to the driver."""
    INVALID_EXPRESSION = 'invalid_expression'
    INVALID_IDENTIFIER = 'invalid_identifier'
    INVALID_ASSIGNMENT = 'invalid_assignment'
    UNKNOWN_VARIABLE = 'unknown_variable'
    UNKNOWN_COMMAND = 'unknown_command'
    ARITHMETIC = 'arithmetic'


class CalculatorError(Exception):
    """Base class for calculator errors."""
    kind: ErrorKind = ErrorKind.INVALID_EXPRESSION
    default_message = 'Error'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidExpression(CalculatorError):
    """Malformed expression, unbalanced parentheses or a broken postfix sequence."""
    kind = ErrorKind.INVALID_EXPRESSION
    default_message = 'Invalid expression'


class InvalidIdentifier(CalculatorError):
    """Identifier is not made of latin letters only."""
    kind = ErrorKind.INVALID_IDENTIFIER
    default_message = 'Invalid identifier'


class InvalidAssignment(CalculatorError):
    """Right-hand side of a declaration is neither an integer nor an identifier."""
    kind = ErrorKind.INVALID_ASSIGNMENT
    default_message = 'Invalid assignment'


class UnknownVariable(CalculatorError):
    """Referenced identifier was never declared."""
    kind = ErrorKind.UNKNOWN_VARIABLE
    default_message = 'Unknown variable'


class UnknownCommand(CalculatorError):
    """Unrecognized '/'-prefixed input."""
    kind = ErrorKind.UNKNOWN_COMMAND
    default_message = 'Unknown command'


class ArithmeticFailure(CalculatorError):
    """Raised for division by zero and unsupported exponents."""
    kind = ErrorKind.ARITHMETIC
    default_message = 'Arithmetic error'

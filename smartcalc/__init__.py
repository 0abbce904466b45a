"""smartcalc: an arbitrary-precision integer calculator with variables."""

from .errors import (
    ArithmeticFailure,
    CalculatorError,
    ErrorKind,
    InvalidAssignment,
    InvalidExpression,
    InvalidIdentifier,
    UnknownCommand,
    UnknownVariable,
)
from .session import HELP_TEXT, LineResult, Session
from .variables import VariableStore

__all__ = [
    'ArithmeticFailure', 'CalculatorError', 'ErrorKind', 'InvalidAssignment',
    'InvalidExpression', 'InvalidIdentifier', 'UnknownCommand', 'UnknownVariable',
    'HELP_TEXT', 'LineResult', 'Session', 'VariableStore',
]

"""Line classification and dispatch for one calculator session.

A line is either a command ('/help', '/exit'), a declaration ('name = value') or an
expression. ``Session.process`` handles exactly one line and never raises for user
input: every ``CalculatorError`` becomes a ``LineResult`` carrying its kind and
message.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .converter import convert
from .errors import (
    CalculatorError,
    ErrorKind,
    InvalidAssignment,
    InvalidExpression,
    InvalidIdentifier,
    UnknownCommand,
)
from .evaluator import DEFAULT_MAX_EXPONENT, DEFAULT_MAX_RESULT_BITS, Evaluator, render
from .grammar import is_valid_expression
from .normalizer import normalize, strip_whitespace
from .tokens import is_identifier
from .variables import VariableStore

logger = logging.getLogger(__name__)

HELP_TEXT = """\
The program calculates expressions over integers of any size.
Supported operations:
  - Addition and subtraction:  2 + 3 - 1, as many pluses and minuses as you like (2 --- 3)
  - Multiplication:            6 * 7
  - Integer division:          7 / 2 (rounds toward zero)
  - Power:                     2 ^ 100
  - Parentheses:               (2 + 3) * 4
Variables (latin letters only, case-sensitive):
  a = 5
  b = a
  a * b + 1
Commands:
  /help   show this message
  /exit   quit the program"""

_DECLARED_NUMBER = re.compile(r'-?[0-9]+')


@dataclass(frozen=True)
class LineResult:
    """Outcome of processing a single input line."""
    running: bool = True
    output: Optional[str] = None
    error: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    @property
    def message(self) -> Optional[str]:
        """The line the driver should print, if any."""
        return self.error_message if self.error is not None else self.output


class Session:
    """One interactive session: owns its variables and processes lines."""

    def __init__(self, variables: Optional[VariableStore] = None,
                 max_exponent: int = DEFAULT_MAX_EXPONENT,
                 max_result_bits: int = DEFAULT_MAX_RESULT_BITS):
        self.variables = variables if variables is not None else VariableStore()
        self.evaluator = Evaluator(self.variables, max_exponent, max_result_bits)

    def process(self, line: str) -> LineResult:
        """Classify and handle one line."""
        if not line:
            return LineResult()
        try:
            if line.startswith('/'):
                return self._handle_command(line)
            if '=' in line:
                self._handle_declaration(line)
                return LineResult()
            return LineResult(output=self.evaluate(line))
        except CalculatorError as e:
            logger.debug("Line %r failed: %s (%s)", line, e.message, e.kind.value)
            return LineResult(error=e.kind, error_message=e.message)

    def _handle_command(self, line: str) -> LineResult:
        if line == '/help':
            return LineResult(output=HELP_TEXT)
        if line == '/exit':
            return LineResult(running=False)
        raise UnknownCommand()

    def _handle_declaration(self, line: str) -> None:
        left, right = line.split('=', 1)
        name = strip_whitespace(left)
        value = strip_whitespace(right)
        if not is_identifier(name):
            raise InvalidIdentifier()
        if _DECLARED_NUMBER.fullmatch(value):
            self.variables.set(name, value)
        elif is_identifier(value):
            self.variables.set(name, self.variables.get(value))
        else:
            raise InvalidAssignment()
        logger.debug("Declared %s = %s", name, self.variables.get(name))

    def evaluate(self, expression: str) -> str:
        """Evaluate an expression line and return its decimal result."""
        compact = strip_whitespace(expression)
        if not is_valid_expression(compact):
            raise InvalidExpression()
        normalized = normalize(compact)
        logger.debug("Normalized %r to %r", expression, normalized)
        return render(self.evaluator.evaluate(convert(normalized)))

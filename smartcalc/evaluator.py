"""Postfix evaluation with exact integer arithmetic."""

import logging
import sys
from typing import List

from .errors import ArithmeticFailure, InvalidExpression, InvalidIdentifier
from .tokens import Token, TokenKind, is_identifier
from .variables import VariableStore

logger = logging.getLogger(__name__)

# Python 3.11+ caps int <-> str conversion at 4300 digits by default.
if hasattr(sys, 'set_int_max_str_digits'):
    sys.set_int_max_str_digits(0)

DEFAULT_MAX_EXPONENT = 100000
DEFAULT_MAX_RESULT_BITS = 4000000


def truncating_divide(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ArithmeticFailure("Division by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def checked_power(base: int, exponent: int, max_exponent: int = DEFAULT_MAX_EXPONENT,
                  max_result_bits: int = DEFAULT_MAX_RESULT_BITS) -> int:
    """Exact power, refusing exponents or results beyond the configured ceilings."""
    if exponent < 0:
        raise ArithmeticFailure("Negative exponent")
    # 0, 1 and -1 stay small for any exponent
    if abs(base) > 1:
        if exponent > max_exponent:
            raise ArithmeticFailure("Exponent too large")
        if (abs(base).bit_length() - 1) * exponent > max_result_bits:
            raise ArithmeticFailure("Result too large")
    return base ** exponent


def render(value: int) -> str:
    return str(value)


class Evaluator:
    """Evaluates postfix token sequences against a variable store."""

    def __init__(self, variables: VariableStore, max_exponent: int = DEFAULT_MAX_EXPONENT,
                 max_result_bits: int = DEFAULT_MAX_RESULT_BITS):
        self.variables = variables
        self.max_exponent = max_exponent
        self.max_result_bits = max_result_bits

    def _apply(self, op: str, a: int, b: int) -> int:
        if op == '+':
            return a + b
        if op == '-':
            return a - b
        if op == '*':
            return a * b
        if op == '/':
            return truncating_divide(a, b)
        if op == '^':
            return checked_power(a, b, self.max_exponent, self.max_result_bits)
        raise InvalidExpression(f"Unknown operator: {op}")

    def _lookup(self, name: str) -> int:
        if not is_identifier(name):
            raise InvalidIdentifier()
        return int(self.variables.get(name))

    def evaluate(self, postfix: List[Token]) -> int:
        """Run the postfix sequence and return the single remaining value."""
        stack: List[int] = []
        for token in postfix:
            if token.kind is TokenKind.NUMBER:
                stack.append(int(token.text))
            elif token.is_operator:
                if len(stack) < 2:
                    logger.debug("Operator %r is missing operands", token.text)
                    raise InvalidExpression()
                b = stack.pop()
                a = stack.pop()
                stack.append(self._apply(token.text, a, b))
            elif token.kind is TokenKind.IDENTIFIER:
                stack.append(self._lookup(token.text))
            else:
                raise InvalidExpression()
        if len(stack) != 1:
            logger.debug("Evaluation left %d values on the stack", len(stack))
            raise InvalidExpression()
        return stack[0]

"""Syntax check for expression lines.

Accepted form, on whitespace-free input::

    expression : sign* operand (operator operand)*
    operand    : '('* word ')'*
    operator   : sign+ | '*' | '/' | '^'
    sign       : '+' | '-'
    word       : [A-Za-z0-9_]+

Parenthesis balance is not checked here; the converter rejects unbalanced input.
"""

import string

SIGNS = '+-'
MULTIPLICATIVE = '*/^'
WORD_CHARS = frozenset(string.ascii_letters + string.digits + '_')


class ExpressionScanner:
    """Single-pass scanner over a whitespace-free expression."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ''

    def _skip(self, chars) -> int:
        start = self.pos
        while self._peek() and self._peek() in chars:
            self.pos += 1
        return self.pos - start

    def _operand(self) -> bool:
        self._skip('(')
        if self._skip(WORD_CHARS) == 0:
            return False
        self._skip(')')
        return True

    def _operator(self) -> bool:
        if self._skip(SIGNS):
            return True
        ch = self._peek()
        if ch and ch in MULTIPLICATIVE:
            self.pos += 1
            return True
        return False

    def matches(self) -> bool:
        self.pos = 0
        self._skip(SIGNS)
        if not self._operand():
            return False
        while self.pos < len(self.text):
            if not self._operator() or not self._operand():
                return False
        return True


def is_valid_expression(text: str) -> bool:
    return ExpressionScanner(text).matches()

"""Token model shared by the converter and the evaluator."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

OPERATORS = '+-*/^'

# Higher number = higher precedence. Every operator is left-associative, '^' included.
PRECEDENCE: Dict[str, int] = {
    '+': 0,
    '-': 0,
    '*': 1,
    '/': 1,
    '^': 3,
}

NUMBER_RE = re.compile(r'[+-]?[0-9]+')
IDENTIFIER_RE = re.compile(r'[A-Za-z]+')


def is_number(text: str) -> bool:
    return NUMBER_RE.fullmatch(text) is not None


def is_identifier(text: str) -> bool:
    return IDENTIFIER_RE.fullmatch(text) is not None


class TokenKind(Enum):
    NUMBER = 'NUMBER'
    IDENTIFIER = 'IDENTIFIER'
    OPERATOR = 'OPERATOR'
    OPEN_PAREN = 'OPEN_PAREN'
    CLOSE_PAREN = 'CLOSE_PAREN'


@dataclass(frozen=True)
class Token:
    """A single lexical unit: number, identifier, operator or parenthesis."""
    text: str
    kind: TokenKind

    @classmethod
    def from_text(cls, text: str) -> Token:
        """Classify raw text; operators win over parentheses, which win over numbers."""
        if len(text) == 1 and text in OPERATORS:
            return cls(text, TokenKind.OPERATOR)
        if text == '(':
            return cls(text, TokenKind.OPEN_PAREN)
        if text == ')':
            return cls(text, TokenKind.CLOSE_PAREN)
        if is_number(text):
            return cls(text, TokenKind.NUMBER)
        return cls(text, TokenKind.IDENTIFIER)

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    @property
    def precedence(self) -> Optional[int]:
        return PRECEDENCE.get(self.text) if self.is_operator else None

    @property
    def left_associative(self) -> bool:
        return self.is_operator

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.text!r})"

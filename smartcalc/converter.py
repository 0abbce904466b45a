"""Tokenizer and shunting-yard conversion to postfix (RPN) order."""

import logging
from typing import List

from .errors import InvalidExpression
from .grammar import SIGNS, WORD_CHARS
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)


def tokenize(text: str) -> List[Token]:
    """Split normalized, whitespace-free input into tokens.

    Runs of word characters become one token. A sign at position 0 followed by a
    digit is glued to that digit run, so '-5+3' yields '-5', '+', '3'.
    """
    tokens: List[Token] = []
    i = 0
    n = len(text)
    while i < n:
        start = i
        if i == 0 and text[i] in SIGNS and i + 1 < n and text[i + 1].isdigit():
            i += 1
            while i < n and text[i].isdigit():
                i += 1
        elif text[i] in WORD_CHARS:
            while i < n and text[i] in WORD_CHARS:
                i += 1
        else:
            i += 1
        tokens.append(Token.from_text(text[start:i]))
    return tokens


def to_postfix(tokens: List[Token]) -> List[Token]:
    """Reorder infix tokens into postfix using an operator stack."""
    output: List[Token] = []
    stack: List[Token] = []
    for token in tokens:
        if token.is_operator:
            while stack and stack[-1].is_operator and stack[-1].precedence >= token.precedence:
                output.append(stack.pop())
            stack.append(token)
        elif token.kind is TokenKind.OPEN_PAREN:
            stack.append(token)
        elif token.kind is TokenKind.CLOSE_PAREN:
            while stack and stack[-1].kind is not TokenKind.OPEN_PAREN:
                output.append(stack.pop())
            if not stack:
                raise InvalidExpression()
            stack.pop()
        else:
            output.append(token)
    while stack:
        token = stack.pop()
        if token.kind in (TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN):
            raise InvalidExpression()
        output.append(token)
    return output


def convert(text: str) -> List[Token]:
    postfix = to_postfix(tokenize(text))
    logger.debug("Postfix for %r: %s", text, ' '.join(t.text for t in postfix))
    return postfix

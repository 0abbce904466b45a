import dataclasses

import pytest

from smartcalc.normalizer import collapse_signs, normalize, strip_whitespace
from smartcalc.tokens import Token, TokenKind


# ---------------------------
# Token Model Tests
# ---------------------------

@pytest.mark.parametrize("text,precedence", [
    ("+", 0),
    ("-", 0),
    ("*", 1),
    ("/", 1),
    ("^", 3),
])
def test_operator_tokens_have_precedence(text, precedence):
    token = Token.from_text(text)
    assert token.kind is TokenKind.OPERATOR
    assert token.precedence == precedence
    assert token.left_associative


@pytest.mark.parametrize("text,kind", [
    ("(", TokenKind.OPEN_PAREN),
    (")", TokenKind.CLOSE_PAREN),
    ("42", TokenKind.NUMBER),
    ("-42", TokenKind.NUMBER),
    ("+7", TokenKind.NUMBER),
    ("abc", TokenKind.IDENTIFIER),
    ("a2a", TokenKind.IDENTIFIER),
    ("--", TokenKind.IDENTIFIER),
])
def test_token_classification(text, kind):
    token = Token.from_text(text)
    assert token.kind is kind
    assert token.precedence is None


def test_tokens_are_immutable_values():
    token = Token.from_text("5")
    assert token == Token("5", TokenKind.NUMBER)
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.text = "6"


# ---------------------------
# Normalizer Tests
# ---------------------------

@pytest.mark.parametrize("count", range(1, 12))
def test_minus_run_parity(count):
    expected = "+" if count % 2 == 0 else "-"
    assert collapse_signs("-" * count) == expected


@pytest.mark.parametrize("raw,expected", [
    ("-----", "-"),
    ("----", "+"),
    ("+-+-", "+"),
    ("-+-+-", "-"),
    ("+++", "+"),
    ("1 - - 2", "1+2"),
    ("3 ---- 4", "3+4"),
    ("9 +++ 10 -- 8", "9+10+8"),
    ("a\t+\n b", "a+b"),
    ("2*3", "2*3"),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_strip_whitespace_removes_every_kind():
    assert strip_whitespace(" 1 \t+\r\n 2 ") == "1+2"

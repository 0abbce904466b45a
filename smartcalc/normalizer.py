"""Sign normalization for expression input."""

import re

_WHITESPACE = re.compile(r'\s')
_TO_PLUS = re.compile(r'(?:--|\+\+)+')
_TO_MINUS = re.compile(r'\+-|-\+')


def strip_whitespace(text: str) -> str:
    return _WHITESPACE.sub('', text)


def collapse_signs(text: str) -> str:
    """Reduce every run of '+'/'-' to one sign: even minus count -> '+', odd -> '-'.

    Each rewrite keeps the parity of minus signs in the run, so looping until no
    pattern matches leaves exactly one sign per run.
    """
    while _TO_PLUS.search(text) or _TO_MINUS.search(text):
        text = _TO_PLUS.sub('+', text)
        text = _TO_MINUS.sub('-', text)
    return text


def normalize(raw: str) -> str:
    """Remove whitespace, then collapse sign runs to a fixed point."""
    return collapse_signs(strip_whitespace(raw))

"""Session-owned variable storage."""

from typing import Dict, Optional

from .errors import UnknownVariable


class VariableStore:
    """Maps identifiers to decimal-string integers.

    Values are kept exactly as declared ('007' stays '007'); they are parsed on use.
    Entries are never removed.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def get(self, name: str) -> str:
        """Return the stored decimal string or raise UnknownVariable."""
        try:
            return self._values[name]
        except KeyError:
            raise UnknownVariable() from None

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

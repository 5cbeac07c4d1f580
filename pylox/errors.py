from typing import Any

from pylox.tokens import Token


class ParseError(Exception):
    """Raised by the parser when a grammar rule cannot be satisfied."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class LoxRuntimeError(Exception):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class InternalError(Exception):
    """An interpreter invariant was violated; not a user-facing error."""


class ReturnSignal:
    """Outcome of a statement that executed `return`.

    Statements hand this back to their caller instead of raising it, so a
    function returning a value is never confused with a runtime fault.
    """
    __slots__ = ('value',)

    def __init__(self, value: Any):
        self.value = value

    def __repr__(self) -> str:
        return f"ReturnSignal({self.value!r})"

"""Runtime value helpers for Lox.

Lox values map directly onto Python objects:

    number   -> float
    string   -> str
    boolean  -> bool
    nil      -> None
    callable -> pylox.functions.LoxCallable

This module answers the questions the interpreter asks about values:
which variant a value belongs to, whether it is truthy, and how it is
displayed by `print` and by string concatenation.
"""

from __future__ import annotations

from typing import Any

NUMBER = 'number'
STRING = 'string'
BOOLEAN = 'boolean'
NIL = 'nil'
CALLABLE = 'callable'


def kind_of(value: Any) -> str:
    """Return the name of the variant a runtime value belongs to."""
    # bool is checked before anything numeric; numbers are always floats.
    if value is None:
        return NIL
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, float):
        return NUMBER
    if isinstance(value, str):
        return STRING
    return CALLABLE


def same_kind(a: Any, b: Any) -> bool:
    return kind_of(a) == kind_of(b)


def is_truthy(value: Any) -> bool:
    """Only nil and false are falsy; 0 and "" are truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def number_to_string(number: float) -> str:
    """Integral values print without a decimal point."""
    if number.is_integer():
        return str(int(number))
    return repr(number)


def to_string(value: Any) -> str:
    """Convert a Lox value to its display text."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return number_to_string(value)
    if isinstance(value, str):
        return value
    return str(value)

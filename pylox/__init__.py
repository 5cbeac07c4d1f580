# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .diagnostics import Diagnostics
from .errors import LoxRuntimeError, ParseError
from .interpreter import Interpreter
from .session import Session, run

__all__ = [
    'run',
    'Session',
    'Interpreter',
    'Diagnostics',
    'LoxRuntimeError',
    'ParseError',
]

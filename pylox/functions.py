from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List

from pylox.ast import Function
from pylox.environment import Environment
from pylox.errors import ReturnSignal

if TYPE_CHECKING:
    from pylox.interpreter import Interpreter


class LoxCallable(ABC):
    """Anything a Lox call expression can invoke."""

    @abstractmethod
    def arity(self) -> int:
        ...

    @abstractmethod
    def call(self, interpreter: 'Interpreter', arguments: List[Any]) -> Any:
        ...


@dataclass(eq=False)
class NativeFunction(LoxCallable):
    """A function implemented in Python and exposed to Lox code."""
    name: str
    num_params: int
    fn: Callable[..., Any]

    def arity(self) -> int:
        return self.num_params

    def call(self, interpreter: 'Interpreter', arguments: List[Any]) -> Any:
        return self.fn(*arguments)

    def __str__(self) -> str:
        return '<native fn>'


class LoxFunction(LoxCallable):
    """A user-defined function together with the scope it was declared in."""
    def __init__(self, declaration: Function, closure: Environment):
        self.declaration = declaration
        self.closure = closure

    def arity(self) -> int:
        return len(self.declaration.params)

    def call(self, interpreter: 'Interpreter', arguments: List[Any]) -> Any:
        environment = Environment(self.closure)
        for param, arg in zip(self.declaration.params, arguments):
            environment.define(param.lexeme, arg)
        result = interpreter.execute_block(self.declaration.body, environment)
        if isinstance(result, ReturnSignal):
            return result.value
        return None

    def __str__(self) -> str:
        return f"<fn {self.declaration.name.lexeme}>"

    def __repr__(self) -> str:
        return f"<function {self.declaration.name.lexeme}>"

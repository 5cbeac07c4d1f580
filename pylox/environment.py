from typing import Any, Dict, Optional

from pylox.errors import LoxRuntimeError
from pylox.tokens import Token


class Environment:
    """A lexical scope mapping names to values, linked to its enclosing scope.

    The global scope has no enclosing environment. Blocks and function
    calls create child environments; closures keep theirs alive by holding
    a reference to them.
    """
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, Any] = {}

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def define(self, name: str, value: Any) -> None:
        # Redefinition in the same scope simply overwrites.
        self.values[name] = value

    def get(self, name: Token) -> Any:
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing is not None:
            return self.enclosing.get(name)
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any) -> None:
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
            return
        if self.enclosing is not None:
            self.enclosing.assign(name, value)
            return
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

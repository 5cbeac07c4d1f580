"""Tree-walking interpreter for the Lox language.

The interpreter executes statement nodes and evaluates expression nodes
against an explicit environment argument; there is no "current
environment" field, so entering a block or a function call only ever
affects the nested evaluation.

Executing a statement yields one of two outcomes: `None` when the
statement completed normally, or a `ReturnSignal` carrying the value of
a `return` that must unwind to the enclosing function call. Runtime
faults travel separately as `LoxRuntimeError` and abort the current
`interpret` call.
"""

from __future__ import annotations

import time
from typing import Any, List, Optional, Sequence

from .ast import (
    Expr, Stmt, Binary, Unary, Grouping, Literal, Variable, Assign,
    Logical, Call, Expression, Print, Var, Block, If, While, Function,
    Return,
)
from .diagnostics import Diagnostics
from .environment import Environment
from .errors import InternalError, LoxRuntimeError, ReturnSignal
from .functions import LoxCallable, LoxFunction, NativeFunction
from .tokens import Token, TokenType
from .types import CALLABLE, NIL, NUMBER, STRING, is_truthy, kind_of, same_kind, to_string

ARITHMETIC_OPERATORS = {TokenType.MINUS, TokenType.STAR, TokenType.SLASH}

COMPARISON_OPERATORS = {
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
    TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL,
}


class Interpreter:
    """Core interpreter that executes Lox statements."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.globals = Environment()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None
        self.load_globals()

    def debug(self, msg: str, level: int = 1) -> None:
        if self.debug_level >= level and self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self) -> None:
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def load_globals(self) -> None:
        def clock() -> float:
            return time.time() * 1000.0

        self.globals.define('clock', NativeFunction('clock', 0, clock))

    # Public API

    def interpret(self, statements: Sequence[Stmt], diagnostics: Optional[Diagnostics] = None) -> Diagnostics:
        """Execute a program's statements against the global environment.

        The first runtime error stops the run and is reported to
        `diagnostics`; output produced before it stands.
        """
        if diagnostics is None:
            diagnostics = Diagnostics()
        self.debug(f"interpret {len(statements)} statement(s)")
        try:
            for stmt in statements:
                result = self.execute(stmt, self.globals)
                if isinstance(result, ReturnSignal):
                    raise InternalError("Return outside of a function.")
        except LoxRuntimeError as error:
            self.debug(f"runtime error at line {error.token.line}: {error.message}")
            diagnostics.runtime_error(error)
        self.debug("interpret done")
        return diagnostics

    # Statements

    def execute_block(self, statements: Sequence[Stmt], env: Environment) -> Optional[ReturnSignal]:
        for stmt in statements:
            result = self.execute(stmt, env)
            if isinstance(result, ReturnSignal):
                return result
        return None

    def execute(self, node: Stmt, env: Environment) -> Optional[ReturnSignal]:
        if isinstance(node, Expression):
            self.evaluate(node.expression, env)
            return None
        if isinstance(node, Print):
            value = self.evaluate(node.expression, env)
            print(to_string(value))
            return None
        if isinstance(node, Var):
            # Bound to nil first so the initializer can see the name.
            env.define(node.name.lexeme, None)
            if node.initializer is not None:
                env.define(node.name.lexeme, self.evaluate(node.initializer, env))
            self.debug(f"declare {node.name.lexeme} = {to_string(env.values[node.name.lexeme])}", 2)
            return None
        if isinstance(node, Block):
            return self.execute_block(node.statements, Environment(env))
        if isinstance(node, Function):
            env.define(node.name.lexeme, LoxFunction(node, env))
            self.debug(f"define function {node.name.lexeme}", 2)
            return None
        if isinstance(node, If):
            cond = self.evaluate(node.condition, env)
            truthy = is_truthy(cond)
            self.debug(f"if condition {to_string(cond)} -> {truthy}", 3)
            if truthy:
                return self.execute(node.then_branch, env)
            if node.else_branch is not None:
                return self.execute(node.else_branch, env)
            return None
        if isinstance(node, While):
            while is_truthy(self.evaluate(node.condition, env)):
                result = self.execute(node.body, env)
                if isinstance(result, ReturnSignal):
                    return result
            return None
        if isinstance(node, Return):
            value = self.evaluate(node.value, env) if node.value is not None else None
            return ReturnSignal(value)
        raise InternalError(f"execute: unexpected node type {type(node).__name__}")

    # Expressions

    def evaluate(self, node: Expr, env: Environment) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.expression, env)
        if isinstance(node, Variable):
            return env.get(node.name)
        if isinstance(node, Assign):
            value = self.evaluate(node.value, env)
            env.assign(node.name, value)
            return value
        if isinstance(node, Logical):
            left = self.evaluate(node.left, env)
            if node.operator.type == TokenType.OR:
                if is_truthy(left):
                    return left
            elif not is_truthy(left):
                return left
            return self.evaluate(node.right, env)
        if isinstance(node, Unary):
            right = self.evaluate(node.right, env)
            if node.operator.type == TokenType.BANG:
                return not is_truthy(right)
            if node.operator.type == TokenType.MINUS:
                if not isinstance(right, float):
                    raise LoxRuntimeError(node.operator, "Operand must be a number.")
                return -right
            raise InternalError(f"unknown unary operator {node.operator.lexeme}")
        if isinstance(node, Binary):
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return self.apply_binary_op(node.operator, left, right)
        if isinstance(node, Call):
            callee = self.evaluate(node.callee, env)
            args = [self.evaluate(arg, env) for arg in node.arguments]
            return self.call_function(callee, args, node.paren)
        raise InternalError(f"evaluate: unexpected node type {type(node).__name__}")

    def call_function(self, callee: Any, args: List[Any], paren: Token) -> Any:
        if not isinstance(callee, LoxCallable):
            raise LoxRuntimeError(paren, "Can only call functions and classes.")
        if len(args) != callee.arity():
            raise LoxRuntimeError(paren, f"Expected {callee.arity()} arguments but got {len(args)}.")
        self.debug(f"call {callee} with {len(args)} argument(s)", 3)
        return callee.call(self, args)

    def apply_binary_op(self, operator: Token, a: Any, b: Any) -> Any:
        op = operator.type
        if op == TokenType.COMMA:
            return b
        if op == TokenType.PLUS:
            if isinstance(a, float) and isinstance(b, float):
                return a + b
            if isinstance(a, str) and isinstance(b, str):
                return a + b
            # One number and one string, in either order.
            if {kind_of(a), kind_of(b)} == {NUMBER, STRING}:
                return to_string(a) + to_string(b)
            raise LoxRuntimeError(operator, "Operands must be two numbers or two strings.")
        if op in ARITHMETIC_OPERATORS:
            if not (isinstance(a, float) and isinstance(b, float)):
                raise LoxRuntimeError(operator, "Operands must be numbers.")
            if op == TokenType.MINUS:
                return a - b
            if op == TokenType.STAR:
                return a * b
            if b == 0:
                raise LoxRuntimeError(operator, "Division by zero.")
            return a / b
        if op in COMPARISON_OPERATORS:
            if not same_kind(a, b):
                raise LoxRuntimeError(operator, "Operands must be of same type.")
            if op == TokenType.EQUAL_EQUAL:
                return self.equal_values(a, b)
            if op == TokenType.BANG_EQUAL:
                return not self.equal_values(a, b)
            return self.compare_values(operator, a, b)
        raise InternalError(f"unknown binary operator {operator.lexeme}")

    def equal_values(self, a: Any, b: Any) -> bool:
        # Callers guarantee both values are of the same variant.
        if kind_of(a) == CALLABLE:
            return a is b
        return a == b

    def compare_values(self, operator: Token, a: Any, b: Any) -> bool:
        kind = kind_of(a)
        if kind == CALLABLE:
            raise LoxRuntimeError(operator, "Operands must be of same type.")
        if kind == NIL:
            # nil is equal to itself and never less than itself.
            return operator.type in (TokenType.LESS_EQUAL, TokenType.GREATER_EQUAL)
        op = operator.type
        if op == TokenType.LESS:
            return a < b
        if op == TokenType.LESS_EQUAL:
            return a <= b
        if op == TokenType.GREATER:
            return a > b
        return a >= b

"""Textual renderings of the Lox AST, used for debugging the parser.

`AstPrinter` writes nodes in a fully parenthesized prefix form that
makes the parsed precedence explicit:

    -1 * (2 + 3)   ->   (* (- 1.0) (group (+ 2.0 3.0)))

`RpnPrinter` writes expressions in reverse Polish notation:

    (1 + 2) * 3    ->   1.0 2.0 + 3.0 *
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from .ast import (
    Expr, Stmt, Binary, Unary, Grouping, Literal, Variable, Assign,
    Logical, Call, Expression, Print, Var, Block, If, While, Function,
    Return,
)


def literal_text(value: Any) -> str:
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return repr(value)
    return str(value)


class AstPrinter:
    def print(self, node: Union[Expr, Stmt]) -> str:
        if isinstance(node, Stmt):
            return self.print_stmt(node)
        return self.print_expr(node)

    def print_program(self, statements: Sequence[Stmt]) -> str:
        return '\n'.join(self.print_stmt(s) for s in statements)

    def print_expr(self, expr: Expr) -> str:
        if isinstance(expr, Binary):
            return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)
        if isinstance(expr, Logical):
            return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)
        if isinstance(expr, Unary):
            return self.parenthesize(expr.operator.lexeme, expr.right)
        if isinstance(expr, Grouping):
            return self.parenthesize('group', expr.expression)
        if isinstance(expr, Literal):
            return literal_text(expr.value)
        if isinstance(expr, Variable):
            return expr.name.lexeme
        if isinstance(expr, Assign):
            return self.parenthesize(f"= {expr.name.lexeme}", expr.value)
        if isinstance(expr, Call):
            return self.parenthesize('call', expr.callee, *expr.arguments)
        raise TypeError(f"cannot print {type(expr).__name__}")

    def print_stmt(self, stmt: Stmt) -> str:
        if isinstance(stmt, Expression):
            return self.parenthesize(';', stmt.expression)
        if isinstance(stmt, Print):
            return self.parenthesize('print', stmt.expression)
        if isinstance(stmt, Var):
            if stmt.initializer is None:
                return f"(var {stmt.name.lexeme})"
            return self.parenthesize(f"var {stmt.name.lexeme}", stmt.initializer)
        if isinstance(stmt, Block):
            return self.parenthesize('block', *stmt.statements)
        if isinstance(stmt, If):
            if stmt.else_branch is None:
                return self.parenthesize('if', stmt.condition, stmt.then_branch)
            return self.parenthesize('if', stmt.condition, stmt.then_branch, stmt.else_branch)
        if isinstance(stmt, While):
            return self.parenthesize('while', stmt.condition, stmt.body)
        if isinstance(stmt, Function):
            params = ' '.join(p.lexeme for p in stmt.params)
            return self.parenthesize(f"fun {stmt.name.lexeme} ({params})", *stmt.body)
        if isinstance(stmt, Return):
            if stmt.value is None:
                return '(return)'
            return self.parenthesize('return', stmt.value)
        raise TypeError(f"cannot print {type(stmt).__name__}")

    def parenthesize(self, name: str, *nodes: Union[Expr, Stmt]) -> str:
        parts = [name] + [self.print(n) for n in nodes]
        return '(' + ' '.join(parts) + ')'


class RpnPrinter:
    def print(self, expr: Expr) -> str:
        if isinstance(expr, (Binary, Logical)):
            return f"{self.print(expr.left)} {self.print(expr.right)} {expr.operator.lexeme}"
        if isinstance(expr, Unary):
            return f"{self.print(expr.right)} {expr.operator.lexeme}"
        if isinstance(expr, Grouping):
            # Postfix order already encodes the grouping.
            return self.print(expr.expression)
        if isinstance(expr, Literal):
            return literal_text(expr.value)
        if isinstance(expr, Variable):
            return expr.name.lexeme
        if isinstance(expr, Assign):
            return f"{self.print(expr.value)} {expr.name.lexeme} ="
        if isinstance(expr, Call):
            parts = [self.print(a) for a in expr.arguments] + [self.print(expr.callee), 'call']
            return ' '.join(parts)
        raise TypeError(f"cannot print {type(expr).__name__}")

"""JSON serialization/deserialization for the Lox AST.

This module converts between Lox AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. It supports a full
round-trip for every statement and expression node and for `Token`.
A whole program is serialized as a list of statement objects.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .ast import (
    Stmt,
    Binary,
    Unary,
    Grouping,
    Literal,
    Variable,
    Assign,
    Logical,
    Call,
    Expression,
    Print,
    Var,
    Block,
    If,
    While,
    Function,
    Return,
)
from .tokens import Token, TokenType


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"type": t.type.name, "lexeme": t.lexeme, "literal": t.literal, "line": t.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    literal = o.get("literal")
    if o["type"] == "NUMBER" and literal is not None:
        literal = float(literal)
    return Token(TokenType[o["type"]], o["lexeme"], literal, o["line"])


def program_to_obj(statements: Sequence[Stmt]) -> List[Any]:
    return [ast_to_obj(s) for s in statements]


def program_from_obj(obj: List[Any]) -> List[Stmt]:
    if not isinstance(obj, list):
        raise TypeError("Invalid program object: expected a list of statements")
    return [ast_from_obj(s) for s in obj]


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None
    if isinstance(node, Token):
        return token_to_obj(node)

    # Expressions
    if isinstance(node, Binary):
        return {"type": "Binary", "left": ast_to_obj(node.left), "operator": token_to_obj(node.operator),
                "right": ast_to_obj(node.right)}
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": token_to_obj(node.operator), "right": ast_to_obj(node.right)}
    if isinstance(node, Grouping):
        return {"type": "Grouping", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Variable):
        return {"type": "Variable", "name": token_to_obj(node.name)}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": token_to_obj(node.name), "value": ast_to_obj(node.value)}
    if isinstance(node, Logical):
        return {"type": "Logical", "left": ast_to_obj(node.left), "operator": token_to_obj(node.operator),
                "right": ast_to_obj(node.right)}
    if isinstance(node, Call):
        return {
            "type": "Call",
            "callee": ast_to_obj(node.callee),
            "paren": token_to_obj(node.paren),
            "arguments": [ast_to_obj(a) for a in node.arguments],
        }

    # Statements
    if isinstance(node, Expression):
        return {"type": "Expression", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Print):
        return {"type": "Print", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Var):
        return {"type": "Var", "name": token_to_obj(node.name), "initializer": ast_to_obj(node.initializer)}
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, If):
        return {
            "type": "If",
            "condition": ast_to_obj(node.condition),
            "then_branch": ast_to_obj(node.then_branch),
            "else_branch": ast_to_obj(node.else_branch),
        }
    if isinstance(node, While):
        return {"type": "While", "condition": ast_to_obj(node.condition), "body": ast_to_obj(node.body)}
    if isinstance(node, Function):
        return {
            "type": "Function",
            "name": token_to_obj(node.name),
            "params": [token_to_obj(p) for p in node.params],
            "body": [ast_to_obj(s) for s in node.body],
        }
    if isinstance(node, Return):
        return {"type": "Return", "keyword": token_to_obj(node.keyword), "value": ast_to_obj(node.value)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")

    # Expressions
    if t == "Binary":
        return Binary(ast_from_obj(obj["left"]), token_from_obj(obj["operator"]), ast_from_obj(obj["right"]))
    if t == "Unary":
        return Unary(token_from_obj(obj["operator"]), ast_from_obj(obj["right"]))
    if t == "Grouping":
        return Grouping(ast_from_obj(obj["expression"]))
    if t == "Literal":
        value = obj["value"]
        # JSON has one number type; Lox numbers are always floats.
        if isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        return Literal(value)
    if t == "Variable":
        return Variable(token_from_obj(obj["name"]))
    if t == "Assign":
        return Assign(token_from_obj(obj["name"]), ast_from_obj(obj["value"]))
    if t == "Logical":
        return Logical(ast_from_obj(obj["left"]), token_from_obj(obj["operator"]), ast_from_obj(obj["right"]))
    if t == "Call":
        return Call(
            ast_from_obj(obj["callee"]),
            token_from_obj(obj["paren"]),
            tuple(ast_from_obj(a) for a in obj["arguments"]),
        )

    # Statements
    if t == "Expression":
        return Expression(ast_from_obj(obj["expression"]))
    if t == "Print":
        return Print(ast_from_obj(obj["expression"]))
    if t == "Var":
        return Var(token_from_obj(obj["name"]), ast_from_obj(obj.get("initializer")))
    if t == "Block":
        return Block(tuple(ast_from_obj(s) for s in obj["statements"]))
    if t == "If":
        return If(
            ast_from_obj(obj["condition"]),
            ast_from_obj(obj["then_branch"]),
            ast_from_obj(obj.get("else_branch")),
        )
    if t == "While":
        return While(ast_from_obj(obj["condition"]), ast_from_obj(obj["body"]))
    if t == "Function":
        return Function(
            token_from_obj(obj["name"]),
            tuple(token_from_obj(p) for p in obj["params"]),
            tuple(ast_from_obj(s) for s in obj["body"]),
        )
    if t == "Return":
        return Return(token_from_obj(obj["keyword"]), ast_from_obj(obj.get("value")))

    raise ValueError(f"Unknown AST node type: {t}")

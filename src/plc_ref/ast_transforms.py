"""
Lark tree -> frozen AST conversion. Applied inline by the LALR parser so the
evaluator never sees lark nodes.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Tuple

from lark import Token, Transformer, v_args

from .types import Char
from .tree import (
    Access,
    Assignment,
    Binary,
    Declaration,
    Expr,
    ExpressionStmt,
    Field,
    For,
    FunctionCall,
    Group,
    If,
    Literal,
    Method,
    Return,
    Source,
    Stmt,
    While,
)

_ESCAPES = {
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "'": "'",
    '"': '"',
    "\\": "\\",
}


def unescape(body: str) -> str:
    out = []
    chars = iter(body)

    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        # the grammar only admits known escapes
        out.append(_ESCAPES[next(chars)])

    return "".join(out)


@v_args(inline=True)
class BuildAst(Transformer):
    """Build `plc_ref.tree` nodes bottom-up from the lark parse."""

    # ---- declarations ----

    def source(self, *members: Field | Method) -> Source:
        fields = tuple(m for m in members if isinstance(m, Field))
        methods = tuple(m for m in members if isinstance(m, Method))
        return Source(fields, methods)

    def field(self, name: Token, value: Optional[Expr]) -> Field:
        return Field(str(name), value)

    def method(self, name: Token, params: Optional[Tuple[str, ...]], body: Tuple[Stmt, ...]) -> Method:
        return Method(str(name), params or (), body)

    def parameters(self, *names: Token) -> Tuple[str, ...]:
        return tuple(str(n) for n in names)

    def block(self, *stmts: Stmt) -> Tuple[Stmt, ...]:
        return tuple(stmts)

    # ---- statements ----

    def declaration(self, name: Token, value: Optional[Expr]) -> Declaration:
        return Declaration(str(name), value)

    def assignment(self, target: Expr, value: Expr) -> Assignment:
        return Assignment(target, value)

    def expression_stmt(self, expr: Expr) -> ExpressionStmt:
        return ExpressionStmt(expr)

    def if_stmt(self, cond: Expr, then: Tuple[Stmt, ...], otherwise: Optional[Tuple[Stmt, ...]]) -> If:
        return If(cond, then, otherwise or ())

    def for_stmt(self, name: Token, iterable: Expr, body: Tuple[Stmt, ...]) -> For:
        return For(str(name), iterable, body)

    def while_stmt(self, cond: Expr, body: Tuple[Stmt, ...]) -> While:
        return While(cond, body)

    def return_stmt(self, value: Expr) -> Return:
        return Return(value)

    # ---- expressions ----

    def _fold_binary(self, *children: Expr | Token) -> Expr:
        acc = children[0]

        for i in range(1, len(children), 2):
            acc = Binary(str(children[i]), acc, children[i + 1])

        return acc

    logical = _fold_binary
    comparison = _fold_binary
    additive = _fold_binary
    multiplicative = _fold_binary

    def field_access(self, receiver: Expr, name: Token) -> Access:
        return Access(receiver, str(name))

    def method_call(self, receiver: Expr, name: Token, args: Optional[Tuple[Expr, ...]]) -> FunctionCall:
        return FunctionCall(receiver, str(name), args or ())

    def name_access(self, name: Token) -> Access:
        return Access(None, str(name))

    def name_call(self, name: Token, args: Optional[Tuple[Expr, ...]]) -> FunctionCall:
        return FunctionCall(None, str(name), args or ())

    def arguments(self, *args: Expr) -> Tuple[Expr, ...]:
        return tuple(args)

    def group(self, expr: Expr) -> Group:
        return Group(expr)

    # ---- literals ----

    def nil_literal(self) -> Literal:
        return Literal(None)

    def true_literal(self) -> Literal:
        return Literal(True)

    def false_literal(self) -> Literal:
        return Literal(False)

    def integer_literal(self, tok: Token) -> Literal:
        return Literal(int(tok))

    def decimal_literal(self, tok: Token) -> Literal:
        return Literal(Decimal(str(tok)))

    def character_literal(self, tok: Token) -> Literal:
        return Literal(Char(unescape(tok[1:-1])))

    def string_literal(self, tok: Token) -> Literal:
        return Literal(unescape(tok[1:-1]))

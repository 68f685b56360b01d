"""Immutable AST node classes consumed by the evaluator.

Nodes are frozen dataclasses; list-valued children are tuples so a parsed
program can be shared and re-evaluated without copying.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union
from typing_extensions import TypeAlias

from .types import HostValue

# ---------- Expressions ----------

@dataclass(frozen=True)
class Literal:
    literal: HostValue

@dataclass(frozen=True)
class Group:
    expression: 'Expr'

@dataclass(frozen=True)
class Binary:
    operator: str
    left: 'Expr'
    right: 'Expr'

@dataclass(frozen=True)
class Access:
    receiver: Optional['Expr']
    name: str

@dataclass(frozen=True)
class FunctionCall:
    receiver: Optional['Expr']
    name: str
    arguments: Tuple['Expr', ...] = ()

Expr: TypeAlias = Union[Literal, Group, Binary, Access, FunctionCall]

# ---------- Statements ----------

@dataclass(frozen=True)
class ExpressionStmt:
    expression: Expr

@dataclass(frozen=True)
class Declaration:
    name: str
    value: Optional[Expr] = None

@dataclass(frozen=True)
class Assignment:
    receiver: Expr
    value: Expr

@dataclass(frozen=True)
class If:
    condition: Expr
    then_statements: Tuple['Stmt', ...] = ()
    else_statements: Tuple['Stmt', ...] = ()

@dataclass(frozen=True)
class For:
    name: str
    value: Expr
    statements: Tuple['Stmt', ...] = ()

@dataclass(frozen=True)
class While:
    condition: Expr
    statements: Tuple['Stmt', ...] = ()

@dataclass(frozen=True)
class Return:
    value: Expr

Stmt: TypeAlias = Union[ExpressionStmt, Declaration, Assignment, If, For, While, Return]

# ---------- Declarations ----------

@dataclass(frozen=True)
class Field:
    name: str
    value: Optional[Expr] = None

@dataclass(frozen=True)
class Method:
    name: str
    parameters: Tuple[str, ...] = ()
    statements: Tuple[Stmt, ...] = ()

@dataclass(frozen=True)
class Source:
    fields: Tuple[Field, ...] = ()
    methods: Tuple[Method, ...] = ()

Node: TypeAlias = Union[Source, Field, Method, Stmt, Expr]

def node_label(node: object) -> str:
    return type(node).__name__

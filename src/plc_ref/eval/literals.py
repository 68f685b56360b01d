from __future__ import annotations

from ..runtime import NIL, PlcObject, Scope, create
from ..tree import Group, Literal
from .common import EvalFunc

def eval_literal(node: Literal, _scope: Scope) -> PlcObject:
    if node.literal is None:
        return NIL

    return create(node.literal)

def eval_group(node: Group, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    return eval_func(node.expression, scope)

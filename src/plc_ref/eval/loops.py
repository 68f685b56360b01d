from __future__ import annotations

from ..runtime import NIL, PlcObject, Scope, create
from ..tree import For, If, While
from .blocks import eval_block, eval_statements
from .common import EvalFunc, require_bool, require_sequence

def eval_if_stmt(node: If, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    condition = require_bool(eval_func(node.condition, scope))
    branch = node.then_statements if condition else node.else_statements

    return eval_block(branch, scope, eval_func)

def eval_while_stmt(node: While, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    while require_bool(eval_func(node.condition, scope)):
        eval_block(node.statements, scope, eval_func)

    return NIL

def eval_for_stmt(node: For, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    elements = require_sequence(eval_func(node.value, scope))

    for element in elements:
        # the loop variable lives only in its own iteration scope
        iteration_scope = Scope(parent=scope)
        iteration_scope.define_variable(node.name, _as_runtime_value(element))
        eval_statements(node.statements, iteration_scope, eval_func)

    return NIL

def _as_runtime_value(element: object) -> PlcObject:
    if isinstance(element, PlcObject):
        return element

    return create(element)

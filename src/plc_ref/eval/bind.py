from __future__ import annotations

from ..runtime import NIL, PlcInvalidAssignmentTarget, PlcObject, Scope
from ..tree import Access, Assignment, Declaration, Field, node_label
from .common import EvalFunc

def eval_field(node: Field, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    value = eval_func(node.value, scope) if node.value is not None else NIL
    scope.define_variable(node.name, value)

    return NIL

def eval_declaration(node: Declaration, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    value = eval_func(node.value, scope) if node.value is not None else NIL
    # same-scope redeclaration is rejected by Scope.define_variable
    scope.define_variable(node.name, value)

    return NIL

def eval_assign_stmt(node: Assignment, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    target = node.receiver

    if not isinstance(target, Access):
        raise PlcInvalidAssignmentTarget(f"Cannot assign to {node_label(target)}")

    value = eval_func(node.value, scope)

    if target.receiver is not None:
        obj = eval_func(target.receiver, scope)
        obj.set_field(target.name, value)
        return NIL

    scope.lookup_variable(target.name).value = value

    return NIL

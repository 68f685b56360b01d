from __future__ import annotations

from typing import List

from ..runtime import PlcObject, Scope
from ..tree import Access, FunctionCall
from .common import EvalFunc

def eval_access(node: Access, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    if node.receiver is not None:
        receiver = eval_func(node.receiver, scope)
        return receiver.get_field(node.name).value

    return scope.lookup_variable(node.name).value

def eval_args(node: FunctionCall, scope: Scope, eval_func: EvalFunc) -> List[PlcObject]:
    return [eval_func(arg, scope) for arg in node.arguments]

def eval_call(node: FunctionCall, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    args = eval_args(node, scope, eval_func)

    if node.receiver is not None:
        receiver = eval_func(node.receiver, scope)
        return receiver.call_method(node.name, args)

    function = scope.lookup_function(node.name, len(args))

    return function.invoke(args)

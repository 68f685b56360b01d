from __future__ import annotations

from typing import List

from loguru import logger

from ..runtime import NIL, PlcFunctionNotFound, PlcObject, PlcReturnSignal, Scope
from ..tree import Method
from .common import EvalFunc

def eval_method_def(node: Method, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    """Bind `node` as a function cell closing over the defining scope."""
    closure = scope

    def invoke(args: List[PlcObject]) -> PlcObject:
        return call_method_body(node, args, closure, eval_func)

    scope.define_function(node.name, len(node.parameters), invoke)

    return NIL

def call_method_body(node: Method, args: List[PlcObject], closure: Scope, eval_func: EvalFunc) -> PlcObject:
    """
    Invocation semantics:
    - callee scope is a child of the defining scope, never the caller's
    - params bind in order to args
    - a return signal from anywhere in the body ends the call with its value
    - falling off the end yields nil
    """
    arity = len(node.parameters)

    if len(args) != arity:
        raise PlcFunctionNotFound(f"Function '{node.name}/{arity}' called with {len(args)} args")

    logger.debug("invoke {}/{}", node.name, arity)

    callee_scope = Scope(parent=closure)
    callee_scope.mark_function_scope()

    for name, val in zip(node.parameters, args):
        callee_scope.define_variable(name, val)

    try:
        for stmt in node.statements:
            eval_func(stmt, callee_scope)
    except PlcReturnSignal as signal:
        return signal.value

    return NIL

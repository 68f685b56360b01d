from __future__ import annotations

from ..runtime import PlcReturnSignal, PlcRuntimeError, Scope
from ..tree import Return
from .common import EvalFunc
from .helpers import current_function_scope as _current_function_scope

def eval_return_stmt(node: Return, scope: Scope, eval_func: EvalFunc) -> None:
    if _current_function_scope(scope) is None:
        raise PlcRuntimeError("return outside of a method")

    value = eval_func(node.value, scope)

    raise PlcReturnSignal(value)

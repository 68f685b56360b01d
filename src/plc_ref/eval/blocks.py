from __future__ import annotations

from typing import Iterable

from ..runtime import NIL, PlcObject, Scope
from .common import EvalFunc

def eval_statements(statements: Iterable[object], scope: Scope, eval_func: EvalFunc) -> PlcObject:
    """Run a stmt list directly in `scope`."""
    for stmt in statements:
        eval_func(stmt, scope)

    return NIL

def eval_block(statements: Iterable[object], scope: Scope, eval_func: EvalFunc) -> PlcObject:
    """Run a stmt list inside a fresh child scope that is dropped on exit."""
    return eval_statements(statements, Scope(parent=scope), eval_func)

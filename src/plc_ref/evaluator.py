from __future__ import annotations

from typing import Any, Callable, Optional

from loguru import logger

from .runtime import (
    NIL,
    PlcFunctionNotFound,
    PlcMissingEntryPoint,
    PlcObject,
    PlcRuntimeError,
    Scope,
    init_stdlib,
    make_root_scope,
)
from . import tree
from .tree import Node, Source, node_label

from .eval.bind import eval_assign_stmt, eval_declaration, eval_field
from .eval.chains import eval_access, eval_call
from .eval.control import eval_return_stmt
from .eval.expr import eval_binary
from .eval.fn import eval_method_def
from .eval.literals import eval_group, eval_literal
from .eval.loops import eval_for_stmt, eval_if_stmt, eval_while_stmt

ENTRY_POINT = ("main", 0)

def _maybe_attach_location(exc: PlcRuntimeError, node: Node) -> None:
    # innermost node wins; outer frames leave it alone
    if exc.plc_node is not None:
        return

    exc.plc_node = node_label(node)

# ---------------- Public API ----------------

def eval_program(program: Source, scope: Optional[Scope]=None) -> PlcObject:
    """Register fields and methods, then invoke `main/0` and return its result.

    `scope` is the root scope (normally from `make_root_scope`); the program's
    own declarations live in a child of it so they may shadow builtins.
    """
    init_stdlib()

    if scope is None:
        scope = make_root_scope()

    return eval_node(program, Scope(parent=scope))

def eval_expr(ast: Node, scope: Optional[Scope]=None) -> PlcObject:
    """Evaluate a single node (statement or expression) in `scope`."""
    init_stdlib()

    if scope is None:
        scope = Scope(parent=make_root_scope())

    return eval_node(ast, scope)

# ---------------- Core evaluator ----------------

def eval_node(n: Node, scope: Scope) -> PlcObject:
    try:
        return _eval_node_inner(n, scope)
    except PlcRuntimeError as e:
        _maybe_attach_location(e, n)
        raise

def _eval_node_inner(n: Node, scope: Scope) -> PlcObject:
    handler = _NODE_DISPATCH.get(type(n))
    if handler is not None:
        return handler(n, scope)

    raise PlcRuntimeError(f"Unknown node: {node_label(n)}")

def _eval_source(n: Source, scope: Scope) -> PlcObject:
    logger.debug("program entry: {} field(s), {} method(s)", len(n.fields), len(n.methods))

    for field in n.fields:
        eval_node(field, scope)

    for method in n.methods:
        eval_node(method, scope)

    try:
        main = scope.lookup_function(*ENTRY_POINT)
    except PlcFunctionNotFound:
        raise PlcMissingEntryPoint() from None

    return main.invoke([])

def _eval_expression_stmt(n: tree.ExpressionStmt, scope: Scope) -> PlcObject:
    eval_node(n.expression, scope)
    return NIL

# ---------------- Grouping / dispatch ----------------

_NODE_DISPATCH: dict[type, Callable[[Any, Scope], PlcObject]] = {
    tree.Source: _eval_source,
    tree.Field: lambda n, scope: eval_field(n, scope, eval_node),
    tree.Method: lambda n, scope: eval_method_def(n, scope, eval_node),
    tree.ExpressionStmt: _eval_expression_stmt,
    tree.Declaration: lambda n, scope: eval_declaration(n, scope, eval_node),
    tree.Assignment: lambda n, scope: eval_assign_stmt(n, scope, eval_node),
    tree.If: lambda n, scope: eval_if_stmt(n, scope, eval_node),
    tree.For: lambda n, scope: eval_for_stmt(n, scope, eval_node),
    tree.While: lambda n, scope: eval_while_stmt(n, scope, eval_node),
    tree.Return: lambda n, scope: eval_return_stmt(n, scope, eval_node),
    tree.Literal: eval_literal,
    tree.Group: lambda n, scope: eval_group(n, scope, eval_node),
    tree.Binary: lambda n, scope: eval_binary(n, scope, eval_node),
    tree.Access: lambda n, scope: eval_access(n, scope, eval_node),
    tree.FunctionCall: lambda n, scope: eval_call(n, scope, eval_node),
}

from __future__ import annotations

import importlib
from collections.abc import Sequence
from decimal import Decimal
from typing import Optional

from .types import (
    Char, CompositeValue, PlcObject, Variable, Function, Scope, NIL,
    HostValue, FunctionBody, StdlibFunction, Builtins,
    PlcRuntimeError, PlcTypeMismatch, PlcDivisionByZero,
    PlcInvalidAssignmentTarget, PlcFunctionNotFound, PlcVariableNotFound,
    PlcMissingEntryPoint, PlcUnsupportedOperator, PlcRedefinitionError,
    PlcReturnSignal, type_name,
)

_STDLIB_INITIALIZED = False

def init_stdlib() -> None:
    """Load stdlib modules (idempotent) so register_stdlib hooks run."""
    global _STDLIB_INITIALIZED

    if _STDLIB_INITIALIZED:
        return

    importlib.import_module("plc_ref.stdlib")
    _STDLIB_INITIALIZED = True

def register_stdlib(name: str, *, arity: int):
    def dec(fn: FunctionBody):
        Builtins.stdlib_functions[(name, arity)] = StdlibFunction(fn=fn, arity=arity)
        return fn

    return dec

def make_root_scope() -> Scope:
    """Fresh parentless scope holding every registered builtin."""
    init_stdlib()
    scope = Scope()

    for (name, arity), std in Builtins.stdlib_functions.items():
        scope.define_function(name, arity, std.fn)

    return scope

_HOST_KINDS = (bool, int, Decimal, Char, str)

def create(value: HostValue) -> PlcObject:
    """Wrap a host primitive or host sequence as a runtime value."""
    if value is None:
        return NIL

    if isinstance(value, _HOST_KINDS) or is_host_sequence(value):
        return PlcObject(value)

    if isinstance(value, PlcObject):
        # nested wrappers are legal; type checks unwrap to a fixed point
        return PlcObject(value)

    if isinstance(value, float):
        return PlcObject(Decimal(str(value)))

    raise PlcTypeMismatch("a host primitive or sequence", value)

def is_host_sequence(value: HostValue) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))

def make_object(fields: Optional[dict] = None, value: HostValue = None) -> PlcObject:
    """Build a composite value whose fields live in its own scope.

    Methods are added afterwards with ``obj.scope.define_function``; they receive
    the receiver as their first argument.
    """
    scope = Scope()

    for name, field_value in (fields or {}).items():
        scope.define_variable(name, field_value if isinstance(field_value, PlcObject) else create(field_value))

    return PlcObject(CompositeValue() if value is None else value, scope=scope)

__all__ = [
    "Char", "CompositeValue", "PlcObject", "Variable", "Function", "Scope", "NIL",
    "HostValue", "FunctionBody", "StdlibFunction", "Builtins",
    "PlcRuntimeError", "PlcTypeMismatch", "PlcDivisionByZero",
    "PlcInvalidAssignmentTarget", "PlcFunctionNotFound", "PlcVariableNotFound",
    "PlcMissingEntryPoint", "PlcUnsupportedOperator", "PlcRedefinitionError",
    "PlcReturnSignal", "type_name",
    "init_stdlib", "register_stdlib", "make_root_scope", "create",
    "is_host_sequence", "make_object",
]

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Tuple

from ..runtime import Char, PlcObject, PlcTypeMismatch, Scope, is_host_sequence, type_name
from ..utils import is_nil, same_kind, unwrap

EvalFunc = Callable[[Any, Scope], PlcObject]

ORDERABLE_KINDS: Tuple[type, ...] = (bool, int, Decimal, Char, str)

def require_bool(obj: PlcObject) -> bool:
    value = unwrap(obj)
    if isinstance(value, bool):
        return value

    raise PlcTypeMismatch("Boolean", value)

def require_integer(obj: PlcObject) -> int:
    value = unwrap(obj)
    # bool subclasses int on the host side but is its own kind here
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    raise PlcTypeMismatch("Integer", value)

def require_decimal(obj: PlcObject) -> Decimal:
    value = unwrap(obj)
    if isinstance(value, Decimal):
        return value

    raise PlcTypeMismatch("Decimal", value)

def require_sequence(obj: PlcObject) -> Any:
    value = unwrap(obj)
    if is_host_sequence(value):
        return value

    raise PlcTypeMismatch("List", value)

def require_orderable(obj: PlcObject) -> Any:
    value = unwrap(obj)
    if isinstance(value, ORDERABLE_KINDS):
        return value

    raise PlcTypeMismatch("a comparable value", value)

def require_same_kind(reference: Any, obj: PlcObject) -> Any:
    value = unwrap(obj)
    if same_kind(reference, value):
        return value

    raise PlcTypeMismatch(type_name(reference), value)

def is_textual(obj: PlcObject) -> bool:
    return isinstance(unwrap(obj), str)

def stringify(value: Any) -> str:
    """Printed form of a runtime or host value."""
    value = unwrap(value)

    if is_nil(value):
        return "nil"

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, str):
        return value

    if is_host_sequence(value):
        return "[" + ", ".join(stringify(item) for item in value) + "]"

    return str(value)

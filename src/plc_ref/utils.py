from __future__ import annotations

from decimal import Decimal

from .types import HostValue, PlcObject, _NilValue
from .runtime import is_host_sequence


def unwrap(value: HostValue) -> HostValue:
    while isinstance(value, PlcObject):
        value = value.value

    return value


def is_nil(value: HostValue) -> bool:
    return isinstance(unwrap(value), _NilValue)


def same_kind(lhs: HostValue, rhs: HostValue) -> bool:
    """Concrete kind check; bool is never an int and lists match tuples."""
    if is_host_sequence(lhs) and is_host_sequence(rhs):
        return True

    return type(lhs) is type(rhs)


def plc_equals(lhs: HostValue, rhs: HostValue) -> bool:
    """Structural equality of host values, never reference identity."""
    lhs = unwrap(lhs)
    rhs = unwrap(rhs)

    if is_nil(lhs) or is_nil(rhs):
        return is_nil(lhs) and is_nil(rhs)

    if not same_kind(lhs, rhs):
        return False

    if is_host_sequence(lhs):
        if len(lhs) != len(rhs):
            return False
        return all(plc_equals(a, b) for a, b in zip(lhs, rhs))

    if isinstance(lhs, Decimal):
        return lhs.compare(rhs) == 0

    return bool(lhs == rhs)


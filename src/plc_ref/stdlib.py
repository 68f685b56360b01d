"""Built-in stdlib functions registered via plc_ref.runtime."""

from __future__ import annotations

from typing import List

from .runtime import NIL, PlcObject, register_stdlib
from .eval.common import stringify

@register_stdlib("print", arity=1)
def std_print(args: List[PlcObject]) -> PlcObject:
    print(stringify(args[0]))
    return NIL

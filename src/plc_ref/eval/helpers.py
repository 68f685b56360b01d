from __future__ import annotations

from typing import Optional

from ..runtime import Scope

def current_function_scope(scope: Scope) -> Optional[Scope]:
    """Walk parents to find the nearest method-invocation scope."""
    cur: Optional[Scope] = scope

    while cur is not None:
        if cur.is_function_scope():
            return cur

        cur = cur.parent

    return None

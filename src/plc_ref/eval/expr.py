from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from ..runtime import PlcObject, PlcDivisionByZero, PlcUnsupportedOperator, Scope, create
from ..tree import Binary
from ..utils import plc_equals
from .common import (
    EvalFunc,
    is_textual,
    require_bool,
    require_decimal,
    require_integer,
    require_orderable,
    require_same_kind,
    stringify,
)

LOGICAL_OPS = {'AND', '&&', 'OR', '||'}
RELATIONAL_OPS = {'<', '<=', '>', '>='}
EQUALITY_OPS = {'==', '!='}
ARITHMETIC_OPS = {'+', '-', '*', '/'}

def eval_binary(node: Binary, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    op = node.operator

    if op in LOGICAL_OPS:
        return eval_logical(op, node, scope, eval_func)

    if op in RELATIONAL_OPS:
        lhs = require_orderable(eval_func(node.left, scope))
        rhs = require_same_kind(lhs, eval_func(node.right, scope))
        return create(_relation_holds(op, (lhs > rhs) - (lhs < rhs)))

    if op in EQUALITY_OPS:
        lhs_obj = eval_func(node.left, scope)
        rhs_obj = eval_func(node.right, scope)
        equal = plc_equals(lhs_obj, rhs_obj)
        return create(equal if op == '==' else not equal)

    if op == '/':
        dividend = require_decimal(eval_func(node.left, scope))
        divisor = require_decimal(eval_func(node.right, scope))
        return create(divide_decimal(dividend, divisor))

    if op in ARITHMETIC_OPS:
        lhs_obj = eval_func(node.left, scope)
        rhs_obj = eval_func(node.right, scope)
        return apply_binary_operator(op, lhs_obj, rhs_obj)

    raise PlcUnsupportedOperator(op)

def eval_logical(op: str, node: Binary, scope: Scope, eval_func: EvalFunc) -> PlcObject:
    lhs = require_bool(eval_func(node.left, scope))

    if op in ('AND', '&&'):
        if not lhs:
            return create(False)
    elif lhs:
        return create(True)

    return create(require_bool(eval_func(node.right, scope)))

def apply_binary_operator(op: str, lhs: PlcObject, rhs: PlcObject) -> PlcObject:
    match op:
        case '+':
            if is_textual(lhs) or is_textual(rhs):
                return create(stringify(lhs) + stringify(rhs))
            return create(require_integer(lhs) + require_integer(rhs))
        case '-':
            return create(require_integer(lhs) - require_integer(rhs))
        case _:
            return create(require_integer(lhs) * require_integer(rhs))

def divide_decimal(dividend: Decimal, divisor: Decimal) -> Decimal:
    if divisor.is_zero():
        raise PlcDivisionByZero()

    with localcontext() as ctx:
        ctx.rounding = ROUND_HALF_EVEN
        return dividend / divisor

def _relation_holds(op: str, comparison: int) -> bool:
    match op:
        case '<':
            return comparison < 0
        case '<=':
            return comparison <= 0
        case '>':
            return comparison > 0
        case _:
            return comparison >= 0

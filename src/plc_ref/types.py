from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Tuple
from typing_extensions import TypeAlias

# ---------- Value Model ----------

@dataclass(frozen=True, order=True)
class Char:
    """Host character kind; orderable against other chars, never textual."""
    value: str

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"'{self.value}'"


class _NilValue:
    def __repr__(self) -> str:
        return "nil"

    def __str__(self) -> str:
        return "nil"


class CompositeValue:
    """Host value of a composite; equal only to itself."""
    def __repr__(self) -> str:
        return "<object>"

    def __str__(self) -> str:
        return "<object>"


HostValue: TypeAlias = Any
FunctionBody: TypeAlias = Callable[[List['PlcObject']], 'PlcObject']


@dataclass(eq=False)
class PlcObject:
    """Uniform wrapper around one host value.

    Composite values carry their own scope holding named fields and methods.
    """
    value: HostValue
    scope: Optional['Scope'] = None

    def get_value(self, deep: bool = False) -> HostValue:
        value = self.value

        if not deep:
            return value

        while isinstance(value, PlcObject):
            value = value.value

        return value

    def get_field(self, name: str) -> 'Variable':
        if self.scope is None:
            raise PlcVariableNotFound(f"Field '{name}' not found on {type_name(self.value)}")

        return self.scope.lookup_variable(name)

    def set_field(self, name: str, value: 'PlcObject') -> None:
        self.get_field(name).value = value

    def call_method(self, name: str, args: List['PlcObject']) -> 'PlcObject':
        arity = len(args) + 1

        if self.scope is None:
            raise PlcFunctionNotFound(f"Method '{name}/{arity}' not found on {type_name(self.value)}")

        method = self.scope.lookup_function(name, arity)
        return method.invoke([self, *args])

    def __repr__(self) -> str:
        return f"PlcObject({self.value!r})"


NIL = PlcObject(_NilValue())


@dataclass
class Variable:
    name: str
    value: PlcObject


@dataclass
class Function:
    name: str
    arity: int
    fn: FunctionBody

    def invoke(self, args: List[PlcObject]) -> PlcObject:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<fn {self.name}/{self.arity}>"


FunctionKey: TypeAlias = Tuple[str, int]


class Scope:
    def __init__(self, parent: Optional['Scope'] = None):
        self.parent = parent
        self.variables: Dict[str, Variable] = {}
        self.functions: Dict[FunctionKey, Function] = {}
        self._is_function_scope = False

    def define_variable(self, name: str, value: PlcObject) -> Variable:
        if name in self.variables:
            raise PlcRedefinitionError(f"Variable '{name}' is already defined in this scope")

        variable = Variable(name, value)
        self.variables[name] = variable
        return variable

    def lookup_variable(self, name: str) -> Variable:
        cur: Optional[Scope] = self

        while cur is not None:
            variable = cur.variables.get(name)
            if variable is not None:
                return variable
            cur = cur.parent

        raise PlcVariableNotFound(f"Variable '{name}' not found")

    def define_function(self, name: str, arity: int, fn: FunctionBody) -> Function:
        key = (name, arity)

        if key in self.functions:
            raise PlcRedefinitionError(f"Function '{name}/{arity}' is already defined in this scope")

        function = Function(name, arity, fn)
        self.functions[key] = function
        return function

    def lookup_function(self, name: str, arity: int) -> Function:
        key = (name, arity)
        cur: Optional[Scope] = self

        while cur is not None:
            function = cur.functions.get(key)
            if function is not None:
                return function
            cur = cur.parent

        raise PlcFunctionNotFound(f"Function '{name}/{arity}' not found")

    def mark_function_scope(self) -> None:
        self._is_function_scope = True

    def is_function_scope(self) -> bool:
        return self._is_function_scope

    def __repr__(self) -> str:
        return f"<scope vars={sorted(self.variables)} fns={sorted(self.functions)}>"


def type_name(value: HostValue) -> str:
    while isinstance(value, PlcObject):
        value = value.value

    if isinstance(value, _NilValue):
        return "Nil"

    return _TYPE_NAMES.get(type(value), type(value).__name__)


_TYPE_NAMES: Dict[type, str] = {
    bool: "Boolean",
    int: "Integer",
    Decimal: "Decimal",
    Char: "Character",
    str: "String",
    list: "List",
    tuple: "List",
    CompositeValue: "Object",
}

# ---------- Exceptions ----------

class PlcRuntimeError(Exception):
    plc_node: Optional[str]

    def __init__(self, message: str):
        super().__init__(message)
        self.plc_node = None

    def __str__(self) -> str:
        msg = super().__str__()

        if self.plc_node is None:
            return msg

        return f"{msg} (in {self.plc_node})"

class PlcTypeMismatch(PlcRuntimeError):
    def __init__(self, expected: str, actual: HostValue):
        super().__init__(f"Expected {expected} but got {type_name(actual)}")
        self.expected = expected
        self.actual = actual

class PlcDivisionByZero(PlcRuntimeError):
    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)

class PlcInvalidAssignmentTarget(PlcRuntimeError):
    pass

class PlcFunctionNotFound(PlcRuntimeError):
    pass

class PlcVariableNotFound(PlcRuntimeError):
    pass

class PlcMissingEntryPoint(PlcRuntimeError):
    def __init__(self, message: str = "Main function 'main/0' not defined"):
        super().__init__(message)

class PlcUnsupportedOperator(PlcRuntimeError):
    def __init__(self, operator: str):
        super().__init__(f"Unsupported operator: {operator}")
        self.operator = operator

class PlcRedefinitionError(PlcRuntimeError):
    pass

class PlcReturnSignal(Exception):
    """Internal control-flow exception used to implement `return`."""
    def __init__(self, value: PlcObject):
        self.value = value


@dataclass(frozen=True)
class StdlibFunction:
    fn: FunctionBody
    arity: int


class Builtins:
    stdlib_functions: Dict[FunctionKey, StdlibFunction] = {}

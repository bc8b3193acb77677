"""Expression model for Schemer.

A single closed family of immutable classes is used both for parsed syntax
and for runtime values:

- Combination: a parenthesized form (a b c ...)
- Identifier: a symbol, resolved against the Environment
- StringLiteral, NumberLiteral, BooleanLiteral: self-evaluating literals
- Procedure: a user-defined procedure (parameters + body, no captured env)
- BuiltinProcedure: a native procedure installed in the global frame
- Void: the result of definitions and of a cond with no matching clause

Structural equality holds for literals and combinations of literals.
Procedures and builtins never compare equal to anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from schemer import BuiltinFn
from schemer.types.number import Number


@dataclass(frozen=True)
class Combination:
    elements: tuple[Expression, ...] = ()

    def __str__(self) -> str:
        return "(" + " ".join(str(e) for e in self.elements) + ")"


@dataclass(frozen=True)
class Identifier:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class StringLiteral:
    text: str

    def __str__(self) -> str:
        return f'"{self.text}"'


@dataclass(frozen=True)
class NumberLiteral:
    value: Number

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


@dataclass(frozen=True, eq=False)
class Procedure:
    """A user-defined procedure.

    The body is evaluated against whatever Environment is active at the
    call site; free identifiers are resolved dynamically.
    """

    params: tuple[str, ...]
    body: Expression
    name: str = ""

    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = object.__hash__

    def __str__(self) -> str:
        return "#procedure"


@dataclass(frozen=True, eq=False)
class BuiltinProcedure:
    """A native procedure: fn(env, args) -> Expression."""

    name: str
    fn: BuiltinFn

    def __call__(self, env, args: list[Expression]) -> Expression:
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = object.__hash__

    def __str__(self) -> str:
        return "#builtin"


class VoidType:
    __slots__ = ()

    def __repr__(self): return "Void"
    def __str__(self): return ""

    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)


Void = VoidType()

TRUE = BooleanLiteral(True)
FALSE = BooleanLiteral(False)

Expression = Union[
    Combination,
    Identifier,
    StringLiteral,
    NumberLiteral,
    BooleanLiteral,
    Procedure,
    BuiltinProcedure,
    VoidType,
]


def number(value) -> NumberLiteral:
    """Shorthand for wrapping a Python int/float as a NumberLiteral."""
    return NumberLiteral(value if isinstance(value, Number) else Number(value))

"""Built-in procedures for the Schemer runtime environment.

Defines the fixed arithmetic and comparison library and the boolean
constants, and builds the global frame they live in.
"""

from __future__ import annotations

import logging
import operator
from functools import reduce
from typing import Callable

from schemer.errors import SchemerArityError, SchemerTypeError
from schemer.types.environment import Environment
from schemer.types.expression import (
    FALSE,
    TRUE,
    BooleanLiteral,
    BuiltinProcedure,
    Expression,
    NumberLiteral,
)
from schemer.types.number import Number

logger = logging.getLogger(__name__)


def extract_numbers(expr: list[Expression]) -> list[Number]:
    """Unwrap NumberLiteral arguments; anything else is a type error."""
    nums = []
    for e in expr:
        if not isinstance(e, NumberLiteral):
            raise SchemerTypeError("Expecting number")
        nums.append(e.value)
    return nums


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[Expression]) -> Expression:
    """Left-fold sum of all arguments, 0 for none."""
    return NumberLiteral(reduce(operator.add, extract_numbers(expr), Number(0)))


def mul(env: Environment, expr: list[Expression]) -> Expression:
    """Left-fold product of all arguments, 1 for none."""
    return NumberLiteral(reduce(operator.mul, extract_numbers(expr), Number(1)))


def _fold_from_first(name: str, op: Callable[[Number, Number], Number], expr: list[Expression]) -> Number:
    if not expr:
        raise SchemerArityError(f"Incorrect argument count in call ({name})")
    first, *rest = extract_numbers(expr)
    return reduce(op, rest, first)


def sub(env: Environment, expr: list[Expression]) -> Expression:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if len(expr) == 1:
        return NumberLiteral(-extract_numbers(expr)[0])
    return NumberLiteral(_fold_from_first("-", operator.sub, expr))


def div(env: Environment, expr: list[Expression]) -> Expression:
    """Divide left-to-right starting from the first argument; one arg returns itself."""
    return NumberLiteral(_fold_from_first("/", operator.truediv, expr))


# -------------------------------
# Comparison
# -------------------------------
def _chain(op: Callable[[Number, Number], bool]):
    def compare(env: Environment, expr: list[Expression]) -> BooleanLiteral:
        nums = extract_numbers(expr)
        result = all(op(a, b) for a, b in zip(nums, nums[1:]))
        return TRUE if result else FALSE
    return compare


gt = _chain(operator.gt)
lt = _chain(operator.lt)
equals = _chain(operator.eq)


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '>': gt,
    '<': lt,
    '=': equals,
}


def register(env: Environment) -> None:
    """Install the builtin library and boolean constants into the top frame."""
    env.update({name: BuiltinProcedure(name, fn) for name, fn in BUILTINS.items()})
    env.update({
        '#t': TRUE,
        '#f': FALSE,
    })
    logger.debug("registered %d builtins", len(BUILTINS))


def create_root_environment() -> Environment:
    """Return a ready-to-use Environment whose single global frame holds the builtins."""
    env = Environment()
    env.push()
    register(env)
    return env

"""Numeric tower for Schemer.

A Number is either exact (backed by a Python int) or inexact (backed by a
Python float). Every binary operator goes through `_apply_binary_op`: two
exact operands use the integer operator, anything else promotes the exact
operand and uses the float operator, so a float always infects the result.
"""

from __future__ import annotations

import math
import operator
import re
from typing import Callable, Union

from schemer.errors import SchemerDivisionByZero

Real = Union[int, float]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _to_float(v: Real) -> float:
    # exact values beyond the float range promote to a signed infinity
    try:
        return float(v)
    except OverflowError:
        return math.inf if v > 0 else -math.inf


def _exact_div(a: int, b: int) -> Real:
    if b == 0:
        raise SchemerDivisionByZero("Division by zero")
    if a % b == 0:
        return a // b
    try:
        return a / b
    except OverflowError:
        return math.inf if (a < 0) == (b < 0) else -math.inf


def _inexact_div(a: float, b: float) -> float:
    if b == 0.0:
        # IEEE-754 semantics instead of Python's ZeroDivisionError
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class Number:
    """An exact integer or an inexact float."""

    __slots__ = ("value",)

    def __init__(self, value: Real):
        # bool is an int subclass; never let it leak in as a payload
        if isinstance(value, bool):
            value = int(value)
        if not isinstance(value, (int, float)):
            raise TypeError(f"Number requires int or float, got {type(value).__name__}")
        self.value: Real = value

    @classmethod
    def from_int(cls, value: int) -> Number:
        return cls(int(value))

    @classmethod
    def from_float(cls, value: float) -> Number:
        return cls(float(value))

    @classmethod
    def parse(cls, text: str) -> Number:
        """Parse `text` as an exact integer, falling back to a float.

        Raises ValueError when neither interpretation applies.
        """
        if _INT_RE.fullmatch(text):
            return cls(int(text))
        if _FLOAT_RE.fullmatch(text):
            return cls(float(text))
        raise ValueError(f"Not a number: {text!r}")

    @property
    def is_exact(self) -> bool:
        return isinstance(self.value, int)

    def _apply_binary_op(
        self,
        other: Number,
        op_int: Callable[[int, int], object],
        op_float: Callable[[float, float], object],
    ):
        a, b = self.value, other.value
        if isinstance(a, int) and isinstance(b, int):
            return op_int(a, b)
        return op_float(_to_float(a), _to_float(b))

    # --- Arithmetic ---
    def __add__(self, other: Number) -> Number:
        return Number(self._apply_binary_op(other, operator.add, operator.add))

    def __sub__(self, other: Number) -> Number:
        return Number(self._apply_binary_op(other, operator.sub, operator.sub))

    def __mul__(self, other: Number) -> Number:
        return Number(self._apply_binary_op(other, operator.mul, operator.mul))

    def __truediv__(self, other: Number) -> Number:
        return Number(self._apply_binary_op(other, _exact_div, _inexact_div))

    def __neg__(self) -> Number:
        return Number(-self.value)

    # --- Comparison (no epsilon) ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._apply_binary_op(other, operator.eq, operator.eq)

    def __lt__(self, other: Number) -> bool:
        return self._apply_binary_op(other, operator.lt, operator.lt)

    def __gt__(self, other: Number) -> bool:
        return self._apply_binary_op(other, operator.gt, operator.gt)

    def __hash__(self) -> int:
        # hash(2) == hash(2.0), consistent with the coercing __eq__
        return hash(self.value)

    def __str__(self) -> str:
        if self.is_exact:
            return str(self.value)
        return format_float(self.value)

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


def format_float(v: float) -> str:
    """Signed scientific notation with four fractional digits, e.g. +1.2346e2."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+inf" if v > 0 else "-inf"
    mantissa, exponent = f"{v:+.4e}".split("e")
    return f"{mantissa}e{int(exponent)}"

"""Core evaluator for the Schemer interpreter.

`evaluate` is a plain recursive dispatch over the expression classes:
identifiers are looked up, combinations are either special forms or
applications, and every other expression evaluates to itself. There is no
tail-call elimination, so recursion depth follows both the nesting of the
expression and the call depth of user procedures.
"""

from __future__ import annotations

from schemer.errors import SchemerInvalidSyntax, SchemerNonProcedureError
from schemer.evaluation.apply import apply
from schemer.evaluation.special_forms import SPECIAL_FORMS
from schemer.types.environment import Environment
from schemer.types.expression import (
    BuiltinProcedure,
    Combination,
    Expression,
    Identifier,
    Procedure,
)


def evaluate(expr: Expression, env: Environment) -> Expression:
    """Evaluate `expr` against `env`.

    Side effects are limited to `define` bindings and the frame pushed for
    each procedure activation. Errors are raised as SchemerError subclasses.
    """
    match expr:
        case Identifier(name=name):
            return env.lookup(name)

        case Combination(elements=()):
            raise SchemerInvalidSyntax("Invalid syntax ()")

        case Combination(elements=(head, *tail_args)):
            # --- Special forms handling ---
            if isinstance(head, Identifier) and head.name in SPECIAL_FORMS:
                return SPECIAL_FORMS[head.name](tuple(tail_args), env, evaluate)

            operand = evaluate(head, env)
            if not isinstance(operand, (BuiltinProcedure, Procedure)):
                raise SchemerNonProcedureError(str(operand))

            # Arguments are evaluated eagerly, left to right.
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(operand, args, env, evaluate)

    # --- Literals and Void return as-is ---
    return expr

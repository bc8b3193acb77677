"""Application engine for Schemer.

Centralizes procedure application for the evaluator:
- Builtin procedures receive the active environment and the evaluated
  argument list, and their errors propagate verbatim.
- User procedures get exactly one new frame per activation. The frame is
  pushed after the arity check and popped when the body returns or raises,
  so a failed call never leaves a stale frame behind.

Procedures carry no captured environment: the body runs against the
caller's frame stack with the parameter frame on top.
"""

import logging

from schemer import EvaluatorFn
from schemer.errors import SchemerArityError
from schemer.types.environment import Environment
from schemer.types.expression import BuiltinProcedure, Expression, Procedure

logger = logging.getLogger(__name__)


def apply_procedure(
    fn: Procedure,
    args: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Bind `args` to the parameters of `fn` in a fresh frame and evaluate its body."""
    if len(fn.params) != len(args):
        raise SchemerArityError("Wrong number of arguments")

    with env.frame() as frame:
        for name, value in zip(fn.params, args):
            frame[name] = value
        logger.debug(
            "apply %s/%d at depth %d", fn.name or "#procedure", len(args), env.depth
        )
        return evaluate_fn(fn.body, env)


def apply(
    head: BuiltinProcedure | Procedure,
    args: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply either a user Procedure or a BuiltinProcedure.

    The evaluator rejects non-procedure operands before arguments are evaluated.
    """
    if isinstance(head, BuiltinProcedure):
        return head(env, args)
    return apply_procedure(head, args, env, evaluate_fn)

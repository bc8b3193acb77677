import logging

from schemer import EvaluatorFn
from schemer.errors import SchemerInvalidSyntax
from schemer.types.environment import Environment
from schemer.types.expression import (
    Combination,
    Expression,
    Identifier,
    Procedure,
    Void,
)

logger = logging.getLogger(__name__)


# special-form names are never bound, so they cannot be shadowed
RESERVED = frozenset({"define", "cond"})


def _check_bindable(names: list[str]) -> None:
    if any(name in RESERVED for name in names):
        raise SchemerInvalidSyntax()


def define_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (define name value)            bind name to the value of `value`
    (define (name p1 p2 ...) body) bind name to a Procedure; body is not evaluated

    Bindings always go into the current top frame. Returns Void.
    """
    if len(tail) != 2:
        raise SchemerInvalidSyntax()

    target, body = tail
    if isinstance(target, Identifier):
        _check_bindable([target.name])
        value = evaluate_fn(body, env)
        env.insert(target.name, value)
        logger.debug("define %s", target.name)
    elif isinstance(target, Combination):
        if not target.elements or not all(
            isinstance(e, Identifier) for e in target.elements
        ):
            raise SchemerInvalidSyntax()
        name, *params = (e.name for e in target.elements)
        _check_bindable([name, *params])
        env.insert(name, Procedure(tuple(params), body, name))
        logger.debug("define procedure %s/%d", name, len(params))
    else:
        raise SchemerInvalidSyntax()
    return Void

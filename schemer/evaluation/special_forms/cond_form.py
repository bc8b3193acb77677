from schemer import EvaluatorFn
from schemer.errors import SchemerInvalidSyntax
from schemer.types.environment import Environment
from schemer.types.expression import FALSE, Combination, Expression, Void


def cond_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Evaluate a (cond (test expr) ...).

    For each clause in order, evaluate the test. Only #f is false; any other
    value selects the clause, whose expression is evaluated and returned
    without looking at the remaining clauses. If no clause matches, return Void.
    """
    for clause in tail:
        if not isinstance(clause, Combination):
            raise SchemerInvalidSyntax()
        if len(clause.elements) != 2:
            raise SchemerInvalidSyntax("Expecting pair as cond clause")
        test, consequent = clause.elements
        if evaluate_fn(test, env) != FALSE:
            return evaluate_fn(consequent, env)

    # No clause matched
    return Void

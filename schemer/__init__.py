# Core type aliases for Schemer's evaluator.
#
# Syntax nodes and runtime values share one closed set of immutable classes
# (see schemer.types.expression). The aliases below describe the callables
# that are threaded through the evaluator and the builtin library.

from typing import Any, Callable

# Evaluator function type: passed into special forms and the apply engine
EvaluatorFn = Callable[..., Any]

# Native procedure type: (env, evaluated arguments) -> Expression
BuiltinFn = Callable[..., Any]

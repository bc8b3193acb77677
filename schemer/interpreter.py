from __future__ import annotations

import logging
import sys
from pathlib import Path

from schemer import config
from schemer.builtins import create_root_environment
from schemer.errors import SchemerError
from schemer.evaluation.evaluator import evaluate
from schemer.reader.parser import parse
from schemer.types.expression import Expression, Void

logger = logging.getLogger(__name__)


def _raise_recursion_limit() -> None:
    limit = config.get_recursion_limit()
    if limit is not None and limit > sys.getrecursionlimit():
        logger.debug("raising recursion limit to %d", limit)
        sys.setrecursionlimit(limit)


class Interpreter:
    """
    A streaming interpreter for Schemer source text.
    Every call evaluates against the same root environment, so definitions
    accumulate across calls.

    SCHEMER_RECURSION_LIMIT raises the interpreter-wide Python recursion
    limit. The change is process-wide and is never lowered or restored, so
    constructing further Interpreters leaves an already-raised limit alone.
    """
    def __init__(self, prelude: str | None = None):
        self.env = create_root_environment()
        _raise_recursion_limit()

        prelude_path = config.get_prelude_path()
        if prelude_path is not None:
            self.eval_file(prelude_path)
        if prelude:
            self.eval(prelude)

    def eval_file(self, path: str | Path) -> list[Expression]:
        """Evaluate every form in the file at `path`."""
        return self.eval(Path(path).read_text(encoding="utf-8"))

    def eval(self, code: str) -> list[Expression]:
        """Parse and evaluate each top-level form in order, returning all results.

        The first syntax or evaluation error stops the remaining forms.
        """
        results = []
        try:
            for expr in parse(code):
                results.append(evaluate(expr, self.env))
        except SchemerError as ex:
            logger.info("evaluation stopped after %d form(s): %s", len(results), ex)
            raise
        return results

    def eval_one(self, code: str) -> Expression:
        """Evaluate `code` and return the value of its last form (Void if empty)."""
        results = self.eval(code)
        return results[-1] if results else Void

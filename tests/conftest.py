import pytest

from schemer.builtins import create_root_environment
from schemer.evaluation.evaluator import evaluate
from schemer.reader.parser import parse


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return create_root_environment()


@pytest.fixture
def run(env):
    """Evaluate every form in a source string against `env`, returning the last value."""
    def _run(source):
        result = None
        for expr in parse(source):
            result = evaluate(expr, env)
        return result
    return _run

import pytest

from oats.evaluation.evaluator import evaluate
from oats.interpreter import Interpreter
from oats.reader.parser import read_all
from oats.types.environment import Environment
from oats.types.void import Void


@pytest.fixture
def env():
    """A fresh environment holding the default primitives."""
    return Environment()


@pytest.fixture
def interp():
    """An interpreter without the prelude, so only primitives are bound."""
    return Interpreter(prelude=None)


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env`, returning the last result."""
    def _run(source):
        result = Void
        for expr in read_all(source):
            result = evaluate(expr, env)
        return result
    return _run

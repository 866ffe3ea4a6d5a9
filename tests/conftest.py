import pytest

from carlae.builtin.env_builtin import global_environment
from carlae.interpreter import evaluate_top_level


@pytest.fixture
def env():
    """Fresh top-level environment over the shared builtins."""
    return global_environment()


@pytest.fixture
def run(env):
    """Evaluate each source line in turn in one environment; return the last result."""
    def _run(*lines):
        result = None
        for line in lines:
            result, _ = evaluate_top_level(line, env)
        return result
    return _run

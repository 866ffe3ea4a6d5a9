from __future__ import annotations
import logging

from carlae import CarlaeValue
from carlae.builtin.env_builtin import global_environment
from carlae.evaluation.evaluator import evaluate
from carlae.printer import stringify
from carlae.reader.parser import tokenize, parse
from carlae.types.environment import Environment

logger = logging.getLogger(__name__)

__all__ = ["evaluate_top_level", "stringify", "Interpreter"]


def evaluate_top_level(
    source: str, env: Environment | None = None
) -> tuple[CarlaeValue, Environment]:
    """Evaluate one top-level form from `source`.

    When `env` is None a fresh child of the builtin environment is created.
    The environment is returned with the result so callers can thread it
    through successive evaluations.
    """
    if env is None:
        env = global_environment()
    tree = parse(tokenize(source))
    logger.debug("evaluating %r", tree)
    return evaluate(tree, env), env


class Interpreter:
    """
    A Carlae session: keeps one environment alive across calls so that
    definitions made by one line are visible to the next.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else global_environment()

    def eval(self, source: str) -> CarlaeValue:
        result, self.env = evaluate_top_level(source, self.env)
        return result

    def eval_to_string(self, source: str) -> str:
        return stringify(self.eval(source))

import logging

from carlae import EvaluatorFn
from carlae import SExpression, CarlaeValue
from carlae.errors import CarlaeArityError, CarlaeTypeError
from carlae.evaluation.special_forms.lambda_form import parameter_list
from carlae.types.boolean import BOOLEAN_LITERALS
from carlae.types.closure import Closure
from carlae.types.environment import Environment
from carlae.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _check_name(name: SExpression) -> Symbol:
    if not isinstance(name, Symbol):
        raise CarlaeTypeError(f"Cannot define {name!r}: names must be symbols")
    if name in BOOLEAN_LITERALS:
        raise CarlaeTypeError(f"Cannot define the literal {name}")
    return name


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> CarlaeValue:
    """
    (def name value)           binds the evaluated value, returns it
    (def (name p1 p2 ...) body) binds a Closure, returns it
    """
    if len(tail) != 2:
        raise CarlaeArityError("def requires exactly 2 arguments")

    target, expr = tail
    if isinstance(target, list):
        if not target:
            raise CarlaeArityError("def of a function requires a name")
        name = _check_name(target[0])
        value = Closure(parameter_list(target[1:]), expr, env)
    else:
        name = _check_name(target)
        value = evaluate_fn(expr, env)

    env.define(name, value)
    logger.debug("def %s", name)
    return value

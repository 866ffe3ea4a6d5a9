from carlae import EvaluatorFn
from carlae import SExpression, CarlaeValue
from carlae.errors import CarlaeArityError
from carlae.types.boolean import is_truthy
from carlae.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> CarlaeValue:
    if len(tail) != 3:
        raise CarlaeArityError("if requires a condition, a consequent and an alternative")

    cond, consequent, alternative = tail
    # Only the taken branch is evaluated
    if is_truthy(evaluate_fn(cond, env)):
        return evaluate_fn(consequent, env)
    return evaluate_fn(alternative, env)

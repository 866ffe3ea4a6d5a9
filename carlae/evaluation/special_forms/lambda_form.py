from carlae import EvaluatorFn
from carlae import SExpression, CarlaeValue
from carlae.errors import CarlaeArityError, CarlaeTypeError
from carlae.types.boolean import BOOLEAN_LITERALS
from carlae.types.closure import Closure
from carlae.types.environment import Environment
from carlae.types.symbol import Symbol


def parameter_list(params: SExpression) -> list[Symbol]:
    """Validate a parsed parameter list: a list of distinct Symbols."""
    if not isinstance(params, list):
        raise CarlaeTypeError(f"Parameter list must be a list, got {params!r}")
    seen: set[Symbol] = set()
    for p in params:
        if not isinstance(p, Symbol):
            raise CarlaeTypeError(f"Parameter names must be symbols, got {p!r}")
        if p in BOOLEAN_LITERALS:
            raise CarlaeTypeError(f"Cannot use the literal {p} as a parameter name")
        if p in seen:
            raise CarlaeTypeError(f"Duplicate parameter name {p}")
        seen.add(p)
    return list(params)


def fun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> CarlaeValue:
    """(fun (params...) body) -> Closure over the current environment."""
    if len(tail) != 2:
        raise CarlaeArityError("fun requires a parameter list and a body")

    params, body = tail
    return Closure(parameter_list(params), body, env)

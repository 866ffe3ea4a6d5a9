"""Core tree-walking evaluator for Carlae.

Dispatch order for a node:
  1. numeric literal -> itself
  2. @t / @f -> True / False
  3. any other Symbol -> environment lookup
  4. list headed by a special-form keyword -> its handler
  5. any other non-empty list -> function application

There is no tail-call elimination: recursion in Carlae code consumes host
stack depth proportional to its depth.
"""

from __future__ import annotations

from carlae import SExpression, CarlaeValue
from carlae.errors import CarlaeEvaluationError
from carlae.evaluation.apply import apply
from carlae.evaluation.special_forms import SPECIAL_FORMS
from carlae.types.boolean import BOOLEAN_LITERALS
from carlae.types.environment import Environment
from carlae.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> CarlaeValue:
    match expr:
        case int() | float():
            return expr

        case Symbol():
            if expr in BOOLEAN_LITERALS:
                return BOOLEAN_LITERALS[expr]
            return env.lookup(expr)

        case []:
            raise CarlaeEvaluationError("Cannot evaluate an empty expression ()")

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [head, *tail]:
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args, evaluate)

    raise CarlaeEvaluationError(f"Cannot evaluate {expr!r}")

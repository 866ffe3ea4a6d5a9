"""Built-in functions for the Carlae runtime environment.

Each builtin takes the list of already-evaluated arguments and left-folds it.
The registry is built once at import time and exposed through a single
read-only environment shared by every session.
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from types import MappingProxyType
from typing import Callable, Mapping

from carlae import CarlaeValue
from carlae.errors import (
    CarlaeArityError,
    CarlaeEvaluationError,
    CarlaeTypeError,
    CarlaeZeroDivisionError,
)
from carlae.types.boolean import is_number
from carlae.types.builtin import Builtin
from carlae.types.environment import Environment, ReadOnlyEnvironment
from carlae.types.symbol import Symbol


def _check_numbers(name: str, args: list[CarlaeValue]) -> None:
    if not args:
        raise CarlaeArityError(f"{name} requires at least 1 argument")
    for arg in args:
        if not is_number(arg):
            raise CarlaeTypeError(f"All arguments to {name} must be numbers, got {arg}")


def _check_finite(name: str, result: CarlaeValue) -> CarlaeValue:
    if isinstance(result, float) and not math.isfinite(result):
        raise CarlaeEvaluationError(f"{name}: result is not a finite number")
    return result


def _folding(name: str, op: Callable[[CarlaeValue, CarlaeValue], CarlaeValue]):
    def fold(args: list[CarlaeValue]) -> CarlaeValue:
        _check_numbers(name, args)
        try:
            return _check_finite(name, reduce(op, args))
        except OverflowError as e:
            raise CarlaeEvaluationError(f"{name}: numeric overflow") from e

    fold.__name__ = f"fold_{op.__name__}"
    return fold


add = _folding("+", operator.add)
sub = _folding("-", operator.sub)
mul = _folding("*", operator.mul)


def div(args: list[CarlaeValue]) -> CarlaeValue:
    """Divide the first argument by each subsequent one, left to right."""
    _check_numbers("/", args)
    try:
        return _check_finite("/", reduce(operator.truediv, args))
    except ZeroDivisionError as e:
        raise CarlaeZeroDivisionError("Division by zero") from e
    except OverflowError as e:
        raise CarlaeEvaluationError("/: numeric overflow") from e


BUILTINS: Mapping[str, Callable[[list[CarlaeValue]], CarlaeValue]] = MappingProxyType({
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
})

BUILTIN_ENV: ReadOnlyEnvironment = ReadOnlyEnvironment(
    {Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()}
)


def global_environment() -> Environment:
    """Return a fresh top-level environment whose parent is the shared builtin env."""
    return Environment(outer=BUILTIN_ENV)

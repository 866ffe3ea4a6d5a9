from __future__ import annotations
from numbers import Number

from carlae import CarlaeValue
from carlae.types.symbol import Symbol

TRUE = Symbol("@t")
FALSE = Symbol("@f")

# Reserved literal symbols, resolved before any environment lookup
BOOLEAN_LITERALS: dict[Symbol, bool] = {TRUE: True, FALSE: False}


def is_number(value: CarlaeValue) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def is_truthy(value: CarlaeValue) -> bool:
    """@f and numeric zero are false; every other value is true."""
    if value is False:
        return False
    if is_number(value) and value == 0:
        return False
    return True

"""Value-to-text conversion for results shown to a user."""

from __future__ import annotations

from carlae import CarlaeValue
from carlae.types.boolean import TRUE, FALSE
from carlae.types.builtin import Builtin
from carlae.types.closure import Closure


def stringify(value: CarlaeValue) -> str:
    """Render a runtime value as display text.

    Numbers render as decimal text (integral floats without a fractional part),
    booleans as @t/@f, and callables as fixed placeholder labels.
    """
    match value:
        case bool():
            return str(TRUE) if value else str(FALSE)
        case int():
            return str(value)
        case float():
            if value.is_integer():
                return str(int(value))
            return repr(value)
        case Builtin() | Closure():
            return str(value)
    return repr(value)

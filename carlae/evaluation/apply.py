"""Application engine for Carlae.

Callables form a closed set: native Builtins and user Closures. Anything
else in operator position is a type error.
"""

import logging

from carlae import CarlaeValue, EvaluatorFn
from carlae.errors import CarlaeTypeError
from carlae.printer import stringify
from carlae.types.builtin import Builtin
from carlae.types.closure import Closure

logger = logging.getLogger(__name__)


def apply(fn: CarlaeValue, args: list[CarlaeValue], evaluate_fn: EvaluatorFn) -> CarlaeValue:
    """Apply an evaluated operator to evaluated arguments.

    - Builtin: invoked with the argument list.
    - Closure: arguments are bound in a fresh frame whose parent is the
      closure's captured environment, then the body is evaluated there.
      Arity mismatches raise CarlaeArityError.
    """
    match fn:
        case Builtin():
            return fn(args)
        case Closure():
            frame = fn.extend_env(args)
            logger.debug("apply %r to %d argument(s)", fn, len(args))
            return evaluate_fn(fn.body, frame)
        case _:
            raise CarlaeTypeError(f"{stringify(fn)} is not callable")

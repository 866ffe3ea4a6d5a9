"""User-defined function values and argument binding."""

from __future__ import annotations

from carlae import SExpression, CarlaeValue
from carlae.errors import CarlaeArityError
from carlae.types.environment import Environment
from carlae.types.symbol import Symbol


class Closure:
    """A first-class function: parameter names, unevaluated body, defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # Captured by reference, never copied
        self.env: Environment = env

    def __str__(self) -> str:
        return "function object"

    def __repr__(self) -> str:
        return f"<Closure ({' '.join(str(p) for p in self.params)})>"

    def extend_env(self, args: list[CarlaeValue]) -> Environment:
        """Bind `args` positionally to the parameters in a fresh frame over the captured env.

        Raises CarlaeArityError when the counts differ.
        """
        if len(args) != len(self.params):
            raise CarlaeArityError(
                f"function expects {len(self.params)} argument(s), got {len(args)}"
            )
        frame = Environment(outer=self.env)
        for param, arg in zip(self.params, args):
            frame.define(param, arg)
        return frame

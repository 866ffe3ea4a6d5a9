"""Runtime environment for Carlae.

An Environment stores bindings of Symbols to evaluated values and links to
an enclosing scope via `outer`. Lookup walks the chain innermost-first;
definition only ever touches the frame it is called on.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Mapping, Optional

from carlae import CarlaeValue
from carlae.errors import CarlaeEvaluationError, CarlaeNameError, CarlaeTypeError
from carlae.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Carlae values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, CarlaeValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: CarlaeValue) -> None:
        """Bind `name` to `value` in this frame, shadowing or overwriting silently.

        Raises CarlaeTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise CarlaeTypeError(f"Cannot define {name!r} as a name")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Return the nearest environment in the chain that binds `name`, or None."""
        env: Optional[Environment] = self
        while env is not None:
            # Presence check: a binding to 0 or @f is still a binding
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> CarlaeValue:
        """Look up the value bound to `name`.

        Raises CarlaeNameError if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise CarlaeNameError(f"unknown identifier: {name}")
        return env.vars[name]

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for the parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()


class ReadOnlyEnvironment(Environment):
    """A parentless frame whose bindings are fixed at construction.

    Used for the builtin registry, which is shared by every session.
    """

    __slots__ = ()

    def __init__(self, bindings: Mapping[Symbol, CarlaeValue]):
        super().__init__(None)
        self.vars = MappingProxyType(dict(bindings))

    def define(self, name: Symbol, value: CarlaeValue) -> None:
        raise CarlaeEvaluationError(f"Cannot rebind {name} in the builtin environment")

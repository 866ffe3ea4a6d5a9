from __future__ import annotations

from typing import Callable

from carlae import CarlaeValue


class Builtin:
    """A native function over a list of already-evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[CarlaeValue]], CarlaeValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[CarlaeValue]) -> CarlaeValue:
        return self.fn(args)

    def __str__(self) -> str:
        return "builtin function"

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"

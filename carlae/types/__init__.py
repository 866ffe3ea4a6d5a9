from carlae.types.symbol import Symbol
from carlae.types.environment import Environment, ReadOnlyEnvironment
from carlae.types.closure import Closure
from carlae.types.builtin import Builtin
from carlae.types.boolean import TRUE, FALSE, is_truthy

__all__ = ["Symbol", "Environment", "ReadOnlyEnvironment", "Closure", "Builtin", "TRUE", "FALSE", "is_truthy"]

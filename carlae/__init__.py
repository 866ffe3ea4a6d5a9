# Core type aliases for Carlae's data model.
# Source forms and runtime values are plain Python objects:
# int/float for numbers, Symbol for identifiers, list for S-expressions,
# bool for @t/@f, plus the Builtin and Closure wrappers for callables.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - CarlaeValue: use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
CarlaeValue = Any
# Parsed form alias
SExpression = Any

# Evaluator function type, passed into special forms and the apply engine
EvaluatorFn = Callable[..., CarlaeValue]

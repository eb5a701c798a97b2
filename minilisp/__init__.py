# Core type aliases for minilisp's data model.
# Integers are plain Python ints; everything else is one of the classes under
# minilisp.types (Pair, Symbol, Primitive, Closure, Macro, the Nil/T/Dot/CloseParen
# markers and Environment frames).
#
# Naming guidance:
# - SExpression: use in reader/macro code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (code and data share one representation)
SExpression = LispValue

# Native procedure behind a Primitive: (environment, unevaluated args) -> value
PrimitiveFn = Callable[[Any, Any], LispValue]

# Evaluator function type, passed to code that cannot import the evaluator directly
EvaluatorFn = Callable[[Any, Any], LispValue]

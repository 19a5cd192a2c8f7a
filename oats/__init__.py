# Core type aliases for the oats data model.
# Atoms use plain Python types where one fits (float, str, bool); symbols,
# characters, pairs, the empty list, void and procedures have their own
# classes under oats.types.
#
# Naming guidance:
# - SExpression: use in reader code and special forms for code-as-data.
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (code and data share one representation)
SExpression = LispValue

# Evaluator function type handed to special forms and primitives
EvaluatorFn = Callable[..., LispValue]

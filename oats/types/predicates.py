from __future__ import annotations

from oats import LispValue
from oats.types.pair import Pair
from oats.types.procedure import Procedure, PrimitiveProcedure


def is_truthy(value: LispValue) -> bool:
    # Only #f is false; 0, "" and () are all true
    return value is not False


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, (Procedure, PrimitiveProcedure))


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality used by `eq?`.

    Pairs are compared element-wise with an explicit stack, so neither long
    nor deeply nested lists recurse. Leaves must share the exact type (so `#t`
    never equals `1`) and payload. Procedures are only equal to themselves.
    """
    stack = [(a, b)]
    while stack:
        a, b = stack.pop()
        if isinstance(a, Pair) and isinstance(b, Pair):
            stack.append((a.cdr, b.cdr))
            stack.append((a.car, b.car))
            continue
        if not _leaf_equal(a, b):
            return False
    return True


def _leaf_equal(a: LispValue, b: LispValue) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, (Procedure, PrimitiveProcedure)):
        return a is b
    return a == b

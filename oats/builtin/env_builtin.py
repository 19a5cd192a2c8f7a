from __future__ import annotations

import math
from typing import Any

import numpy as np

from oats import SExpression, LispValue
from oats.errors import IncorrectArity, IndexOutOfBounds, TypeMismatch
from oats.evaluation.evaluator import evaluate_to_value
from oats.printer import to_display
from oats.types.char import Char
from oats.types.environment import Environment
from oats.types.nil import EmptyListType
from oats.types.pair import Pair, iterate, list_length, make_list
from oats.types.predicates import is_equal, is_procedure
from oats.types.symbol import Symbol
from oats.types.void import Void

# Primitives receive their operands unevaluated and evaluate them here, left
# to right, demanding a value from each.

# -------------------------------
# Operand helpers
# -------------------------------
_KINDS: dict[str, type | tuple[type, ...]] = {
    "number": float,
    "string": str,
    "pair": Pair,
    "boolean": bool,
    "symbol": Symbol,
}


def expect(value: Any, kind: str) -> Any:
    """Return `value` if it is of `kind`, else raise TypeMismatch."""
    if not isinstance(value, _KINDS[kind]):
        raise TypeMismatch(kind, value)
    return value


def evaluate_operands(operands: SExpression, env: Environment, *kinds: str) -> list[Any]:
    """Evaluate exactly len(kinds) operands, checking each against its kind.

    A kind of "any" accepts every value.
    """
    exprs = list(iterate(operands))
    if len(exprs) != len(kinds):
        raise IncorrectArity(len(kinds), len(exprs))
    values = []
    for expr, kind in zip(exprs, kinds):
        value = evaluate_to_value(expr, env)
        values.append(value if kind == "any" else expect(value, kind))
    return values


def evaluate_all(operands: SExpression, env: Environment, kind: str = "any") -> list[Any]:
    """Evaluate a variadic operand list."""
    values = []
    for expr in iterate(operands):
        value = evaluate_to_value(expr, env)
        values.append(value if kind == "any" else expect(value, kind))
    return values


def to_index(value: float) -> int:
    # Truncate toward zero like a float -> integer cast
    if not math.isfinite(value):
        raise TypeMismatch("index", value)
    return int(value)


# -------------------------------
# Output
# -------------------------------
def display(operands: SExpression, env: Environment) -> LispValue:
    (value,) = evaluate_operands(operands, env, "any")
    print(to_display(value))
    return Void


# -------------------------------
# Equality and predicates
# -------------------------------
def logical_not(operands: SExpression, env: Environment) -> bool:
    (b,) = evaluate_operands(operands, env, "boolean")
    return not b


def eq(operands: SExpression, env: Environment) -> bool:
    lhs, rhs = evaluate_operands(operands, env, "any", "any")
    return is_equal(lhs, rhs)


def _predicate(test):
    def check(operands: SExpression, env: Environment) -> bool:
        (value,) = evaluate_operands(operands, env, "any")
        return test(value)
    return check


# -------------------------------
# List operations
# -------------------------------
def cons(operands: SExpression, env: Environment) -> Pair:
    car, cdr = evaluate_operands(operands, env, "any", "any")
    return Pair(car, cdr)


def car(operands: SExpression, env: Environment) -> LispValue:
    (pair,) = evaluate_operands(operands, env, "pair")
    return pair.car


def cdr(operands: SExpression, env: Environment) -> LispValue:
    (pair,) = evaluate_operands(operands, env, "pair")
    return pair.cdr


def list_builtin(operands: SExpression, env: Environment) -> LispValue:
    return make_list(evaluate_all(operands, env))


# -------------------------------
# Arithmetic
# -------------------------------
def _divide(dividend: float, divisor: float) -> float:
    # IEEE-754 division: x/0 is +-inf and 0/0 is NaN instead of ZeroDivisionError
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(dividend) / np.float64(divisor))


def absolute(operands: SExpression, env: Environment) -> float:
    (n,) = evaluate_operands(operands, env, "number")
    return abs(n)


def add(operands: SExpression, env: Environment) -> float:
    result = 0.0
    for n in evaluate_all(operands, env, "number"):
        result += n
    return result


def sub(operands: SExpression, env: Environment) -> float:
    count = list_length(operands)
    if count == 0:
        raise IncorrectArity(1, 0)
    minuend, *rest = evaluate_all(operands, env, "number")
    if not rest:
        return -minuend
    subtrahend = 0.0
    for n in rest:
        subtrahend += n
    return minuend - subtrahend


def mul(operands: SExpression, env: Environment) -> float:
    result = 1.0
    for n in evaluate_all(operands, env, "number"):
        result *= n
    return result


def div(operands: SExpression, env: Environment) -> float:
    count = list_length(operands)
    if count == 0:
        raise IncorrectArity(1, 0)
    dividend, *rest = evaluate_all(operands, env, "number")
    if not rest:
        return _divide(1.0, dividend)
    divisor = 1.0
    for n in rest:
        divisor *= n
    return _divide(dividend, divisor)


# -------------------------------
# Comparison
# -------------------------------
def _comparison(test):
    def compare(operands: SExpression, env: Environment) -> bool:
        numbers = evaluate_all(operands, env, "number")
        return all(test(a, b) for a, b in zip(numbers, numbers[1:]))
    return compare


# -------------------------------
# Strings
# -------------------------------
def string_length(operands: SExpression, env: Environment) -> float:
    (s,) = evaluate_operands(operands, env, "string")
    return float(len(s))


def string_ref(operands: SExpression, env: Environment) -> Char:
    s, idx = evaluate_operands(operands, env, "string", "number")
    i = to_index(idx)
    if not 0 <= i < len(s):
        raise IndexOutOfBounds(i)
    return Char(s[i])


def substring(operands: SExpression, env: Environment) -> str:
    s, start, end = evaluate_operands(operands, env, "string", "number", "number")
    i, j = to_index(start), to_index(end)
    if not 0 <= i <= len(s):
        raise IndexOutOfBounds(i)
    if not i <= j <= len(s):
        raise IndexOutOfBounds(j)
    return s[i:j]


def string_append(operands: SExpression, env: Environment) -> str:
    return "".join(evaluate_all(operands, env, "string"))


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    "display": display,
    "not": logical_not,
    "eq?": eq,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "list": list_builtin,
    "abs": absolute,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": _comparison(lambda a, b: a == b),
    "<": _comparison(lambda a, b: a < b),
    "<=": _comparison(lambda a, b: a <= b),
    ">": _comparison(lambda a, b: a > b),
    ">=": _comparison(lambda a, b: a >= b),
    "null?": _predicate(lambda v: isinstance(v, EmptyListType)),
    "pair?": _predicate(lambda v: isinstance(v, Pair)),
    "symbol?": _predicate(lambda v: isinstance(v, Symbol)),
    "number?": _predicate(lambda v: isinstance(v, float)),
    "string?": _predicate(lambda v: isinstance(v, str)),
    "procedure?": _predicate(is_procedure),
    "string-length": string_length,
    "string-ref": string_ref,
    "substring": substring,
    "string-append": string_append,
}

from oats import SExpression, LispValue, EvaluatorFn
from oats.errors import EmptyProcedure, TypeMismatch
from oats.types.environment import Environment
from oats.types.nil import EmptyListType
from oats.types.pair import Pair, iterate
from oats.types.procedure import Procedure
from oats.types.symbol import Symbol


def lambda_form(operands: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(lambda (params...) body...) with at least one body form."""
    if not isinstance(operands, Pair):
        raise TypeMismatch("pair", operands)
    return make_procedure(operands.car, list(iterate(operands.cdr)), env)


def make_procedure(parameters: SExpression, body: list[SExpression], env: Environment) -> Procedure:
    # Fixed arity only: `(a . rest)` and a bare `rest` are rejected
    params: list[Symbol] = []
    cursor = parameters
    while isinstance(cursor, Pair):
        if not isinstance(cursor.car, Symbol):
            raise TypeMismatch("symbol", cursor.car)
        params.append(cursor.car)
        cursor = cursor.cdr
    if not isinstance(cursor, EmptyListType):
        raise TypeMismatch("parameter list", parameters)

    if not body:
        raise EmptyProcedure()

    captures: list[tuple[Symbol, LispValue]] = []
    for expr in body:
        collect_captures(expr, params, env, captures)
    return Procedure(params, body, captures)


def collect_captures(
    expr: SExpression,
    parameters: list[Symbol],
    env: Environment,
    captures: list[tuple[Symbol, LispValue]],
) -> None:
    """Append (symbol, value) for every free symbol of `expr` bound in `env`.

    Symbols that are unbound right now are skipped; if the body reaches them
    at call time they fail as undefined.
    """
    stack = [expr]
    while stack:
        value = stack.pop()
        if isinstance(value, Symbol):
            if value not in parameters and value in env:
                captures.append((value, env.lookup(value)))
        elif isinstance(value, Pair):
            stack.append(value.car)
            stack.append(value.cdr)

"""Core evaluator for oats.

Evaluation is one explicit loop. Special forms that end in tail position
(`if`) hand back a TailCall, and closure application replaces the current
expression with the last body form, so neither grows the Python stack.
"""

from __future__ import annotations

from oats import SExpression, LispValue
from oats.errors import EmptyApplication, ExpectedProcedure, ExpectedValue
from oats.evaluation.apply import enter_procedure
from oats.evaluation.special_forms import SPECIAL_FORMS
from oats.types.environment import Environment
from oats.types.nil import EmptyListType
from oats.types.pair import Pair
from oats.types.procedure import Procedure, PrimitiveProcedure
from oats.types.symbol import Symbol
from oats.types.tail_call import TailCall
from oats.types.void import VoidType


def evaluate_to_value(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` and fail with ExpectedValue if it produces void."""
    value = evaluate(expr, env)
    if isinstance(value, VoidType):
        raise ExpectedValue(expr)
    return value


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate `expr` in `env`.

    The scope stack is truncated back to its depth on entry whichever way the
    loop is left, so a failing call never leaves a frame behind.
    """
    initial_depth = env.depth()
    try:
        while True:
            match expr:
                case Pair(car=head, cdr=operands):
                    # --- Special forms handling ---
                    if isinstance(head, Symbol):
                        form = SPECIAL_FORMS.get(head)
                        if form is not None:
                            result = form(operands, env, evaluate_to_value)
                            if isinstance(result, TailCall):
                                expr = result.expr
                                continue
                            return result

                    procedure = evaluate_to_value(head, env)
                    if isinstance(procedure, PrimitiveProcedure):
                        return procedure(operands, env)
                    if not isinstance(procedure, Procedure):
                        raise ExpectedProcedure(procedure)

                    # Only the first call in this loop gets a new frame; tail
                    # calls after it rebind into that same frame.
                    expr = enter_procedure(
                        procedure,
                        operands,
                        env,
                        new_frame=env.depth() == initial_depth,
                        evaluate_fn=evaluate,
                        argument_fn=evaluate_to_value,
                    )

                case Symbol():
                    return env.lookup(expr)

                case EmptyListType():
                    raise EmptyApplication()

                case _:
                    # --- Atoms return as-is ---
                    return expr
    finally:
        env.truncate(initial_depth)

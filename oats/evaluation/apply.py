"""Application engine for oats.

Closure calls are split in two: `enter_procedure` evaluates the arguments,
sets up the frame and runs every body form but the last, then hands the last
form back to the evaluator loop to run in tail position. `apply` calls a
procedure value from Python with arguments that are already evaluated.
"""

from __future__ import annotations

from oats import SExpression, LispValue, EvaluatorFn
from oats.errors import IncorrectArity
from oats.types.environment import Environment
from oats.types.pair import iterate, make_list
from oats.types.procedure import Procedure
from oats.types.symbol import Symbol

_QUOTE = Symbol("quote")


def enter_procedure(
    procedure: Procedure,
    operands: SExpression,
    env: Environment,
    new_frame: bool,
    evaluate_fn: EvaluatorFn,
    argument_fn: EvaluatorFn,
) -> SExpression:
    """Prepare a call to `procedure` and return its tail expression.

    Parameters:
    - operands: the unevaluated operand list from the application.
    - new_frame: push a scope first; False when re-entering from a tail call.
    - evaluate_fn: runs the non-final body forms for effect.
    - argument_fn: evaluates each operand, demanding a value.

    Arguments are evaluated left to right in the caller's scope before any
    binding happens.
    """
    args = [argument_fn(arg, env) for arg in iterate(operands)]
    if len(args) != procedure.arity:
        raise IncorrectArity(procedure.arity, len(args))

    if new_frame:
        env.push_scope()
    procedure.bind_arguments(env, args)

    *effects, last = procedure.body
    for form in effects:
        evaluate_fn(form, env)
    return last


def apply(procedure: LispValue, args: list[LispValue], env: Environment) -> LispValue:
    """Call `procedure` with already-evaluated `args`.

    Each argument is quoted so primitives, which evaluate their own operands,
    see the values unchanged.
    """
    from oats.evaluation.evaluator import evaluate

    operands = [make_list([_QUOTE, arg]) for arg in args]
    return evaluate(make_list([procedure, *operands]), env)

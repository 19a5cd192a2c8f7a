from oats import EvaluatorFn
from oats import SExpression, LispValue
from oats.errors import IncorrectArity, TypeMismatch
from oats.evaluation.special_forms.lambda_form import make_procedure
from oats.types.environment import Environment
from oats.types.pair import Pair, iterate
from oats.types.symbol import Symbol
from oats.types.void import Void


def define_form(operands: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)  ; same as (define name (lambda (params...) body...))

    Binds in the innermost scope, so a define inside a procedure body stays
    local to that call.
    """
    items = list(iterate(operands))
    if not items:
        raise IncorrectArity(2, 0)

    target = items[0]
    if isinstance(target, Pair):
        name = target.car
        if not isinstance(name, Symbol):
            raise TypeMismatch("symbol", name)
        env.bind(name, make_procedure(target.cdr, items[1:], env))
        return Void

    if not isinstance(target, Symbol):
        raise TypeMismatch("symbol", target)
    if len(items) != 2:
        raise IncorrectArity(2, len(items))
    env.bind(target, evaluate_fn(items[1], env))
    return Void

from oats import SExpression, EvaluatorFn
from oats.types.environment import Environment
from oats.types.pair import iterate
from oats.types.predicates import is_truthy


def and_form(operands: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> bool:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns #f as soon
    as one is false. Otherwise returns #t; the operand values themselves are
    never returned. With zero operands, returns #t.
    """
    for expr in iterate(operands):
        if not is_truthy(evaluate_fn(expr, env)):
            return False
    return True


def or_form(operands: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> bool:
    """Short-circuiting logical OR special form.

    (or a b c ...) returns #t at the first truthy operand, else #f. With zero
    operands, returns #f.
    """
    for expr in iterate(operands):
        if is_truthy(evaluate_fn(expr, env)):
            return True
    return False

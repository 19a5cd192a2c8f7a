from oats import SExpression, LispValue, EvaluatorFn
from oats.errors import IncorrectArity
from oats.types.environment import Environment
from oats.types.pair import iterate


def quote_form(operands: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(quote x) returns x unevaluated."""
    items = list(iterate(operands))
    if len(items) != 1:
        raise IncorrectArity(1, len(items))
    return items[0]

from oats import EvaluatorFn
from oats import SExpression
from oats.errors import IncorrectArity
from oats.types.environment import Environment
from oats.types.pair import iterate
from oats.types.predicates import is_truthy
from oats.types.tail_call import TailCall


def if_form(operands: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> TailCall:
    """
    (if predicate consequent alternative)
    The chosen branch is handed back to the evaluator loop, which keeps it in
    tail position.
    """
    items = list(iterate(operands))
    if len(items) != 3:
        raise IncorrectArity(3, len(items))

    predicate, consequent, alternative = items
    if is_truthy(evaluate_fn(predicate, env)):
        return TailCall(consequent)
    return TailCall(alternative)

from oats import SExpression


class TailCall:
    """Returned by a special form to ask the evaluator loop to continue with
    `expr` in the current frame instead of recursing."""

    __slots__ = ("expr",)

    def __init__(self, expr: SExpression):
        self.expr = expr

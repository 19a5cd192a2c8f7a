"""Procedure values: user closures and native primitives."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from oats import SExpression, LispValue
from oats.errors import EmptyProcedure
from oats.types.symbol import Symbol

if TYPE_CHECKING:
    from oats.types.environment import Environment

PrimitiveFn = Callable[[SExpression, "Environment"], LispValue]


class PrimitiveProcedure:
    """A native procedure.

    `fn` receives the *unevaluated* operand list and the calling environment
    and evaluates whatever operands it needs itself.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, operands: SExpression, env: Environment) -> LispValue:
        return self.fn(operands, env)

    def __str__(self) -> str:
        return "#<procedure>"

    def __repr__(self) -> str:
        return f"PrimitiveProcedure({self.name!r})"


class Procedure:
    """A closure built by `lambda` or the procedure form of `define`.

    `captures` is a snapshot of the free variables of `body` taken when the
    closure was built; rebinding those names later does not affect it.
    """

    __slots__ = ("parameters", "body", "captures")

    def __init__(
        self,
        parameters: list[Symbol],
        body: list[SExpression],
        captures: list[tuple[Symbol, LispValue]] | None = None,
    ):
        if not body:
            raise EmptyProcedure()
        self.parameters: list[Symbol] = parameters
        self.body: list[SExpression] = body
        self.captures: list[tuple[Symbol, LispValue]] = captures if captures is not None else []

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def bind_arguments(self, env: Environment, args: list[LispValue]) -> None:
        """Bind parameters, then captures, into the innermost scope of `env`."""
        for param, arg in zip(self.parameters, args):
            env.bind(param, arg)
        for name, value in self.captures:
            env.bind(name, value)

    def __str__(self) -> str:
        return "#<procedure>"

    def __repr__(self) -> str:
        params = " ".join(p.id for p in self.parameters)
        return f"Procedure(({params}), {len(self.body)} body forms)"

"""Runtime environment for oats.

The Environment is a stack of scopes, innermost last. The bottom scope holds
the primitives from a PrimitiveRegistry; the evaluator pushes a scope for each
procedure call and truncates back to a saved depth when the call finishes.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Optional

from oats import LispValue
from oats.errors import UndefinedVariable
from oats.types.symbol import Symbol

if TYPE_CHECKING:
    from oats.builtin.registry import PrimitiveRegistry


class Environment:
    """Stack of Symbol -> value scopes with innermost-first lookup."""

    __slots__ = ("scopes",)

    def __init__(self, registry: Optional[PrimitiveRegistry] = None):
        if registry is None:
            # Lazy import to avoid circular imports
            from oats.builtin.registry import default_registry
            registry = default_registry()
        self.scopes: list[dict[Symbol, LispValue]] = [
            {Symbol(name): proc for name, proc in registry.items()}
        ]

    def bind(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the innermost scope only, replacing any binding there."""
        self.scopes[-1][name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Return the innermost binding of `name`.

        Raises UndefinedVariable if no scope binds it.
        """
        for scope in reversed(self.scopes):
            if name in scope:
                return scope[name]
        raise UndefinedVariable(name.id)

    def is_bound(self, name: Symbol) -> bool:
        return any(name in scope for scope in self.scopes)

    __contains__ = is_bound

    def push_scope(self) -> None:
        self.scopes.append({})

    def depth(self) -> int:
        return len(self.scopes)

    def truncate(self, depth: int) -> None:
        """Drop every scope above `depth`. The bottom scope is never dropped."""
        del self.scopes[max(depth, 1):]

    def _write_scope(self, buffer: StringIO, scope: dict[Symbol, LispValue]) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k.id}: {v}" for k, v in scope.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost scope with an indicator for the depth below it."""
        with StringIO() as buffer:
            self._write_scope(buffer, self.scopes[-1])
            if len(self.scopes) > 1:
                buffer.write(f" -> ... ({len(self.scopes) - 1} more)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment depth={len(self.scopes)}>"

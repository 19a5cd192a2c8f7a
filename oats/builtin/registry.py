"""Immutable table of primitive procedures handed to an Environment."""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from collections.abc import Iterator, Mapping

from oats.types.procedure import PrimitiveFn, PrimitiveProcedure


class PrimitiveRegistry(Mapping[str, PrimitiveProcedure]):
    """Read-only name -> PrimitiveProcedure mapping.

    Plain callables are wrapped on construction. Use `extend` to build a new
    registry with extra or replaced entries; an existing registry never changes.
    """

    __slots__ = ("_table",)

    def __init__(self, entries: Mapping[str, PrimitiveProcedure | PrimitiveFn] | None = None):
        table: dict[str, PrimitiveProcedure] = {}
        for name, proc in (entries or {}).items():
            if not isinstance(proc, PrimitiveProcedure):
                proc = PrimitiveProcedure(name, proc)
            table[name] = proc
        self._table = MappingProxyType(table)

    def __getitem__(self, name: str) -> PrimitiveProcedure:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def extend(self, entries: Mapping[str, PrimitiveProcedure | PrimitiveFn]) -> PrimitiveRegistry:
        return PrimitiveRegistry({**self._table, **entries})

    def __repr__(self) -> str:
        return f"<PrimitiveRegistry {len(self._table)} primitives>"


@lru_cache(maxsize=None)
def default_registry() -> PrimitiveRegistry:
    """The base primitives: display, not, eq?, pairs, arithmetic, strings."""
    from oats.builtin.env_builtin import BUILTINS
    return PrimitiveRegistry(BUILTINS)

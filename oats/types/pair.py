"""Cons cells and the list protocol built on them."""

from __future__ import annotations

from typing import Iterable, Iterator

from oats import LispValue
from oats.errors import ExpectedList
from oats.types.nil import EmptyList


class Pair:
    """An immutable cons cell.

    `car` and `cdr` are plain references, so several lists may share a tail
    (`cdr` of a list hands back the original spine, no copy is made).
    """

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispValue]:
        return iterate(self)

    def __eq__(self, other: object) -> bool:
        from oats.types.predicates import is_equal
        return isinstance(other, Pair) and is_equal(self, other)

    __hash__ = None  # structural equality, not hashable

    def __repr__(self):
        return f"Pair({self.car!r}, {self.cdr!r})"

    def __str__(self):
        from oats.printer import to_external
        return to_external(self)


def iterate(value: LispValue) -> Iterator[LispValue]:
    """Yield the elements of `value` read as a list.

    Raises ExpectedList with the offending tail when the chain does not end
    in the empty list.
    """
    while isinstance(value, Pair):
        yield value.car
        value = value.cdr
    if value != EmptyList:
        raise ExpectedList(value)


def make_list(elements: Iterable[LispValue], tail: LispValue = EmptyList) -> LispValue:
    """Fold `elements` right to left into pairs ending in `tail`."""
    result = tail
    for element in reversed(list(elements)):
        result = Pair(element, result)
    return result


def list_length(value: LispValue) -> int:
    """Count the elements of a proper list."""
    return sum(1 for _ in iterate(value))

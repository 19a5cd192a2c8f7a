from __future__ import annotations


class EmptyListType:
    """The `()` list terminator.

    Equality is by value: every EmptyListType instance equals every other, so
    code should compare with `==` rather than `is`.
    """

    __slots__ = ()

    def __repr__(self): return "EmptyList"
    def __str__(self): return "()"

    def __eq__(self, other):
        return isinstance(other, EmptyListType)

    def __hash__(self):
        return hash(EmptyListType)


EmptyList = EmptyListType()

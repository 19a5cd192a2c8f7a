from __future__ import annotations


class VoidType:
    """Result of side-effecting forms such as `define` and `display`."""

    __slots__ = ()

    def __repr__(self): return "Void"
    def __str__(self): return "#<void>"

    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)


Void = VoidType()

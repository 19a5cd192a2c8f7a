from __future__ import annotations


class Char:
    """A character literal such as `#\\a`.

    Kept distinct from `str` so that `"a"` and `#\\a` never compare equal.
    """

    __slots__ = ("value",)

    def __init__(self, value: str):
        if len(value) != 1:
            raise ValueError(f"Char expects a single character, got {value!r}")
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Char) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("char", self.value))

    def __repr__(self):
        return f"Char({self.value!r})"

    def __str__(self):
        from oats.printer import to_external
        return to_external(self)

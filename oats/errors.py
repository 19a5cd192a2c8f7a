"""Error kinds raised by the reader, the evaluator and the primitives.

Every failure in oats is one of the classes below. Each carries its payload as
attributes so callers can inspect it without parsing the message.
"""

from __future__ import annotations

from typing import NamedTuple

from oats import LispValue


def _show(value: LispValue) -> str:
    from oats.printer import to_external
    return to_external(value)


class OatsError(Exception):
    """ Base class for all oats errors"""
    pass


class UndefinedVariable(OatsError):
    """ Raised when a symbol is looked up but bound in no scope"""

    def __init__(self, name: str):
        super().__init__(f"variable `{name}` is unbound")
        self.name = name


class EmptyApplication(OatsError):
    """ Raised when `()` is evaluated"""

    def __init__(self):
        super().__init__("cannot evaluate empty application `()`")


class EmptyProcedure(OatsError):
    """ Raised when a lambda has no body expressions"""

    def __init__(self):
        super().__init__("procedure body cannot be empty")


class ExpectedProcedure(OatsError):
    """ Raised when the head of an application is not a procedure"""

    def __init__(self, value: LispValue):
        super().__init__(f"expected a procedure in application but found `{_show(value)}`")
        self.value = value


class ExpectedValue(OatsError):
    """ Raised when an expression whose result is consumed evaluates to void"""

    def __init__(self, value: LispValue):
        super().__init__(f"expected a value, but found `{_show(value)}`")
        self.value = value


class IncorrectArity(OatsError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, expected: int, received: int):
        super().__init__(f"expected {expected} arguments, but found {received}")
        self.expected = expected
        self.received = received


class TypeMismatch(OatsError):
    """ Raised when a value has the wrong type for an operation"""

    def __init__(self, expected: str, value: LispValue):
        super().__init__(f"expected a value of type '{expected}', but found `{_show(value)}`")
        self.expected = expected
        self.value = value


class ExpectedList(OatsError):
    """ Raised when a proper list is required but a pair chain ends in an atom"""

    def __init__(self, value: LispValue):
        super().__init__(f"expected a list, but found `{_show(value)}`")
        self.value = value


class IndexOutOfBounds(OatsError):
    """ Raised when a string index is outside the string"""

    def __init__(self, index: int):
        super().__init__(f"index {index} out of bounds")
        self.index = index


class UnexpectedEndOfInput(OatsError):
    """ Raised when the input ends before a datum is complete"""

    def __init__(self):
        super().__init__("unexpected end of input")


class Span(NamedTuple):
    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


class ParseProblem(NamedTuple):
    span: Span
    expected: tuple[str, ...]
    found: str


class ParseError(OatsError):
    """ Raised when the reader meets a character it cannot use"""

    def __init__(self, problems: list[ParseProblem]):
        lines = []
        for span, expected, found in problems:
            if expected:
                lines.append(f"expected one of {list(expected)} at {span} but found '{found}'")
            else:
                lines.append(f"unexpected '{found}' at {span}")
        super().__init__("\n".join(lines))
        self.problems = problems

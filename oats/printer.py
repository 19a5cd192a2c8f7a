"""Textual rendering of values.

`to_external` produces the form the reader accepts back (strings quoted and
escaped, characters as `#\\x`); `to_display` is what the `display` primitive
writes, with strings and characters shown raw.
"""

from __future__ import annotations

import math
import re
from io import StringIO

import numpy as np

from oats import LispValue
from oats.types.char import Char
from oats.types.nil import EmptyListType
from oats.types.pair import Pair
from oats.types.procedure import Procedure, PrimitiveProcedure
from oats.types.symbol import Symbol
from oats.types.void import VoidType

_QUOTE = Symbol("quote")

NAMED_CHARS: dict[str, str] = {
    " ": "space",
    "\n": "newline",
}

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
}

# A symbol prints bare only when the reader would give the same symbol back
_BARE_SYMBOL_RE = re.compile(r'[^\s|()";\'#]+')
_NUMBER_RE = re.compile(r"-?(?:\d+\.\d*|\.\d+|\d+)")


def format_number(n: float) -> str:
    """Shortest positional form; integral values print without a fraction."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    return np.format_float_positional(n, trim="-")


def format_symbol(name: str) -> str:
    if name != "." and _BARE_SYMBOL_RE.fullmatch(name) and not _NUMBER_RE.fullmatch(name):
        return name
    return f"|{name}|"


def format_string(s: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in s) + '"'


def format_char(c: Char) -> str:
    return "#\\" + NAMED_CHARS.get(c.value, c.value)


def _write(buffer: StringIO, value: LispValue) -> None:
    # Work items are (is_text, payload); text is written as-is, values are
    # expanded. Nesting depth is bounded by memory, not the Python stack.
    stack: list[tuple[bool, LispValue]] = [(False, value)]
    while stack:
        is_text, item = stack.pop()
        if is_text:
            buffer.write(item)
            continue
        if not isinstance(item, Pair):
            buffer.write(_atom(item))
            continue

        cdr = item.cdr
        if item.car == _QUOTE and isinstance(cdr, Pair) and isinstance(cdr.cdr, EmptyListType):
            buffer.write("'")
            stack.append((False, cdr.car))
            continue

        parts: list[tuple[bool, LispValue]] = [(True, "("), (False, item.car)]
        while isinstance(cdr, Pair):
            parts.append((True, " "))
            parts.append((False, cdr.car))
            cdr = cdr.cdr
        if not isinstance(cdr, EmptyListType):
            parts.append((True, " . "))
            parts.append((False, cdr))
        parts.append((True, ")"))
        stack.extend(reversed(parts))


def _atom(value: LispValue) -> str:
    # bool before float: bool is an int subclass, keep the checks exact
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return format_string(value)
    if isinstance(value, Symbol):
        return format_symbol(value.id)
    if isinstance(value, Char):
        return format_char(value)
    if isinstance(value, EmptyListType):
        return "()"
    if isinstance(value, VoidType):
        return "#<void>"
    if isinstance(value, (Procedure, PrimitiveProcedure)):
        return "#<procedure>"
    # Foreign Python values (e.g. from a custom registry)
    return repr(value)


def to_external(value: LispValue) -> str:
    """Render `value` in the external form the reader accepts."""
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()


def to_display(value: LispValue) -> str:
    """Render `value` the way `display` prints it."""
    if isinstance(value, str):
        return value
    if isinstance(value, Char):
        return value.value
    return to_external(value)

"""
  Reader: S-expression text to values.

- A single loop over the raw text; each alternative is a regex matched at
  the current position, tried in this order:

    - boolean    -> #t #true #f #false
    - character  -> #\\newline #\\space #\\<any char>
    - number     -> -?digits[.digits] (a whole bare run, so `1+` is a symbol)
    - string     -> "..." with \\n \\t \\" \\\\ escapes
    - symbol     -> |any run without | or \\|  or a bare run
    - quote      -> 'x  reads as (quote x)
    - list       -> ( x y ... ) and ( x y . z ), folded into Pairs

- `;` starts a comment that runs to the end of the line.
- Spans in ParseError are character offsets into the text passed in.
"""

from __future__ import annotations

import re
from typing import Iterator

from oats import SExpression
from oats.errors import ParseError, ParseProblem, Span, UnexpectedEndOfInput
from oats.types.char import Char
from oats.types.nil import EmptyList
from oats.types.pair import make_list
from oats.types.symbol import Symbol

LABELS: tuple[str, ...] = ("boolean", "character", "number", "string", "symbol", "quote", "list")

_SKIP_RE = re.compile(r"(?:\s+|;[^\n]*)*")
_BOOLEAN_RE = re.compile(r"#(?:true|t|false|f)")
_BARE_RE = re.compile(r'[^\s|()";\'#]+')
_NUMBER_RE = re.compile(r"-?(?:\d+\.\d*|\.\d+|\d+)")

NAMED_CHARS: dict[str, str] = {
    "newline": "\n",
    "space": " ",
}

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}

_QUOTE = Symbol("quote")
_DOT = Symbol(".")


class _OpenList:
    """A list whose `(` has been read but not its `)`."""

    __slots__ = ("items", "dotted", "tail", "has_tail")

    def __init__(self):
        self.items: list[SExpression] = []
        self.dotted = False
        self.tail: SExpression = EmptyList
        self.has_tail = False

    def add(self, value: SExpression) -> None:
        if self.dotted:
            self.tail = value
            self.has_tail = True
        else:
            self.items.append(value)


class Reader:
    """Reads values out of `source`, one datum per `parse_expr` call."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    # --- helpers ---
    def _error(self, pos: int, expected: tuple[str, ...]) -> ParseError:
        return ParseError([ParseProblem(Span(pos, pos + 1), expected, self.source[pos])])

    def _need(self, pos: int) -> None:
        if pos >= len(self.source):
            raise UnexpectedEndOfInput()

    def skip_whitespace(self) -> None:
        self.pos = _SKIP_RE.match(self.source, self.pos).end()

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    # --- grammar ---
    def parse_expr(self) -> SExpression:
        """Read one datum.

        Open lists and pending quotes are kept on an explicit stack, so nesting
        depth is not limited by the Python stack.
        """
        stack: list[_OpenList | None] = []  # None marks a pending quote
        while True:
            self.skip_whitespace()
            self._need(self.pos)
            c = self.source[self.pos]
            top = stack[-1] if stack else None

            if top is not None and top.has_tail and c != ")":
                raise self._error(self.pos, (")",))

            if c == "(":
                self.pos += 1
                stack.append(_OpenList())
                continue
            if c == "'":
                self.pos += 1
                stack.append(None)
                continue
            if c == ")":
                if top is None or top.dotted and not top.has_tail:
                    raise self._error(self.pos, LABELS)
                self.pos += 1
                stack.pop()
                value = make_list(top.items, top.tail)
            else:
                start = self.pos
                value = self._parse_atom(c)
                if (value == _DOT and top is not None and top.items
                        and not top.dotted and self.pos - start == 1):
                    top.dotted = True
                    continue

            # Hand the finished datum to whatever is waiting for it
            while stack and stack[-1] is None:
                stack.pop()
                value = make_list([_QUOTE, value])
            if not stack:
                return value
            stack[-1].add(value)

    def _parse_atom(self, c: str) -> SExpression:
        if c == "#":
            return self._parse_hash()
        if c == '"':
            return self._parse_string()
        if c == "|":
            return self._parse_quoted_symbol()

        m = _BARE_RE.match(self.source, self.pos)
        self.pos = m.end()
        text = m.group()
        if _NUMBER_RE.fullmatch(text):
            return float(text)
        return Symbol(text)

    def _parse_hash(self) -> SExpression:
        m = _BOOLEAN_RE.match(self.source, self.pos)
        if m:
            self.pos = m.end()
            return m.group() in ("#t", "#true")
        if self.source.startswith("#\\", self.pos):
            start = self.pos + 2
            self._need(start)
            for name, ch in NAMED_CHARS.items():
                if self.source.startswith(name, start):
                    self.pos = start + len(name)
                    return Char(ch)
            self.pos = start + 1
            return Char(self.source[start])
        self._need(self.pos + 1)
        raise self._error(self.pos + 1, ("boolean", "character"))

    def _parse_string(self) -> str:
        pos = self.pos + 1
        chars: list[str] = []
        while True:
            self._need(pos)
            c = self.source[pos]
            if c == '"':
                break
            if c == "\\":
                self._need(pos + 1)
                escaped = STRING_ESCAPES.get(self.source[pos + 1])
                if escaped is None:
                    raise self._error(pos + 1, tuple(STRING_ESCAPES))
                chars.append(escaped)
                pos += 2
                continue
            chars.append(c)
            pos += 1
        self.pos = pos + 1
        return "".join(chars)

    def _parse_quoted_symbol(self) -> Symbol:
        pos = self.pos + 1
        while True:
            self._need(pos)
            c = self.source[pos]
            if c == "|":
                break
            if c == "\\":
                raise self._error(pos, ("|",))
            pos += 1
        name = self.source[self.pos + 1:pos]
        self.pos = pos + 1
        return Symbol(name)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            self.skip_whitespace()
            if self.at_end():
                break
            yield self.parse_expr()


def read_all(text: str) -> list[SExpression]:
    """Read every datum in `text`. Empty or comment-only text gives []."""
    return list(Reader(text).parse_all())


def read_one(text: str) -> SExpression:
    """Read exactly one datum; anything after it other than whitespace fails."""
    reader = Reader(text)
    value = reader.parse_expr()
    reader.skip_whitespace()
    if not reader.at_end():
        raise reader._error(reader.pos, ("end of input",))
    return value

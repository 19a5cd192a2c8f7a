import pytest
from hypothesis import given, strategies as st

from oats.errors import ParseError, Span, UnexpectedEndOfInput
from oats.printer import to_external
from oats.reader.parser import LABELS, read_all, read_one
from oats.types.char import Char
from oats.types.nil import EmptyList
from oats.types.pair import Pair, make_list
from oats.types.symbol import Symbol


def L(*items):
    return make_list(items)


S = Symbol


@pytest.mark.parametrize(
    "source, expected",
    [
        ("#t", True),
        ("#true", True),
        ("#f", False),
        ("#false", False),
        ("123456", 123456.0),
        ("123.456", 123.456),
        ("123.", 123.0),
        ("0.456", 0.456),
        (".456", 0.456),
        ("-5", -5.0),
        ("-.5", -0.5),
        ('""', ""),
        (r'"\t\n\\\""', "\t\n\\\""),
        ('"a b c d"', "a b c d"),
        ("#\\a", Char("a")),
        ("#\\space", Char(" ")),
        ("#\\newline", Char("\n")),
        ("#\\(", Char("(")),
        ("a", S("a")),
        ("|a b|", S("a b")),
        ("!$%&*+-./:<=>?@^_~", S("!$%&*+-./:<=>?@^_~")),
        ("1+", S("1+")),
        ("-", S("-")),
        ("  42  ", 42.0),
    ]
)
def test_read_atoms(source, expected):
    result = read_one(source)
    assert type(result) is type(expected)
    assert result == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("()", EmptyList),
        ("(a)", L(S("a"))),
        ("((a))", L(L(S("a")))),
        ('(a 2 "c" (1 2 3))', L(S("a"), 2.0, "c", L(1.0, 2.0, 3.0))),
        ("((a) b)", L(L(S("a")), S("b"))),
        ("(a(b)c)", L(S("a"), L(S("b")), S("c"))),
        ("(a . b)", Pair(S("a"), S("b"))),
        ("(1 2 . 3)", Pair(1.0, Pair(2.0, 3.0))),
        ("'a", L(S("quote"), S("a"))),
        ("''a", L(S("quote"), L(S("quote"), S("a")))),
        ("'(1 2 3)", L(S("quote"), L(1.0, 2.0, 3.0))),
        ("'(''1 2)", L(S("quote"), L(L(S("quote"), L(S("quote"), 1.0)), 2.0))),
    ]
)
def test_read_lists(source, expected):
    assert read_one(source) == expected


def test_read_all_sequence():
    forms = read_all("(define x 1) x\n'y")
    assert forms == [L(S("define"), S("x"), 1.0), S("x"), L(S("quote"), S("y"))]


def test_read_all_empty_and_comments():
    assert read_all("") == []
    assert read_all("   ; only a comment\n  ") == []
    assert read_all("; leading\n(a ; inner\n b) ; trailing") == [L(S("a"), S("b"))]


@pytest.mark.parametrize("source", ["", "   ", "(a b", '"abc', "'", "#", "#\\", '"a\\', "|ab", "(a . b"])
def test_unexpected_end_of_input(source):
    with pytest.raises(UnexpectedEndOfInput):
        read_one(source)


@pytest.mark.parametrize(
    "source, span, found",
    [
        (")", Span(0, 1), ")"),
        ("#x", Span(1, 2), "x"),
        ('"\\q"', Span(2, 3), "q"),
        ("|a\\b|", Span(2, 3), "\\"),
        ("(a . b c)", Span(7, 8), "c"),
        ("a b", Span(2, 3), "b"),
        ("(a)(b)", Span(3, 4), "("),
    ]
)
def test_parse_error_location(source, span, found):
    with pytest.raises(ParseError) as info:
        read_one(source)
    (problem,) = info.value.problems
    assert problem.span == span
    assert problem.found == found
    assert problem.expected


def test_parse_error_expected_categories():
    with pytest.raises(ParseError) as info:
        read_all("(a) )")
    (problem,) = info.value.problems
    assert problem.expected == LABELS
    assert "expected one of" in str(info.value)

    with pytest.raises(ParseError) as info:
        read_one("1 2")
    assert info.value.problems[0].expected == ("end of input",)


@pytest.mark.parametrize("source, span", [("(a . )", Span(5, 6)), ("')", Span(1, 2)), ("(a ')", Span(4, 5))])
def test_closing_paren_where_a_datum_is_needed(source, span):
    with pytest.raises(ParseError) as info:
        read_one(source)
    (problem,) = info.value.problems
    assert problem.span == span
    assert problem.expected == LABELS


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(a '. b)", L(S("a"), L(S("quote"), S(".")), S("b"))),
        ("(. a)", L(S("."), S("a"))),
        ("(a .b)", L(S("a"), S(".b"))),
        ("''a", L(S("quote"), L(S("quote"), S("a")))),
        ("(a . (b))", L(S("a"), S("b"))),
    ]
)
def test_dot_and_quote_edge_cases(source, expected):
    assert read_one(source) == expected


def test_read_deep_nesting():
    depth = 20_000
    value = read_one("'" + "(" * depth + "x" + ")" * depth)
    assert value.car == S("quote")
    value = value.cdr.car
    for _ in range(depth - 1):
        assert value.cdr == EmptyList
        value = value.car
    assert value == L(S("x"))


# -------------------------------
# Round trip through the printer
# -------------------------------
@pytest.mark.parametrize(
    "source",
    ["#t", "#f", "42", "-3.25", "0.5", '"tab\\there"', '"quote \\" and \\\\"', "#\\a",
     "#\\space", "#\\newline", "abc", "|hello world|", "(1 . 2)", "'(a \"b\" #\\c)"]
)
def test_round_trip_literals(source):
    rendered = to_external(read_one(source))
    assert read_one(rendered) == read_one(source)
    assert to_external(read_one(rendered)) == rendered


symbol_strat = st.text(min_size=1, max_size=12).filter(lambda s: "|" not in s and "\\" not in s)

atom_strat = st.one_of(
    st.booleans(),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=20),
    st.characters().map(Char),
    symbol_strat.map(Symbol),
)


@given(atom_strat)
def test_display_read_round_trip(value):
    rendered = to_external(value)
    again = read_one(rendered)
    assert type(again) is type(value)
    assert again == value
    assert to_external(again) == rendered


@given(st.lists(st.one_of(st.floats(allow_nan=False, allow_infinity=False), symbol_strat.map(Symbol)), max_size=8))
def test_list_round_trip(items):
    value = make_list(items)
    assert read_one(to_external(value)) == value

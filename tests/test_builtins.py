import pytest

from oats import errors
from oats.types.char import Char
from oats.types.nil import EmptyList
from oats.types.pair import Pair, make_list
from oats.types.symbol import Symbol
from oats.types.void import Void


def test_display_prints_raw_and_returns_void(run, capsys):
    assert run('(display "alpha")') is Void
    run("(display #\\b)")
    run("(display '(1 \"s\" #\\c))")
    run("(display (/ 1 2))")
    out = capsys.readouterr().out
    assert out == 'alpha\nb\n(1 "s" #\\c)\n0.5\n'


def test_display_needs_a_value(run):
    with pytest.raises(errors.ExpectedValue):
        run("(display (define x 1))")


def test_not(run):
    assert run("(not #f)") is True
    assert run("(not #t)") is False
    with pytest.raises(errors.TypeMismatch) as info:
        run("(not 1)")
    assert info.value.expected == "boolean"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(eq? 1 1)", True),
        ("(eq? 1 2)", False),
        ("(eq? 'a 'a)", True),
        ('(eq? "a" "a")', True),
        ("(eq? #\\a #\\a)", True),
        ("(eq? '(1 (2)) '(1 (2)))", True),
        ("(eq? '(1 2) '(1 2 3))", False),
        ("(eq? '() '())", True),
        ("(eq? #t 1)", False),
        ("(eq? car car)", True),
        ("(eq? (lambda (x) x) (lambda (x) x))", False),
    ]
)
def test_eq(run, source, expected):
    assert run(source) is expected


def test_eq_arity(run):
    with pytest.raises(errors.IncorrectArity):
        run("(eq? 1)")


def test_pairs(run):
    assert run("(cons 1 2)") == Pair(1.0, 2.0)
    assert run("(cons 1 '())") == make_list([1.0])
    assert run("(car '(a b))") == Symbol("a")
    assert run("(cdr '(a b))") == make_list([Symbol("b")])
    assert run("(list 1 (+ 1 1) \"x\")") == make_list([1.0, 2.0, "x"])
    assert run("(list)") == EmptyList


def test_cdr_type_mismatch(run):
    with pytest.raises(errors.TypeMismatch) as info:
        run("(cdr '())")
    assert info.value.expected == "pair"
    assert info.value.value == EmptyList


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(+)", 0.0),
        ("(+ 1 2 3)", 6.0),
        ("(- 5)", -5.0),
        ("(- 10 1 2)", 7.0),
        ("(*)", 1.0),
        ("(* 2 3 4)", 24.0),
        ("(/ 2)", 0.5),
        ("(/ 12 2 3)", 2.0),
        ("(abs -4.5)", 4.5),
        ("(= 1 1 1)", True),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(>= 3 3 1)", True),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(-)", "(/)"])
def test_minus_and_divide_need_an_operand(run, source):
    with pytest.raises(errors.IncorrectArity) as info:
        run(source)
    assert (info.value.expected, info.value.received) == (1, 0)


def test_arithmetic_type_mismatch(run):
    with pytest.raises(errors.TypeMismatch) as info:
        run('(+ 1 "2")')
    assert info.value.expected == "number"
    assert info.value.value == "2"


def test_strings(run):
    assert run('(string-length "héllo")') == 5.0
    assert run('(string-ref "abc" 1)') == Char("b")
    assert run('(substring "hello" 1 3)') == "el"
    assert run('(substring "hello" 0 5)') == "hello"
    assert run('(string-append "a" "b" "c")') == "abc"
    assert run("(string-append)") == ""


@pytest.mark.parametrize(
    "source, index",
    [
        ('(string-ref "abc" 3)', 3),
        ('(string-ref "abc" -1)', -1),
        ('(substring "hello" 2 9)', 9),
        ('(substring "hello" 3 2)', 2),
        ('(substring "hello" 6 7)', 6),
    ]
)
def test_string_index_errors(run, source, index):
    with pytest.raises(errors.IndexOutOfBounds) as info:
        run(source)
    assert info.value.index == index


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(null? '())", True),
        ("(null? '(1))", False),
        ("(pair? '(1))", True),
        ("(symbol? 'a)", True),
        ("(number? 1)", True),
        ('(string? "s")', True),
        ("(procedure? car)", True),
        ("(procedure? (lambda (x) x))", True),
        ("(procedure? 1)", False),
    ]
)
def test_predicates(run, source, expected):
    assert run(source) is expected

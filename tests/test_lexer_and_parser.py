from io import StringIO
import string

import pytest
from hypothesis import given, strategies as st

from minilisp.errors import LispSyntaxError
from minilisp.printer import to_lisp_string
from minilisp.reader.parser import Reader
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol, SymbolTable


@pytest.fixture
def symbols():
    return SymbolTable()


def read(source: str, symbols: SymbolTable, **kwargs):
    return Reader(StringIO(source), symbols, **kwargs).read()


@given(st.integers(min_value=-(2**63), max_value=2**63))
def test_integer_round_trip(n):
    assert to_lisp_string(read(str(n), SymbolTable())) == str(n)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", 42),
        ("-7", -7),
        ("007", 7),
        ("-0", 0),
        ("  \t\n\r 5", 5),
    ]
)
def test_integers(symbols, source, expected):
    assert read(source, symbols) == expected


@pytest.mark.parametrize(
    "source,printed",
    [
        ("(1 2 3)", "(1 2 3)"),
        ("(1 . 2)", "(1 . 2)"),
        ("(1 2 . 3)", "(1 2 . 3)"),
        ("((a b) (c))", "((a b) (c))"),
        ("(a . (b c))", "(a b c)"),
        ("()", "()"),
        ("( )", "()"),
        ("'a", "(quote a)"),
        ("'(1 . 2)", "(quote (1 . 2))"),
        ("(+ -1 2)", "(+ -1 2)"),
    ]
)
def test_lists_and_quote(symbols, source, printed):
    assert to_lisp_string(read(source, symbols)) == printed


def test_empty_list_is_nil(symbols):
    assert read("()", symbols) is Nil


def test_dotted_pair_structure(symbols):
    pair = read("(a . b)", symbols)
    assert isinstance(pair, Pair)
    assert pair.car is symbols.intern("a")
    assert pair.cdr is symbols.intern("b")


@pytest.mark.parametrize(
    "source",
    ["foo", "a-b", "x1", "+", "=", "*star", "#t", "%x-1", "Foo"]
)
def test_symbols_are_interned(symbols, source):
    sym = read(source, symbols)
    assert isinstance(sym, Symbol)
    assert sym is symbols.intern(source)


def test_symbol_case_is_significant(symbols):
    assert read("Foo", symbols) is not read("foo", symbols)


@given(st.text(alphabet=string.ascii_letters, min_size=1, max_size=30))
def test_reading_a_name_twice_gives_the_same_symbol(name):
    table = SymbolTable()
    assert read(name, table) is read(name, table)


@pytest.mark.parametrize(
    "source",
    [
        "; comment\n42",
        "; comment\r\n42",
        "; comment\r42",
        ";\n;\n  42 ; trailing",
    ]
)
def test_comments_are_skipped(symbols, source):
    assert read(source, symbols) == 42


@pytest.mark.parametrize("source", ["", "   ", "; only a comment", "\n\r\t"])
def test_end_of_input(symbols, source):
    assert read(source, symbols) is None


def test_reads_forms_one_at_a_time(symbols):
    reader = Reader(StringIO("1 (a) 'b"), symbols)
    assert reader.read() == 1
    assert to_lisp_string(reader.read()) == "(a)"
    assert to_lisp_string(reader.read()) == "(quote b)"
    assert reader.read() is None


def test_digits_then_letters_are_two_tokens(symbols):
    forms = list(Reader(StringIO("1a"), symbols).read_all())
    assert forms == [1, symbols.intern("a")]


@pytest.mark.parametrize(
    "source,message",
    [
        (")", "Stray close parenthesis"),
        (".", "Stray dot"),
        ("(. 1)", "Stray dot"),
        ("(1", "Unclosed parenthesis"),
        ("((1 2)", "Unclosed parenthesis"),
        ("(1 . 2", "Unclosed parenthesis"),
        ("(1 . 2 3)", "Closed parenthesis expected after dot"),
        ("(1 . )", "Expected one form after dot"),
        ("'", "Unexpected end of input after quote"),
        ("(')", "Nothing to quote"),
        ("?", r"handle '\?'"),
        ('"str"', "'\"'"),
    ]
)
def test_syntax_errors(symbols, source, message):
    with pytest.raises(LispSyntaxError, match=message):
        read(source, symbols)


@pytest.mark.parametrize("source", ["-", "- 1", "-x", "(-)"])
def test_minus_without_digit_is_not_a_symbol(symbols, source):
    with pytest.raises(LispSyntaxError, match="'-'"):
        read(source, symbols)


def test_symbol_length_limit(symbols):
    longest = "a" * 200
    assert read(longest, symbols, symbol_max_len=200) is symbols.intern(longest)
    with pytest.raises(LispSyntaxError, match="Symbol name too long"):
        read("a" * 201, symbols, symbol_max_len=200)


def test_symbol_length_limit_from_environment(symbols, monkeypatch):
    monkeypatch.setenv("MINILISP_SYMBOL_MAX_LEN", "3")
    assert read("abc", symbols) is symbols.intern("abc")
    with pytest.raises(LispSyntaxError, match="Symbol name too long"):
        read("abcd", symbols)

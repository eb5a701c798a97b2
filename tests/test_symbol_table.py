from hypothesis import given, strategies as st

from minilisp.interpreter import Interpreter
from minilisp.types.symbol import SymbolTable


@given(st.text(min_size=1, max_size=50))
def test_intern_is_idempotent(name):
    table = SymbolTable()
    assert table.intern(name) is table.intern(name)
    assert len(table) == 1
    assert name in table


def test_distinct_names_distinct_symbols():
    table = SymbolTable()
    a, b = table.intern("a"), table.intern("b")
    assert a is not b
    assert a.name == "a" and str(b) == "b"


def test_sessions_do_not_share_symbols():
    first, second = Interpreter(), Interpreter()
    assert first.intern("x") is not second.intern("x")


def test_reader_and_builtins_share_the_session_table():
    interp = Interpreter()
    quoted = interp.eval("'(quote list)")
    assert quoted.car is interp.intern("quote")
    assert quoted.cdr.car is interp.intern("list")
    assert interp.env.lookup(interp.intern("list")) is not None

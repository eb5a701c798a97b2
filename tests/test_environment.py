import pytest

from minilisp.errors import LispArityError, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.pair import from_iterable
from minilisp.types.symbol import SymbolTable


@pytest.fixture
def symbols():
    return SymbolTable()


def test_lookup_walks_to_outer_frame(symbols):
    x = symbols.intern("x")
    outer = Environment()
    outer.define(x, 1)
    inner = Environment(outer)
    assert inner.lookup(x).value == 1


def test_unbound_lookup_returns_none(symbols):
    assert Environment().lookup(symbols.intern("nope")) is None


def test_inner_definition_shadows_outer(symbols):
    x = symbols.intern("x")
    outer = Environment()
    outer.define(x, 1)
    inner = Environment(outer)
    inner.define(x, 2)
    assert inner.lookup(x).value == 2
    assert outer.lookup(x).value == 1


def test_binding_cells_are_shared(symbols):
    x = symbols.intern("x")
    outer = Environment()
    outer.define(x, 1)
    inner = Environment(outer)
    inner.lookup(x).value = 5
    assert outer.lookup(x).value == 5


def test_push_binds_positionally(symbols):
    a, b = symbols.intern("a"), symbols.intern("b")
    parent = Environment()
    frame = Environment.push(from_iterable([a, b]), from_iterable([1, 2]), parent)
    assert frame.outer is parent
    assert frame.lookup(a).value == 1
    assert frame.lookup(b).value == 2
    assert parent.lookup(a) is None


def test_push_empty(symbols):
    frame = Environment.push(Nil, Nil, None)
    assert frame.vars == {}


@pytest.mark.parametrize("values", [[1], [1, 2, 3]])
def test_push_count_mismatch(symbols, values):
    names = from_iterable([symbols.intern("a"), symbols.intern("b")])
    with pytest.raises(LispArityError, match="argument count mismatch"):
        Environment.push(names, from_iterable(values), None)


def test_define_requires_symbol():
    with pytest.raises(LispTypeError):
        Environment().define(42, 1)

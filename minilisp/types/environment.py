"""Runtime environment frames for minilisp.

A frame maps Symbols to mutable Binding cells and links to its enclosing frame
through `outer`. Lookups walk innermost to outermost and return the first cell
found, so inner definitions shadow outer ones. Cells are shared: code holding
a frame sees every mutation made through any other holder.
"""

from __future__ import annotations

from typing import Optional

from minilisp import LispValue
from minilisp.errors import LispArityError, LispTypeError
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol


class Binding:
    """A mutable variable cell."""

    __slots__ = ("symbol", "value")

    def __init__(self, symbol: Symbol, value: LispValue):
        self.symbol = symbol
        self.value = value

    def __repr__(self) -> str:
        return f"Binding({self.symbol}, {self.value!r})"


class Environment:
    """One frame of the lexical chain."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Binding] = {}
        self.outer: Environment | None = outer

    @classmethod
    def push(cls, names: LispValue, values: LispValue, outer: Optional[Environment]) -> Environment:
        """Create a child frame of `outer` binding each name to the matching value.

        Both `names` and `values` are lists; their lengths must agree.
        """
        env = cls(outer)
        while isinstance(names, Pair) and isinstance(values, Pair):
            env.define(names.car, values.car)
            names = names.cdr
            values = values.cdr
        if isinstance(names, Pair) or isinstance(values, Pair):
            raise LispArityError("Cannot apply function: argument count mismatch")
        return env

    def define(self, name: Symbol, value: LispValue) -> None:
        """Add a new binding in this frame, shadowing any outer one."""
        if not isinstance(name, Symbol):
            raise LispTypeError(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = Binding(name, value)

    def lookup(self, name: Symbol) -> Optional[Binding]:
        """Return the innermost cell bound to `name`, or None when unbound."""
        env: Optional[Environment] = self
        while env is not None:
            cell = env.vars.get(name)
            if cell is not None:
                return cell
            env = env.outer
        return None

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"

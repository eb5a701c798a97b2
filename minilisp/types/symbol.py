from __future__ import annotations


class Symbol:
    """An interned name. Compared by identity only; create through SymbolTable.intern."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Registry mapping symbol text to the one Symbol carrying that text.

    Text comparison happens here, once per intern call; every other part of
    the interpreter compares symbols with `is`.
    """

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, name: str) -> Symbol:
        sym = self._symbols.get(name)
        if sym is None:
            sym = Symbol(name)
            self._symbols[name] = sym
        return sym

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

"""Mutable cons cells and helpers for walking Nil-terminated chains of them."""

from __future__ import annotations

from typing import Iterable, Iterator

from minilisp import LispValue
from minilisp.types.nil import Nil


class Pair:
    """A cons cell. Both slots may be reassigned; every holder sees the change."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car = car
        self.cdr = cdr

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"


def from_iterable(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a fresh list holding `items` in order, terminated by `tail`."""
    head: LispValue = Nil
    last: Pair | None = None
    for item in items:
        cell = Pair(item, Nil)
        if last is None:
            head = cell
        else:
            last.cdr = cell
        last = cell
    if last is None:
        return tail
    last.cdr = tail
    return head


def is_list(obj: LispValue) -> bool:
    """True for Nil and for chains of Pairs ending in Nil."""
    while isinstance(obj, Pair):
        obj = obj.cdr
    return obj is Nil


def list_length(obj: LispValue) -> int:
    """Number of elements of a proper list, or -1 if `obj` is not one."""
    n = 0
    while isinstance(obj, Pair):
        n += 1
        obj = obj.cdr
    return n if obj is Nil else -1


def iter_list(obj: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a chain of Pairs, stopping at the first non-Pair."""
    while isinstance(obj, Pair):
        yield obj.car
        obj = obj.cdr

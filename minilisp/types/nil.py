"""Singleton marker values.

Nil is both the empty list and false, T is the canonical true value. Dot and
CloseParen only ever travel between the reader's internal routines; they must
never reach the evaluator or the printer.
"""
from __future__ import annotations


class NilType:
    __slots__ = ()

    def __repr__(self): return "Nil"
    def __bool__(self): return False


class TrueType:
    __slots__ = ()

    def __repr__(self): return "T"


class DotType:
    __slots__ = ()

    def __repr__(self): return "Dot"


class CloseParenType:
    __slots__ = ()

    def __repr__(self): return "CloseParen"


Nil = NilType()
T = TrueType()
Dot = DotType()
CloseParen = CloseParenType()

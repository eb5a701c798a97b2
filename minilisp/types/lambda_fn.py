"""Procedure values: native primitives, closures and macros."""

from __future__ import annotations

from minilisp import LispValue, PrimitiveFn, SExpression
from minilisp.errors import LispSyntaxError, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol


class Primitive:
    """A native procedure. It receives the caller's frame and the unevaluated args."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: LispValue) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"


def validate_params(params: SExpression, form: str) -> None:
    """Reject anything but a flat, Nil-terminated list of Symbols.

    Each element is checked, not the chain link holding it, so `(x 1)` and
    `(x . y)` are both refused.
    """
    p = params
    while isinstance(p, Pair):
        if not isinstance(p.car, Symbol):
            raise LispTypeError(f"{form}: parameter must be a symbol, got {p.car!r}")
        p = p.cdr
    if p is not Nil:
        raise LispSyntaxError(f"{form}: parameter list is not a flat list")


class Lambda:
    """Shared shape of closures and macros: parameters, body forms, captured frame.

    The body is a non-empty list of forms evaluated as a sequence. The captured
    environment is held by reference, never copied.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params = params
        self.body = body
        self.env = env


class Closure(Lambda):
    """User function created by `lambda` or `defun`."""

    def __repr__(self) -> str:
        return "<function>"


class Macro(Lambda):
    """User macro created by `defmacro`; applied to unevaluated arguments."""

    def __repr__(self) -> str:
        return "<macro>"

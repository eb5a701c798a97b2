"""Text rendering of runtime values.

Lists print space separated with a ". tail" for dotted chains. Cyclic
structure (possible through setq/setcar) is not detected and does not
terminate.
"""

from __future__ import annotations

from io import StringIO

from minilisp import LispValue
from minilisp.errors import LispBug
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Closure, Macro, Primitive
from minilisp.types.nil import Nil, T
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol


def _write(obj: LispValue, buffer: StringIO) -> None:
    match obj:
        case int():
            buffer.write(str(obj))
        case Symbol():
            buffer.write(obj.name)
        case Pair():
            buffer.write("(")
            while True:
                _write(obj.car, buffer)
                obj = obj.cdr
                if obj is Nil:
                    break
                if not isinstance(obj, Pair):
                    buffer.write(" . ")
                    _write(obj, buffer)
                    break
                buffer.write(" ")
            buffer.write(")")
        case Primitive():
            buffer.write("<primitive>")
        case Closure():
            buffer.write("<function>")
        case Macro():
            buffer.write("<macro>")
        case Environment():
            raise LispBug("print: environment frames are not printable")
        case _ if obj is Nil:
            buffer.write("()")
        case _ if obj is T:
            buffer.write("t")
        case _:
            raise LispBug(f"print: Unknown value {obj!r}")


def to_lisp_string(obj: LispValue) -> str:
    with StringIO() as buffer:
        _write(obj, buffer)
        return buffer.getvalue()

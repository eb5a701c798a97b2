"""Built-in procedures for the minilisp runtime environment.

Every primitive receives the caller's frame and its unevaluated argument
list, evaluates what it needs, and checks operand counts exactly. This module
also provides `register`, which installs these together with the special
forms and the constant `t` into a global frame.
"""
from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from minilisp import LispValue
from minilisp.errors import LispArityError, LispTypeError
from minilisp.evaluation.apply import eval_list
from minilisp.evaluation.evaluator import evaluate
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.logging_config import get_logger
from minilisp.printer import to_lisp_string
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Primitive
from minilisp.types.nil import Nil, T
from minilisp.types.pair import Pair, iter_list, list_length
from minilisp.types.symbol import SymbolTable

logger = get_logger(__name__)


def _eval_exactly(env: Environment, args: LispValue, n: int, name: str) -> list[LispValue]:
    if list_length(args) != n:
        raise LispArityError(f"Malformed {name}")
    return list(iter_list(eval_list(args, env, evaluate)))


def _expect_pair(obj: LispValue, name: str) -> Pair:
    if not isinstance(obj, Pair):
        raise LispTypeError(f"{name} takes a pair, got {to_lisp_string(obj)}")
    return obj


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, args: LispValue) -> LispValue:
    """(list a b ...): fresh list of the evaluated arguments."""
    return eval_list(args, env, evaluate)

def cons(env: Environment, args: LispValue) -> LispValue:
    car, cdr = _eval_exactly(env, args, 2, "cons")
    return Pair(car, cdr)

def car(env: Environment, args: LispValue) -> LispValue:
    (obj,) = _eval_exactly(env, args, 1, "car")
    return _expect_pair(obj, "car").car

def cdr(env: Environment, args: LispValue) -> LispValue:
    (obj,) = _eval_exactly(env, args, 1, "cdr")
    return _expect_pair(obj, "cdr").cdr

def setcar(env: Environment, args: LispValue) -> LispValue:
    """(setcar pair value): mutate pair in place, visible through every alias."""
    obj, value = _eval_exactly(env, args, 2, "setcar")
    _expect_pair(obj, "setcar").car = value
    return obj

# -------------------------------
# Arithmetic and comparison
# -------------------------------
def add(env: Environment, args: LispValue) -> LispValue:
    total = 0
    for value in iter_list(eval_list(args, env, evaluate)):
        if not isinstance(value, int):
            raise LispTypeError(f"+ takes only numbers, got {to_lisp_string(value)}")
        total += value
    return total

def num_eq(env: Environment, args: LispValue) -> LispValue:
    a, b = _eval_exactly(env, args, 2, "=")
    if not isinstance(a, int) or not isinstance(b, int):
        raise LispTypeError("= only takes numbers")
    return T if a == b else Nil

def eq(env: Environment, args: LispValue) -> LispValue:
    a, b = _eval_exactly(env, args, 2, "eq")
    # Integers are compared by value; everything else by identity
    if isinstance(a, int) and isinstance(b, int):
        return T if a == b else Nil
    return T if a is b else Nil

# -------------------------------
# Side effects
# -------------------------------
def make_println(output: Optional[TextIO] = None) -> Callable[[Environment, LispValue], LispValue]:
    def println(env: Environment, args: LispValue) -> LispValue:
        (value,) = _eval_exactly(env, args, 1, "println")
        stream = output if output is not None else sys.stdout
        stream.write(to_lisp_string(value))
        stream.write("\n")
        return Nil
    return println

def exit_builtin(env: Environment, args: LispValue) -> LispValue:
    """(exit): stop the process with status 0; nothing after it is evaluated."""
    logger.debug("exit called")
    raise SystemExit(0)


def register(env: Environment, symbols: SymbolTable, output: Optional[TextIO] = None) -> None:
    """Register all special forms, builtin procedures and constants into `env`."""
    builtins = {
        **SPECIAL_FORMS,
        "list": list_builtin,
        "cons": cons,
        "car": car,
        "cdr": cdr,
        "setcar": setcar,
        "+": add,
        "=": num_eq,
        "eq": eq,
        "println": make_println(output),
        "exit": exit_builtin,
    }
    for name, fn in builtins.items():
        env.define(symbols.intern(name), Primitive(name, fn))
    env.define(symbols.intern("t"), T)

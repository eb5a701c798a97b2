"""Core evaluator for the minilisp interpreter.

Dispatches on the variant of the expression: atoms evaluate to themselves,
symbols are looked up through the frame chain, and pairs are macro-expanded
once before the head is evaluated and applied. Evaluation is plainly
recursive; deep Lisp recursion consumes the Python stack.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.errors import LispBug, LispTypeError, LispUnboundSymbol
from minilisp.evaluation.apply import apply, progn
from minilisp.logging_config import get_logger
from minilisp.printer import to_lisp_string
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Closure, Lambda, Macro, Primitive
from minilisp.types.nil import Nil, T
from minilisp.types.pair import Pair, is_list
from minilisp.types.symbol import Symbol

logger = get_logger(__name__)


def macroexpand(expr: SExpression, env: Environment) -> SExpression:
    """Expand `expr` once if its head is a symbol bound to a Macro.

    Returns `expr` itself (the same object) when it is not a macro call.
    """
    if not isinstance(expr, Pair) or not isinstance(expr.car, Symbol):
        return expr
    cell = env.lookup(expr.car)
    if cell is None or not isinstance(cell.value, Macro):
        return expr
    macro = cell.value
    args = expr.cdr
    if not is_list(args):
        raise LispTypeError(f"Macro {expr.car}: argument must be a list")
    frame = Environment.push(macro.params, args, macro.env)
    expansion = progn(macro.body, frame, evaluate)
    logger.debug("expanded macro %s", expr.car)
    return expansion


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case int() | Primitive() | Lambda():
            return expr
        case Symbol():
            cell = env.lookup(expr)
            if cell is None:
                raise LispUnboundSymbol(f"Undefined symbol: {expr}")
            return cell.value
        case Pair():
            expanded = macroexpand(expr, env)
            if expanded is not expr:
                return evaluate(expanded, env)
            fn = evaluate(expr.car, env)
            if not isinstance(fn, (Primitive, Closure)):
                raise LispTypeError(f"The head of a list must be a function, got {to_lisp_string(fn)}")
            return apply(fn, expr.cdr, env, evaluate)
    if expr is Nil or expr is T:
        return expr
    raise LispBug(f"eval: Unknown value {expr!r}")

"""Application engine for minilisp.

This module centralizes procedure application for the interpreter:
- Primitives receive the caller's frame and the unevaluated argument list and
  decide for themselves what to evaluate.
- Closures evaluate their arguments left to right in the caller's frame, bind
  them in a new frame chained to the captured environment and run the body
  as a sequence.

The evaluator is passed in as `evaluate_fn`; minilisp.evaluation.evaluator
imports this module, not the other way round.
"""

from __future__ import annotations

from minilisp import LispValue, EvaluatorFn
from minilisp.errors import LispArityError, LispBug, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Closure, Primitive
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair, is_list


def eval_list(args: LispValue, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate every element of `args` and return the results as a fresh list."""
    head: LispValue = Nil
    tail: Pair | None = None
    while isinstance(args, Pair):
        cell = Pair(evaluate_fn(args.car, env), Nil)
        if tail is None:
            head = cell
        else:
            tail.cdr = cell
        tail = cell
        args = args.cdr
    return head


def progn(body: LispValue, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate each form of `body` in order and return the last value."""
    if not isinstance(body, Pair):
        raise LispArityError("Cannot evaluate an empty body")
    result: LispValue = Nil
    while isinstance(body, Pair):
        result = evaluate_fn(body.car, env)
        body = body.cdr
    return result


def apply(
    fn: Primitive | Closure,
    args: LispValue,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a primitive or closure to the unevaluated argument list `args`."""
    if not is_list(args):
        raise LispTypeError("Argument must be a list")
    if isinstance(fn, Primitive):
        return fn(env, args)
    if isinstance(fn, Closure):
        values = eval_list(args, env, evaluate_fn)
        frame = Environment.push(fn.params, values, fn.env)
        return progn(fn.body, frame, evaluate_fn)
    raise LispBug(f"apply: not supported {fn!r}")

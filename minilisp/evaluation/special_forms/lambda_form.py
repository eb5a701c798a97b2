from minilisp import LispValue
from minilisp.errors import LispSyntaxError, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Closure, Lambda, validate_params
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol


def make_function(env: Environment, args: LispValue, kind: type[Lambda], form: str) -> Lambda:
    # args is ((params...) body...); the body needs at least one form.
    if not isinstance(args, Pair) or not isinstance(args.cdr, Pair):
        raise LispSyntaxError(f"Malformed {form}")
    validate_params(args.car, form)
    return kind(args.car, args.cdr, env)


def define_function(env: Environment, args: LispValue, kind: type[Lambda], form: str) -> Lambda:
    # args is (name (params...) body...)
    if not isinstance(args, Pair) or not isinstance(args.cdr, Pair):
        raise LispSyntaxError(f"Malformed {form}")
    name = args.car
    if not isinstance(name, Symbol):
        raise LispTypeError(f"{form} name must be a symbol, got {name!r}")
    fn = make_function(env, args.cdr, kind, form)
    env.define(name, fn)
    return fn


def lambda_form(env: Environment, args: LispValue) -> LispValue:
    """(lambda (params...) body...): a closure over the current frame."""
    return make_function(env, args, Closure, "lambda")


def defun_form(env: Environment, args: LispValue) -> LispValue:
    """(defun name (params...) body...)"""
    return define_function(env, args, Closure, "defun")

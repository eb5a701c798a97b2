from minilisp import LispValue
from minilisp.errors import LispArityError, LispTypeError
from minilisp.evaluation.evaluator import evaluate
from minilisp.types.environment import Environment
from minilisp.types.pair import list_length
from minilisp.types.symbol import Symbol


def define_form(env: Environment, args: LispValue) -> LispValue:
    """
    (define name expr)
    Adds a new binding in the current frame; a previous binding is not required.
    """
    if list_length(args) != 2:
        raise LispArityError("Malformed define")
    name = args.car
    if not isinstance(name, Symbol):
        raise LispTypeError(f"define first argument must be a symbol, got {name!r}")
    value = evaluate(args.cdr.car, env)
    env.define(name, value)
    return value

from minilisp import LispValue
from minilisp.errors import LispArityError, LispTypeError, LispUnboundSymbol
from minilisp.evaluation.evaluator import evaluate
from minilisp.types.environment import Environment
from minilisp.types.pair import list_length
from minilisp.types.symbol import Symbol


def setq_form(env: Environment, args: LispValue) -> LispValue:
    """(setq name expr): overwrite the existing binding of name in place."""
    if list_length(args) != 2:
        raise LispArityError("Malformed setq")
    name = args.car
    if not isinstance(name, Symbol):
        raise LispTypeError(f"setq first argument must be a symbol, got {name!r}")
    cell = env.lookup(name)
    if cell is None:
        raise LispUnboundSymbol(f"Unbound variable {name}")
    value = evaluate(args.cdr.car, env)
    cell.value = value
    return value

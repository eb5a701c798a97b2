from minilisp import LispValue
from minilisp.errors import LispArityError
from minilisp.types.environment import Environment
from minilisp.types.pair import list_length


def quote_form(env: Environment, args: LispValue) -> LispValue:
    """(quote x): return x without evaluating it."""
    if list_length(args) != 1:
        raise LispArityError("Malformed quote")
    return args.car

from minilisp import LispValue
from minilisp.errors import LispArityError
from minilisp.evaluation.apply import progn
from minilisp.evaluation.evaluator import evaluate
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.pair import list_length


def if_form(env: Environment, args: LispValue) -> LispValue:
    """(if cond then else...): else is an implicit sequence and may be absent."""
    if list_length(args) < 2:
        raise LispArityError("Malformed if")

    cond = evaluate(args.car, env)
    # Anything other than Nil counts as true
    if cond is not Nil:
        return evaluate(args.cdr.car, env)
    orelse = args.cdr.cdr
    if orelse is Nil:
        return Nil
    return progn(orelse, env, evaluate)

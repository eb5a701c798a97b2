from minilisp import LispValue
from minilisp.errors import LispArityError
from minilisp.evaluation.apply import progn
from minilisp.evaluation.evaluator import evaluate
from minilisp.types.environment import Environment
from minilisp.types.pair import list_length


def progn_form(env: Environment, args: LispValue) -> LispValue:
    if list_length(args) < 1:
        raise LispArityError("Malformed progn")
    return progn(args, env, evaluate)

"""Special form: defmacro.

Binds a Macro in the current frame. Its body runs against the unevaluated
arguments of a call and the result is evaluated in the caller's frame.
"""

from minilisp import LispValue
from minilisp.evaluation.special_forms.lambda_form import define_function
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Macro


def defmacro_form(env: Environment, args: LispValue) -> LispValue:
    """(defmacro name (params...) body...)"""
    return define_function(env, args, Macro, "defmacro")

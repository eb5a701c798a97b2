"""Special form that exposes the macro expander to Lisp code.

(macroexpand form) expands the head macro of form once and returns the
result without evaluating it. The argument is not evaluated either; a single
leading (quote ...) wrapper is unwrapped so both (macroexpand (twice 5)) and
(macroexpand '(twice 5)) give (+ 5 5).
"""

from minilisp import LispValue
from minilisp.errors import LispArityError
from minilisp.evaluation.evaluator import macroexpand
from minilisp.evaluation.special_forms.quote_forms import quote_form
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Primitive
from minilisp.types.pair import Pair, list_length
from minilisp.types.symbol import Symbol


def _is_quoted(env: Environment, form: LispValue) -> bool:
    if not isinstance(form, Pair) or not isinstance(form.car, Symbol):
        return False
    if list_length(form) != 2:
        return False
    cell = env.lookup(form.car)
    return cell is not None and isinstance(cell.value, Primitive) and cell.value.fn is quote_form


def macroexpand_form(env: Environment, args: LispValue) -> LispValue:
    if list_length(args) != 1:
        raise LispArityError("Malformed macroexpand")
    form = args.car
    if _is_quoted(env, form):
        form = form.cdr.car
    return macroexpand(form, env)

"""Registry of special forms for the minilisp evaluator.

Maps names to primitives that receive their arguments unevaluated and
control evaluation themselves. They are registered into the global frame
like any other primitive, so the evaluator needs no separate dispatch table.
"""

from minilisp.evaluation.special_forms.quote_forms import quote_form
from minilisp.evaluation.special_forms.set_form import setq_form
from minilisp.evaluation.special_forms.define_form import define_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form, defun_form
from minilisp.evaluation.special_forms.defmacro_form import defmacro_form
from minilisp.evaluation.special_forms.macroexpand_forms import macroexpand_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.progn_form import progn_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "setq": setq_form,
    "define": define_form,
    "lambda": lambda_form,
    "defun": defun_form,
    "defmacro": defmacro_form,
    "macroexpand": macroexpand_form,
    "if": if_form,
    "progn": progn_form,
}

"""Registry of special forms for the oats evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before evaluating the head of an
application, so these names cannot be rebound as procedures.

Every handler has the signature `(operands, env, evaluate_fn)`, where
`operands` is the unevaluated operand list and `evaluate_fn` evaluates an
expression demanding a value. A handler returns either a value or a TailCall
for the evaluator loop to continue with.
"""

from oats.types.symbol import Symbol
from oats.evaluation.special_forms.quote_forms import quote_form
from oats.evaluation.special_forms.lambda_form import lambda_form
from oats.evaluation.special_forms.define_form import define_form
from oats.evaluation.special_forms.if_form import if_form
from oats.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("lambda"): lambda_form,
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
}

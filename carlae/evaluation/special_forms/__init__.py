"""Registry of special forms for the Carlae evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator matches the textual head of a list against this table before
any environment lookup, so rebinding `def`, `fun` or `if` never changes
how these forms are dispatched.
"""

from carlae.types.symbol import Symbol
from carlae.evaluation.special_forms.lambda_form import fun_form
from carlae.evaluation.special_forms.define_form import define_form
from carlae.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("fun"): fun_form,
    Symbol("def"): define_form,
    Symbol("if"): if_form,
}

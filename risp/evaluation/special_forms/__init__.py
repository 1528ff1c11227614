"""Registry of syntax forms for the Risp evaluator.

Maps AST node types to handler functions. Literals and identifiers are
evaluated inline by the evaluator; every compound node is dispatched here.
"""

from risp.types.ast import Add, Apply, Define, Equal, Function, If, Minus
from risp.evaluation.special_forms.arithmetic_forms import add_form, minus_form
from risp.evaluation.special_forms.equal_form import equal_form
from risp.evaluation.special_forms.if_form import if_form
from risp.evaluation.special_forms.define_form import define_form
from risp.evaluation.special_forms.function_form import function_form
from risp.evaluation.special_forms.apply_form import apply_form

SPECIAL_FORMS = {
    Add: add_form,
    Minus: minus_form,
    Equal: equal_form,
    If: if_form,
    Define: define_form,
    Function: function_form,
    Apply: apply_form,
}

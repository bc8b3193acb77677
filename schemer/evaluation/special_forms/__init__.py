"""Registry of special forms for the Schemer evaluator.

Maps reserved identifier names to handler functions that implement
non-standard evaluation rules. The evaluator consults this table only for
the first element of a combination, before ordinary application; the names
are never looked up in, or bound into, the Environment.
"""

from schemer.evaluation.special_forms.cond_form import cond_form
from schemer.evaluation.special_forms.define_form import define_form

SPECIAL_FORMS = {
    "define": define_form,
    "cond": cond_form,
}

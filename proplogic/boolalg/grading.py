# grading of free-text answers against a reference expression
#
# eg:
#   reference = parse('A => B')
#   grade_answer('\not A \or B', reference, form='CNF').correct   -> True
#   grade_answer('A \and', reference).reason                     -> Reason.PARSE_ERROR

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .expr import *
from .parser import parse, ParserError
from .tools import compare_expressions

log = logging.getLogger(__name__)

FORMS = ('CNF', 'DNF')

class Reason(Enum):
    CORRECT = 'The answer is correct.'
    PARSE_ERROR = 'The answer could not be parsed.'
    UNKNOWN_VARIABLES = 'The answer uses variables that do not occur in the question.'
    WRONG_FORM = 'The answer is not in the requested normal form.'
    NOT_EQUIVALENT = 'The answer is not equivalent to the expected expression.'

@dataclass
class Feedback:
    correct: bool
    reason: Reason
    answer: Optional[SyntaxTreeNode] = None
    parse_error: Optional[ParserError] = None
    # unknown variables, or an assignment where answer and reference differ
    detail: Optional[object] = None

    @property
    def message(self):
        return self.reason.value

# text:              the user's answer
# reference:         expected expression, any equivalent answer is accepted
# form:              None, 'CNF' or 'DNF'
# allowed_variables: variables the answer may use, default is the reference's
def grade_answer(text, reference, form=None, allowed_variables=None):
    if form is not None and form not in FORMS:
        raise ValueError(f'unknown normal form {form!r}, expected one of {FORMS}')

    answer = parse(text)
    if isinstance(answer, ParserError):
        return Feedback(False, Reason.PARSE_ERROR, parse_error=answer)

    if allowed_variables is None:
        allowed_variables = reference.get_variable_names()
    unknown = [name for name in answer.get_variable_names() if name not in allowed_variables]
    if unknown:
        return Feedback(False, Reason.UNKNOWN_VARIABLES, answer, detail=unknown)

    match form:
        case 'CNF' if not answer.is_cnf():
            return Feedback(False, Reason.WRONG_FORM, answer)
        case 'DNF' if not answer.is_dnf():
            return Feedback(False, Reason.WRONG_FORM, answer)

    if not compare_expressions([reference, answer]):
        return Feedback(False, Reason.NOT_EQUIVALENT, answer, detail=counterexample(reference, answer))

    log.debug('accepted %s for %s', answer, reference)
    return Feedback(True, Reason.CORRECT, answer)

# first assignment (over the union of the variables) where a and b differ, or None
def counterexample(a, b):
    varnames = sorted(set(a.get_variable_names()) | set(b.get_variable_names()))
    check_variable_count(varnames)

    for values in assignments(varnames):
        if a.evaluate(values) != b.evaluate(values):
            return values

    return None

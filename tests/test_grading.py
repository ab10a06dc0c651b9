import pytest

from proplogic.boolalg.grading import *
from proplogic.boolalg.parser import parse, ParseErrorKind

REFERENCE = parse('A => B')


def test_correct_answer():
    feedback = grade_answer('\\not A \\or B', REFERENCE, form='CNF')
    assert feedback.correct
    assert feedback.reason == Reason.CORRECT
    assert feedback.message == Reason.CORRECT.value
    assert str(feedback.answer) == '\\not A \\or B'


def test_parse_error():
    feedback = grade_answer('A \\and', REFERENCE)
    assert not feedback.correct
    assert feedback.reason == Reason.PARSE_ERROR
    assert feedback.parse_error.kind == ParseErrorKind.EMPTY_EXPRESSION


def test_unknown_variables():
    feedback = grade_answer('A \\or C', REFERENCE)
    assert feedback.reason == Reason.UNKNOWN_VARIABLES
    assert feedback.detail == ['C']
    assert grade_answer('A \\or C', parse('A'), allowed_variables=['A', 'C']).reason == Reason.NOT_EQUIVALENT


def test_wrong_form():
    assert grade_answer('NOT (A AND NOT B)', REFERENCE, form='CNF').reason == Reason.WRONG_FORM
    assert grade_answer('NOT (A AND NOT B)', REFERENCE).correct
    assert grade_answer('(NOT A AND B) OR NOT A OR B', REFERENCE, form='DNF').correct
    assert grade_answer('A => B', REFERENCE, form='DNF').reason == Reason.WRONG_FORM


def test_not_equivalent():
    feedback = grade_answer('B => A', REFERENCE)
    assert feedback.reason == Reason.NOT_EQUIVALENT
    assert feedback.detail == {'A': True, 'B': False}


def test_answer_with_fewer_variables():
    assert grade_answer('A', parse('A OR (B AND NOT B)')).correct


def test_counterexample():
    assert counterexample(parse('A'), parse('A \\and (B \\or \\not B)')) is None
    assert counterexample(parse('A'), parse('B')) == {'A': True, 'B': False}


def test_unknown_form():
    with pytest.raises(ValueError):
        grade_answer('A', REFERENCE, form='ANF')


def test_oversized_answer():
    feedback = grade_answer(' or '.join(['A']*1500), parse('A'))
    assert not feedback.correct
    assert feedback.reason == Reason.PARSE_ERROR
    assert feedback.parse_error.kind == ParseErrorKind.EXPRESSION_TOO_LONG

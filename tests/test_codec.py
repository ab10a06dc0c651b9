import pytest

from proplogic.boolalg.codec import *
from proplogic.boolalg.expr import Literal, Operator


def test_num_to_values_bit_order():
    assert num_to_values(0, ['A', 'B']) == {'A': False, 'B': False}
    assert num_to_values(1, ['A', 'B']) == {'A': True, 'B': False}
    assert num_to_values(2, ['A', 'B']) == {'A': False, 'B': True}
    assert num_to_values(3, ['A', 'B']) == {'A': True, 'B': True}


def test_missing_bits_are_false():
    assert num_to_values(1, ['A', 'B', 'C', 'D']) == {'A': True, 'B': False, 'C': False, 'D': False}


def test_values_to_num_inverts():
    varnames = ['p', 'q', 'r']
    for i in range(8):
        assert values_to_num(num_to_values(i, varnames), varnames) == i

    # absent names count as false
    assert values_to_num({'q': True}, varnames) == 2


def test_assignments_in_index_order():
    rows = list(assignments(['A', 'B']))
    assert rows == [
        {'A': False, 'B': False},
        {'A': True, 'B': False},
        {'A': False, 'B': True},
        {'A': True, 'B': True},
    ]
    assert list(assignments([])) == [{}]


def test_variable_limit():
    varnames = [f'x{i:02d}' for i in range(MAX_VARIABLES + 1)]
    check_variable_count(varnames[:-1])
    with pytest.raises(TooManyVariables):
        check_variable_count(varnames)

    expr = Operator.make_conjunction([Literal(name) for name in varnames])
    with pytest.raises(ValueError):
        expr.get_truth_table()
    with pytest.raises(ValueError):
        expr.to_dnf()

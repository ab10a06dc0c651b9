import random

import pytest

from proplogic.boolalg.expr import *
from proplogic.boolalg.generate import *

VARNAMES = ['A', 'B', 'C', 'D', 'E']


def literals(expr):
    return [n for n in expr.all_nodes() if isinstance(n, Literal)]


# operands of a run of nested same-kind operators
def chain_operands(node, kind):
    if isinstance(node, Operator) and node.kind == kind and not node.negated:
        return chain_operands(node.left, kind) + chain_operands(node.right, kind)
    return [node]


def test_exact_leaf_count():
    for n_leaves in range(1, 15):
        for seed in range(10):
            expr = generate(random.Random(seed), n_leaves, VARNAMES)
            assert len(literals(expr)) == n_leaves
            assert set(expr.get_variable_names()) <= set(VARNAMES)


def test_single_leaf():
    expr = generate(random.Random(0), 1, ['A'])
    assert expr == Literal('A') or expr == Literal('A', True)


def test_reproducible():
    for seed in range(10):
        assert generate(random.Random(seed), 9, VARNAMES) == generate(random.Random(seed), 9, VARNAMES)


def test_does_not_touch_global_random():
    random.seed(99)
    state = random.getstate()
    generate(random.Random(1), 10, VARNAMES)
    assert random.getstate() == state


def test_chains_use_distinct_variables():
    for n_leaves in range(2, 12):
        for seed in range(20):
            expr = generate(random.Random(seed), n_leaves, ['A', 'B', 'C'])
            for node in expr.all_nodes():
                if isinstance(node, Operator) and node.kind in CHAIN_OPERATORS:
                    operands = chain_operands(node, node.kind)
                    names = [o.name for o in operands if isinstance(o, Literal)]
                    assert len(names) == len(set(names)), str(expr)


def test_siblings_leaves_differ():
    for seed in range(50):
        expr = generate(random.Random(seed), 2, ['A', 'B'])
        assert expr.left.name != expr.right.name


def test_single_variable_pool():
    expr = generate(random.Random(3), 4, ['A'])
    assert expr.get_variable_names() == ['A']
    assert len(literals(expr)) == 4


def test_invalid_arguments():
    rng = random.Random(0)
    with pytest.raises(ValueError):
        generate(rng, 0, VARNAMES)
    with pytest.raises(ValueError):
        generate(rng, 3, [])
    with pytest.raises(ValueError):
        split_leaves(rng, 1)
    with pytest.raises(ValueError):
        generate_tautology(rng, 1, VARNAMES)


def test_split_leaves():
    rng = random.Random(5)
    for n in range(2, 20):
        (left, right) = split_leaves(rng, n)
        assert left >= 1 and right >= 1 and left + right == n


def test_tautology():
    for n_leaves in range(2, 10):
        for seed in range(10):
            expr = generate_tautology(random.Random(seed), n_leaves, VARNAMES[:3])
            props = expr.get_properties()
            assert props.falsifiable is None
            assert props.satisfiable is not None


def test_contradiction():
    for n_leaves in range(2, 10):
        for seed in range(10):
            expr = generate_contradiction(random.Random(seed), n_leaves, VARNAMES[:3])
            props = expr.get_properties()
            assert props.satisfiable is None
            assert props.falsifiable is not None

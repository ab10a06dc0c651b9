# random expression generation
#
# all randomness comes from the rng argument (a random.Random), the same seed
# gives the same expression
#
# a chain is a run of nested nodes with the same AND/OR operator, eg:
#   (A and B) and (C or D) and E
# has the chain operands A, B, (C or D), E. The literals directly in a chain
# get distinct variables, otherwise A and /A and ... could quietly turn the
# whole chain into a contradiction (or tautology for OR).

import logging

from .expr import *

log = logging.getLogger(__name__)

# chance that a generated literal is negated
NEGATION_PROBABILITY = 0.2

OPERATOR_WEIGHTS = {
    OperatorKind.AND: 4,
    OperatorKind.OR: 4,
    OperatorKind.XOR: 1,
    OperatorKind.IMPLIES: 2,
    OperatorKind.IFF: 1,
}

# a chain continuing with fewer free variables than leaves is less likely
CONSTRAINED_WEIGHT_FACTOR = 0.25

CHAIN_OPERATORS = (OperatorKind.AND, OperatorKind.OR)

def generate(rng, total_leaves, allowed_variables):
    if total_leaves < 1:
        raise ValueError(f'an expression needs at least one leaf, got {total_leaves}')
    allowed_variables = list(allowed_variables)
    if not allowed_variables:
        raise ValueError('no variables to generate an expression from')

    (expr, _) = _generate(rng, total_leaves, allowed_variables, allowed_variables, None)
    log.debug('generated %s', expr)
    return expr

# pool:    variables still free in the chain of parent_kind
# returns: (expression, variables used by the chain of this node)
def _generate(rng, n_leaves, pool, allowed, parent_kind):
    if n_leaves == 1:
        # with a single allowed variable repeats are unavoidable
        name = rng.choice(pool or allowed)
        return (Literal(name, rng.random() < NEGATION_PROBABILITY), [name])

    kind = _choose_operator(rng, n_leaves, pool, parent_kind)

    # continuing the chain of the parent keeps its pool, anything else starts
    # over with every allowed variable
    chain = kind in CHAIN_OPERATORS
    if not (chain and kind == parent_kind):
        pool = allowed

    (n_left, n_right) = split_leaves(rng, n_leaves)

    # reserve single leaf names up front so the two sides cannot collide
    reserved = None
    if n_right == 1:
        reserved = rng.choice(pool)

    (left, left_used) = _generate(rng, n_left, _without(pool, [reserved]), allowed, kind)
    used = _chain_names(left, left_used, kind)

    if reserved is not None:
        right = Literal(reserved, rng.random() < NEGATION_PROBABILITY)
        right_used = [reserved]
    else:
        (right, right_used) = _generate(rng, n_right, _without(pool, used), allowed, kind)
    used = used + _chain_names(right, right_used, kind)

    return (Operator(kind, left, right), used if chain else [])

def _choose_operator(rng, n_leaves, pool, parent_kind):
    weights = dict(OPERATOR_WEIGHTS)

    if parent_kind in CHAIN_OPERATORS:
        if len(pool) < 2:
            del weights[parent_kind]
        elif len(pool) < n_leaves:
            weights[parent_kind] *= CONSTRAINED_WEIGHT_FACTOR

    kinds = list(weights)
    return rng.choices(kinds, [weights[k] for k in kinds])[0]

# only literals and sub chains of the same operator use up chain variables
def _chain_names(node, used, kind):
    match node:
        case Literal():
            return used
        case Operator():
            return used if node.kind == kind and kind in CHAIN_OPERATORS else []
        case _:
            raise NotImplementedError(type(node))

def _without(pool, names):
    return [name for name in pool if name not in names]

def split_leaves(rng, n_leaves):
    if n_leaves < 2:
        raise ValueError(f'cannot split {n_leaves} leaves between two operands')
    n_left = rng.randint(1, n_leaves - 1)
    return (n_left, n_leaves - n_left)

#------------------------------------------------------------------------------
# tautologies and contradictions
#------------------------------------------------------------------------------

# E or /E' where E' is a shuffled copy of E
def generate_tautology(rng, total_leaves, allowed_variables):
    return _generate_complementary(rng, total_leaves, allowed_variables, OperatorKind.OR)

# E and /E' where E' is a shuffled copy of E
def generate_contradiction(rng, total_leaves, allowed_variables):
    return _generate_complementary(rng, total_leaves, allowed_variables, OperatorKind.AND)

def _generate_complementary(rng, total_leaves, allowed_variables, kind):
    if total_leaves < 2:
        raise ValueError(f'a tautology or contradiction needs at least two leaves, got {total_leaves}')

    expr = generate(rng, total_leaves // 2, allowed_variables)
    complement = expr.copy().negate().shuffle(rng)
    if rng.random() < 0.5:
        (expr, complement) = (complement, expr)
    result = Operator(kind, expr, complement)

    # an odd budget gets one more leaf, X or True == True, X and False == False
    if total_leaves % 2:
        result = Operator(kind, result, generate(rng, 1, allowed_variables))

    result.shuffle(rng)
    log.debug('generated %s %s', 'tautology' if kind == OperatorKind.OR else 'contradiction', result)
    return result

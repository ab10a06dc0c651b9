# propositional logic expression trees
#
# conventions:
# there is no Not node, Literal and Operator both carry a negated flag that
# complements the node's value after it has been computed
# negate(), simplify*() and shuffle() are in-place and return self
# WARNING! a tree must not be reachable from two places when you call an
# in-place method, .copy() first:
#  e2 = e.copy().simplify()
#
# evaluation is done with .evaluate(values), unknown variables are False

from enum import Enum
from typing import NamedTuple, Optional

from .codec import *

# shuffle(): chance to rewrite the operator in terms of another one
OBSCURE_OPERATOR_PROBABILITY = 0.2
# shuffle(): chance to push the negation of a negated operator to its children
PUSH_NEGATION_PROBABILITY = 0.3

class OperatorKind(Enum):
    AND = '\\and'
    OR = '\\or'
    XOR = '\\xor'
    IMPLIES = '=>'
    IFF = '<=>'

    def __str__(self):
        return self.value

ASSOCIATIVE_OPERATORS = (OperatorKind.AND, OperatorKind.OR, OperatorKind.XOR)

NEGATION = '\\not'

LATEX_SYMBOLS = {
    OperatorKind.AND: '\\wedge',
    OperatorKind.OR: '\\vee',
    OperatorKind.XOR: '\\oplus',
    OperatorKind.IMPLIES: '\\Rightarrow',
    OperatorKind.IFF: '\\Leftrightarrow',
}
LATEX_NEGATION = '\\neg'

class TruthTable(NamedTuple):
    table: list
    variables: list

class ExpressionProperties(NamedTuple):
    variables: list
    # first satisfying/falsifying assignment, None if there is none
    satisfiable: Optional[dict]
    falsifiable: Optional[dict]

class SyntaxTreeNode(object):
    def __init__(self, negated=False):
        assert type(negated) == bool
        self.negated = negated

    def negate(self):
        self.negated = not self.negated
        return self

    def all_nodes(self):
        return [self]

    # Literal and Operator need to override
    def copy(self):
        raise NotImplementedError()

    def evaluate(self, values):
        raise NotImplementedError()

    def get_variable_names(self):
        raise NotImplementedError()

    def to_string(self, latex=False):
        raise NotImplementedError()

    def is_conjunction(self):
        raise NotImplementedError()

    def is_disjunction(self):
        raise NotImplementedError()

    def is_cnf(self):
        raise NotImplementedError()

    def is_dnf(self):
        raise NotImplementedError()

    # the rewrites do nothing on literals
    def simplify_local(self):
        return self

    def simplify(self):
        return self

    def simplify_negation_local(self):
        return self

    def simplify_negation(self):
        return self

    def shuffle(self, rng):
        return self

    def __str__(self):
        return self.to_string()

    #--------------------------------------------------------------------------
    # truth tables
    #--------------------------------------------------------------------------

    def get_truth_table(self):
        variables = self.get_variable_names()
        check_variable_count(variables)

        table = [self.evaluate(values) for values in assignments(variables)]
        return TruthTable(table, variables)

    # like get_truth_table() but stops once both a satisfying and a falsifying
    # assignment were seen
    def get_properties(self):
        variables = self.get_variable_names()
        check_variable_count(variables)

        satisfiable = None
        falsifiable = None
        for values in assignments(variables):
            if self.evaluate(values):
                if satisfiable is None:
                    satisfiable = values
            elif falsifiable is None:
                falsifiable = values

            if satisfiable is not None and falsifiable is not None:
                break

        return ExpressionProperties(variables, satisfiable, falsifiable)

    #--------------------------------------------------------------------------
    # normal forms, built from the truth table
    #--------------------------------------------------------------------------

    # CNF: one clause per falsifying row, ruling out exactly that row
    def to_cnf(self):
        return self._make_normal_form(OperatorKind.OR, OperatorKind.AND, False)

    # DNF: one term per satisfying row, matching exactly that row
    def to_dnf(self):
        return self._make_normal_form(OperatorKind.AND, OperatorKind.OR, True)

    def _make_normal_form(self, inner, outer, selected):
        (table, variables) = self.get_truth_table()

        nodes = []
        for (index, value) in enumerate(table):
            if value != selected:
                continue

            values = num_to_values(index, variables)
            literals = [Literal(name, values[name] != selected) for name in variables]
            nodes.append(Operator.make_from_list(inner, literals))

        # tautology for CNF, contradiction for DNF: no row to select, so pair
        # every variable with its complement (v or /v, resp. v and /v)
        if not nodes:
            nodes = [Operator(inner, Literal(name), Literal(name, True)) for name in variables]

        return Operator.make_from_list(outer, nodes)

class Literal(SyntaxTreeNode):
    def __init__(self, name:str, negated=False):
        super().__init__(negated)
        assert type(name) == str and name
        self.name = name

    def copy(self):
        return Literal(self.name, self.negated)

    def evaluate(self, values):
        return bool(values.get(self.name, False)) != self.negated

    def get_variable_names(self):
        return [self.name]

    def to_string(self, latex=False):
        if not self.negated:
            return self.name
        return (LATEX_NEGATION if latex else NEGATION) + ' ' + self.name

    def is_conjunction(self):
        return True

    def is_disjunction(self):
        return True

    def is_cnf(self):
        return True

    def is_dnf(self):
        return True

    def __eq__(self, other):
        return type(other) == Literal and self.name == other.name and self.negated == other.negated

    def __repr__(self):
        if self.negated:
            return f'Literal({self.name!r}, True)'
        return f'Literal({self.name!r})'

class Operator(SyntaxTreeNode):
    def __init__(self, kind, left, right, negated=False):
        super().__init__(negated)
        assert isinstance(kind, OperatorKind)
        assert isinstance(left, SyntaxTreeNode) and isinstance(right, SyntaxTreeNode)
        self.kind = kind
        self.left = left
        self.right = right

    # [a, b, c] -> (a op b) op c
    @staticmethod
    def make_from_list(kind, nodes):
        if not nodes:
            raise ValueError(f'cannot join an empty list of nodes with {kind}')

        result = nodes[0]
        for node in nodes[1:]:
            result = Operator(kind, result, node)
        return result

    @staticmethod
    def make_conjunction(nodes):
        return Operator.make_from_list(OperatorKind.AND, nodes)

    @staticmethod
    def make_disjunction(nodes):
        return Operator.make_from_list(OperatorKind.OR, nodes)

    def copy(self):
        return Operator(self.kind, self.left.copy(), self.right.copy(), self.negated)

    def all_nodes(self):
        return [self] + self.left.all_nodes() + self.right.all_nodes()

    def evaluate(self, values):
        a = self.left.evaluate(values)
        b = self.right.evaluate(values)

        match self.kind:
            case OperatorKind.AND:
                value = a and b
            case OperatorKind.OR:
                value = a or b
            case OperatorKind.XOR:
                value = a != b
            case OperatorKind.IMPLIES:
                value = (not a) or b
            case OperatorKind.IFF:
                value = a == b
            case _:
                raise NotImplementedError(self.kind)

        return value != self.negated

    def get_variable_names(self):
        return sorted(set(self.left.get_variable_names()) | set(self.right.get_variable_names()))

    def to_string(self, latex=False):
        symbol = LATEX_SYMBOLS[self.kind] if latex else self.kind.value
        result = f'{self._operand_string(self.left, latex)} {symbol} {self._operand_string(self.right, latex)}'
        if self.negated:
            result = (LATEX_NEGATION if latex else NEGATION) + f'({result})'
        return result

    # chains of the same associative operator need no parentheses
    def _operand_string(self, node, latex):
        match node:
            case Literal():
                return node.to_string(latex)
            case Operator():
                if node.negated:
                    return node.to_string(latex)
                if node.kind == self.kind and self.kind in ASSOCIATIVE_OPERATORS:
                    return node.to_string(latex)
                return f'({node.to_string(latex)})'
            case _:
                raise NotImplementedError(type(node))

    def is_conjunction(self):
        return not self.negated and self.kind == OperatorKind.AND and \
            self.left.is_conjunction() and self.right.is_conjunction()

    def is_disjunction(self):
        return not self.negated and self.kind == OperatorKind.OR and \
            self.left.is_disjunction() and self.right.is_disjunction()

    def is_cnf(self):
        if self.is_disjunction():
            return True
        return not self.negated and self.kind == OperatorKind.AND and \
            self.left.is_cnf() and self.right.is_cnf()

    def is_dnf(self):
        if self.is_conjunction():
            return True
        return not self.negated and self.kind == OperatorKind.OR and \
            self.left.is_dnf() and self.right.is_dnf()

    #--------------------------------------------------------------------------
    # simplification: only AND, OR and negation remain
    #--------------------------------------------------------------------------

    # rewrites this node only, the kind becomes OR
    def simplify_local(self):
        (a, b) = (self.left, self.right)

        match self.kind:
            case OperatorKind.AND | OperatorKind.OR:
                return self
            case OperatorKind.XOR:
                # a xor b == (a and /b) or (/a and b)
                self.left = Operator(OperatorKind.AND, a, b.copy().negate())
                self.right = Operator(OperatorKind.AND, a.copy().negate(), b)
            case OperatorKind.IMPLIES:
                # a => b == /a or b
                a.negate()
            case OperatorKind.IFF:
                # a <=> b == (a and b) or (/a and /b)
                self.left = Operator(OperatorKind.AND, a, b)
                self.right = Operator(OperatorKind.AND, a.copy().negate(), b.copy().negate())
            case _:
                raise NotImplementedError(self.kind)

        self.kind = OperatorKind.OR
        return self

    def simplify(self):
        self.simplify_local()
        self.left.simplify()
        self.right.simplify()
        return self

    # De Morgan, one level: /(a and b) -> /a or /b, /(a or b) -> /a and /b
    def simplify_negation_local(self):
        if not self.negated:
            return self

        self.simplify_local()
        self.kind = OperatorKind.OR if self.kind == OperatorKind.AND else OperatorKind.AND
        self.left.negate()
        self.right.negate()
        self.negated = False
        return self

    # afterwards only literals are negated
    def simplify_negation(self):
        self.simplify_negation_local()
        self.left.simplify_negation()
        self.right.simplify_negation()
        return self

    #--------------------------------------------------------------------------
    # shuffle: random rewrites that keep the truth table
    #--------------------------------------------------------------------------

    def shuffle(self, rng):
        if rng.random() < OBSCURE_OPERATOR_PROBABILITY:
            match self.kind:
                case OperatorKind.XOR | OperatorKind.IMPLIES | OperatorKind.IFF:
                    self.simplify_local()
                case OperatorKind.AND:
                    # a and b == /(a => /b)
                    self.kind = OperatorKind.IMPLIES
                    self.negate()
                    self.right.negate()
                case OperatorKind.OR:
                    # a or b == /a => b
                    self.kind = OperatorKind.IMPLIES
                    self.left.negate()

        if rng.random() < PUSH_NEGATION_PROBABILITY and self.negated:
            self.simplify_negation_local()

        # implication is the only operator that is not commutative
        if self.kind != OperatorKind.IMPLIES:
            match rng.randrange(4):
                case 0:
                    (self.left, self.right) = (self.right, self.left)
                case 1:
                    self._rotate(rng, 'left', 'right')
                case 2:
                    self._rotate(rng, 'right', 'left')
                case 3:
                    self._swap_grandchildren(rng)

        self.left.shuffle(rng)
        self.right.shuffle(rng)
        return self

    # child continues the chain of an associative operator, eg: the (a and b)
    # in (a and b) and c
    def _is_chain(self, node):
        return self.kind in ASSOCIATIVE_OPERATORS and type(node) == Operator and \
            node.kind == self.kind and not node.negated

    # (a op b) op c -> (c op b) op a  or  (a op c) op b
    def _rotate(self, rng, inner, outer):
        child = getattr(self, inner)
        if not self._is_chain(child):
            return

        grandchild = rng.choice(('left', 'right'))
        tmp = getattr(self, outer)
        setattr(self, outer, getattr(child, grandchild))
        setattr(child, grandchild, tmp)

    # (a op b) op (c op d) -> (c op b) op (a op d)  etc.
    def _swap_grandchildren(self, rng):
        if not (self._is_chain(self.left) and self._is_chain(self.right)):
            return

        a = rng.choice(('left', 'right'))
        b = rng.choice(('left', 'right'))
        tmp = getattr(self.left, a)
        setattr(self.left, a, getattr(self.right, b))
        setattr(self.right, b, tmp)

    def __eq__(self, other):
        return type(other) == Operator and self.kind == other.kind and self.negated == other.negated \
            and self.left == other.left and self.right == other.right

    def __repr__(self):
        negated = ', True' if self.negated else ''
        return f'Operator(OperatorKind.{self.kind.name}, {self.left!r}, {self.right!r}{negated})'

import logging

import networkx as nx

from proplogic.graphs import nxtools

from .expr import *

log = logging.getLogger(__name__)

#------------------------------------------------------------------------------
# equivalence
#------------------------------------------------------------------------------

# are all expressions equivalent?
# compares over the union of all variables, so 'A' and 'A and (B or /B)' are
def compare_expressions(exprs):
    if len(exprs) < 2:
        raise ValueError(f'need at least two expressions to compare, got {len(exprs)}')

    varnames = sorted(set().union(*[e.get_variable_names() for e in exprs]))
    check_variable_count(varnames)

    for values in assignments(varnames):
        expected = exprs[0].evaluate(values)
        for e in exprs[1:]:
            if e.evaluate(values) != expected:
                log.debug('%s and %s differ at %s', exprs[0], e, values)
                return False

    return True

# is no expression equivalent to another one?
def expressions_different(exprs):
    if len(exprs) < 2:
        raise ValueError(f'need at least two expressions to compare, got {len(exprs)}')

    for i in range(len(exprs)):
        for j in range(i+1, len(exprs)):
            if compare_expressions([exprs[i], exprs[j]]):
                return False

    return True

#------------------------------------------------------------------------------
# truth tables as text
#------------------------------------------------------------------------------

# eg: 'A \xor B' ->
# A B | out
# 0 0 | 0
# 1 0 | 1
# 0 1 | 1
# 1 1 | 0
def format_truth_table(expr, varnames=None):
    if varnames == None:
        varnames = expr.get_variable_names()
    check_variable_count(varnames)

    widths = [len(name) for name in varnames]
    lines = [' '.join(varnames) + ' | out']
    for values in assignments(varnames):
        cells = [str(int(values[name])).ljust(w) for (name, w) in zip(varnames, widths)]
        lines.append(' '.join(cells) + ' | ' + str(int(expr.evaluate(values))))

    return '\n'.join(lines)

def print_truth_table(expr, varnames=None):
    print(format_truth_table(expr, varnames))

#------------------------------------------------------------------------------
# syntax tree -> graph
#------------------------------------------------------------------------------

# nodes are numbered in pre-order, the root is 0
# node attributes:
#   label:   variable name or operator symbol
#   negated: bool
# edges go parent -> child with attribute side 'left' or 'right'
def to_graph(expr, latex=False):
    G = nx.DiGraph()

    def add(node):
        node_id = len(G)
        match node:
            case Literal():
                G.add_node(node_id, label=node.name, negated=node.negated)
            case Operator():
                label = LATEX_SYMBOLS[node.kind] if latex else node.kind.value
                G.add_node(node_id, label=label, negated=node.negated)
                G.add_edge(node_id, add(node.left), side='left')
                G.add_edge(node_id, add(node.right), side='right')
            case _:
                raise NotImplementedError(type(node))
        return node_id

    add(expr)
    return G

def syntax_tree_node_attrs(G, n):
    label = G.nodes[n]['label']
    if G.nodes[n]['negated']:
        label = 'not ' + label
    attrs = {'label': label}
    if G.out_degree(n) == 0:
        attrs['shape'] = 'plain'
    return attrs

def gen_dot(expr, latex=False):
    return nxtools.gen_dot(to_graph(expr, latex), f_node_attrs=syntax_tree_node_attrs)

# fpath: .svg or .png, needs graphviz dot on the PATH
def draw(expr, fpath, latex=False):
    log.debug('drawing %s to %s', expr, fpath)
    nxtools.render(gen_dot(expr, latex), fpath)

# TEST WITH: python -m proplogic.graphs.nxtools

import os
from subprocess import Popen, PIPE

import networkx as nx

# children are laid out in the order of G's out edges, for syntax trees that
# is left operand then right operand
TREE_SETTINGS = ['ordering="out";', 'edge [arrowhead="none"];']

RENDER_FORMATS = ('svg', 'png')

#------------------------------------------------------------------------------
# graphviz integration
#------------------------------------------------------------------------------

# eg: {'label':'A', 'shape':'plain'} -> '[label="A" shape="plain"]'
def format_attrs(attrs):
    fields = []
    for (key, value) in attrs.items():
        value = str(value).replace('\\', '\\\\').replace('"', '\\"')
        fields.append(f'{key}="{value}"')
    return '[' + ' '.join(fields) + ']'

# f_node_attrs: G, n -> dict of dot attributes for node n
# f_edge_attrs: G, n0, n1 -> dict of dot attributes for edge n0 -> n1
# settings:     global statements placed before the nodes
def gen_dot(G, f_node_attrs=None, f_edge_attrs=None, settings=TREE_SETTINGS):
    lines = ['digraph G {']
    lines.extend(settings)

    for n in G.nodes:
        attrs = f_node_attrs(G, n) if f_node_attrs else {}
        lines.append(f'{n} {format_attrs(attrs)};')

    for (n0, n1) in G.edges:
        attrs = f_edge_attrs(G, n0, n1) if f_edge_attrs else {}
        lines.append(f'{n0} -> {n1} {format_attrs(attrs)};')

    lines.append('}')
    return '\n'.join(lines)

# dot:   graph source, see gen_dot()
# fpath: output file, the extension picks the format
def render(dot, fpath):
    ftype = os.path.splitext(fpath)[1][1:].lower()
    if ftype not in RENDER_FORMATS:
        raise ValueError(f'cannot render to {fpath}, expected one of: {", ".join(RENDER_FORMATS)}')

    cmd = ['dot', f'-T{ftype}', '-o', fpath]
    process = Popen(cmd, stdin=PIPE, stdout=PIPE, stderr=PIPE)
    (_, stderr) = process.communicate(dot.encode('utf-8'))
    if process.returncode != 0:
        raise RuntimeError(f'{" ".join(cmd)} failed: {stderr.decode("utf-8")}')

#------------------------------------------------------------------------------
# main/test
#------------------------------------------------------------------------------

if __name__ == '__main__':
    G = nx.DiGraph()
    G.add_edges_from([(0, 1), (0, 2)])

    dot = gen_dot(G, lambda G, n: {'label': f'n{n}'})
    assert '1 [label="n1"];' in dot
    print(dot)
    print('pass')

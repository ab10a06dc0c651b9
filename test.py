#!/usr/bin/env python

import logging
import random
import sys

from proplogic.boolalg.expr import *
from proplogic.boolalg.parser import parse, ParserError
from proplogic.boolalg import generate as gen
from proplogic.boolalg import tools
from proplogic.boolalg.grading import grade_answer
from proplogic.util import setup_logger

if __name__ == '__main__':
    what = 'all'
    if sys.argv[1:]:
        what = sys.argv[1]

    setup_logger(loglevel=logging.DEBUG if '-v' in sys.argv else logging.WARNING)

    rng = random.Random(2024)

    if what in ['all', 'parse']:
        expr = parse('A AND B')
        assert expr.evaluate({'A':True, 'B':False}) == False
        assert expr.evaluate({'A':True, 'B':True}) == True
        assert expr.get_truth_table().table == [False, False, False, True]
        for text in ['((', '(A', 'NOT', 'A AND']:
            assert isinstance(parse(text), ParserError)
        assert isinstance(parse(' AND '.join(['A']*1000)), ParserError)

    if what in ['all', 'random-exprs']:
        varnames = list('ABCDEF')
        for n_leaves in range(1, 20):
            print(f'{n_leaves}: ' + str(gen.generate(rng, n_leaves, varnames)))

    if what in ['all', 'normal-forms']:
        for n_leaves in range(1, 12):
            expr = gen.generate(rng, n_leaves, list('ABCD'))
            cnf = expr.to_cnf()
            dnf = expr.to_dnf()
            print(f'{expr}\n  CNF: {cnf}\n  DNF: {dnf}')
            assert cnf.is_cnf() and dnf.is_dnf()
            assert cnf.get_truth_table() == expr.get_truth_table() == dnf.get_truth_table()

    if what in ['all', 'shuffle']:
        for n_leaves in range(2, 12):
            expr = gen.generate(rng, n_leaves, list('ABCDE'))
            for i in range(20):
                shuffled = expr.copy().shuffle(rng)
                assert shuffled.get_truth_table() == expr.get_truth_table()
            print(f'{expr} -> {shuffled}')

    if what in ['all', 'equivalence']:
        assert tools.compare_expressions([parse('NOT A AND B'), parse('NOT(B => A)')])
        assert not tools.compare_expressions([parse('A AND B'), parse('A OR B')])
        assert tools.expressions_different([parse('A AND B'), parse('A OR B'), parse('A XOR B')])

    if what in ['all', 'grading']:
        reference = parse('A => B')
        assert grade_answer('\\not A \\or B', reference, form='CNF').correct
        assert not grade_answer('A \\or B', reference).correct

    if what in ['all', 'truth-table']:
        tools.print_truth_table(parse('A \\xor (B => C)'))

    if what in ['dot']:
        print(tools.gen_dot(gen.generate(rng, 6, list('ABC'))))

    if what in ['draw']:
        paths = [arg for arg in sys.argv[2:] if arg != '-v']
        fpath = paths[0] if paths else '/tmp/tree.svg'
        tools.draw(gen.generate(rng, 6, list('ABC')), fpath)
        print(f'wrote {fpath}')

    print('pass')

# text -> expression tree
#
# grammar, there is no operator precedence:
#
#   expr    := NOT* operand (OP expr)?
#   operand := VAR | '(' expr ')'
#
# everything after an operator is the right operand, so
#   A op1 B op2 C  ->  A op1 (B op2 C)
# for any pair of operators
#
# eg:
#   '\not A \and (B \or C)'
#   'not A and B => C'
#   '¬(A ∧ B) ⇔ C'

import logging
import re
from enum import Enum

from .expr import *

log = logging.getLogger(__name__)

# parsing and every tree walk recurse once per operator and parenthesis level,
# longer or deeper input is rejected as a ParserError
MAX_TOKENS = 300
MAX_NESTING = 32

KEYWORDS = {
    'not': None,
    'and': OperatorKind.AND,
    'or': OperatorKind.OR,
    'xor': OperatorKind.XOR,
}

SYMBOLS = {
    '<=>': OperatorKind.IFF, '<->': OperatorKind.IFF, '⇔': OperatorKind.IFF, '↔': OperatorKind.IFF,
    '=>': OperatorKind.IMPLIES, '->': OperatorKind.IMPLIES, '⇒': OperatorKind.IMPLIES, '→': OperatorKind.IMPLIES,
    '&': OperatorKind.AND, '∧': OperatorKind.AND,
    '|': OperatorKind.OR, '∨': OperatorKind.OR,
    '^': OperatorKind.XOR, '⊕': OperatorKind.XOR,
    '!': None, '~': None, '¬': None,
}

# longest symbols first so '<=>' wins over '=>'
_symbols_re = '|'.join(re.escape(s) for s in sorted(SYMBOLS, key=len, reverse=True))
_keyword_chars = re.escape(''.join(sorted(set(''.join(SYMBOLS)) | {'\\'})))

TOKEN_RE = re.compile(
    r'(?P<space>\s+)'
    r'|(?P<lparen>\()'
    r'|(?P<rparen>\))'
    r'|\\(?P<keyword>not|xor|and|or)'
    rf'|(?P<symbol>{_symbols_re})'
    rf'|(?P<name>[^\s(){_keyword_chars}]+)'
    r'|(?P<junk>.)'
)

class ParseErrorKind(Enum):
    EMPTY_EXPRESSION = 'Empty expression'
    UNEXPECTED_TOKEN = 'Unexpected token'
    MISSING_OPERATOR = 'Missing operator'
    UNMATCHED_PARENTHESIS = 'Missing closing parenthesis'
    EXPRESSION_TOO_LONG = 'Expression too long'
    NESTING_TOO_DEEP = 'Too many nested parentheses'

# returned (not raised) by parse()
class ParserError(Exception):
    def __init__(self, kind, text, pos=None, message=None):
        self.kind = kind
        self.message = message or kind.value
        self.text = text
        self.pos = pos
        super().__init__(self.message)

    # eg:
    # "A \and \or B"
    #         ^
    def info(self):
        result = f'"{self.text}"'
        if self.pos is not None:
            result += '\n' + ' '*(self.pos + 1) + '^'
        return result

    def __repr__(self):
        return f'ParserError({self.kind.name}, {self.text!r}, {self.pos!r})'

class Token(object):
    def __init__(self, type_, text, pos, operator=None):
        self.type = type_
        self.text = text
        self.pos = pos
        self.operator = operator

    def __repr__(self):
        return f'Token({self.type}, {self.text!r}, {self.pos})'

# types are 'lparen', 'rparen', 'not', 'op', 'var'
def tokenize(text):
    tokens = []
    for m in TOKEN_RE.finditer(text):
        (kind, value, pos) = (m.lastgroup, m.group(m.lastgroup), m.start())
        match kind:
            case 'space':
                continue
            case 'lparen' | 'rparen':
                tokens.append(Token(kind, value, pos))
            case 'keyword':
                operator = KEYWORDS[value]
                tokens.append(Token('not' if operator is None else 'op', m.group(0), pos, operator))
            case 'symbol':
                operator = SYMBOLS[value]
                tokens.append(Token('not' if operator is None else 'op', value, pos, operator))
            case 'name' if value.lower() in KEYWORDS:
                operator = KEYWORDS[value.lower()]
                tokens.append(Token('not' if operator is None else 'op', value, pos, operator))
            case 'name':
                tokens.append(Token('var', value, pos))
            case _:
                # a stray keyword character like a lone '=' or '<'
                tokens.append(Token('junk', value, pos))
    return tokens

class Parser(object):
    def __init__(self, text):
        self.text = text
        self.tokens = tokenize(text)

    def error(self, kind, pos=None):
        return ParserError(kind, self.text, pos)

    def parse(self):
        self.check_limits()
        return self.parse_expr(0, len(self.tokens))

    # error positions are the first token past the limit
    def check_limits(self):
        if len(self.tokens) > MAX_TOKENS:
            raise self.error(ParseErrorKind.EXPRESSION_TOO_LONG, self.tokens[MAX_TOKENS].pos)

        level = 0
        for token in self.tokens:
            match token.type:
                case 'lparen':
                    level += 1
                    if level > MAX_NESTING:
                        raise self.error(ParseErrorKind.NESTING_TOO_DEEP, token.pos)
                case 'rparen':
                    level -= 1

    # parses tokens[start:end] completely
    def parse_expr(self, start, end):
        i = start
        negations = 0
        while i < end and self.tokens[i].type == 'not':
            negations += 1
            i += 1

        if i == end:
            raise self.error(ParseErrorKind.EMPTY_EXPRESSION)

        token = self.tokens[i]
        match token.type:
            case 'var':
                operand = Literal(token.text)
                i += 1
            case 'lparen':
                close = self.find_closing_parenthesis(i, end)
                operand = self.parse_expr(i + 1, close)
                i = close + 1
            case _:
                raise self.error(ParseErrorKind.UNEXPECTED_TOKEN, token.pos)

        if negations % 2:
            operand.negate()

        if i == end:
            return operand

        token = self.tokens[i]
        if token.type != 'op':
            raise self.error(ParseErrorKind.MISSING_OPERATOR, token.pos)

        return Operator(token.operator, operand, self.parse_expr(i + 1, end))

    # index of the token closing the parenthesis at tokens[start]
    def find_closing_parenthesis(self, start, end):
        level = 0
        for i in range(start, end):
            match self.tokens[i].type:
                case 'lparen':
                    level += 1
                case 'rparen':
                    level -= 1
                    if level == 0:
                        return i

        raise self.error(ParseErrorKind.UNMATCHED_PARENTHESIS)

# returns the tree, or a ParserError for malformed input
def parse(text):
    try:
        return parse_or_raise(text)
    except ParserError as e:
        log.debug('could not parse %r: %s', text, e.message)
        return e

def parse_or_raise(text):
    assert type(text) == str
    return Parser(text).parse()

if __name__ == '__main__':
    for text in ['A', '\\not A \\and B', 'not (A or B) => C', '((\\notA\\orB)\\and(B\\xorC))=>(D<=>E)']:
        print(f'{text} -> {parse(text)}')

    for text in ['', '((', '(A', 'NOT', 'A AND', 'A B', 'AND A']:
        result = parse(text)
        assert isinstance(result, ParserError)
        print(f'{result.message}:\n{result.info()}')

    print('pass')

'''
Tokens, operator descriptors and the queue/stack structures
shared by the tokenizer, the converter and the evaluator
'''

import math
import operator
from collections import namedtuple

from . import (
    DivisionByZeroException,
    InvalidOperatorException,
    MathDomainException,
)

# token types
NUMBER = 'NUMBER'
OPERATOR = 'OPERATOR'
UNARY = 'UNARY'
LEFT_BRACKET = 'LEFT_BRACKET'
RIGHT_BRACKET = 'RIGHT_BRACKET'

# associativity
LEFT = 'LEFT'
RIGHT = 'RIGHT'

Token = namedtuple('Token', ['type', 'symbol', 'value', 'position'], defaults=(None, None))
Token.__doc__ = '''
An immutable token

value is the float value of NUMBER tokens and None for everything else
position is the index in the source text, None for inserted tokens
'''

Operator = namedtuple('Operator', ['symbol', 'precedence', 'associativity', 'arity', 'function'])


def divide(a, b):
    if b == 0:
        raise DivisionByZeroException()
    return a / b


def power(a, b):
    '''
    Real power, undefined combinations such as a negative base
    with a fractional exponent raise a MathDomainException
    '''
    try:
        return math.pow(a, b)
    except ValueError as e:
        raise MathDomainException('^') from e
    except OverflowError as e:
        raise MathDomainException('^', 'result out of range') from e


OPERATORS = {
    '+': Operator('+', 1, LEFT, 2, operator.add),
    '-': Operator('-', 1, LEFT, 2, operator.sub),
    '*': Operator('*', 2, LEFT, 2, operator.mul),
    '/': Operator('/', 2, LEFT, 2, divide),
    '^': Operator('^', 4, RIGHT, 2, power),
}

# binds looser than ^ so -2^2 is -(2^2)
UNARY_OPERATORS = {
    '-': Operator('-', 3, RIGHT, 1, operator.neg),
    '+': Operator('+', 3, RIGHT, 1, operator.pos),
}

# right bracket -> left bracket
BRACKETS = {
    ')': '(',
    ']': '[',
    '}': '{',
}


def get_operator(symbol, operators=OPERATORS):
    '''
    Gets the descriptor for an operator symbol
    '''
    try:
        return operators[symbol]
    except KeyError:
        raise InvalidOperatorException(symbol) from None


def is_bracket(token):
    return token.type in (LEFT_BRACKET, RIGHT_BRACKET)


class TokenQueue:
    '''
    Ordered sequence of tokens, appended at the end and read by position
    '''
    def __init__(self, tokens=()):
        self._tokens = list(tokens)

    def add(self, token):
        self._tokens.append(token)

    def token_at(self, index):
        return self._tokens[index]

    def symbols(self):
        return [token.symbol for token in self._tokens]

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __eq__(self, other):
        if isinstance(other, TokenQueue):
            return self._tokens == other._tokens
        return NotImplemented

    def __repr__(self):
        return 'TokenQueue({!r})'.format(self._tokens)

    def __str__(self):
        return ' '.join(self.symbols())


class TokenStack:
    '''
    LIFO stack, pop and top raise IndexError when the stack is empty
    '''
    def __init__(self):
        self._items = []

    def push(self, item):
        self._items.append(item)

    def pop(self):
        if not self._items:
            raise IndexError('pop from empty stack')
        return self._items.pop()

    def top(self):
        if not self._items:
            raise IndexError('top of empty stack')
        return self._items[-1]

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __repr__(self):
        return 'TokenStack({!r})'.format(self._items)

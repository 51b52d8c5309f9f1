'''
An extensible module for evaluation of arithmetic expressions

The expression is tokenized, converted to postfix with the shunting-yard
algorithm and the postfix token queue is solved with a value stack.
'''

import logging
import re

from . import (
    InvalidTokenException,
    InsufficientParametersException,
    MalformedExpressionException,
    MismatchedParenthesesException,
)
from .tokens import (
    BRACKETS,
    LEFT,
    LEFT_BRACKET,
    NUMBER,
    OPERATOR,
    OPERATORS,
    RIGHT_BRACKET,
    UNARY,
    UNARY_OPERATORS,
    Token,
    TokenQueue,
    TokenStack,
    get_operator,
    is_bracket,
)

logger = logging.getLogger(__name__)

IMPLICIT_OPERATOR = '*'

# token types after which a - or + starts a negation instead of a subtraction
_PREFIX_CONTEXT = (OPERATOR, UNARY, LEFT_BRACKET)


def _scan(expression, symbols):
    '''
    Splits the expression into (type, text, position) triples
    '''
    def token(t):
        def callback(scanner, match):
            return t, match, scanner.match.start()
        return callback
    lefts = ''.join(BRACKETS.values())
    rights = ''.join(BRACKETS.keys())
    tokens = [
        (r'\s+', 'WHITESPACE'),
        (r'\d+\.?\d*|\.\d+', NUMBER),
        (r'[{}]'.format(re.escape(lefts)), LEFT_BRACKET),
        (r'[{}]'.format(re.escape(rights)), RIGHT_BRACKET),
        # longest symbols first so multi character operators win
        (r'|'.join(map(re.escape, sorted(symbols, key=len, reverse=True))), 'SYMBOL'),
    ]
    scanner = re.Scanner([(p, token(t)) for p, t in tokens])
    out, rest = scanner.scan(expression)
    if rest:
        raise InvalidTokenException(rest[0], len(expression) - len(rest))
    return [item for item in out if item[0] != 'WHITESPACE']


def _needs_implicit_operator(prev, type):
    if prev is None:
        return False
    if prev.type in (NUMBER, RIGHT_BRACKET) and type == LEFT_BRACKET:
        return True
    return prev.type == RIGHT_BRACKET and type == NUMBER


def tokenize(expression, operators=OPERATORS, unary=UNARY_OPERATORS):
    '''
    Parses an arithmetic expression into a list of tokens

    A - or + at the start of the expression, after an operator or after an
    opening bracket becomes a UNARY token. A * is inserted between a number
    or closing bracket and a following opening bracket, and between a
    closing bracket and a following number.
    '''
    symbols = set(operators) | set(unary)
    tokens = []
    prev = None

    for type, text, position in _scan(expression, symbols):
        if type == 'SYMBOL':
            prefix = prev is None or prev.type in _PREFIX_CONTEXT
            if text in unary and (prefix or text not in operators):
                type = UNARY
            else:
                type = OPERATOR

        if prev is not None and prev.type == NUMBER and type == NUMBER:
            raise MalformedExpressionException(
                expression,
                'Missing operator between {} and {}'.format(prev.symbol, text))

        if _needs_implicit_operator(prev, type):
            tokens.append(Token(OPERATOR, IMPLICIT_OPERATOR))

        if type == NUMBER:
            item = Token(NUMBER, text, float(text), position)
        else:
            item = Token(type, text, None, position)
        tokens.append(item)
        prev = item

    logger.debug('Tokens for %r: %s', expression, ' '.join(t.symbol for t in tokens))
    return tokens


def _descriptor(token, operators, unary):
    if token.type == UNARY:
        return get_operator(token.symbol, unary)
    return get_operator(token.symbol, operators)


def infix2postfix(tokens, operators=OPERATORS, unary=UNARY_OPERATORS):
    '''
    Converts an infix token list to a postfix token queue
    '''
    output = TokenQueue()
    stack = TokenStack()

    for token in tokens:
        if token.type == NUMBER:
            output.add(token)
        elif token.type == LEFT_BRACKET:
            stack.push(token)
        elif token.type == RIGHT_BRACKET:
            while stack and stack.top().type != LEFT_BRACKET:
                output.add(stack.pop())
            if not stack:
                raise MismatchedParenthesesException(token.position)
            stack.pop()
        elif token.type == UNARY:
            # a prefix operator has no left operand to resolve
            get_operator(token.symbol, unary)
            stack.push(token)
        elif token.type == OPERATOR:
            op = get_operator(token.symbol, operators)
            while stack and not is_bracket(stack.top()):
                top = _descriptor(stack.top(), operators, unary)
                if top.precedence > op.precedence or (
                        top.precedence == op.precedence and op.associativity == LEFT):
                    output.add(stack.pop())
                else:
                    break
            stack.push(token)
        else:
            raise InvalidTokenException(token.symbol, token.position)

    while stack:
        token = stack.pop()
        if is_bracket(token):
            raise MismatchedParenthesesException(token.position)
        output.add(token)

    logger.debug('Postfix: %s', output)
    return output


def solve_postfix(postfix, operators=OPERATORS, unary=UNARY_OPERATORS):
    '''
    Solves a postfix token sequence

    The first operand popped for an operator is its right hand operand
    '''
    postfix = list(postfix)
    stack = TokenStack()

    for token in postfix:
        if token.type == NUMBER:
            stack.push(token.value if token.value is not None else float(token.symbol))
        elif token.type in (OPERATOR, UNARY):
            op = _descriptor(token, operators, unary)
            if len(stack) < op.arity:
                raise InsufficientParametersException(op.symbol, op.arity, len(stack))
            args = [stack.pop() for _ in range(op.arity)][::-1]
            stack.push(float(op.function(*args)))
        else:
            raise InvalidTokenException(token.symbol, token.position)

    if len(stack) != 1:
        raise MalformedExpressionException(
            ' '.join(t.symbol for t in postfix),
            'Expected a single result, found {} values'.format(len(stack)))

    return stack.pop()


def to_postfix(expression, operators=OPERATORS, unary=UNARY_OPERATORS):
    '''
    Returns the postfix form of an infix expression as a string
    '''
    tokens = tokenize(expression, operators=operators, unary=unary)
    return str(infix2postfix(tokens, operators=operators, unary=unary))


def evaluate(expression, operators=OPERATORS, unary=UNARY_OPERATORS):
    '''
    Solves an infix expression

    Operators is a dict of binary operator descriptors keyed by symbol
        Each descriptor gives the precedence, the associativity, the arity
        and a function taking float arguments
    Unary is a dict of prefix operator descriptors in the same format
    '''
    tokens = tokenize(expression, operators=operators, unary=unary)
    postfix = infix2postfix(tokens, operators=operators, unary=unary)
    return solve_postfix(postfix, operators=operators, unary=unary)


solve = evaluate

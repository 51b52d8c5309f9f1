'''Arithmetic expression parser and calculator

Evaluates expressions such as 5 + ((1 + 2) * 4) - 3

Brackets may be (), [] or {} and can be mixed freely
A number or closing bracket directly before an opening bracket multiplies, i.e. 29[(-10)+1]
and so does a closing bracket directly before a number, i.e. (4-20)13

Operations from highest precedence to lowest:

^ : exponentiation, right associative

- : negation (prefix)
+ : does nothing to a number (prefix)

* : multiplication
/ : division

+ : addition
- : subtraction
'''

import logging
from collections import OrderedDict
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .util import EquationError
from .util.equations import evaluate, infix2postfix, solve, solve_postfix, to_postfix, tokenize

__all__ = [
    'EquationError',
    'evaluate',
    'infix2postfix',
    'solve',
    'solve_postfix',
    'to_postfix',
    'tokenize',
    'app',
    'main',
]

app = typer.Typer(
    name='math-parser',
    help='Evaluates arithmetic expressions',
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def format_result(value, precision=None):
    '''
    Formats a result, integral values lose the trailing .0
    unless a precision is requested
    '''
    if precision is not None:
        return '{:.{}f}'.format(value, precision)
    if value % 1 == 0:
        return str(int(value))
    return str(value)


def token_table(tokens):
    table = Table(title='Tokens', show_header=True, header_style='bold')
    table.add_column('Type', style='green')
    table.add_column('Symbol')
    table.add_column('Position', justify='right')
    for token in tokens:
        position = '' if token.position is None else str(token.position)
        table.add_row(token.type, escape(token.symbol), position)
    return table


def run(expression, config):
    '''
    Evaluates one expression and prints the output requested by the config
    '''
    tokens = tokenize(expression)
    if config['show_tokens']:
        console.print(token_table(tokens))
    postfix = infix2postfix(tokens)
    if config['show_postfix']:
        console.print('Postfix: {}'.format(postfix), highlight=False)
    value = solve_postfix(postfix)
    console.print(format_result(value, config['precision']), highlight=False)
    return value


def report(error):
    if error.args:
        message = 'Invalid expression: {}'.format(error.args[0])
    else:
        message = 'Invalid expression'
    err_console.print('[red]{}[/red]'.format(escape(message)), highlight=False)


@app.command()
def calculate(
    expression: Optional[str] = typer.Argument(
        None, help='Expression to evaluate, use -- before expressions starting with -'),
    precision: Optional[int] = typer.Option(None, '--precision', '-d', help='Decimal places to print'),
    postfix: bool = typer.Option(False, '--postfix', '-p', help='Also print the postfix form'),
    tokens: bool = typer.Option(False, '--tokens', '-t', help='Print the token stream'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Debug logging'),
) -> None:
    '''
    Evaluates an expression, or reads expressions until EOF when none is given
    '''
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = OrderedDict([
        ('precision', precision),
        ('show_postfix', postfix),
        ('show_tokens', tokens),
    ])

    if expression is not None:
        try:
            run(expression, config)
        except EquationError as e:
            report(e)
            raise typer.Exit(1)
        return

    while True:
        try:
            line = input('Eq: ')
        except EOFError:
            break
        if not line.strip():
            break
        try:
            run(line, config)
        except EquationError as e:
            report(e)


def main():
    app()

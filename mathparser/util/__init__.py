class EquationError (Exception):
    pass


class InvalidTokenException (EquationError):
    def __init__(self, token, position=None):
        self.token = token
        self.position = position
        if position is None:
            message = 'Invalid token: {}'.format(token)
        else:
            message = 'Invalid token: {} at position {}'.format(token, position)
        super().__init__(message)


class InvalidOperatorException (EquationError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__('Invalid operator: {}'.format(symbol))


class MismatchedParenthesesException (EquationError):
    def __init__(self, position=None):
        self.position = position
        if position is None:
            message = 'Mismatched parentheses'
        else:
            message = 'Mismatched parentheses at position {}'.format(position)
        super().__init__(message)


class InsufficientParametersException (EquationError):
    def __init__(self, symbol, required, available):
        self.symbol = symbol
        self.required = required
        self.available = available
        super().__init__('Not enough operands for {}: needs {}, found {}'.format(
            symbol, required, available))


class DivisionByZeroException (EquationError):
    def __init__(self):
        super().__init__('Division by zero')


class MalformedExpressionException (EquationError):
    def __init__(self, expression=None, reason=None):
        self.expression = expression
        message = reason or 'Malformed expression'
        if expression is not None:
            message = '{}: {}'.format(message, expression)
        super().__init__(message)


class MathDomainException (EquationError):
    def __init__(self, symbol, reason='math domain error'):
        self.symbol = symbol
        super().__init__('Undefined result for {}: {}'.format(symbol, reason))

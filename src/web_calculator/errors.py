"""Exceptions raised when the calculator is driven with malformed input."""


class CalculatorError(ValueError):
    """Base class for calculator input errors."""


class InvalidTokenError(CalculatorError):
    """Raised when a token is neither a single digit nor a decimal point."""

    def __init__(self, token):
        super().__init__(f"Invalid token: {token!r}")
        self.token = token


class InvalidOperatorError(CalculatorError):
    """Raised when an operator cannot be mapped to ADD, SUB, MUL or DIV."""

    def __init__(self, operator):
        super().__init__(f"Unknown operator: {operator!r}")
        self.operator = operator

"""Browser calculator: arithmetic engine, key bindings and web front-end."""

from .engine import ArithmeticEngine, CalculatorState
from .errors import CalculatorError, InvalidOperatorError, InvalidTokenError
from .operators import Operator

__version__ = "0.1.0"

__all__ = [
    "ArithmeticEngine",
    "CalculatorState",
    "CalculatorError",
    "InvalidOperatorError",
    "InvalidTokenError",
    "Operator",
]

"""
Binary operators supported by the calculator.

The engine stores an ``Operator`` member; the glyph shown on the previous
display line comes from ``Operator.symbol``.
"""

from enum import Enum
from typing import Dict, Union

from .errors import InvalidOperatorError


class Operator(Enum):
    """Arithmetic operator with its display glyph."""

    ADD = "+"
    SUB = "-"
    MUL = "×"
    DIV = "÷"

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, left: float, right: float) -> float:
        """
        Apply the operator to two numbers.

        Args:
            left: Left-hand operand
            right: Right-hand operand

        Returns:
            Result of the operation

        Raises:
            ZeroDivisionError: If dividing by zero
        """
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUB:
            return left - right
        if self is Operator.MUL:
            return left * right
        return left / right

    @classmethod
    def parse(cls, value: Union["Operator", str]) -> "Operator":
        """
        Map an operator name, glyph or keyboard character to an Operator.

        Args:
            value: Operator member, name ("ADD"), glyph ("×") or key ("*")

        Returns:
            The matching Operator

        Raises:
            InvalidOperatorError: If the value is not recognised
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text in _ALIASES:
                return _ALIASES[text]
            if text.upper() in cls.__members__:
                return cls[text.upper()]
        raise InvalidOperatorError(value)


_ALIASES: Dict[str, Operator] = {
    "+": Operator.ADD,
    "-": Operator.SUB,
    "−": Operator.SUB,
    "*": Operator.MUL,
    "x": Operator.MUL,
    "×": Operator.MUL,
    "/": Operator.DIV,
    "÷": Operator.DIV,
}

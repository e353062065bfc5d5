"""
Arithmetic engine behind the calculator display.

Accumulates digit input, applies one pending binary operator or a
percentage transform, and derives the two display lines:
- Addition, subtraction, multiplication, division
- Chained evaluation when a second operator is chosen
- Divide-by-zero and overflow reported on the display, never raised
- Results rounded to 8 decimal places
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Union

from .errors import InvalidTokenError
from .numeric import float_to_text, format_display_number, format_result, parse_number
from .operators import Operator

logger = logging.getLogger(__name__)

DECIMAL_POINT = "."
DIGITS = frozenset("0123456789")

DIVIDE_BY_ZERO_MESSAGE = "Cannot divide by zero"
RESULT_TOO_LARGE_MESSAGE = "Result too large"
ERROR_MESSAGES = frozenset({DIVIDE_BY_ZERO_MESSAGE, RESULT_TOO_LARGE_MESSAGE})


@dataclass
class CalculatorState:
    """Mutable calculator state owned by an ArithmeticEngine."""

    current_operand: str = ""
    previous_operand: str = ""
    pending_operator: Optional[Operator] = None
    reset_on_next_input: bool = False


class ArithmeticEngine:
    """Calculator engine managing state and operations."""

    def __init__(self):
        """Initialize engine with empty state."""
        self.state = CalculatorState()

    def clear(self) -> None:
        """Reset all state to its initial empty values."""
        self.state = CalculatorState()

    def delete_last_char(self) -> None:
        """
        Remove the last character of the current operand.

        A result or error still on display is discarded entirely instead.
        """
        state = self.state
        if state.reset_on_next_input:
            state.current_operand = ""
            state.reset_on_next_input = False
            return
        state.current_operand = state.current_operand[:-1]

    def append_token(self, token: str) -> None:
        """
        Add a digit or the decimal point to the current operand.

        Args:
            token: Single digit character (0-9) or "."

        Raises:
            InvalidTokenError: If the token is anything else
        """
        if token != DECIMAL_POINT and token not in DIGITS:
            raise InvalidTokenError(token)

        state = self.state
        if state.reset_on_next_input:
            state.current_operand = ""
            state.reset_on_next_input = False

        if token == DECIMAL_POINT and DECIMAL_POINT in state.current_operand:
            return

        if state.current_operand == "0" and token != DECIMAL_POINT:
            state.current_operand = token
        else:
            state.current_operand += token

    def choose_operator(self, op: Union[Operator, str]) -> None:
        """
        Queue a binary operator, evaluating any pending one first.

        Args:
            op: Operator, or a name/glyph/key accepted by Operator.parse

        Raises:
            InvalidOperatorError: If op cannot be mapped to an operator
        """
        op = Operator.parse(op)
        state = self.state

        if state.current_operand == "":
            # Lets the user change their mind before typing the right operand
            if state.previous_operand != "":
                state.pending_operator = op
            return

        if state.previous_operand != "" and state.pending_operator is not None:
            self.compute()

        state.pending_operator = op
        state.previous_operand = state.current_operand
        state.current_operand = ""

    def compute(self) -> None:
        """Perform the pending operation and store the result as the current operand."""
        state = self.state
        left = parse_number(state.previous_operand)
        right = parse_number(state.current_operand)
        if left is None or right is None or state.pending_operator is None:
            return

        op = state.pending_operator
        if op is Operator.DIV and right == 0:
            self._show_error(DIVIDE_BY_ZERO_MESSAGE)
            return

        try:
            result = op.apply(left, right)
        except OverflowError:
            result = math.inf

        if not math.isfinite(result):
            self._show_error(RESULT_TOO_LARGE_MESSAGE)
            return

        logger.debug("Computed %s %s %s = %r", left, op.symbol, right, result)
        state.current_operand = format_result(result)
        state.pending_operator = None
        state.previous_operand = ""
        state.reset_on_next_input = True

    def percentage(self) -> None:
        """Convert the current operand to a percentage."""
        state = self.state
        current = parse_number(state.current_operand)
        if current is None:
            return
        result = current / 100
        if not math.isfinite(current) or not math.isfinite(result):
            self._show_error(RESULT_TOO_LARGE_MESSAGE)
            return
        state.current_operand = float_to_text(result)
        state.reset_on_next_input = True

    def _show_error(self, message: str) -> None:
        logger.info("Calculator error: %s", message)
        state = self.state
        state.current_operand = message
        state.previous_operand = ""
        state.pending_operator = None
        state.reset_on_next_input = True

    @property
    def is_error(self) -> bool:
        """True while an error message occupies the current line."""
        return self.state.current_operand in ERROR_MESSAGES

    def get_current_line_text(self) -> str:
        if self.state.current_operand == "":
            return "0"
        return format_display_number(self.state.current_operand)

    def get_previous_line_text(self) -> str:
        state = self.state
        if state.pending_operator is None:
            return ""
        return f"{format_display_number(state.previous_operand)} {state.pending_operator.symbol}"

    def snapshot(self) -> Dict:
        """
        Capture state and display lines as a JSON-serialisable dict.

        Returns:
            Dict with raw state fields plus 'current_line', 'previous_line'
            and 'error'
        """
        data = asdict(self.state)
        op = self.state.pending_operator
        data["pending_operator"] = op.name if op is not None else None
        data["current_line"] = self.get_current_line_text()
        data["previous_line"] = self.get_previous_line_text()
        data["error"] = self.is_error
        return data

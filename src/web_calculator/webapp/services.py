"""
Action dispatch for the calculator API.

Translates the JSON ``{"action": ..., "value": ...}`` payloads posted by the
page into engine commands.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..engine import DECIMAL_POINT, ArithmeticEngine
from ..errors import CalculatorError, InvalidTokenError
from ..keymap import dispatch_key

logger = logging.getLogger(__name__)


class UnknownActionError(CalculatorError):
    """Raised for an action name the API does not support."""

    def __init__(self, action):
        super().__init__(f"Unknown action: {action}")
        self.action = action


def _digit(engine: ArithmeticEngine, value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidTokenError(value)
    engine.append_token(value)


def _operator(engine: ArithmeticEngine, value: Any) -> None:
    engine.choose_operator(value)


def _key(engine: ArithmeticEngine, value: Any) -> None:
    if not isinstance(value, str) or dispatch_key(engine, value) is None:
        raise UnknownActionError(f"key {value!r}")


ACTIONS: Dict[str, Callable[[ArithmeticEngine, Any], None]] = {
    "digit": _digit,
    "dot": lambda engine, value: engine.append_token(DECIMAL_POINT),
    "operator": _operator,
    "equals": lambda engine, value: engine.compute(),
    "clear": lambda engine, value: engine.clear(),
    "backspace": lambda engine, value: engine.delete_last_char(),
    "percentage": lambda engine, value: engine.percentage(),
    "key": _key,
}


def apply_action(engine: ArithmeticEngine, action: str, value: Optional[Any] = None) -> Dict:
    """
    Apply one user action to an engine.

    Args:
        engine: Engine owned by the requesting session
        action: One of the ACTIONS names
        value: Digit, operator or key name, depending on the action

    Returns:
        Engine snapshot after the action

    Raises:
        CalculatorError: If the action, token, operator or key is invalid
    """
    handler = ACTIONS.get(action) if isinstance(action, str) else None
    if handler is None:
        raise UnknownActionError(action)

    handler(engine, value)
    logger.debug("Applied action %s(%r)", action, value)
    return engine.snapshot()

"""
Keyboard bindings for the calculator.

Maps browser ``KeyboardEvent.key`` names onto engine commands so the page,
the JSON API and the command line all share one set of shortcuts.
"""

import logging
from typing import Callable, Dict, Optional

from .engine import DECIMAL_POINT, DIGITS, ArithmeticEngine
from .operators import Operator

logger = logging.getLogger(__name__)

CALCULATOR_KEYS = frozenset(
    list(DIGITS)
    + ["+", "-", "*", "/", "=", ".", "Enter", "Escape", "Backspace", "%", "c"]
)

_COMMANDS: Dict[str, Callable[[ArithmeticEngine], None]] = {
    "Enter": ArithmeticEngine.compute,
    "=": ArithmeticEngine.compute,
    "Escape": ArithmeticEngine.clear,
    "c": ArithmeticEngine.clear,
    "Backspace": ArithmeticEngine.delete_last_char,
    "%": ArithmeticEngine.percentage,
}

_OPERATOR_KEYS: Dict[str, Operator] = {
    "+": Operator.ADD,
    "-": Operator.SUB,
    "*": Operator.MUL,
    "/": Operator.DIV,
}


def _normalise(key: str) -> str:
    # Letter shortcuts are case-insensitive; named keys ("Enter") are not.
    return key.lower() if len(key) == 1 else key


def command_for_key(key: str) -> Optional[str]:
    """
    Name the engine command a key is bound to.

    Args:
        key: KeyboardEvent.key value ("7", "*", "Enter", ...)

    Returns:
        Engine method name, or None if the key is unbound
    """
    if key in DIGITS or key == DECIMAL_POINT:
        return "append_token"
    if key in _OPERATOR_KEYS:
        return "choose_operator"
    command = _COMMANDS.get(_normalise(key))
    return command.__name__ if command else None


def dispatch_key(engine: ArithmeticEngine, key: str) -> Optional[str]:
    """
    Run the command bound to a key against an engine.

    Args:
        engine: Engine receiving the command
        key: KeyboardEvent.key value

    Returns:
        Name of the command that ran, or None for unbound keys
    """
    command = command_for_key(key)
    if command is None:
        logger.debug("Ignoring unbound key %r", key)
        return None

    if command == "append_token":
        engine.append_token(key)
    elif command == "choose_operator":
        engine.choose_operator(_OPERATOR_KEYS[key])
    else:
        _COMMANDS[_normalise(key)](engine)

    logger.debug("Key %r -> %s", key, command)
    return command

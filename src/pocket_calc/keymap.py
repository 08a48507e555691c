"""
Input translation: keyboard keys, on-screen buttons and JSON payloads to actions.

None of this carries calculator logic; every input becomes one reducer action.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from .actions import (
    DIGITS,
    Action,
    ActionError,
    AllClear,
    Backspace,
    Calculate,
    ChooseOperator,
    Clear,
    ClearHistoryLog,
    InputDecimal,
    InputDigit,
    InputPercent,
    RecallHistoryEntry,
    ToggleHistoryPanel,
    ToggleSign,
    ToggleTheme,
)
from .state import Operator

_KEY_ACTIONS: Dict[str, Action] = {
    ".": InputDecimal(),
    ",": InputDecimal(),
    "+": ChooseOperator(Operator.ADD),
    "-": ChooseOperator(Operator.SUBTRACT),
    "*": ChooseOperator(Operator.MULTIPLY),
    "/": ChooseOperator(Operator.DIVIDE),
    "Enter": Calculate(),
    "Return": Calculate(),
    "=": Calculate(),
    "Backspace": Backspace(),
    "Escape": AllClear(),
    "Delete": Clear(),
    "%": InputPercent(),
}


def action_for_key(key: str) -> Optional[Action]:
    """Translate a key name (browser ``KeyboardEvent.key`` style) into an action."""
    if len(key) == 1 and key in DIGITS:
        return InputDigit(key)
    return _KEY_ACTIONS.get(key)


@dataclass(frozen=True, slots=True)
class Button:
    button_id: str
    label: str
    action: Action
    kind: str  # function, digit, operator


BUTTON_LAYOUT: List[Button] = [
    Button("clear", "AC", Clear(), "function"),
    Button("toggle-sign", "+/-", ToggleSign(), "function"),
    Button("percent", "%", InputPercent(), "function"),
    Button("divide", "÷", ChooseOperator(Operator.DIVIDE), "operator"),
    Button("seven", "7", InputDigit("7"), "digit"),
    Button("eight", "8", InputDigit("8"), "digit"),
    Button("nine", "9", InputDigit("9"), "digit"),
    Button("multiply", "×", ChooseOperator(Operator.MULTIPLY), "operator"),
    Button("four", "4", InputDigit("4"), "digit"),
    Button("five", "5", InputDigit("5"), "digit"),
    Button("six", "6", InputDigit("6"), "digit"),
    Button("subtract", "-", ChooseOperator(Operator.SUBTRACT), "operator"),
    Button("one", "1", InputDigit("1"), "digit"),
    Button("two", "2", InputDigit("2"), "digit"),
    Button("three", "3", InputDigit("3"), "digit"),
    Button("add", "+", ChooseOperator(Operator.ADD), "operator"),
    Button("zero", "0", InputDigit("0"), "digit"),
    Button("decimal", ".", InputDecimal(), "digit"),
    Button("equals", "=", Calculate(), "operator"),
]

_BUTTONS_BY_ID = {button.button_id: button for button in BUTTON_LAYOUT}


def action_for_button(button_id: str) -> Action:
    button = _BUTTONS_BY_ID.get(button_id)
    if button is None:
        raise ActionError(f"Unknown button: {button_id}")
    return button.action


_SIMPLE_PAYLOAD_TYPES: Dict[str, Action] = {
    "INPUT_DECIMAL": InputDecimal(),
    "CALCULATE": Calculate(),
    "CLEAR": Clear(),
    "ALL_CLEAR": AllClear(),
    "TOGGLE_SIGN": ToggleSign(),
    "INPUT_PERCENT": InputPercent(),
    "BACKSPACE": Backspace(),
    "TOGGLE_HISTORY": ToggleHistoryPanel(),
    "CLEAR_HISTORY": ClearHistoryLog(),
    "TOGGLE_THEME": ToggleTheme(),
}


def action_from_payload(data: Mapping) -> Action:
    """
    Build an action from a JSON payload.

    Expected shape:
        {"type": "INPUT_DIGIT", "payload": 7}

    Types without an argument ignore ``payload``. ``INPUT_DIGIT`` takes a
    digit (int or str), ``CHOOSE_OPERATOR`` one of ``+ - * /`` and
    ``USE_HISTORY_VALUE`` a history line.

    Raises:
        ActionError: If the type is unknown or the payload is invalid
    """
    if not isinstance(data, Mapping):
        raise ActionError("payload must be a JSON object")

    action_type = data.get("type")
    if not isinstance(action_type, str) or not action_type:
        raise ActionError("type is required")

    if action_type in _SIMPLE_PAYLOAD_TYPES:
        return _SIMPLE_PAYLOAD_TYPES[action_type]

    payload = data.get("payload")

    if action_type == "INPUT_DIGIT":
        if isinstance(payload, bool) or not isinstance(payload, (int, str)):
            raise ActionError(f"INPUT_DIGIT needs a digit, got {payload!r}")
        return InputDigit(str(payload))

    if action_type == "CHOOSE_OPERATOR":
        try:
            return ChooseOperator(Operator(payload))
        except ValueError:
            raise ActionError(f"Unknown operator: {payload!r}") from None

    if action_type == "USE_HISTORY_VALUE":
        if not isinstance(payload, str):
            raise ActionError("USE_HISTORY_VALUE needs a history line")
        return RecallHistoryEntry(payload)

    raise ActionError(f"Unknown action: {action_type}")


_SIMPLE_TYPE_NAMES = {type(action): name for name, action in _SIMPLE_PAYLOAD_TYPES.items()}


def payload_for_action(action: Action) -> Dict:
    """Inverse of action_from_payload, used to wire the on-screen buttons."""
    if isinstance(action, InputDigit):
        return {"type": "INPUT_DIGIT", "payload": action.digit}
    if isinstance(action, ChooseOperator):
        return {"type": "CHOOSE_OPERATOR", "payload": action.operator.value}
    if isinstance(action, RecallHistoryEntry):
        return {"type": "USE_HISTORY_VALUE", "payload": str(action.entry)}
    name = _SIMPLE_TYPE_NAMES.get(type(action))
    if name is None:
        raise ActionError(f"No payload form for {action!r}")
    return {"type": name}

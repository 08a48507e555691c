"""Tests for key, button and payload translation."""

import pytest

from pocket_calc.actions import (
    ActionError,
    AllClear,
    Backspace,
    Calculate,
    ChooseOperator,
    Clear,
    InputDecimal,
    InputDigit,
    InputPercent,
    RecallHistoryEntry,
    ToggleHistoryPanel,
    ToggleTheme,
)
from pocket_calc.keymap import (
    BUTTON_LAYOUT,
    action_for_button,
    action_for_key,
    action_from_payload,
    payload_for_action,
)
from pocket_calc.state import Operator


def test_key_translation():
    """Keyboard keys map onto the action vocabulary."""
    assert action_for_key("7") == InputDigit("7")
    assert action_for_key(".") == InputDecimal()
    assert action_for_key(",") == InputDecimal()
    assert action_for_key("/") == ChooseOperator(Operator.DIVIDE)
    assert action_for_key("Enter") == Calculate()
    assert action_for_key("=") == Calculate()
    assert action_for_key("Escape") == AllClear()
    assert action_for_key("Delete") == Clear()
    assert action_for_key("Backspace") == Backspace()
    assert action_for_key("%") == InputPercent()


def test_unbound_keys():
    """Keys without a binding translate to None."""
    for key in ("F5", "a", "", "Shift", "12"):
        assert action_for_key(key) is None


def test_button_layout():
    """Nineteen buttons with unique ids, wired to their actions."""
    ids = [button.button_id for button in BUTTON_LAYOUT]
    assert len(ids) == 19
    assert len(set(ids)) == 19
    assert action_for_button("equals") == Calculate()
    assert action_for_button("zero") == InputDigit("0")
    assert action_for_button("multiply") == ChooseOperator(Operator.MULTIPLY)

    with pytest.raises(ActionError):
        action_for_button("sqrt")


def test_every_button_has_a_payload_form():
    """The web page wires each button through its JSON payload."""
    for button in BUTTON_LAYOUT:
        assert action_from_payload(payload_for_action(button.action)) == button.action


def test_action_from_payload():
    """JSON payloads build the matching actions."""
    assert action_from_payload({"type": "INPUT_DIGIT", "payload": 7}) == InputDigit("7")
    assert action_from_payload({"type": "INPUT_DIGIT", "payload": "0"}) == InputDigit("0")
    assert action_from_payload({"type": "CHOOSE_OPERATOR", "payload": "*"}) == ChooseOperator(
        Operator.MULTIPLY
    )
    assert action_from_payload({"type": "TOGGLE_HISTORY"}) == ToggleHistoryPanel()
    assert action_from_payload({"type": "TOGGLE_THEME", "payload": None}) == ToggleTheme()
    assert action_from_payload(
        {"type": "USE_HISTORY_VALUE", "payload": "5 + 3 = 8"}
    ) == RecallHistoryEntry("5 + 3 = 8")


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"type": ""},
        {"type": "SQUARE_ROOT"},
        {"type": "INPUT_DIGIT", "payload": 12},
        {"type": "INPUT_DIGIT", "payload": "x"},
        {"type": "INPUT_DIGIT", "payload": True},
        {"type": "INPUT_DIGIT"},
        {"type": "CHOOSE_OPERATOR", "payload": "^"},
        {"type": "CHOOSE_OPERATOR"},
        {"type": "USE_HISTORY_VALUE", "payload": 8},
    ],
)
def test_bad_payloads(data):
    """Malformed payloads raise ActionError."""
    with pytest.raises(ActionError):
        action_from_payload(data)


def test_payload_must_be_an_object():
    """Lists and scalars are not action payloads."""
    for data in ([1], "7", None, 3):
        with pytest.raises(ActionError):
            action_from_payload(data)

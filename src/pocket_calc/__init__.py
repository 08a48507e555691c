"""Four-function calculator built around a pure state machine."""

from .actions import (
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
from .formatting import apply_operator, format_number, parse_number
from .reducer import initial_state, transition
from .session import CalculatorSession
from .state import CalculatorState, HistoryEntry, Operator, Theme

__all__ = [
    "ActionError",
    "AllClear",
    "Backspace",
    "Calculate",
    "CalculatorSession",
    "CalculatorState",
    "ChooseOperator",
    "Clear",
    "ClearHistoryLog",
    "HistoryEntry",
    "InputDecimal",
    "InputDigit",
    "InputPercent",
    "Operator",
    "RecallHistoryEntry",
    "Theme",
    "ToggleHistoryPanel",
    "ToggleSign",
    "ToggleTheme",
    "apply_operator",
    "format_number",
    "initial_state",
    "parse_number",
    "transition",
]

__version__ = "0.1.0"

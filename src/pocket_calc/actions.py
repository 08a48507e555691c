"""Action vocabulary accepted by the calculator reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .state import HistoryEntry, Operator

DIGITS = "0123456789"


class ActionError(ValueError):
    """Raised when external input cannot be turned into an action."""


@dataclass(frozen=True, slots=True)
class InputDigit:
    digit: str

    def __post_init__(self):
        if len(self.digit) != 1 or self.digit not in DIGITS:
            raise ActionError(f"Not a single digit: {self.digit!r}")


@dataclass(frozen=True, slots=True)
class InputDecimal:
    pass


@dataclass(frozen=True, slots=True)
class ChooseOperator:
    operator: Operator


@dataclass(frozen=True, slots=True)
class Calculate:
    pass


@dataclass(frozen=True, slots=True)
class Clear:
    pass


@dataclass(frozen=True, slots=True)
class AllClear:
    pass


@dataclass(frozen=True, slots=True)
class ToggleSign:
    pass


@dataclass(frozen=True, slots=True)
class InputPercent:
    pass


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


@dataclass(frozen=True, slots=True)
class ToggleHistoryPanel:
    pass


@dataclass(frozen=True, slots=True)
class ClearHistoryLog:
    pass


@dataclass(frozen=True, slots=True)
class RecallHistoryEntry:
    """Recall a log entry; plain strings are accepted for the web/CLI layers."""

    entry: Union[HistoryEntry, str]


@dataclass(frozen=True, slots=True)
class ToggleTheme:
    pass


Action = Union[
    InputDigit,
    InputDecimal,
    ChooseOperator,
    Calculate,
    Clear,
    AllClear,
    ToggleSign,
    InputPercent,
    Backspace,
    ToggleHistoryPanel,
    ClearHistoryLog,
    RecallHistoryEntry,
    ToggleTheme,
]


__all__ = [
    "Action",
    "ActionError",
    "AllClear",
    "Backspace",
    "Calculate",
    "ChooseOperator",
    "Clear",
    "ClearHistoryLog",
    "InputDecimal",
    "InputDigit",
    "InputPercent",
    "RecallHistoryEntry",
    "ToggleHistoryPanel",
    "ToggleSign",
    "ToggleTheme",
]

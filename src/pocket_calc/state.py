"""
=============================================================================
MODULE NAME: state.py
=============================================================================

INPUT FILES:
- None (value types only).

OUTPUT FILES:
- None; instances are rendered by pocket_calc.view.

VERSION HISTORY:
- v1.0 (2025-10-02): Immutable calculator state and history entries.

LAST UPDATED: 2025-10-02

NOTES:
- CalculatorState is frozen; the reducer builds a new value for every action.
- HistoryEntry keeps the numeric result next to the printed line so that
  recalling an entry never needs to re-parse text.
=============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

MAX_ENTRY_LENGTH = 15
MAX_HISTORY_ENTRIES = 20
ERROR_TEXT = "Error"


class Operator(str, Enum):
    """Closed set of binary operators; the value is the history symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def __str__(self) -> str:
        return self.value


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """A completed calculation, e.g. ``5 + 3 = 8``."""

    text: str
    result: float
    display: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class CalculatorState:
    """Everything the renderer needs; replaced wholesale on every action."""

    display_value: str = "0"
    first_operand: Optional[float] = None
    operator: Optional[Operator] = None
    waiting_for_second_operand: bool = False
    history: str = ""
    calculation_history: Tuple[HistoryEntry, ...] = ()
    show_history: bool = False
    theme: Theme = Theme.DARK

    @property
    def is_error(self) -> bool:
        return self.display_value == ERROR_TEXT


__all__ = [
    "CalculatorState",
    "ERROR_TEXT",
    "HistoryEntry",
    "MAX_ENTRY_LENGTH",
    "MAX_HISTORY_ENTRIES",
    "Operator",
    "Theme",
]

"""Renderer helpers: read-only projections of a CalculatorState."""

from __future__ import annotations

from typing import Dict, Optional

from .state import CalculatorState

# (max display length, css font size)
_FONT_SIZES = ((6, "4rem"), (9, "3rem"), (12, "2.5rem"), (15, "2rem"))
_SMALLEST_FONT = "1.5rem"


def font_size(display_value: str) -> str:
    length = len(display_value)
    for limit, size in _FONT_SIZES:
        if length <= limit:
            return size
    return _SMALLEST_FONT


def clear_label(state: CalculatorState) -> str:
    if state.display_value == "0" and state.first_operand is None and not state.history:
        return "AC"
    return "C"


def active_operator(state: CalculatorState) -> Optional[str]:
    """Operator button to highlight while the second operand is pending."""
    if state.operator is not None and state.waiting_for_second_operand:
        return state.operator.value
    return None


def snapshot(state: CalculatorState) -> Dict:
    """JSON-ready view of everything the UI paints."""
    return {
        "display_value": state.display_value,
        "history": state.history,
        "calculation_history": [entry.text for entry in state.calculation_history],
        "show_history": state.show_history,
        "theme": state.theme.value,
        "operator": state.operator.value if state.operator is not None else None,
        "waiting_for_second_operand": state.waiting_for_second_operand,
        "clear_label": clear_label(state),
        "font_size": font_size(state.display_value),
        "active_operator": active_operator(state),
    }

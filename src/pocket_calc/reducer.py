"""
Calculator state machine.

``transition(state, action)`` is the only entry point. It is pure and total:
it never raises for a well-formed action and always returns a valid state.
Arithmetic failures (division by zero, overflow to infinity) resolve to a state
whose display reads ``"Error"`` with the pending operation cleared and the
calculation log kept.

While the display shows ``"Error"``, typing a digit or a decimal point starts
a fresh entry; operator, equals, sign and backspace inputs are ignored until
then.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Callable, Dict, Optional, Union

from .actions import (
    Action,
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
from .state import (
    ERROR_TEXT,
    MAX_ENTRY_LENGTH,
    MAX_HISTORY_ENTRIES,
    CalculatorState,
    HistoryEntry,
)

_IGNORED_ON_ERROR = (ChooseOperator, Calculate, ToggleSign, Backspace, InputPercent)
_RESET_ON_ERROR = (InputDigit, InputDecimal)


def initial_state() -> CalculatorState:
    return CalculatorState()


def transition(state: CalculatorState, action: Action) -> CalculatorState:
    """Map (state, action) to the next state."""
    if state.is_error:
        if isinstance(action, _IGNORED_ON_ERROR):
            return state
        if isinstance(action, _RESET_ON_ERROR):
            state = _all_clear(state, AllClear())

    handler = _HANDLERS.get(type(action))
    if handler is None:
        return state
    return handler(state, action)


def _error_state(state: CalculatorState) -> CalculatorState:
    return CalculatorState(
        display_value=ERROR_TEXT,
        calculation_history=state.calculation_history,
        theme=state.theme,
    )


def _input_digit(state: CalculatorState, action: InputDigit) -> CalculatorState:
    if len(state.display_value) >= MAX_ENTRY_LENGTH:
        return state
    if state.waiting_for_second_operand:
        return replace(state, display_value=action.digit, waiting_for_second_operand=False)
    if state.display_value == "0":
        return replace(state, display_value=action.digit)
    return replace(state, display_value=state.display_value + action.digit)


def _input_decimal(state: CalculatorState, action: InputDecimal) -> CalculatorState:
    if state.waiting_for_second_operand:
        return replace(state, display_value="0.", waiting_for_second_operand=False)
    if "." in state.display_value:
        return state
    return replace(state, display_value=state.display_value + ".")


def _choose_operator(state: CalculatorState, action: ChooseOperator) -> CalculatorState:
    op = action.operator

    if state.operator is not None and state.waiting_for_second_operand:
        # operator changed before the second operand was typed
        history = state.history
        if state.first_operand is not None:
            history = f"{format_number(state.first_operand)} {op}"
        return replace(state, operator=op, history=history)

    first_operand = state.first_operand
    display_value = state.display_value

    if first_operand is None:
        first_operand = parse_number(display_value)
    elif state.operator is not None:
        result = apply_operator(state.operator, first_operand, parse_number(display_value))
        if not math.isfinite(result):
            return _error_state(state)
        display_value = format_number(result)
        first_operand = result

    return replace(
        state,
        display_value=display_value,
        first_operand=first_operand,
        operator=op,
        waiting_for_second_operand=True,
        history=f"{format_number(first_operand)} {op}",
    )


def _calculate(state: CalculatorState, action: Calculate) -> CalculatorState:
    if state.operator is None or state.waiting_for_second_operand:
        return state
    if state.first_operand is None:
        return state

    second_operand = parse_number(state.display_value)
    result = apply_operator(state.operator, state.first_operand, second_operand)
    if not math.isfinite(result):
        return _error_state(state)

    formatted = format_number(result)
    line = (
        f"{format_number(state.first_operand)} {state.operator} "
        f"{format_number(second_operand)} = {formatted}"
    )
    entry = HistoryEntry(text=line, result=result, display=formatted)
    log = (entry,) + state.calculation_history[: MAX_HISTORY_ENTRIES - 1]

    return replace(
        state,
        display_value=formatted,
        first_operand=None,
        operator=None,
        waiting_for_second_operand=False,
        history=line,
        calculation_history=log,
    )


def _clear(state: CalculatorState, action: Clear) -> CalculatorState:
    return replace(
        state,
        display_value="0",
        first_operand=None,
        operator=None,
        waiting_for_second_operand=False,
        history="",
    )


def _all_clear(state: CalculatorState, action: AllClear) -> CalculatorState:
    return CalculatorState(
        calculation_history=state.calculation_history,
        theme=state.theme,
    )


def _toggle_sign(state: CalculatorState, action: ToggleSign) -> CalculatorState:
    display = state.display_value
    if display == "0":
        return state
    if display.startswith("-"):
        return replace(state, display_value=display[1:])
    if len(display) >= MAX_ENTRY_LENGTH:
        return state
    return replace(state, display_value="-" + display)


def _input_percent(state: CalculatorState, action: InputPercent) -> CalculatorState:
    return replace(state, display_value=format_number(parse_number(state.display_value) / 100))


def _backspace(state: CalculatorState, action: Backspace) -> CalculatorState:
    if state.display_value == "0" or state.waiting_for_second_operand:
        return state
    mantissa, sep, _ = state.display_value.partition("e")
    if sep:
        # drop the exponent as a whole
        return replace(state, display_value=mantissa)
    trimmed = state.display_value[:-1]
    if trimmed in ("", "-"):
        trimmed = "0"
    return replace(state, display_value=trimmed)


def _toggle_history_panel(state: CalculatorState, action: ToggleHistoryPanel) -> CalculatorState:
    return replace(state, show_history=not state.show_history)


def _clear_history_log(state: CalculatorState, action: ClearHistoryLog) -> CalculatorState:
    return replace(state, calculation_history=())


def _recall_history_entry(state: CalculatorState, action: RecallHistoryEntry) -> CalculatorState:
    display = _recalled_display(state, action.entry)
    if display is None:
        return replace(state, show_history=False)
    return replace(state, display_value=display, show_history=False)


def _recalled_display(state: CalculatorState, entry: Union[HistoryEntry, str]) -> Optional[str]:
    if isinstance(entry, HistoryEntry):
        return entry.display

    for known in state.calculation_history:
        if known.text == entry:
            return known.display

    _, sep, tail = entry.rpartition(" = ")
    if not sep:
        return None
    value = parse_number(tail.strip())
    if not math.isfinite(value):
        return None
    return format_number(value)


def _toggle_theme(state: CalculatorState, action: ToggleTheme) -> CalculatorState:
    return replace(state, theme=state.theme.toggled())


_HANDLERS: Dict[type, Callable[[CalculatorState, Action], CalculatorState]] = {
    InputDigit: _input_digit,
    InputDecimal: _input_decimal,
    ChooseOperator: _choose_operator,
    Calculate: _calculate,
    Clear: _clear,
    AllClear: _all_clear,
    ToggleSign: _toggle_sign,
    InputPercent: _input_percent,
    Backspace: _backspace,
    ToggleHistoryPanel: _toggle_history_panel,
    ClearHistoryLog: _clear_history_log,
    RecallHistoryEntry: _recall_history_entry,
    ToggleTheme: _toggle_theme,
}

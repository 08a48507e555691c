"""Tests for the in-memory session."""

import logging

from pocket_calc.actions import InputDigit
from pocket_calc.session import CalculatorSession
from pocket_calc.state import CalculatorState


def test_press_all_runs_key_sequence():
    """Keys go through the translator and the reducer in order."""
    session = CalculatorSession()
    state = session.press_all(["1", "2", "+", "3", "Enter"])
    assert state.display_value == "15"
    assert session.state is state


def test_unbound_key_is_ignored():
    """Unbound keys leave the state untouched."""
    session = CalculatorSession()
    session.dispatch(InputDigit("4"))
    before = session.state
    assert session.press("F5") is None
    assert session.state is before


def test_reset():
    """Reset drops everything including the log."""
    session = CalculatorSession()
    session.press_all(["5", "+", "3", "="])
    assert session.reset() == CalculatorState()
    assert session.state.calculation_history == ()


def test_error_is_logged(caplog):
    """Landing on Error logs a warning once."""
    caplog.set_level(logging.WARNING, logger="pocket_calc.session")
    session = CalculatorSession()
    session.press_all(["8", "/", "0", "="])
    assert session.state.display_value == "Error"
    assert "Calculation error" in caplog.text

    caplog.clear()
    session.press("+")
    assert caplog.text == ""

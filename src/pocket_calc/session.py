"""
In-memory calculator session.

Holds the current state for the web server and the CLI and feeds every input
through the reducer, one transition at a time.
"""

import logging
import threading
from typing import Iterable, Optional

from .actions import Action
from .keymap import action_for_key
from .reducer import initial_state, transition
from .state import CalculatorState

logger = logging.getLogger(__name__)


class CalculatorSession:
    """Owns the current CalculatorState and serialises dispatches."""

    def __init__(self, state: Optional[CalculatorState] = None):
        self._state = state if state is not None else initial_state()
        self._lock = threading.Lock()

    @property
    def state(self) -> CalculatorState:
        with self._lock:
            return self._state

    def dispatch(self, action: Action) -> CalculatorState:
        """
        Apply one action.

        Args:
            action: Reducer action

        Returns:
            The new state
        """
        with self._lock:
            previous = self._state
            self._state = transition(previous, action)
            current = self._state

        logger.debug("%s: %r -> %r", type(action).__name__, previous.display_value, current.display_value)
        if current.is_error and not previous.is_error:
            logger.warning("Calculation error after %s (history: %r)", type(action).__name__, previous.history)
        return current

    def press(self, key: str) -> Optional[CalculatorState]:
        """
        Translate a key name and dispatch it.

        Returns:
            The new state, or None if the key has no binding
        """
        action = action_for_key(key)
        if action is None:
            logger.debug("Ignoring unbound key %r", key)
            return None
        return self.dispatch(action)

    def press_all(self, keys: Iterable[str]) -> CalculatorState:
        for key in keys:
            self.press(key)
        return self.state

    def reset(self) -> CalculatorState:
        state = initial_state()
        with self._lock:
            self._state = state
        logger.info("Session reset")
        return state

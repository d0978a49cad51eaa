"""Calculator Engine — the key-event state machine behind the display.

Invariants:
    - Display is text, so partial entry ("3.") survives until the next key
    - Phase transitions: Idle -> PendingOperation (operator), PendingOperation -> Idle
      (evaluate), PendingOperation -> Fault (÷ by 0), Fault -> Idle (digit, clear,
      history selection), any -> Idle (clear)
    - Fault always pairs with display "Error" and never holds a pending operation
    - History only grows by successful evaluations, newest first, max 10 entries
    - Feedback never blocks or fails an event; history selection emits none

Design Decisions:
    - One method per key-event type, each runs to completion synchronously
    - Chained operators resolve left to right (3 + 4 × 2 = 14), no precedence
    - Settings held as configuration, replaced via update_settings()
"""

import logging
from operator import add, sub, mul, truediv

from calculator.core.calculator_state import (
    Phase, PendingOperation, Fault, IDLE, FAULT,
    HistoryEntry, CalculatorSettings, prepend_history,
)
from calculator.core.domain_types import (
    Operator, EngineStatus, DIGITS, ZERO_DISPLAY, ERROR_DISPLAY,
)
from calculator.core.errors import InvalidKeyError
from calculator.core.feedback_port import FeedbackPort
from calculator.core.number_format import parse_number, format_number, format_result

logger = logging.getLogger(__name__)

_APPLY = {
    Operator.ADD: add,
    Operator.SUBTRACT: sub,
    Operator.MULTIPLY: mul,
    Operator.DIVIDE: truediv,
}


class CalculatorEngine:
    """Four-function calculator driven by discrete key events."""

    def __init__(
        self,
        settings: CalculatorSettings | None = None,
        feedback: FeedbackPort | None = None,
    ):
        self._display: str = ZERO_DISPLAY
        self._phase: Phase = IDLE
        self._history: tuple[HistoryEntry, ...] = ()
        self._settings = settings or CalculatorSettings()
        self._feedback = feedback

    # ─── Observable state ────────────────────────────────────────

    @property
    def display(self) -> str:
        return self._display

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def status(self) -> EngineStatus:
        return self._phase.status

    @property
    def pending_operation(self) -> PendingOperation | None:
        if isinstance(self._phase, PendingOperation):
            return self._phase
        return None

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        return self._history

    @property
    def settings(self) -> CalculatorSettings:
        return self._settings

    def update_settings(self, settings: CalculatorSettings) -> None:
        """Replace settings. Takes effect from the next evaluation."""
        self._settings = settings

    # ─── Key events ──────────────────────────────────────────────

    def digit(self, d: str) -> None:
        """Append a digit; replaces a lone "0" or the Error sentinel."""
        if d not in DIGITS:
            raise InvalidKeyError(d)
        self._signal("digit")
        if self._display in (ZERO_DISPLAY, ERROR_DISPLAY):
            self._display = d
        else:
            self._display += d
        if isinstance(self._phase, Fault):
            self._phase = IDLE

    def decimal_point(self) -> None:
        self._signal("decimal_point")
        if isinstance(self._phase, Fault) or "." in self._display:
            return
        self._display += "."

    def choose_operator(self, op: Operator | str) -> None:
        """Select an operator, resolving any pending one first. No-op in Fault."""
        try:
            operator = Operator(op)
        except ValueError:
            raise InvalidKeyError(str(op)) from None
        self._signal("operator")
        if isinstance(self._phase, Fault):
            return
        if isinstance(self._phase, PendingOperation):
            self._resolve()
            if isinstance(self._phase, Fault):
                return
        self._phase = PendingOperation(operand=self._display, operator=operator)
        self._display = ZERO_DISPLAY

    def evaluate(self) -> None:
        self._signal("evaluate")
        self._resolve()

    def clear(self) -> None:
        """Reset display and pending operation. History is kept."""
        self._signal("clear")
        self._display = ZERO_DISPLAY
        self._phase = IDLE

    def toggle_sign(self) -> None:
        self._signal("toggle_sign")
        if self._display in (ZERO_DISPLAY, ERROR_DISPLAY):
            return
        self._display = format_number(-parse_number(self._display))

    def percentage(self) -> None:
        """Divide the display by 100. No-op while the Error sentinel is shown."""
        self._signal("percentage")
        if isinstance(self._phase, Fault):
            return
        self._display = format_number(parse_number(self._display) / 100)

    def select_history_entry(self, entry: HistoryEntry) -> None:
        """Recall a past result into the display. Pending operation is kept."""
        self._display = entry.result
        if isinstance(self._phase, Fault):
            self._phase = IDLE

    # ─── Internals ───────────────────────────────────────────────

    def _resolve(self) -> None:
        pending = self._phase
        if not isinstance(pending, PendingOperation):
            return

        left = parse_number(pending.operand)
        right = parse_number(self._display)
        if pending.operator is Operator.DIVIDE and right == 0:
            logger.info(
                "Division by zero", extra={"status": EngineStatus.FAULT.value},
            )
            self._display = ERROR_DISPLAY
            self._phase = FAULT
            return

        result = format_result(
            _APPLY[pending.operator](left, right), self._settings.precision,
        )
        entry = HistoryEntry(
            expression=f"{pending.preview} {self._display}", result=result,
        )
        self._history = prepend_history(self._history, entry)
        self._display = result
        self._phase = IDLE

    def _signal(self, event: str) -> None:
        if self._feedback is None or not self._settings.sound_enabled:
            return
        try:
            self._feedback(event)
        except Exception as e:
            logger.warning(f"Feedback signal failed for '{event}': {e}")

"""Calculator Registry — in-memory sessions, one engine + feedback port each.

Invariants:
    - A session id maps to exactly one CalculatorEngine for its whole lifetime
    - At most max_sessions live sessions; create() raises SessionLimitError beyond it
    - Unknown ids raise ResourceNotFoundError (never KeyError)
    - Key presses are routed through core.keypad — the registry holds no calculator logic

Design Decisions:
    - Module-level registry instance: single-process uvicorn, state lost on restart
      (persistence is out of scope)
"""

import logging
from dataclasses import dataclass
from uuid import uuid4

from calculator.config import get_settings
from calculator.core.calculator_engine import CalculatorEngine
from calculator.core.calculator_state import CalculatorSettings, HistoryEntry
from calculator.core.domain_types import CalculatorId
from calculator.core.errors import (
    ErrorContext, HistoryEntryNotFoundError, ResourceNotFoundError, SessionLimitError,
)
from calculator.core.keypad import press_key
from calculator.infrastructure.audio_feedback import ToneFeedback

logger = logging.getLogger(__name__)


@dataclass
class CalculatorSession:
    id: CalculatorId
    engine: CalculatorEngine
    feedback: ToneFeedback


class CalculatorRegistry:
    """Owns every live calculator session of the process."""

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max_sessions
        self._sessions: dict[CalculatorId, CalculatorSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, calculator_id: CalculatorId) -> bool:
        return calculator_id in self._sessions

    def create(self, settings: CalculatorSettings) -> CalculatorSession:
        if len(self._sessions) >= self.max_sessions:
            raise SessionLimitError(self.max_sessions)
        calculator_id = CalculatorId(uuid4())
        feedback = ToneFeedback(str(calculator_id))
        session = CalculatorSession(
            id=calculator_id,
            engine=CalculatorEngine(settings=settings, feedback=feedback),
            feedback=feedback,
        )
        self._sessions[calculator_id] = session
        logger.info(
            "Calculator created", extra={"calculator_id": str(calculator_id)},
        )
        return session

    def get(self, calculator_id: CalculatorId) -> CalculatorSession:
        session = self._sessions.get(calculator_id)
        if session is None:
            raise ResourceNotFoundError(
                "Calculator", str(calculator_id),
                ErrorContext(calculator_id=str(calculator_id)),
            )
        return session

    def delete(self, calculator_id: CalculatorId) -> None:
        self.get(calculator_id)
        del self._sessions[calculator_id]
        logger.info(
            "Calculator deleted", extra={"calculator_id": str(calculator_id)},
        )

    def press(self, calculator_id: CalculatorId, key: str) -> CalculatorSession:
        """Route one key press to the session's engine."""
        session = self.get(calculator_id)
        label = press_key(session.engine, key)
        logger.debug(
            f"Key {label} -> {session.engine.display}",
            extra={
                "calculator_id": str(calculator_id),
                "key": label,
                "status": session.engine.status.value,
            },
        )
        return session

    def select_history(self, calculator_id: CalculatorId, index: int) -> CalculatorSession:
        """Recall history entry #index (0 = newest) into the display."""
        session = self.get(calculator_id)
        history = session.engine.history
        if not 0 <= index < len(history):
            raise HistoryEntryNotFoundError(
                index, len(history), ErrorContext(calculator_id=str(calculator_id)),
            )
        entry: HistoryEntry = history[index]
        session.engine.select_history_entry(entry)
        return session

    def update_settings(
        self, calculator_id: CalculatorId, settings: CalculatorSettings,
    ) -> CalculatorSession:
        session = self.get(calculator_id)
        session.engine.update_settings(settings)
        return session


_registry: CalculatorRegistry | None = None


def get_registry() -> CalculatorRegistry:
    """Process-wide registry, created lazily from application settings."""
    global _registry
    if _registry is None:
        _registry = CalculatorRegistry(get_settings().max_sessions)
    return _registry

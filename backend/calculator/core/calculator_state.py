"""Calculator State — immutable records and the tagged engine phase.

Invariants:
    - Phase is exactly one of Idle | PendingOperation | Fault
    - PendingOperation carries operand AND operator (never one without the other)
    - HistoryEntry is frozen; history lists are newest first, at most MAX_HISTORY_ENTRIES
    - CalculatorSettings.precision is within MIN_PRECISION..MAX_PRECISION

Design Decisions:
    - Tagged variant over two nullable fields: "operand without operator" is unrepresentable
    - Frozen dataclasses, replaced wholesale on change (dataclasses.replace)
"""

from dataclasses import dataclass

from calculator.core.domain_types import (
    Operator, Precision, Theme, EngineStatus,
    MIN_PRECISION, MAX_PRECISION, DEFAULT_PRECISION, MAX_HISTORY_ENTRIES,
)
from calculator.core.errors import InvalidPrecisionError


# ─── Phase variant ───────────────────────────────────────────────

@dataclass(frozen=True)
class Idle:
    """No operation selected."""
    status = EngineStatus.IDLE


@dataclass(frozen=True)
class PendingOperation:
    """Operator chosen, waiting for the right-hand operand."""
    operand: str
    operator: Operator
    status = EngineStatus.PENDING

    @property
    def preview(self) -> str:
        """Text for the "previous value + operator" line above the display."""
        return f"{self.operand} {self.operator.value}"


@dataclass(frozen=True)
class Fault:
    """Division by zero happened; display holds the Error sentinel."""
    status = EngineStatus.FAULT


Phase = Idle | PendingOperation | Fault

IDLE = Idle()
FAULT = Fault()


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class HistoryEntry:
    """One completed evaluation."""
    expression: str
    result: str


@dataclass(frozen=True)
class CalculatorSettings:
    """Settings store snapshot. Only precision and sound_enabled reach the engine."""
    theme: Theme = Theme.GRADIENT
    sound_enabled: bool = True
    precision: Precision = Precision(DEFAULT_PRECISION)

    def __post_init__(self):
        if not MIN_PRECISION <= self.precision <= MAX_PRECISION:
            raise InvalidPrecisionError(self.precision)


def prepend_history(
    history: tuple[HistoryEntry, ...], entry: HistoryEntry,
) -> tuple[HistoryEntry, ...]:
    """Newest first, oldest dropped beyond MAX_HISTORY_ENTRIES. Pure."""
    return (entry, *history)[:MAX_HISTORY_ENTRIES]

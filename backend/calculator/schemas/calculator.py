"""Calculator Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - SettingsPayload.precision: 0–4
    - KeyPress.key: 1–16 chars, stripped, non-empty (routing decides if it is a real key)
    - CalculatorResponse mirrors the engine's observable state, nothing more

Design Decisions:
    - from_engine() classmethods keep conversion next to the schema, routes stay thin
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from calculator.core.calculator_engine import CalculatorEngine
from calculator.core.calculator_state import (
    CalculatorSettings, HistoryEntry, PendingOperation,
)
from calculator.core.domain_types import (
    EngineStatus, KeyKind, Operator, Precision, Theme, MIN_PRECISION, MAX_PRECISION,
)
from calculator.core.keypad import Key


class SettingsPayload(BaseModel):
    """Settings as read and written by the settings panel."""
    theme: Theme = Theme.GRADIENT
    sound_enabled: bool = True
    precision: int = Field(2, ge=MIN_PRECISION, le=MAX_PRECISION)

    def to_domain(self) -> CalculatorSettings:
        return CalculatorSettings(
            theme=self.theme,
            sound_enabled=self.sound_enabled,
            precision=Precision(self.precision),
        )

    @classmethod
    def from_domain(cls, settings: CalculatorSettings) -> "SettingsPayload":
        return cls(
            theme=settings.theme,
            sound_enabled=settings.sound_enabled,
            precision=settings.precision,
        )


class CalculatorCreate(BaseModel):
    """Session creation — settings optional, config defaults apply when omitted."""
    settings: SettingsPayload | None = None


class KeyPress(BaseModel):
    """One key event from the keypad or keyboard."""
    key: str = Field(min_length=1, max_length=16)

    @field_validator("key")
    @classmethod
    def strip_key(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("key cannot be empty or whitespace")
        return stripped


class HistoryEntryResponse(BaseModel):
    expression: str
    result: str

    @classmethod
    def from_domain(cls, entry: HistoryEntry) -> "HistoryEntryResponse":
        return cls(expression=entry.expression, result=entry.result)


class PendingOperationResponse(BaseModel):
    operand: str
    operator: Operator


class KeyResponse(BaseModel):
    """One keypad button for the presentation layer."""
    label: str
    kind: KeyKind
    wide: bool = False

    @classmethod
    def from_domain(cls, key: Key) -> "KeyResponse":
        return cls(label=key.label, kind=key.kind, wide=key.wide)


class CalculatorResponse(BaseModel):
    """Calculator snapshot — everything the presentation layer renders."""
    id: UUID
    display: str
    status: EngineStatus
    pending_operation: PendingOperationResponse | None = None
    preview: str | None = None
    history: list[HistoryEntryResponse]
    settings: SettingsPayload

    @classmethod
    def from_engine(
        cls, calculator_id: UUID, engine: CalculatorEngine,
    ) -> "CalculatorResponse":
        pending: PendingOperation | None = engine.pending_operation
        return cls(
            id=calculator_id,
            display=engine.display,
            status=engine.status,
            pending_operation=(
                PendingOperationResponse(
                    operand=pending.operand, operator=pending.operator,
                )
                if pending else None
            ),
            preview=pending.preview if pending else None,
            history=[HistoryEntryResponse.from_domain(e) for e in engine.history],
            settings=SettingsPayload.from_domain(engine.settings),
        )

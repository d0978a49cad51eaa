"""Calculator Events — key presses and history recall for one calculator.

Invariants:
    - One request applies exactly one event, then returns the full snapshot
    - Division by zero is NOT an HTTP error: 200 with display "Error", status "fault"
    - Unknown keys → 400 INVALID_KEY, unknown history index → 404
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from calculator.core.domain_types import CalculatorId
from calculator.schemas.calculator import (
    CalculatorResponse, HistoryEntryResponse, KeyPress,
)
from calculator.services.calculator_registry import CalculatorRegistry, get_registry

router = APIRouter(prefix="/api/v1/calculators", tags=["calculator-events"])


@router.post("/{calculator_id}/keys", response_model=CalculatorResponse)
async def press_key(
    calculator_id: UUID,
    body: KeyPress,
    registry: CalculatorRegistry = Depends(get_registry),
):
    """Apply one keypad label or keyboard alias."""
    session = registry.press(CalculatorId(calculator_id), body.key)
    return CalculatorResponse.from_engine(session.id, session.engine)


@router.get(
    "/{calculator_id}/history", response_model=list[HistoryEntryResponse],
)
async def get_history(
    calculator_id: UUID,
    registry: CalculatorRegistry = Depends(get_registry),
):
    """History entries, newest first."""
    session = registry.get(CalculatorId(calculator_id))
    return [HistoryEntryResponse.from_domain(e) for e in session.engine.history]


@router.post(
    "/{calculator_id}/history/{index}/select",
    response_model=CalculatorResponse,
)
async def select_history_entry(
    calculator_id: UUID,
    index: int,
    registry: CalculatorRegistry = Depends(get_registry),
):
    session = registry.select_history(CalculatorId(calculator_id), index)
    return CalculatorResponse.from_engine(session.id, session.engine)

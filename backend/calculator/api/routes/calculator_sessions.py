"""Calculator Sessions — create, read, delete calculators and edit their settings.

Invariants:
    - Every calculator lives in the process registry (in-memory, lost on restart)
    - Settings are validated by Pydantic before reaching the route handler
    - Unknown ids surface as 404 through the CalculatorError handler

Design Decisions:
    - Registry injected with Depends(get_registry): tests override it per test
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from calculator.config import Settings, get_settings
from calculator.core.domain_types import CalculatorId
from calculator.schemas.calculator import (
    CalculatorCreate, CalculatorResponse, SettingsPayload,
)
from calculator.services.calculator_registry import CalculatorRegistry, get_registry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/calculators", tags=["calculators"])


def _default_settings(config: Settings) -> SettingsPayload:
    return SettingsPayload(
        theme=config.default_theme,
        sound_enabled=config.default_sound_enabled,
        precision=config.default_precision,
    )


@router.post(
    "", response_model=CalculatorResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_calculator(
    body: CalculatorCreate | None = None,
    registry: CalculatorRegistry = Depends(get_registry),
    config: Settings = Depends(get_settings),
):
    """Create a calculator in the Idle state with display "0"."""
    payload = (body.settings if body else None) or _default_settings(config)
    session = registry.create(payload.to_domain())
    return CalculatorResponse.from_engine(session.id, session.engine)


@router.get("/{calculator_id}", response_model=CalculatorResponse)
async def get_calculator(
    calculator_id: UUID,
    registry: CalculatorRegistry = Depends(get_registry),
):
    session = registry.get(CalculatorId(calculator_id))
    return CalculatorResponse.from_engine(session.id, session.engine)


@router.delete("/{calculator_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_calculator(
    calculator_id: UUID,
    registry: CalculatorRegistry = Depends(get_registry),
):
    registry.delete(CalculatorId(calculator_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{calculator_id}/settings", response_model=SettingsPayload)
async def get_calculator_settings(
    calculator_id: UUID,
    registry: CalculatorRegistry = Depends(get_registry),
):
    session = registry.get(CalculatorId(calculator_id))
    return SettingsPayload.from_domain(session.engine.settings)


@router.put("/{calculator_id}/settings", response_model=SettingsPayload)
async def update_calculator_settings(
    calculator_id: UUID,
    body: SettingsPayload,
    registry: CalculatorRegistry = Depends(get_registry),
):
    """Replace settings. Precision applies to the next evaluation only."""
    session = registry.update_settings(CalculatorId(calculator_id), body.to_domain())
    logger.info(
        f"Settings updated (precision={body.precision}, sound={body.sound_enabled})",
        extra={"calculator_id": str(calculator_id)},
    )
    return SettingsPayload.from_domain(session.engine.settings)

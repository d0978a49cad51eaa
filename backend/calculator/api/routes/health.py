"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up
"""

import logging
from fastapi import APIRouter, Depends, status

from calculator.services.calculator_registry import CalculatorRegistry, get_registry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(registry: CalculatorRegistry = Depends(get_registry)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "calculator-api",
        "version": "1.0.0",
        "active_sessions": len(registry),
    }

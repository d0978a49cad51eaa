"""Keypad Layout — read-only button table for the presentation layer."""

from fastapi import APIRouter

from calculator.core.keypad import KEYPAD, KEY_ALIASES
from calculator.schemas.calculator import KeyResponse

router = APIRouter(prefix="/api/v1/keypad", tags=["keypad"])


@router.get("", response_model=list[KeyResponse])
async def get_keypad():
    """Buttons in row order, four per row ("0" is wide)."""
    return [KeyResponse.from_domain(k) for k in KEYPAD]


@router.get("/aliases")
async def get_key_aliases() -> dict[str, str]:
    """Keyboard keys accepted in place of keypad labels."""
    return dict(KEY_ALIASES)

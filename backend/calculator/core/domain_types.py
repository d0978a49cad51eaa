"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CalculatorId wraps UUID — never use bare UUID in domain logic
    - Precision is bounded 0–4 (MIN_PRECISION..MAX_PRECISION)
    - Operators, themes and engine status encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - Operator values are the keypad glyphs ("×", "÷"), so history text reads like the keys
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CalculatorId = NewType("CalculatorId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Precision = NewType("Precision", int)   # 0–4 decimal places

MIN_PRECISION: int = 0
MAX_PRECISION: int = 4
DEFAULT_PRECISION: int = 2

MAX_HISTORY_ENTRIES: int = 10

ZERO_DISPLAY: str = "0"
ERROR_DISPLAY: str = "Error"
DIGITS: frozenset[str] = frozenset("0123456789")


# ─── Enums ───────────────────────────────────────────────────────

class Operator(str, Enum):
    """The four binary operators. Values are the glyphs shown on the keypad."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"


class EngineStatus(str, Enum):
    """Engine phases exposed to the presentation layer."""
    IDLE = "idle"
    PENDING = "pending"
    FAULT = "fault"


class Theme(str, Enum):
    """Presentation themes. The engine never reads this value."""
    LIGHT = "light"
    DARK = "dark"
    GRADIENT = "gradient"


class KeyKind(str, Enum):
    """Keypad button groups, used by the presentation layer for styling."""
    NUMBER = "number"
    OPERATION = "operation"
    OPERATOR = "operator"
    EQUALS = "equals"

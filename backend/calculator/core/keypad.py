"""Keypad — button layout and explicit label -> engine operation routing.

Invariants:
    - KEYPAD lists the 19 buttons in row order (4 columns; "0" spans two)
    - Every label maps to exactly one engine operation — no getattr magic
    - The routing table is built once at import; each action takes the engine
    - Aliases normalize keyboard input onto keypad labels before routing
    - Unknown labels raise InvalidKeyError before the engine is touched
"""

from dataclasses import dataclass
from typing import Callable

from calculator.core.calculator_engine import CalculatorEngine
from calculator.core.domain_types import DIGITS, KeyKind, Operator
from calculator.core.errors import InvalidKeyError


@dataclass(frozen=True)
class Key:
    label: str
    kind: KeyKind
    wide: bool = False


KEYPAD: tuple[Key, ...] = (
    Key("AC", KeyKind.OPERATION),
    Key("±", KeyKind.OPERATION),
    Key("%", KeyKind.OPERATION),
    Key("÷", KeyKind.OPERATOR),
    Key("7", KeyKind.NUMBER),
    Key("8", KeyKind.NUMBER),
    Key("9", KeyKind.NUMBER),
    Key("×", KeyKind.OPERATOR),
    Key("4", KeyKind.NUMBER),
    Key("5", KeyKind.NUMBER),
    Key("6", KeyKind.NUMBER),
    Key("-", KeyKind.OPERATOR),
    Key("1", KeyKind.NUMBER),
    Key("2", KeyKind.NUMBER),
    Key("3", KeyKind.NUMBER),
    Key("+", KeyKind.OPERATOR),
    Key("0", KeyKind.NUMBER, wide=True),
    Key(".", KeyKind.NUMBER),
    Key("=", KeyKind.EQUALS),
)

KEY_ALIASES: dict[str, str] = {
    "*": "×",
    "x": "×",
    "/": "÷",
    "Enter": "=",
    "Escape": "AC",
    "c": "AC",
    "C": "AC",
    ",": ".",
}


def normalize_key(key: str) -> str:
    """Map keyboard aliases onto keypad labels. Unknown keys pass through."""
    return KEY_ALIASES.get(key, key)


_ROUTES: dict[str, Callable[[CalculatorEngine], None]] = {
    "AC": CalculatorEngine.clear,
    "±": CalculatorEngine.toggle_sign,
    "%": CalculatorEngine.percentage,
    ".": CalculatorEngine.decimal_point,
    "=": CalculatorEngine.evaluate,
    **{
        op.value: (lambda engine, op=op: engine.choose_operator(op))
        for op in Operator
    },
    **{d: (lambda engine, d=d: engine.digit(d)) for d in DIGITS},
}


def press_key(engine: CalculatorEngine, key: str) -> str:
    """Apply one key press to the engine. Returns the normalized label."""
    label = normalize_key(key)
    action = _ROUTES.get(label)
    if action is None:
        raise InvalidKeyError(key)
    action(engine)
    return label

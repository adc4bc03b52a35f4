"""Keypad chain press calculator.

Exposes public APIs for the keypad layouts, path planning, press counting
through chains of directional-keypad robots, and code complexity sums.
"""

from .types import Position, Move
from .pad import Pad, NUMERIC_PAD, DIRECTIONAL_PAD, parse_pad
from .planner import DIRECTIONAL_MOVES, plan, plan_numeric, plan_directional
from .cost import PressCounter
from .solver import (
    DEPTH_PRESETS,
    MAX_DEPTH,
    CodeError,
    CodeResult,
    parse_code,
    numeric_value,
    get_button_presses,
    complexity,
    solve_codes,
    total_complexity,
    expand_presses,
    parse_codes,
    load_codes_from_file,
)

__all__ = [
    "Position",
    "Move",
    "Pad",
    "NUMERIC_PAD",
    "DIRECTIONAL_PAD",
    "parse_pad",
    "DIRECTIONAL_MOVES",
    "plan",
    "plan_numeric",
    "plan_directional",
    "PressCounter",
    "DEPTH_PRESETS",
    "MAX_DEPTH",
    "CodeError",
    "CodeResult",
    "parse_code",
    "numeric_value",
    "get_button_presses",
    "complexity",
    "solve_codes",
    "total_complexity",
    "expand_presses",
    "parse_codes",
    "load_codes_from_file",
]

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .cost import PressCounter
from .pad import DIRECTIONAL_PAD, NUMERIC_PAD
from .planner import plan
from .types import Move, glyphs_of

logger = logging.getLogger(__name__)

DEPTH_PRESETS = {
    "part1": 2,
    "part2": 25,
}

# Upper bound for depths taken from user input; press counts grow about 2.5x per level
MAX_DEPTH = 1000


class CodeError(ValueError):
    pass


@dataclass(frozen=True)
class CodeResult:
    code: str
    presses: int
    value: int

    @property
    def complexity(self) -> int:
        return self.presses * self.value

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "presses": self.presses,
            "value": self.value,
            "complexity": self.complexity,
        }


def parse_code(text: str) -> str:
    code = text.strip()
    if not code:
        raise CodeError("Empty code")
    for ch in code:
        if ch not in NUMERIC_PAD.positions:
            raise CodeError(f"Code {code!r} contains {ch!r}, which is not on the numeric pad")
    return code


def numeric_value(code: str) -> int:
    return _value_of(parse_code(code))


def _value_of(code: str) -> int:
    digits = code[:-1] if code.endswith("A") else code
    if not digits.isdigit():
        raise CodeError(f"Code {code!r} has no numeric part")
    return int(digits)


def _check_depth(depth: int) -> None:
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")


def get_button_presses(code: str, depth: int, counter: Optional[PressCounter] = None) -> int:
    code = parse_code(code)
    _check_depth(depth)
    return _count_presses(code, depth, counter if counter is not None else PressCounter())


def _count_presses(code: str, depth: int, counter: PressCounter) -> int:
    return sum(
        counter.move_count_numpad(prev, key, depth)
        for prev, key in zip("A" + code, code)
    )


def complexity(code: str, depth: int, counter: Optional[PressCounter] = None) -> int:
    code = parse_code(code)
    _check_depth(depth)
    value = _value_of(code)
    return _count_presses(code, depth, counter if counter is not None else PressCounter()) * value


def solve_codes(codes: Iterable[str], depth: int, counter: Optional[PressCounter] = None) -> List[CodeResult]:
    _check_depth(depth)
    if counter is None:
        counter = PressCounter()
    results: List[CodeResult] = []
    for raw in codes:
        code = parse_code(raw)
        result = CodeResult(
            code=code,
            value=_value_of(code),
            presses=_count_presses(code, depth, counter),
        )
        logger.debug("%s at depth %d: %d presses, complexity %d", code, depth, result.presses, result.complexity)
        results.append(result)
    logger.debug("cache holds %d transitions (%d hits, %d misses)", len(counter), counter.hits, counter.misses)
    return results


def total_complexity(codes: Iterable[str], depth: int, counter: Optional[PressCounter] = None) -> int:
    return sum(result.complexity for result in solve_codes(codes, depth, counter))


def expand_presses(code: str, depth: int) -> str:
    """Literal human press string for ``code``.

    Builds every layer explicitly, so the result grows roughly 2.5x per level.
    Meant for small depths; use ``get_button_presses`` for counting.
    """
    code = parse_code(code)
    _check_depth(depth)

    sequence: List[Move] = []
    for prev, key in zip("A" + code, code):
        sequence.extend(plan(NUMERIC_PAD, prev, key))

    for _ in range(depth):
        layer: List[Move] = []
        prev_move = Move.ACTIVATE
        for move in sequence:
            layer.extend(plan(DIRECTIONAL_PAD, prev_move.value, move.value))
            prev_move = move
        sequence = layer

    return glyphs_of(sequence)


def parse_codes(text: str) -> List[str]:
    return [parse_code(line) for line in text.splitlines() if line.strip() != ""]


def load_codes_from_file(path: str | Path) -> List[str]:
    text = Path(path).read_text(encoding="utf-8")
    return parse_codes(text)

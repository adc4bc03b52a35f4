from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def manhattan_distance(self, other: "Position") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def move(self, dr: int, dc: int) -> "Position":
        return Position(self.row + dr, self.col + dc)


class Move(Enum):
    """A press on a directional keypad, named by the glyph printed on the key."""

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"
    ACTIVATE = "A"

    @property
    def delta(self) -> Tuple[int, int]:
        return STEP_DELTAS[self]


# Row/column deltas; rows grow downwards
STEP_DELTAS = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
    Move.ACTIVATE: (0, 0),
}


def moves_from_glyphs(glyphs: str) -> Tuple[Move, ...]:
    return tuple(Move(ch) for ch in glyphs)


def glyphs_of(moves) -> str:
    return "".join(m.value for m in moves)

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .types import Move, Position


GAP_CHAR = "#"

NUMERIC_LAYOUT = """
789
456
123
#0A
"""

DIRECTIONAL_LAYOUT = """
#^A
<v>
"""


@dataclass(frozen=True)
class Pad:
    name: str
    width: int
    height: int
    positions: Dict[str, Position]
    keys_by_position: Dict[Position, str]
    gap: Position

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    @property
    def keys(self) -> List[str]:
        return list(self.positions)

    def coordinate_of(self, key: str) -> Position:
        try:
            return self.positions[key]
        except KeyError:
            raise KeyError(f"{key!r} is not a key on the {self.name} pad") from None

    def key_of(self, pos: Position) -> Optional[str]:
        if not self.in_bounds(pos):
            raise KeyError(f"{pos} is outside the {self.name} pad")
        if pos == self.gap:
            return None
        return self.keys_by_position[pos]

    def path_cells(self, start_key: str, moves: Iterable[Move]) -> List[Position]:
        """Every cell the arm occupies while executing ``moves`` from ``start_key``."""
        pos = self.coordinate_of(start_key)
        cells = [pos]
        for move in moves:
            pos = pos.move(*move.delta)
            cells.append(pos)
        return cells


def parse_pad(name: str, layout: str) -> Pad:
    lines = [line.strip() for line in layout.splitlines() if line.strip() != ""]
    if not lines:
        raise ValueError("Empty pad layout")

    width = max(len(line) for line in lines)
    positions: Dict[str, Position] = {}
    gap: Position | None = None

    for row, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"Pad row {row} has {len(line)} cells, expected {width}")
        for col, ch in enumerate(line):
            pos = Position(row, col)
            if ch == GAP_CHAR:
                if gap is not None:
                    raise ValueError("Pad layout must have exactly one gap")
                gap = pos
            elif ch in positions:
                raise ValueError(f"Duplicate key {ch!r} in pad layout")
            else:
                positions[ch] = pos

    if gap is None:
        raise ValueError(f"Pad layout must mark its gap with {GAP_CHAR!r}")

    return Pad(
        name=name,
        width=width,
        height=len(lines),
        positions=positions,
        keys_by_position={pos: key for key, pos in positions.items()},
        gap=gap,
    )


NUMERIC_PAD = parse_pad("numeric", NUMERIC_LAYOUT)
DIRECTIONAL_PAD = parse_pad("directional", DIRECTIONAL_LAYOUT)

"""Shortest press sequences for a single arm moving between two keys.

Only two shapes of shortest path are ever produced: all horizontal presses
followed by all vertical presses, or the reverse.

Ordering rule, applied to the numeric pad:

- moving left: horizontal run first, unless that corner is the gap
- otherwise: vertical run first, unless that corner is the gap

The directional pad has five keys, so its twenty non-trivial paths are kept
as an explicit table instead.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .pad import DIRECTIONAL_PAD, NUMERIC_PAD, Pad
from .types import Move, Position, moves_from_glyphs


# (from, to) -> presses, without the trailing activate
_DIRECTIONAL_GLYPHS: Dict[Tuple[str, str], str] = {
    ("A", "A"): "",
    ("A", "^"): "<",
    ("A", ">"): "v",
    ("A", "v"): "<v",
    ("A", "<"): "v<<",
    ("^", "^"): "",
    ("^", "A"): ">",
    ("^", "v"): "v",
    ("^", ">"): "v>",
    ("^", "<"): "v<",
    ("<", "<"): "",
    ("<", "v"): ">",
    ("<", ">"): ">>",
    ("<", "^"): ">^",
    ("<", "A"): ">>^",
    ("v", "v"): "",
    ("v", "<"): "<",
    ("v", ">"): ">",
    ("v", "^"): "^",
    ("v", "A"): "^>",
    (">", ">"): "",
    (">", "v"): "<",
    (">", "<"): "<<",
    (">", "A"): "^",
    (">", "^"): "<^",
}

DIRECTIONAL_MOVES: Dict[Tuple[Move, Move], Tuple[Move, ...]] = {
    (Move(src), Move(dst)): moves_from_glyphs(glyphs)
    for (src, dst), glyphs in _DIRECTIONAL_GLYPHS.items()
}


def _axis_runs(src: Position, dst: Position) -> Tuple[List[Move], List[Move]]:
    dr = dst.row - src.row
    dc = dst.col - src.col
    horizontal = [Move.RIGHT if dc > 0 else Move.LEFT] * abs(dc)
    vertical = [Move.DOWN if dr > 0 else Move.UP] * abs(dr)
    return horizontal, vertical


def moves_by_rule(pad: Pad, src_key: str, dst_key: str) -> List[Move]:
    src = pad.coordinate_of(src_key)
    dst = pad.coordinate_of(dst_key)
    horizontal, vertical = _axis_runs(src, dst)

    horizontal_first = dst.col < src.col
    if horizontal_first and Position(src.row, dst.col) == pad.gap:
        horizontal_first = False
    elif not horizontal_first and Position(dst.row, src.col) == pad.gap:
        horizontal_first = True

    if horizontal_first:
        return horizontal + vertical
    return vertical + horizontal


def _ensure_valid(pad: Pad, src_key: str, dst_key: str, moves: List[Move]) -> None:
    cells = pad.path_cells(src_key, moves)
    if pad.gap in cells:
        raise RuntimeError(f"Path from {src_key!r} on the {pad.name} pad crosses the gap")
    start = pad.coordinate_of(src_key)
    end = pad.coordinate_of(dst_key)
    if cells[-1] != end or len(moves) != start.manhattan_distance(end):
        raise RuntimeError(f"Path from {src_key!r} to {dst_key!r} on the {pad.name} pad is not a shortest path")


def plan_numeric(src_key: str, dst_key: str) -> List[Move]:
    moves = moves_by_rule(NUMERIC_PAD, src_key, dst_key)
    _ensure_valid(NUMERIC_PAD, src_key, dst_key, moves)
    return moves + [Move.ACTIVATE]


def plan_directional(src: Move, dst: Move) -> List[Move]:
    return list(DIRECTIONAL_MOVES[(src, dst)]) + [Move.ACTIVATE]


def plan(pad: Pad, src_key: str, dst_key: str) -> List[Move]:
    """Presses one arm makes to travel from ``src_key`` to ``dst_key`` and press it."""
    if pad is DIRECTIONAL_PAD:
        return plan_directional(Move(src_key), Move(dst_key))
    if pad is NUMERIC_PAD:
        return plan_numeric(src_key, dst_key)
    raise ValueError(f"No planner for the {pad.name} pad")

"""Human press counts through a chain of directional-keypad robots.

Depth 0 means the human types the sequence directly. At depth ``d`` every
press in the sequence is made by a robot arm whose own keypad is driven
from depth ``d - 1``. Each arm starts on ``A`` and returns to ``A`` after
every press it is asked to make, so the cost of one transition depends only
on ``(depth, from, to)`` and can be cached on that key.

The cache is filled one depth at a time, from depth 1 upwards, so a deep
chain never recurses.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Tuple

from .planner import DIRECTIONAL_MOVES, plan_directional, plan_numeric
from .types import Move

logger = logging.getLogger(__name__)

CacheKey = Tuple[int, Move, Move]


class PressCounter:
    def __init__(self) -> None:
        self._cache: Dict[CacheKey, int] = {}
        self._filled_depth = 0
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        logger.debug("dropping %d cached transitions", len(self._cache))
        self._cache.clear()
        self._filled_depth = 0
        self.hits = 0
        self.misses = 0

    def _fill(self, depth: int) -> None:
        for level in range(self._filled_depth + 1, depth + 1):
            for src, dst in DIRECTIONAL_MOVES:
                if src == dst:
                    continue
                self.misses += 1
                self._cache[(level, src, dst)] = self._sequence_cost(level - 1, plan_directional(src, dst))
            self._filled_depth = level
        logger.debug("transition table filled to depth %d", self._filled_depth)

    def _sequence_cost(self, depth: int, sequence: Iterable[Move]) -> int:
        # Assumes every level up to ``depth`` is already filled
        if depth == 0:
            return sum(1 for _ in sequence)
        total = 0
        prev = Move.ACTIVATE
        for nxt in sequence:
            if nxt == prev:
                total += 1
            else:
                self.hits += 1
                total += self._cache[(depth, prev, nxt)]
            prev = nxt
        return total

    def cost(self, depth: int, sequence: Iterable[Move]) -> int:
        """Fewest human presses that make the depth-``depth`` arm emit ``sequence``."""
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        if depth > self._filled_depth:
            self._fill(depth)
        return self._sequence_cost(depth, sequence)

    def move_count_dirpad(self, src: Move, dst: Move, depth: int) -> int:
        if src == dst:
            return 1
        if depth < 1:
            raise ValueError(f"moving between directional keys needs depth >= 1, got {depth}")
        if depth > self._filled_depth:
            self._fill(depth)
        self.hits += 1
        return self._cache[(depth, src, dst)]

    def move_count_numpad(self, src_key: str, dst_key: str, depth: int) -> int:
        # The numeric arm is driven directly by the depth-``depth`` sequence
        return self.cost(depth, plan_numeric(src_key, dst_key))

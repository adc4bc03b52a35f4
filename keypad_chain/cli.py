from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .cost import PressCounter
from .solver import (
    DEPTH_PRESETS,
    MAX_DEPTH,
    CodeError,
    expand_presses,
    load_codes_from_file,
    solve_codes,
)

logger = logging.getLogger(__name__)

# Literal press strings grow too fast to print beyond this
MAX_SHOWN_DEPTH = 3


def _depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}") from None
    if depth < 0:
        raise argparse.ArgumentTypeError("depth must be non-negative")
    if depth > MAX_DEPTH:
        raise argparse.ArgumentTypeError(f"depth must be at most {MAX_DEPTH}")
    return depth


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count human key presses for door codes typed through a robot keypad chain.")
    parser.add_argument("codes", type=str, help="Path to a file with one code per line")
    depth_group = parser.add_mutually_exclusive_group()
    depth_group.add_argument("--depth", type=_depth, help="Number of directional-keypad robots in the chain")
    depth_group.add_argument("--preset", choices=sorted(DEPTH_PRESETS), help="Named chain depth")
    parser.add_argument("--show-presses", action="store_true", help=f"Print the literal press string (depth <= {MAX_SHOWN_DEPTH})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if args.depth is not None:
        depth = args.depth
    else:
        depth = DEPTH_PRESETS[args.preset or "part1"]

    counter = PressCounter()
    try:
        codes = load_codes_from_file(Path(args.codes))
        results = solve_codes(codes, depth, counter)
    except (OSError, CodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for result in results:
        print(f"{result.code}: {result.presses} presses x {result.value} = {result.complexity}")
        if args.show_presses:
            if depth <= MAX_SHOWN_DEPTH:
                print(f"  {expand_presses(result.code, depth)}")
            else:
                logger.warning("not expanding presses at depth %d", depth)
    print(f"Total complexity at depth {depth}: {sum(r.complexity for r in results)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

import itertools

import pytest

from keypad_chain.pad import DIRECTIONAL_PAD, NUMERIC_PAD, parse_pad
from keypad_chain.planner import DIRECTIONAL_MOVES, moves_by_rule, plan, plan_directional, plan_numeric
from keypad_chain.types import Move, glyphs_of

NUMERIC_PAIRS = list(itertools.product(NUMERIC_PAD.keys, repeat=2))
DIRECTIONAL_PAIRS = list(itertools.product(list(Move), repeat=2))


def direction_changes(moves):
    motion = [m for m in moves if m is not Move.ACTIVATE]
    return sum(1 for a, b in zip(motion, motion[1:]) if a != b)


def test_directional_table_is_complete():
    assert len(DIRECTIONAL_MOVES) == 25
    for move in Move:
        assert DIRECTIONAL_MOVES[(move, move)] == ()


@pytest.mark.parametrize('src,dst', DIRECTIONAL_PAIRS)
def test_directional_entry_is_shortest_and_clear(src, dst):
    moves = DIRECTIONAL_MOVES[(src, dst)]
    start = DIRECTIONAL_PAD.coordinate_of(src.value)
    end = DIRECTIONAL_PAD.coordinate_of(dst.value)
    assert len(moves) == start.manhattan_distance(end)
    cells = DIRECTIONAL_PAD.path_cells(src.value, moves)
    assert cells[-1] == end
    assert DIRECTIONAL_PAD.gap not in cells
    assert direction_changes(moves) <= 1


@pytest.mark.parametrize('src,dst', DIRECTIONAL_PAIRS)
def test_directional_table_agrees_with_ordering_rule(src, dst):
    assert list(DIRECTIONAL_MOVES[(src, dst)]) == moves_by_rule(DIRECTIONAL_PAD, src.value, dst.value)


@pytest.mark.parametrize('src,dst', NUMERIC_PAIRS)
def test_numeric_plan_is_shortest_and_clear(src, dst):
    presses = plan_numeric(src, dst)
    assert presses[-1] is Move.ACTIVATE
    moves = presses[:-1]
    start = NUMERIC_PAD.coordinate_of(src)
    end = NUMERIC_PAD.coordinate_of(dst)
    assert len(moves) == start.manhattan_distance(end)
    cells = NUMERIC_PAD.path_cells(src, moves)
    assert cells[-1] == end
    assert NUMERIC_PAD.gap not in cells
    assert direction_changes(moves) <= 1


@pytest.mark.parametrize('src,dst,expected', [
    ('A', '0', '<A'),
    ('0', '2', '^A'),
    ('2', '9', '^^>A'),
    ('9', 'A', 'vvvA'),
    # bottom row into the left column goes up first to dodge the gap
    ('A', '1', '^<<A'),
    ('0', '7', '^^^<A'),
    ('A', '4', '^^<<A'),
    # left column into the bottom row goes right first
    ('1', 'A', '>>vA'),
    ('7', '0', '>vvvA'),
    ('4', '0', '>vvA'),
    # unobstructed moves: left goes horizontal first, right goes vertical first
    ('9', '1', '<<vvA'),
    ('3', '7', '<<^^A'),
    ('1', '9', '^^>>A'),
    ('8', '3', 'vv>A'),
    ('5', '5', 'A'),
])
def test_numeric_tie_break(src, dst, expected):
    assert glyphs_of(plan_numeric(src, dst)) == expected


@pytest.mark.parametrize('src,dst,expected', [
    ('A', '<', 'v<<A'),
    ('<', 'A', '>>^A'),
    ('^', '<', 'v<A'),
    ('<', '^', '>^A'),
    ('A', 'v', '<vA'),
    ('v', 'A', '^>A'),
    ('^', '>', 'v>A'),
    ('>', '^', '<^A'),
    ('v', 'v', 'A'),
])
def test_directional_plan(src, dst, expected):
    assert glyphs_of(plan_directional(Move(src), Move(dst))) == expected
    assert glyphs_of(plan(DIRECTIONAL_PAD, src, dst)) == expected


def test_plan_dispatches_on_pad():
    assert plan(NUMERIC_PAD, 'A', '0') == plan_numeric('A', '0')
    with pytest.raises(ValueError):
        plan(parse_pad('other', '#A'), 'A', 'A')


def test_path_check_rejects_detours_and_the_gap():
    from keypad_chain.planner import _ensure_valid

    with pytest.raises(RuntimeError):
        _ensure_valid(NUMERIC_PAD, 'A', '1', [Move.LEFT, Move.LEFT, Move.UP])
    with pytest.raises(RuntimeError):
        _ensure_valid(NUMERIC_PAD, '5', '6', [Move.UP, Move.RIGHT, Move.DOWN])
    _ensure_valid(NUMERIC_PAD, '5', '6', [Move.RIGHT])

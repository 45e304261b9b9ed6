"""Tests for the SegmentArena and BodyChain modules."""

import pytest

from chain_snake.chain import BodyChain, SegmentArena
from chain_snake.direction import Direction


def _chain(cells):
    chain = BodyChain(SegmentArena(), cells[0])
    for cell in cells[1:]:
        chain.append(cell)
    return chain


class TestSegmentArena:
    def test_spawn_assigns_distinct_handles(self):
        arena = SegmentArena()
        a = arena.spawn((0, 0))
        b = arena.spawn((0, 1))
        assert a != b
        assert arena.position(b) == (0, 1)
        assert len(arena) == 2

    def test_move(self):
        arena = SegmentArena()
        h = arena.spawn((0, 0))
        arena.move(h, (3, 4))
        assert arena.position(h) == (3, 4)

    def test_handles_not_reused(self):
        arena = SegmentArena()
        h = arena.spawn((0, 0))
        arena.release(h)
        assert arena.spawn((1, 1)) != h

    def test_unknown_handle_raises(self):
        arena = SegmentArena()
        with pytest.raises(KeyError, match="does not exist"):
            arena.position(7)
        with pytest.raises(KeyError, match="does not exist"):
            arena.move(7, (0, 0))
        with pytest.raises(KeyError, match="does not exist"):
            arena.release(7)

    def test_released_handle_raises(self):
        arena = SegmentArena()
        h = arena.spawn((0, 0))
        arena.release(h)
        assert h not in arena
        with pytest.raises(KeyError):
            arena.position(h)


class TestBodyChainInit:
    def test_head_only(self):
        chain = BodyChain(SegmentArena(), (4, 5))
        assert len(chain) == 1
        assert chain.head == chain.tail
        assert chain.head_cell == (4, 5)
        assert chain.cells() == [(4, 5)]

    def test_append(self):
        chain = _chain([(4, 5), (4, 4)])
        assert len(chain) == 2
        assert chain.tail_cell == (4, 4)
        assert len(set(chain)) == 2


class TestBodyChainAdvance:
    def test_single_segment_moves_head_only(self):
        chain = BodyChain(SegmentArena(), (4, 5))
        old_tail = chain.advance(Direction.UP)
        assert chain.cells() == [(3, 5)]
        assert old_tail == (4, 5)

    def test_positions_shift_by_one_slot(self):
        chain = _chain([(5, 5), (5, 4), (5, 3), (5, 2)])
        chain.advance(Direction.RIGHT)
        assert chain.cells() == [(5, 6), (5, 5), (5, 4), (5, 3)]

    def test_turn_propagates(self):
        chain = _chain([(5, 5), (5, 4), (5, 3)])
        chain.advance(Direction.DOWN)
        assert chain.cells() == [(6, 5), (5, 5), (5, 4)]
        chain.advance(Direction.LEFT)
        assert chain.cells() == [(6, 4), (6, 5), (5, 5)]

    def test_chain_does_not_collapse(self):
        chain = _chain([(5, 5), (5, 4), (5, 3), (5, 2), (5, 1)])
        for _ in range(3):
            chain.advance(Direction.RIGHT)
        cells = chain.cells()
        assert len(set(cells)) == len(cells)

    def test_returns_vacated_tail(self):
        chain = _chain([(5, 5), (5, 4), (5, 3)])
        assert chain.advance(Direction.RIGHT) == (5, 3)

    def test_gap_after_growth_closes(self):
        # New tail two cells behind its predecessor.
        chain = _chain([(5, 7), (5, 6), (5, 4)])
        chain.advance(Direction.RIGHT)
        assert chain.cells() == [(5, 8), (5, 7), (5, 6)]

    def test_none_direction_holds_still(self):
        chain = _chain([(5, 5), (5, 4)])
        chain.advance(Direction.NONE)
        assert chain.cells() == [(5, 5), (5, 4)]

    def test_handles_keep_order(self):
        chain = _chain([(5, 5), (5, 4), (5, 3)])
        before = list(chain)
        chain.advance(Direction.UP)
        assert list(chain) == before


class TestBodyChainTruncate:
    def test_truncate_keeps_head(self):
        chain = _chain([(5, 5), (5, 4), (5, 3)])
        head = chain.head
        chain.truncate()
        assert list(chain) == [head]
        assert chain.head_cell == (5, 5)
        assert len(chain.arena) == 1

    def test_truncate_head_only_is_noop(self):
        chain = BodyChain(SegmentArena(), (1, 1))
        chain.truncate()
        assert len(chain) == 1


class TestBodyChainSerialization:
    def test_to_dict(self):
        chain = _chain([(5, 5), (5, 4)])
        d = chain.to_dict()
        assert d["cells"] == [[5, 5], [5, 4]]
        assert len(d["handles"]) == 2

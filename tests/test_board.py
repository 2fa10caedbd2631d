"""Tests for board geometry and free-spot sampling."""

import numpy as np
import pytest

from term_snake.board import free_spot, interior_mask, on_border


class TestBorder:
    @pytest.mark.parametrize(
        ("x", "y"), [(0, 3), (9, 3), (4, 0), (4, 5), (-1, 2), (10, 2)],
    )
    def test_border_cells(self, x, y):
        assert on_border(10, 6, x, y)

    @pytest.mark.parametrize(("x", "y"), [(1, 1), (8, 4), (5, 3)])
    def test_interior_cells(self, x, y):
        assert not on_border(10, 6, x, y)


class TestInteriorMask:
    def test_shape_and_ring(self):
        mask = interior_mask(5, 4)
        assert mask.shape == (4, 5)
        assert mask.sum() == 3 * 2
        assert not mask[0].any()
        assert not mask[:, 0].any()

    def test_occupied_cells_removed(self):
        mask = interior_mask(5, 5, [(1, 1), (2, 3), (0, 0), (99, 99)])
        assert not mask[1, 1]
        assert not mask[3, 2]
        assert mask.sum() == 9 - 2

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 3"):
            interior_mask(2, 5)
        with pytest.raises(ValueError, match="at least 3"):
            interior_mask(5, 2)


class TestFreeSpot:
    def test_never_border_or_occupied(self):
        rng = np.random.default_rng(0)
        occupied = [(x, 2) for x in range(1, 7)]
        for _ in range(200):
            x, y = free_spot(8, 6, occupied, rng)
            assert not on_border(8, 6, x, y)
            assert (x, y) not in occupied

    def test_single_free_cell(self):
        rng = np.random.default_rng(1)
        occupied = [(x, y) for x in range(1, 4) for y in range(1, 4)]
        occupied.remove((2, 3))
        assert free_spot(5, 5, occupied, rng) == (2, 3)

    def test_full_interior_returns_none(self):
        rng = np.random.default_rng(1)
        occupied = [(x, y) for x in range(1, 4) for y in range(1, 4)]
        assert free_spot(5, 5, occupied, rng) is None

    def test_smallest_board(self):
        rng = np.random.default_rng(2)
        assert free_spot(3, 3, [], rng) == (1, 1)

    def test_covers_whole_interior(self):
        rng = np.random.default_rng(3)
        seen = {free_spot(4, 4, [], rng) for _ in range(200)}
        assert seen == {(1, 1), (2, 1), (1, 2), (2, 2)}

    def test_deterministic(self):
        a = [free_spot(20, 10, [], np.random.default_rng(42)) for _ in range(3)]
        b = [free_spot(20, 10, [], np.random.default_rng(42)) for _ in range(3)]
        assert a == b

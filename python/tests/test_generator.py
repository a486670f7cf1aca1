"""Board generator tests."""

from __future__ import annotations

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.matcher import Matcher
from backend.models.tile import MAX_SPAWN_VALUE, TileSource


@pytest.mark.parametrize("size", [3, 4, 5, 8, 10, 12])
@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_generated_board_has_no_matches(size: int, seed: int) -> None:
    board = GameGenerator.generate(size, TileSource(seed=seed))

    assert board.size == size
    assert Matcher.scan_all(board) == []
    assert Matcher.unique(board) == []


def test_generated_tiles_are_fresh() -> None:
    board = GameGenerator.generate(8, TileSource(seed=21))
    tiles = [board.tile_at(p) for p in board.positions()]

    assert len({t.id for t in tiles}) == len(tiles)
    assert all(not t.consumed for t in tiles)
    assert all(1 <= t.value <= MAX_SPAWN_VALUE for t in tiles)


def test_same_seed_same_board() -> None:
    a = GameGenerator.generate(6, TileSource(seed=99))
    b = GameGenerator.generate(6, TileSource(seed=99))

    assert a.values() == b.values()


@pytest.mark.parametrize("size", [1, 2])
def test_tiny_boards(size: int) -> None:
    board = GameGenerator.generate(size, TileSource(seed=0))
    assert board.size == size


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_size(size: int) -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(size)

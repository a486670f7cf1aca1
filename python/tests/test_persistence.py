"""Saved-game codec and high-score storage tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.engine.gamestate import GameState
from backend.models.board import Board, Position
from backend.models.highscore import HighScoreEntry, HighScoreManager
from backend.models.savegame import (
    SaveGameManager,
    decode_board,
    decode_state,
    encode_board,
    encode_state,
)
from backend.models.tile import TileSource

_VALUES = [
    1, 2, 3,
    4, 5, 6,
    7, 8, 9,
]


def _board() -> Board:
    return Board.from_flat(3, _VALUES, TileSource(seed=0))


# -- codec --------------------------------------------------------------------


def test_encode_board_is_row_major_flat() -> None:
    data = encode_board(_board())

    assert data == {"size": 3, "values": _VALUES}
    # index = y*size + x
    assert data["values"][1 * 3 + 2] == _board().tile_at(Position(2, 1)).value


def test_decode_preserves_values_with_fresh_ids() -> None:
    board = _board()

    restored = decode_board(encode_board(board), TileSource(seed=1))

    assert restored.size == board.size
    assert restored.values() == board.values()
    assert all(not restored.tile_at(p).consumed for p in restored.positions())


def test_state_roundtrip() -> None:
    state = GameState(_board(), points=120, moves=7)

    restored = decode_state(json.loads(json.dumps(encode_state(state))))

    assert restored.points == 120
    assert restored.moves == 7
    assert restored.board.to_flat() == _VALUES


@pytest.mark.parametrize(
    "data",
    [
        {"size": 0, "values": []},
        {"size": "3", "values": _VALUES},
        {"size": 3, "values": _VALUES[:-1]},
        {"size": 3, "values": [0] * 9},
        {"size": 3, "values": "123456789"},
        {"values": _VALUES},
    ],
)
def test_decode_rejects_malformed(data: dict) -> None:
    with pytest.raises(ValueError):
        decode_board(data)


def test_decode_state_rejects_negative_points() -> None:
    with pytest.raises(ValueError):
        decode_state({"size": 3, "values": _VALUES, "points": -1, "moves": 0})


# -- saved game file ----------------------------------------------------------


def test_save_and_load(tmp_path: Path) -> None:
    manager = SaveGameManager(tmp_path / "data" / "savegame.json")

    manager.save(GameState(_board(), points=64, moves=3))
    loaded = manager.load()

    assert loaded is not None
    assert loaded.points == 64
    assert loaded.moves == 3
    assert loaded.board.to_flat() == _VALUES


def test_load_missing_file(tmp_path: Path) -> None:
    assert SaveGameManager(tmp_path / "nope.json").load() is None


def test_load_malformed_file(tmp_path: Path) -> None:
    path = tmp_path / "savegame.json"
    path.write_text("{not json")

    assert SaveGameManager(path).load() is None


def test_game_without_points_is_not_resumed(tmp_path: Path) -> None:
    manager = SaveGameManager(tmp_path / "savegame.json")
    manager.save(GameState(_board()))

    assert manager.load() is None


def test_clear(tmp_path: Path) -> None:
    manager = SaveGameManager(tmp_path / "savegame.json")
    manager.save(GameState(_board(), points=8))

    manager.clear()
    manager.clear()

    assert not manager.filepath.exists()


# -- high scores --------------------------------------------------------------


def test_high_scores_sorted_and_persisted(tmp_path: Path) -> None:
    path = tmp_path / "highscores.json"
    manager = HighScoreManager(path)

    manager.add_score(8, HighScoreEntry(points=100, moves=20, date="2026-01-01 10:00"))
    manager.add_score(8, HighScoreEntry(points=300, moves=40, date="2026-01-02 10:00"))
    manager.add_score(8, HighScoreEntry(points=300, moves=30, date="2026-01-03 10:00"))
    manager.add_score(6, HighScoreEntry(points=50, moves=5, date="2026-01-04 10:00"))
    manager.add_score(6, HighScoreEntry(points=0, moves=5, date="2026-01-05 10:00"))

    reloaded = HighScoreManager(path)

    assert reloaded.get_all_sizes() == [6, 8]
    assert [(e.points, e.moves) for e in reloaded.get_scores(8)] == [
        (300, 30), (300, 40), (100, 20),
    ]
    assert len(reloaded.get_scores(6)) == 1
    assert reloaded.best(8) == 300
    assert reloaded.best(5) == 0

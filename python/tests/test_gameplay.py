"""Game session tests — score, move counting and game over."""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameState
from backend.engine.matcher import Matcher
from backend.engine.gamesolver import Solver
from backend.models.board import Board, Position
from backend.models.tile import TileSource

_PLAYABLE = [
    3, 3, 1, 2,
    1, 2, 3, 4,
    2, 4, 1, 3,
    4, 1, 2, 1,
]

_STUCK = [
    1, 2, 3,
    3, 1, 2,
    2, 3, 1,
]


def _game(size: int, values: list[int], points: int = 0) -> GamePlay:
    source = TileSource(seed=4)
    state = GameState(Board.from_flat(size, values, source), points=points)
    return GamePlay.from_state(state, source)


def test_new_game_starts_clean() -> None:
    game = GamePlay(6, TileSource(seed=1))

    assert game.size == game.state.size == 6
    assert game.state.points == 0
    assert game.state.moves == 0
    assert Matcher.unique(game.state.board) == []


def test_valid_swap_scores_and_counts() -> None:
    game = _game(4, _PLAYABLE, points=10)

    snapshots = game.swap(Position(2, 1), Position(2, 0))

    assert game.state.moves == 1
    assert game.state.points == 10 + sum(s.points for s in snapshots)
    assert game.state.points >= 26
    assert game.state.board is snapshots[-1].board


def test_rejected_swap_counts_but_restores_board() -> None:
    game = _game(3, _STUCK)
    board = game.state.board

    snapshots = game.swap(Position(0, 0), Position(1, 0))

    assert len(snapshots) == 2
    assert game.state.moves == 1
    assert game.state.points == 0
    assert game.state.board is board


def test_out_of_bounds_swap_is_ignored() -> None:
    game = _game(3, _STUCK)

    game.swap(Position(0, 0), Position(-1, 0))

    assert game.state.moves == 0


def test_hint_and_game_over() -> None:
    playable = _game(4, _PLAYABLE)
    stuck = _game(3, _STUCK)

    assert playable.hint() == Solver.find_almost_match(playable.state.board)
    assert not playable.is_over
    assert stuck.hint() is None
    assert stuck.is_over


def test_contains_tile() -> None:
    game = _game(3, [
        11, 2, 3,
        3, 1, 2,
        2, 3, 1,
    ])

    assert game.contains_tile(2048)
    assert not game.contains_tile(4096)


def test_restart_resets_state() -> None:
    game = _game(4, _PLAYABLE, points=50)
    game.swap(Position(2, 1), Position(2, 0))

    game.restart()

    assert game.state.points == 0
    assert game.state.moves == 0
    assert game.state.size == 4
    assert Matcher.unique(game.state.board) == []

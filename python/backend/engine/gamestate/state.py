"""Tracks the state of a game in progress."""

from __future__ import annotations

from collections.abc import Iterable

from backend.models.board import Board
from backend.models.match import BoardSnapshot


class GameState:
    """Holds the current board, score and move counter."""

    def __init__(self, board: Board, points: int = 0, moves: int = 0) -> None:
        self.board = board
        self.points = points
        self.moves = moves

    @property
    def size(self) -> int:
        return self.board.size

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def apply(self, snapshots: Iterable[BoardSnapshot]) -> None:
        """Fast-forward through *snapshots*, adding up their points."""
        for snapshot in snapshots:
            self.board = snapshot.board
            self.points += snapshot.points

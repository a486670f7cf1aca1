"""Hint finding and game-over detection."""

from __future__ import annotations

from backend.engine.matcher import Matcher
from backend.models.board import Board, Direction, Position

# Neighbour order fixes which pair a hint returns.
_HINT_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def are_adjacent(a: Position, b: Position) -> bool:
        """True iff *a* and *b* are orthogonal neighbours."""
        return abs(a.x - b.x) + abs(a.y - b.y) == 1

    @staticmethod
    def find_almost_match(board: Board) -> tuple[Position, Position] | None:
        """Return the first swap that would create a match, or ``None``.

        Positions are scanned column-major and each one tries its
        neighbours up, down, left, then right.
        """
        for position in board.positions():
            for direction in _HINT_ORDER:
                neighbour = position.step(direction)
                if not board.in_bounds(neighbour):
                    continue

                trial = board.copy()
                trial.swap(position, neighbour)

                if (
                    Matcher.detect(position, trial) is not None
                    or Matcher.detect(neighbour, trial) is not None
                ):
                    return position, neighbour

        return None

    @staticmethod
    def hint(board: Board) -> tuple[Position, Position] | None:
        """Alias of :meth:`find_almost_match` for front ends."""
        return Solver.find_almost_match(board)

    @staticmethod
    def is_terminal(board: Board) -> bool:
        """Return True if no single swap can create a match."""
        return Solver.find_almost_match(board) is None

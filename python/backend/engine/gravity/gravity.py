"""Removes consumed tiles and lets the survivors fall."""

from __future__ import annotations

from collections.abc import Sequence

from backend.models.board import Board, Position
from backend.models.match import Match
from backend.models.tile import TileSource, default_source


class Gravity:
    """Stateless gravity resolver — all methods are static."""

    @staticmethod
    def mark_consumed(matches: Sequence[Match], board: Board) -> Board:
        """Return a copy of *board* with every consumed tile flagged.

        Values are left untouched; this is the "about to disappear" frame.
        """
        marked = board.copy()
        for match in matches:
            for position in match.consumed:
                marked.set_tile(position, marked.tile_at(position).consume(match.origin))
        return marked

    @staticmethod
    def fall(
        matches: Sequence[Match],
        board: Board,
        source: TileSource | None = None,
    ) -> Board:
        """Return *board* with the consumed cells of *matches* removed.

        Each column is compacted on its own: surviving tiles keep their
        relative order and slide to the bottom, and the vacated cells at
        the top receive fresh tiles from *source*.
        """
        source = source or default_source()
        removed: set[Position] = {p for match in matches for p in match.consumed}
        settled = board.copy()

        for x in range(board.size):
            column = board[x]
            target = settled[x]

            write_y = board.size - 1
            for y in range(board.size - 1, -1, -1):
                if Position(x, y) in removed:
                    continue
                target[write_y] = column[y]
                write_y -= 1

            # Fill in from the top.
            for y in range(write_y, -1, -1):
                target[y] = source.tile()

        return settled

    @staticmethod
    def apply(
        matches: Sequence[Match],
        board: Board,
        source: TileSource | None = None,
    ) -> tuple[Board, Board]:
        """Return ``(board_with_consumed_marked, board_after_gravity)``."""
        return Gravity.mark_consumed(matches, board), Gravity.fall(matches, board, source)

"""Match detection and board-wide match scanning."""

from __future__ import annotations

from collections.abc import Iterable

from backend.models.board import Board, Direction, Position, position_to_index
from backend.models.match import Match

# A run needs this many equal neighbours along one axis (3 tiles in total).
MIN_NEIGHBOURS = 2


class Matcher:
    """Stateless matcher — all methods are static."""

    @staticmethod
    def detect(position: Position, board: Board) -> Match | None:
        """Return the match *position* takes part in, or ``None``.

        Runs are counted per axis. When both axes qualify (an L, T or
        cross shape) every tile of both runs merges into *position*.
        """
        tile = board.tile_at(position)

        up = Matcher._same_run(position, Direction.UP, board)
        down = Matcher._same_run(position, Direction.DOWN, board)
        left = Matcher._same_run(position, Direction.LEFT, board)
        right = Matcher._same_run(position, Direction.RIGHT, board)

        consumed: list[Position] = []
        if len(up) + len(down) >= MIN_NEIGHBOURS:
            consumed += up + down
        if len(left) + len(right) >= MIN_NEIGHBOURS:
            consumed += left + right

        if not consumed:
            return None

        return Match(
            origin=position,
            new_value=tile.value + len(consumed) - 1,
            consumed=tuple(consumed),
        )

    @staticmethod
    def scan_all(board: Board) -> list[Match]:
        """Run :meth:`detect` on every cell, column-major.

        Every tile of a run reports its own match, so the result overlaps.
        """
        matches: list[Match] = []
        for position in board.positions():
            match = Matcher.detect(position, board)
            if match is not None:
                matches.append(match)
        return matches

    @staticmethod
    def unique(board: Board) -> list[Match]:
        """Return the non-overlapping matches on *board*.

        The biggest merge claims contested tiles first; equal merges are
        ordered by origin index (``y*size + x``).
        """
        return Matcher.claim(Matcher.scan_all(board), board.size)

    @staticmethod
    def claim(matches: Iterable[Match], size: int) -> list[Match]:
        """Keep matches that touch no position claimed by a better one."""
        ordered = sorted(
            matches,
            key=lambda m: (-m.new_value, position_to_index(m.origin, size)),
        )
        claimed: set[int] = set()
        result: list[Match] = []

        for match in ordered:
            indices = [position_to_index(p, size) for p in match.positions]
            if any(i in claimed for i in indices):
                continue
            claimed.update(indices)
            result.append(match)

        return result

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _same_run(
        position: Position, direction: Direction, board: Board
    ) -> list[Position]:
        """Collect contiguous same-valued positions walking *direction*."""
        value = board.tile_at(position).value
        run: list[Position] = []
        current = position.step(direction)
        while board.in_bounds(current) and board.tile_at(current).value == value:
            run.append(current)
            current = current.step(direction)
        return run
